"""Mapping from original item ids to their per-language replacements."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class IdentifierMapError(KeyError):
    """Raised when an entry of the identifier map would be overwritten."""


class IdentifierMap:
    """Write-once map: original id -> {language code -> new id}.

    Only items that were split get an entry. The attachment pass reads
    the entries written while splitting posts to find new parent ids.
    """

    def __init__(self) -> None:
        self._entries: dict[int, dict[str, int]] = {}
        self._origins: dict[int, tuple[int, str]] = {}

    def record(self, original_id: int, ids: Mapping[str, int]) -> None:
        """Register the replacement ids of a split item.

        Args:
            original_id: Id of the item that was replaced
            ids: New id per language code

        Raises:
            IdentifierMapError: If original_id already has an entry
        """
        if original_id in self._entries:
            raise IdentifierMapError(
                f"Item {original_id} was already split into {self._entries[original_id]}"
            )
        self._entries[original_id] = dict(ids)
        for code, new_id in ids.items():
            self._origins[new_id] = (original_id, code)

    def get(self, original_id: int) -> dict[str, int] | None:
        """Replacement ids of ``original_id``, or None if it was not split."""
        entry = self._entries.get(original_id)
        return dict(entry) if entry is not None else None

    def origin(self, new_id: int) -> tuple[int, str] | None:
        """(original id, language code) of a copy, or None for other ids."""
        return self._origins.get(new_id)

    def __contains__(self, original_id: object) -> bool:
        return original_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[int]:
        return iter(self._entries)
