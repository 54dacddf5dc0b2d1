"""Identifier allocation for split items and localized terms."""

from __future__ import annotations

from localizer.config import validate_start_id


class IdAllocator:
    """Hands out increasing integer ids, starting at a given seed.

    Ids are never handed out twice, even if the item they were allocated
    for is dropped later. Posts and taxonomy terms use separate instances.
    """

    def __init__(self, start: int, name: str = "next_post_id") -> None:
        """Initialize the allocator.

        Args:
            start: First id to hand out (the next free id of the target site)
            name: Label used in error messages

        Raises:
            ValueError: If start is not positive
        """
        validate_start_id(start, name)
        self._next = start

    def next(self) -> int:
        """Return a fresh id."""
        value = self._next
        self._next += 1
        return value

    @property
    def next_id(self) -> int:
        """The id the next call to next() will return."""
        return self._next
