"""Protocols and data structures for the splitting system."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from localizer.config import LanguageSettings, MigrationSettings
from localizer.models import MigrationResult
from localizer.splitting.allocator import IdAllocator
from localizer.splitting.id_map import IdentifierMap

if TYPE_CHECKING:
    from localizer.parsers.wxr_parser import WxrItem


@dataclass(frozen=True)
class OriginalFields:
    """Snapshot of the fields of an item before it is split."""

    id: int
    title: str
    slug: str
    link: str
    parent_id: int = 0


@dataclass
class SplitContext:
    """State shared by both passes.

    The identifier map is the only channel from the item pass to the
    attachment pass.
    """

    settings: MigrationSettings
    """Language pair, suffixes and site URL for the run."""

    allocator: IdAllocator
    """Source of fresh post ids."""

    id_map: IdentifierMap = field(default_factory=IdentifierMap)
    """Replacement ids of every split item."""

    result: MigrationResult = field(default_factory=MigrationResult)
    """Corrections collected for the companion SQL files."""

    @property
    def languages(self) -> tuple[LanguageSettings, LanguageSettings]:
        """(default language, other language)."""
        return self.settings.default_language, self.settings.other_language

    @property
    def language_codes(self) -> tuple[str, str]:
        default, other = self.languages
        return default.code, other.code

    def counterpart(self, language: LanguageSettings) -> LanguageSettings:
        """The language of the pair that is not ``language``."""
        default, other = self.languages
        return other if language.code == default.code else default


class SplitStrategy(Protocol):
    """Protocol for kind-specific splitting behavior.

    The engine does the common work (ids, guid, slug suffix, language and
    translation metadata, splicing); strategies rewrite the fields that
    differ between posts and attachments.
    """

    def guid_base(self, settings: MigrationSettings) -> str:
        """Prefix the new id is appended to in the <guid> element."""
        ...

    def localize(
        self,
        copy: WxrItem,
        original: OriginalFields,
        language: LanguageSettings,
        context: SplitContext,
    ) -> None:
        """Rewrite ``copy`` for ``language``.

        Args:
            copy: The language copy, already carrying its new id
            original: Fields of the item being replaced
            language: Language the copy is for
            context: Current split context
        """
        ...
