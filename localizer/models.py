"""Data models for the localizer."""

from dataclasses import dataclass, field
from enum import Enum


class RecordKind(str, Enum):
    """Kinds of WXR items, as far as splitting is concerned."""

    POST = "post"
    ATTACHMENT = "attachment"

    @classmethod
    def from_post_type(cls, post_type: str) -> "RecordKind":
        """Map a wp:post_type value; everything but attachments is post-like."""
        if post_type.strip() == "attachment":
            return cls.ATTACHMENT
        return cls.POST


@dataclass(frozen=True)
class ParentCorrection:
    """Attachment id paired with the parent id it must point to."""

    item_id: int
    parent_id: int


@dataclass(frozen=True)
class SlugCorrection:
    """Record id paired with the slug to restore after import."""

    item_id: int
    slug: str


@dataclass(frozen=True)
class TitleCorrection:
    """Record id paired with its title before the disambiguating suffix."""

    item_id: int
    title: str


@dataclass
class MigrationResult:
    """Everything the two passes accumulate besides the mutated tree."""

    parent_corrections: list[ParentCorrection] = field(default_factory=list)
    slug_corrections: list[SlugCorrection] = field(default_factory=list)
    title_corrections: list[TitleCorrection] = field(default_factory=list)
    split_items: int = 0
    split_attachments: int = 0
    next_post_id: int = 0


@dataclass
class LocalizedTag:
    """A post tag and its other-language copy."""

    default_id: int
    default_slug: str
    name: str
    other_id: int
    other_slug: str
