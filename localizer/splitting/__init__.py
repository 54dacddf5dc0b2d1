"""Splitting module for replacing bilingual items by language copies.

Items are split by a shared engine; strategies supply the behavior that
differs between posts/pages and attachments.
"""

from localizer.splitting.allocator import IdAllocator
from localizer.splitting.engine import SplitEngine
from localizer.splitting.id_map import IdentifierMap, IdentifierMapError
from localizer.splitting.protocols import (
    OriginalFields,
    SplitContext,
    SplitStrategy,
)
from localizer.splitting.strategies import (
    AttachmentSplitStrategy,
    AttachmentTextSplitStrategy,
    PostSplitStrategy,
)
from localizer.splitting.translations import (
    build_translation_link,
    serialize_translations,
)

__all__ = [
    "IdAllocator",
    "IdentifierMap",
    "IdentifierMapError",
    "OriginalFields",
    "SplitContext",
    "SplitStrategy",
    "SplitEngine",
    "PostSplitStrategy",
    "AttachmentSplitStrategy",
    "AttachmentTextSplitStrategy",
    "build_translation_link",
    "serialize_translations",
]
