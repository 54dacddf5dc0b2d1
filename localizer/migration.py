"""Two-pass migration of a Polyglot WXR export to Polylang items.

Pass 1 splits every bilingual item. Pass 2 revisits attachments: those
whose parent was split in pass 1 are split as well, one copy per language
version of the parent. Attachments that were themselves split in pass 1
already have one copy per language; pass 2 only points each copy at the
parent version of its language. The passes cannot be merged because an attachment
may come before its parent in the document.

Running the migration on its own output does nothing useful: split items
no longer carry markup and pass through untouched. Run it exactly once
per original export.
"""

from __future__ import annotations

from collections import Counter

from lxml import etree

from localizer.config import MigrationSettings
from localizer.logging_config import logger
from localizer.models import MigrationResult, ParentCorrection, RecordKind
from localizer.parsers.markup import has_language_markup
from localizer.parsers.wxr_parser import WxrItem, find_items, validate_items
from localizer.splitting import (
    AttachmentSplitStrategy,
    AttachmentTextSplitStrategy,
    IdAllocator,
    PostSplitStrategy,
    SplitContext,
    SplitEngine,
)

_post_engine = SplitEngine(PostSplitStrategy())
_attachment_engine = SplitEngine(AttachmentSplitStrategy())
_attachment_text_engine = SplitEngine(AttachmentTextSplitStrategy())


def is_multilingual(item: WxrItem, codes: tuple[str, ...]) -> bool:
    """Check whether content, excerpt or title carries language markers."""
    return (
        has_language_markup(item.content, codes)
        or has_language_markup(item.excerpt, codes)
        or has_language_markup(item.title, codes)
    )


def split_multilingual_items(
    items: list[etree._Element], context: SplitContext
) -> int:
    """Pass 1: split every bilingual item.

    Args:
        items: Snapshot of the document's items in document order
        context: Split context; its identifier map is filled here

    Returns:
        Number of items split
    """
    count = 0
    for elem in items:
        item = WxrItem(elem)
        with logger.indent_block(f"Item {item.id}"):
            if not is_multilingual(item, context.language_codes):
                continue
            logger.debug("multilingual, replacing by language copies")
            if item.kind is RecordKind.ATTACHMENT:
                _attachment_text_engine.split(item, context)
            else:
                _post_engine.split(item, context)
            count += 1
    return count


def relink_attachments(items: list[etree._Element], context: SplitContext) -> int:
    """Pass 2: give attachments of split items their own language copies.

    Every attachment yields at least one parent correction, split or not.
    Language copies made in pass 1 are not split again: each one gets the
    parent version of its own language.

    Args:
        items: Snapshot of the document's items after pass 1
        context: Split context filled by pass 1

    Returns:
        Number of attachments split
    """
    count = 0
    for elem in items:
        item = WxrItem(elem)
        if item.kind is not RecordKind.ATTACHMENT:
            continue

        parent_id = item.parent_id
        with logger.indent_block(f"Attachment {item.id} (parent {parent_id})"):
            if parent_id not in context.id_map:
                context.result.parent_corrections.append(
                    ParentCorrection(item_id=item.id, parent_id=parent_id)
                )
                continue
            origin = context.id_map.origin(item.id)
            if origin is not None:
                _, code = origin
                item.parent_id = context.id_map.get(parent_id)[code]
                logger.debug(f"{code} copy, parent set to {item.parent_id}")
                context.result.parent_corrections.append(
                    ParentCorrection(item_id=item.id, parent_id=item.parent_id)
                )
                continue
            logger.debug("parent was split, replacing by language copies")
            _attachment_engine.split(item, context)
            count += 1
    return count


def find_duplicate_titles(doc: etree._ElementTree) -> list[str]:
    """Titles used by more than one post-like item."""
    titles = Counter(
        item.title
        for item in map(WxrItem, find_items(doc))
        if item.kind is RecordKind.POST and item.title
    )
    return sorted(title for title, n in titles.items() if n > 1)


def migrate(
    doc: etree._ElementTree,
    next_post_id: int,
    settings: MigrationSettings | None = None,
) -> MigrationResult:
    """Split all bilingual items of ``doc`` in place.

    Args:
        doc: Parsed WXR document; modified in place
        next_post_id: First free post id of the target site
        settings: Language pair and suffixes (default: en/it)

    Returns:
        Corrections for the companion SQL files and run statistics

    Raises:
        MissingFieldError: If an item lacks a required element (nothing is
            modified in that case)
        ValueError: If post ids are not numeric or not unique
    """
    settings = settings or MigrationSettings()
    context = SplitContext(settings=settings, allocator=IdAllocator(next_post_id))

    items = find_items(doc)
    validate_items(items)
    logger.info(f"Found {len(items)} items")

    context.result.split_items = split_multilingual_items(items, context)
    logger.info(f"Split {context.result.split_items} multilingual items")

    context.result.split_attachments = relink_attachments(find_items(doc), context)
    logger.info(
        f"Split {context.result.split_attachments} attachments, "
        f"{len(context.result.parent_corrections)} parent corrections"
    )

    # Suffixed titles may still clash with titles already in the export
    duplicates = find_duplicate_titles(doc)
    if duplicates:
        logger.warning(f"Duplicate titles after migration: {duplicates}")

    context.result.next_post_id = context.allocator.next_id
    return context.result
