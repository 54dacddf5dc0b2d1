"""Split engine that replaces one bilingual item by two language copies."""

from __future__ import annotations

import copy as copy_module

from localizer.logging_config import logger
from localizer.parsers.wxr_parser import WxrItem, suffix_link
from localizer.splitting.protocols import OriginalFields, SplitContext, SplitStrategy
from localizer.splitting.translations import build_translation_link


class SplitEngine:
    """Engine for splitting items into language versions.

    Common steps live here; the strategy rewrites the kind-specific
    fields (text stripping for posts, parent ids for attachments).
    """

    def __init__(self, strategy: SplitStrategy) -> None:
        """Initialize the engine.

        Args:
            strategy: Kind-specific field handling
        """
        self._strategy = strategy

    def split(self, item: WxrItem, context: SplitContext) -> tuple[WxrItem, WxrItem]:
        """Replace ``item`` in its document by a default and an other copy.

        The copies are inserted where the item stood, default first, and
        the item itself is unlinked. A traversal over a snapshot of the
        items continues with the item that followed the original.

        Args:
            item: The item to split; must be attached to a document
            context: Current split context

        Returns:
            (default-language copy, other-language copy)
        """
        original = OriginalFields(
            id=item.id,
            title=item.title,
            slug=item.slug,
            link=item.link,
            parent_id=item.parent_id,
        )
        default, other = context.languages

        ids = {default.code: context.allocator.next(), other.code: context.allocator.next()}
        context.id_map.record(original.id, ids)
        logger.debug(f"ids: {ids}")

        translation_link = build_translation_link(ids)
        guid_base = self._strategy.guid_base(context.settings)

        copies: list[WxrItem] = []
        for language in (default, other):
            localized = item.duplicate()
            localized.id = ids[language.code]
            localized.guid = f"{guid_base}{localized.id}"

            if language is other:
                localized.slug = original.slug + context.settings.slug_suffix
                localized.link = suffix_link(original.link, context.settings.slug_suffix)

            self._strategy.localize(localized, original, language, context)

            localized.add_language(language.code, language.name)
            localized.append(copy_module.deepcopy(translation_link))
            copies.append(localized)

            logger.debug(
                f"{language.code}: id={localized.id} slug={localized.slug} "
                f"link={localized.link} guid={localized.guid}"
            )

        item.replace_with(*copies)
        return copies[0], copies[1]
