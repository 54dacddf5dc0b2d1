"""Split strategy implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localizer.config import LanguageSettings, MigrationSettings
from localizer.models import ParentCorrection, SlugCorrection, TitleCorrection
from localizer.parsers.markup import strip_language
from localizer.splitting.protocols import OriginalFields, SplitContext

if TYPE_CHECKING:
    from localizer.parsers.wxr_parser import WxrItem


@dataclass
class PostSplitStrategy:
    """Posts and pages: each copy gets the text of its own language.

    The default-language copy keeps the original slug and link so that
    existing URLs stay valid. The other-language copy is recorded for a
    slug correction, and its title is made unique if stripping left it
    unchanged (WXR exports lose title translations, so most titles carry
    no markup at all).
    """

    def guid_base(self, settings: MigrationSettings) -> str:
        return settings.post_guid_base

    def localize(
        self,
        copy: WxrItem,
        original: OriginalFields,
        language: LanguageSettings,
        context: SplitContext,
    ) -> None:
        drop = context.counterpart(language).code
        copy.content = strip_language(copy.content, language.code, drop)
        copy.excerpt = strip_language(copy.excerpt, language.code, drop)
        title = strip_language(original.title, language.code, drop)

        if language.code == context.settings.other_language.code:
            context.result.slug_corrections.append(
                SlugCorrection(item_id=copy.id, slug=original.slug)
            )
            if title == original.title:
                context.result.title_corrections.append(
                    TitleCorrection(item_id=copy.id, title=title)
                )
                title += context.settings.title_suffix

        copy.title = title


@dataclass
class AttachmentTextSplitStrategy(PostSplitStrategy):
    """Attachments whose own text carries language markup.

    Stripped like posts, but the copies keep attachment guids. Their parent
    is left alone here; the attachment pass retargets it per language.
    """

    def guid_base(self, settings: MigrationSettings) -> str:
        return settings.attachment_guid_base


@dataclass
class AttachmentSplitStrategy:
    """Attachments of a split parent: one copy per language version of it.

    Attachment titles and captions are not translated, so nothing is
    stripped; the other-language copy always gets the title suffix.
    """

    def guid_base(self, settings: MigrationSettings) -> str:
        return settings.attachment_guid_base

    def localize(
        self,
        copy: WxrItem,
        original: OriginalFields,
        language: LanguageSettings,
        context: SplitContext,
    ) -> None:
        parent_ids = context.id_map.get(original.parent_id)
        if parent_ids is None:
            raise KeyError(
                f"Attachment {original.id}: parent {original.parent_id} was not split"
            )

        copy.parent_id = parent_ids[language.code]
        context.result.parent_corrections.append(
            ParentCorrection(item_id=copy.id, parent_id=copy.parent_id)
        )

        if language.code == context.settings.other_language.code:
            context.result.title_corrections.append(
                TitleCorrection(item_id=copy.id, title=original.title)
            )
            copy.title = original.title + context.settings.title_suffix
