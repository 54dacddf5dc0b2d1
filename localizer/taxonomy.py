"""Other-language copies of post tags, created through SQL.

WXR exports do not carry term metadata, and re-importing tags through WXR
silently skips duplicates, which would leave metadata pointing at the
wrong terms. The copies are therefore inserted directly, with fixed ids
taken from a term id allocator.
"""

from __future__ import annotations

from lxml import etree

from localizer.config import NAMESPACES, TABLE_PREFIX, MigrationSettings
from localizer.models import LocalizedTag
from localizer.splitting.allocator import IdAllocator
from localizer.splitting.translations import serialize_translations
from localizer.storage.sql_writer import sql_quote


def collect_tags(
    doc: etree._ElementTree,
    allocator: IdAllocator,
    settings: MigrationSettings,
) -> list[LocalizedTag]:
    """Pair every post tag of the export with a new other-language tag.

    Terms without a <wp:tag_slug> do not belong to the post tag taxonomy
    and are ignored.

    Args:
        doc: Parsed WXR document
        allocator: Source of fresh term ids
        settings: Language pair of the run

    Returns:
        One LocalizedTag per post tag, in document order
    """
    suffix = f"-{settings.other_language.code}"
    tags: list[LocalizedTag] = []
    for tag in doc.xpath("//channel//wp:tag", namespaces=NAMESPACES):
        slug = tag.findtext("wp:tag_slug", namespaces=NAMESPACES)
        if slug is None:
            continue
        name = tag.findtext("wp:tag_name", default="", namespaces=NAMESPACES)
        term_id = tag.findtext("wp:term_id", default="", namespaces=NAMESPACES)
        tags.append(
            LocalizedTag(
                default_id=int(term_id),
                default_slug=slug,
                name=name,
                other_id=allocator.next(),
                other_slug=slug + suffix,
            )
        )
    return tags


def tag_statements(
    tags: list[LocalizedTag],
    language_term_id: int,
    settings: MigrationSettings,
    prefix: str = TABLE_PREFIX,
) -> list[str]:
    """SQL creating the other-language tags and linking both versions.

    Args:
        tags: Tags as returned by collect_tags
        language_term_id: Term id of the other language in the "language"
            taxonomy of the target site
        settings: Language pair of the run
        prefix: WordPress table prefix

    Returns:
        Statements, with an empty string separating consecutive tags
    """
    default, other = settings.default_language, settings.other_language
    statements: list[str] = []
    for tag in tags:
        translations = sql_quote(
            serialize_translations({default.code: tag.default_id, other.code: tag.other_id})
        )
        statements += [
            f"INSERT INTO {prefix}terms (term_id, name, slug) VALUES "
            f"( {tag.other_id}, {sql_quote(tag.name)}, {sql_quote(tag.other_slug)} );",
            f"INSERT INTO {prefix}term_taxonomy (term_id, taxonomy) VALUES "
            f"( {tag.other_id}, 'post_tag' );",
            f"INSERT INTO {prefix}termmeta (term_id, meta_key, meta_value) VALUES "
            f"( {tag.other_id}, '_language', {language_term_id} );",
            f"INSERT INTO {prefix}termmeta (term_id, meta_key, meta_value) VALUES "
            f"( {tag.default_id}, '_translations', {translations} );",
            f"INSERT INTO {prefix}termmeta (term_id, meta_key, meta_value) VALUES "
            f"( {tag.other_id}, '_translations', {translations} );",
            "",
        ]
    return statements
