"""Title translations lost by the WXR export, restored through SQL.

The export only contains the default-language title of each post, so the
other-language copies are imported with the suffixed default title. Given
the original bilingual titles, one per line, these statements put the
other-language title in place.
"""

from __future__ import annotations

from collections.abc import Iterable

from localizer.config import TABLE_PREFIX, MigrationSettings
from localizer.parsers.markup import strip_language
from localizer.storage.sql_writer import sql_quote


def title_translation_statements(
    lines: Iterable[str],
    settings: MigrationSettings,
    prefix: str = TABLE_PREFIX,
) -> list[str]:
    """One UPDATE per bilingual title line.

    Args:
        lines: Titles with language markup, one per entry
        settings: Language pair and title suffix of the migration run
        prefix: WordPress table prefix

    Returns:
        Statements matching the suffixed default title of each copy
    """
    default = settings.default_language.code
    other = settings.other_language.code
    statements: list[str] = []
    for line in lines:
        line = line.rstrip("\n")
        if not line.strip():
            continue
        translated = strip_language(line, keep=other, drop=default)
        imported = strip_language(line, keep=default, drop=other) + settings.title_suffix
        statements.append(
            f"UPDATE {prefix}posts SET post_title={sql_quote(translated)} "
            f"WHERE post_title={sql_quote(imported)};"
        )
    return statements
