"""SQL statements for corrections a WXR import cannot carry.

WordPress imports attachments in a separate run that may time out, so
their parent links are restated in SQL. Slugs of the other-language copies
carry a suffix to get past the importer's uniqueness handling and can be
reset afterwards, as can titles that were suffixed for the same reason.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from localizer.config import TABLE_PREFIX
from localizer.models import (
    MigrationResult,
    ParentCorrection,
    SlugCorrection,
    TitleCorrection,
)


def sql_quote(value: str) -> str:
    """Quote a string literal for SQL, doubling single quotes."""
    return "'" + value.replace("'", "''") + "'"


def parent_statements(
    corrections: Iterable[ParentCorrection], prefix: str = TABLE_PREFIX
) -> list[str]:
    return [
        f"UPDATE {prefix}posts SET post_parent={c.parent_id} WHERE ID={c.item_id};"
        for c in corrections
    ]


def slug_statements(
    corrections: Iterable[SlugCorrection], prefix: str = TABLE_PREFIX
) -> list[str]:
    return [
        f"UPDATE {prefix}posts SET post_name={sql_quote(c.slug)} WHERE ID={c.item_id};"
        for c in corrections
    ]


def title_statements(
    corrections: Iterable[TitleCorrection], prefix: str = TABLE_PREFIX
) -> list[str]:
    return [
        f"UPDATE {prefix}posts SET post_title={sql_quote(c.title)} WHERE ID={c.item_id};"
        for c in corrections
    ]


def write_statements(statements: Iterable[str], output_file: Path) -> Path:
    """Write one statement per line."""
    with open(output_file, "w", encoding="utf-8") as f:
        for statement in statements:
            f.write(f"{statement}\n")
    return output_file


def save_corrections(
    result: MigrationResult,
    wxr_output: Path,
    prefix: str = TABLE_PREFIX,
) -> list[Path]:
    """Write the companion SQL files next to the migrated WXR file.

    Args:
        result: Corrections collected by the migration
        wxr_output: Path of the written WXR file; SQL files share its name
        prefix: WordPress table prefix

    Returns:
        Paths of the attach, names and titles files
    """
    return [
        write_statements(
            parent_statements(result.parent_corrections, prefix),
            Path(f"{wxr_output}.attach.sql"),
        ),
        write_statements(
            slug_statements(result.slug_corrections, prefix),
            Path(f"{wxr_output}.names.sql"),
        ),
        write_statements(
            title_statements(result.title_corrections, prefix),
            Path(f"{wxr_output}.titles.sql"),
        ),
    ]
