"""Tests for the companion SQL writer."""

from pathlib import Path

from localizer.models import (
    MigrationResult,
    ParentCorrection,
    SlugCorrection,
    TitleCorrection,
)
from localizer.storage.sql_writer import (
    parent_statements,
    save_corrections,
    slug_statements,
    sql_quote,
    title_statements,
)


class TestStatements:
    """Tests for statement rendering."""

    def test_sql_quote_doubles_quotes(self) -> None:
        assert sql_quote("l'amico") == "'l''amico'"

    def test_parent_statements(self) -> None:
        statements = parent_statements([ParentCorrection(504, 500), ParentCorrection(901, 0)])
        assert statements == [
            "UPDATE wp_posts SET post_parent=500 WHERE ID=504;",
            "UPDATE wp_posts SET post_parent=0 WHERE ID=901;",
        ]

    def test_slug_statements(self) -> None:
        assert slug_statements([SlugCorrection(501, "hello")]) == [
            "UPDATE wp_posts SET post_name='hello' WHERE ID=501;"
        ]

    def test_title_statements_escaped(self) -> None:
        assert title_statements([TitleCorrection(501, "Rock 'n' Roll")]) == [
            "UPDATE wp_posts SET post_title='Rock ''n'' Roll' WHERE ID=501;"
        ]

    def test_custom_table_prefix(self) -> None:
        assert parent_statements([ParentCorrection(1, 2)], prefix="blog_") == [
            "UPDATE blog_posts SET post_parent=2 WHERE ID=1;"
        ]


class TestSaveCorrections:
    """Tests for save_corrections."""

    def test_writes_three_files(self, tmp_path: Path) -> None:
        result = MigrationResult(
            parent_corrections=[ParentCorrection(504, 500)],
            slug_corrections=[SlugCorrection(501, "hello")],
        )
        output = tmp_path / "out.xml"

        paths = save_corrections(result, output)

        assert [p.name for p in paths] == [
            "out.xml.attach.sql",
            "out.xml.names.sql",
            "out.xml.titles.sql",
        ]
        assert paths[0].read_text(encoding="utf-8") == (
            "UPDATE wp_posts SET post_parent=500 WHERE ID=504;\n"
        )
        assert paths[1].read_text(encoding="utf-8") == (
            "UPDATE wp_posts SET post_name='hello' WHERE ID=501;\n"
        )
        assert paths[2].read_text(encoding="utf-8") == ""
