"""Tests for tag localization."""

from localizer.config import MigrationSettings
from localizer.models import LocalizedTag
from localizer.splitting import IdAllocator
from localizer.taxonomy import collect_tags, tag_statements


class TestCollectTags:
    """Tests for collect_tags."""

    def test_pairs_every_post_tag(self, sample_doc) -> None:
        allocator = IdAllocator(20, "next_term_id")

        tags = collect_tags(sample_doc, allocator, MigrationSettings())

        assert tags == [
            LocalizedTag(7, "music", "Music", 20, "music-it"),
            LocalizedTag(8, "rock-n-roll", "Rock 'n' Roll", 21, "rock-n-roll-it"),
        ]
        assert allocator.next_id == 22


class TestTagStatements:
    """Tests for tag_statements."""

    def test_statements_for_one_tag(self) -> None:
        tag = LocalizedTag(8, "rock-n-roll", "Rock 'n' Roll", 21, "rock-n-roll-it")

        statements = tag_statements([tag], 1561, MigrationSettings())

        translations = """'a:2:{s:2:"en";i:8;s:2:"it";i:21;}'"""
        assert statements == [
            "INSERT INTO wp_terms (term_id, name, slug) VALUES "
            "( 21, 'Rock ''n'' Roll', 'rock-n-roll-it' );",
            "INSERT INTO wp_term_taxonomy (term_id, taxonomy) VALUES ( 21, 'post_tag' );",
            "INSERT INTO wp_termmeta (term_id, meta_key, meta_value) VALUES "
            "( 21, '_language', 1561 );",
            "INSERT INTO wp_termmeta (term_id, meta_key, meta_value) VALUES "
            f"( 8, '_translations', {translations} );",
            "INSERT INTO wp_termmeta (term_id, meta_key, meta_value) VALUES "
            f"( 21, '_translations', {translations} );",
            "",
        ]

    def test_no_tags(self) -> None:
        assert tag_statements([], 1561, MigrationSettings()) == []
