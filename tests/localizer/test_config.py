"""Tests for settings and input validation."""

import pytest
from pydantic import ValidationError

from localizer.config import (
    MigrationSettings,
    load_settings,
    validate_language_code,
    validate_start_id,
)


class TestValidateStartId:
    """Tests for allocator seed validation."""

    def test_valid_seed(self) -> None:
        validate_start_id(1)  # Should not raise

    def test_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid next_post_id"):
            validate_start_id(0)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="Invalid next_term_id"):
            validate_start_id(-5, "next_term_id")


class TestValidateLanguageCode:
    """Tests for language code validation."""

    def test_valid_code(self) -> None:
        validate_language_code("it")  # Should not raise

    @pytest.mark.parametrize("code", ["", "ita", "IT", "i1"])
    def test_invalid_codes(self, code: str) -> None:
        with pytest.raises(ValueError, match="Invalid language code"):
            validate_language_code(code)


class TestMigrationSettings:
    """Tests for MigrationSettings."""

    def test_defaults(self) -> None:
        settings = MigrationSettings()

        assert settings.default_language.code == "en"
        assert settings.other_language.name == "Italiano"
        assert settings.slug_suffix == "-italiano"
        assert settings.title_suffix == " (Italiano)"
        assert settings.post_guid_base == "http://www.cottica.net/?p="

    def test_same_language_twice_rejected(self) -> None:
        with pytest.raises(ValidationError, match="different codes"):
            MigrationSettings(
                default_language={"code": "en", "name": "English"},
                other_language={"code": "en", "name": "English"},
            )

    def test_empty_suffix_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Suffix must not be empty"):
            MigrationSettings(slug_suffix="")

    def test_frozen(self) -> None:
        settings = MigrationSettings()
        with pytest.raises(ValidationError):
            settings.slug_suffix = "-x"


class TestLoadSettings:
    """Tests for load_settings."""

    def test_no_file_gives_defaults(self) -> None:
        assert load_settings(None) == MigrationSettings()

    def test_partial_file(self, tmp_path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            "other_language:\n  code: fr\n  name: Français\nslug_suffix: -fr\n",
            encoding="utf-8",
        )

        settings = load_settings(path)

        assert settings.other_language.code == "fr"
        assert settings.slug_suffix == "-fr"
        assert settings.title_suffix == " (Italiano)"

    def test_not_a_mapping(self, tmp_path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- en\n- it\n", encoding="utf-8")

        with pytest.raises(ValueError, match="expected a mapping"):
            load_settings(path)
