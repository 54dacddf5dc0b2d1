"""Shared configuration for the localizer package."""

from __future__ import annotations

import re
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

# WXR 1.2 namespaces
WP_NS = "http://wordpress.org/export/1.2/"
CONTENT_NS = "http://purl.org/rss/1.0/modules/content/"
EXCERPT_NS = "http://wordpress.org/export/1.2/excerpt/"

NAMESPACES = {
    "wp": WP_NS,
    "content": CONTENT_NS,
    "excerpt": EXCERPT_NS,
}

# Default language pair (Polyglot markup: <lang_en>, <lang_it>)
DEFAULT_LANGUAGE_CODE = "en"
DEFAULT_LANGUAGE_NAME = "English"
OTHER_LANGUAGE_CODE = "it"
OTHER_LANGUAGE_NAME = "Italiano"

# Appended to the other-language copy to keep slugs and titles unique on import
SLUG_SUFFIX = "-italiano"
TITLE_SUFFIX = " (Italiano)"

SITE_URL = "http://www.cottica.net"

TABLE_PREFIX = "wp_"

LANGUAGE_CODE_PATTERN = re.compile(r"^[a-z]{2}$")


def validate_start_id(value: int, name: str = "next_post_id") -> None:
    """Validate an allocator seed.

    Args:
        value: First identifier the allocator hands out
        name: Argument name used in the error message

    Raises:
        ValueError: If the seed is not a positive integer
    """
    if value < 1:
        raise ValueError(f"Invalid {name}: {value}. Expected a positive integer")


def validate_language_code(code: str) -> None:
    """Validate a two-letter language code.

    Args:
        code: Language code as used in <lang_xx> markers

    Raises:
        ValueError: If the code is not two lowercase letters
    """
    if not LANGUAGE_CODE_PATTERN.match(code):
        raise ValueError(
            f"Invalid language code: '{code}'. Expected two lowercase letters (e.g., en)"
        )


class LanguageSettings(BaseModel):
    """One language of the pair."""

    code: str
    name: str

    @field_validator("code")
    @classmethod
    def _check_code(cls, value: str) -> str:
        validate_language_code(value)
        return value


class MigrationSettings(BaseModel):
    """Settings for one migration run."""

    default_language: LanguageSettings = Field(
        default_factory=lambda: LanguageSettings(
            code=DEFAULT_LANGUAGE_CODE, name=DEFAULT_LANGUAGE_NAME
        )
    )
    other_language: LanguageSettings = Field(
        default_factory=lambda: LanguageSettings(
            code=OTHER_LANGUAGE_CODE, name=OTHER_LANGUAGE_NAME
        )
    )
    slug_suffix: str = SLUG_SUFFIX
    title_suffix: str = TITLE_SUFFIX
    site_url: str = SITE_URL
    table_prefix: str = TABLE_PREFIX

    model_config = {"frozen": True}

    @field_validator("slug_suffix", "title_suffix")
    @classmethod
    def _check_suffix(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Suffix must not be empty")
        return value

    @field_validator("other_language")
    @classmethod
    def _check_distinct(cls, value: LanguageSettings, info) -> LanguageSettings:
        default = info.data.get("default_language")
        if default is not None and default.code == value.code:
            raise ValueError("The two languages must have different codes")
        return value

    @property
    def post_guid_base(self) -> str:
        return f"{self.site_url.rstrip('/')}/?p="

    @property
    def attachment_guid_base(self) -> str:
        return f"{self.site_url.rstrip('/')}/?attachment_id="


def load_settings(path: Path | None = None) -> MigrationSettings:
    """Load migration settings from a YAML file.

    Keys missing from the file keep their defaults.

    Args:
        path: YAML settings file, or None for the defaults

    Returns:
        Validated MigrationSettings
    """
    if path is None:
        return MigrationSettings()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Invalid settings file '{path}': expected a mapping")

    return MigrationSettings(**data)
