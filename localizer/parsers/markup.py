"""Polyglot language markup (<lang_xx>...</lang_xx>) handling.

Text fields of a multilingual item carry both languages inline, each
wrapped in a marker pair named after its language code. Stripping keeps
one language and removes every marker of both languages.
"""

from __future__ import annotations

import re
from functools import lru_cache


@lru_cache(maxsize=None)
def _span_pattern(code: str) -> re.Pattern[str]:
    # Non-greedy so repeated spans on one line are removed one by one,
    # DOTALL so a span may cover several lines.
    return re.compile(rf"<lang_{code}>.*?</lang_{code}>", re.DOTALL)


@lru_cache(maxsize=None)
def _marker_pattern(code: str) -> re.Pattern[str]:
    return re.compile(rf"</?lang_{code}>")


def strip_language(text: str, keep: str, drop: str) -> str:
    """Reduce bilingual text to the language ``keep``.

    Args:
        text: Text possibly containing language markers
        keep: Code of the language whose content survives
        drop: Code of the language whose spans are removed

    Returns:
        Text without any marker of either language
    """
    text = _span_pattern(drop).sub("", text)
    # Lone half-markers from corrupted documents
    text = _marker_pattern(drop).sub("", text)
    return _marker_pattern(keep).sub("", text)


def has_language_markup(text: str, codes: tuple[str, ...]) -> bool:
    """Check whether ``text`` contains a marker of any of ``codes``."""
    return any(_marker_pattern(code).search(text) for code in codes)
