"""Keyword-based spending category detection.

Categories are tried in the order of
:data:`fintrack.keywords.CATEGORY_KEYWORDS`; the first one with a whole-word
keyword hit wins. Whole-word matching keeps "foodie" from counting as
"food" and "automatic" from counting as "auto".
"""

from __future__ import annotations

import re

from .keywords import CATEGORY_KEYWORDS
from .logging_setup import get_logger
from .models import Category

# Compiled once; the tables are constant for the process lifetime.
_CATEGORY_PATTERNS: tuple[tuple[Category, tuple[tuple[str, re.Pattern[str]], ...]], ...] = tuple(
    (
        category,
        tuple(
            (kw, re.compile(rf"\b{re.escape(kw)}\b", re.IGNORECASE))
            for kw in keywords
        ),
    )
    for category, keywords in CATEGORY_KEYWORDS
)

_logger = get_logger("fintrack.categorize")


def detect_category(text: str) -> Category | None:
    """Return the first category whose keyword appears in ``text`` as a word."""

    for category, patterns in _CATEGORY_PATTERNS:
        for keyword, pattern in patterns:
            if pattern.search(text):
                _logger.debug("category %s from keyword %r", category.value, keyword)
                return category
    return None


__all__ = ["detect_category"]
