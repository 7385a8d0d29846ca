"""Top-level receipt text parser.

Public API:
    - :func:`parse_transaction`

The three detectors run independently against the same input; none of them
short-circuits the others. Amount extraction sees the original text, while
direction and category detection share a single lowercased copy.
"""

from __future__ import annotations

from typing import Any

from .amount import extract_amount
from .categorize import detect_category
from .direction import detect_type
from .logging_setup import get_logger
from .models import ParsedTransaction

_logger = get_logger("fintrack.parser")


def parse_transaction(raw_text: Any) -> ParsedTransaction:
    """Parse OCR text into a :class:`ParsedTransaction`.

    Never raises for string input. ``None`` is treated as empty text and any
    other object is converted with ``str()``, so callers can hand over
    whatever the recognizer produced. Absent signals come back as ``None``
    fields; an input with no signal at all yields an empty result.
    """

    if raw_text is None:
        text = ""
    elif isinstance(raw_text, str):
        text = raw_text
    else:
        text = str(raw_text)

    normalized = text.lower()

    parsed = ParsedTransaction(
        amount=extract_amount(text),
        type=detect_type(normalized),
        category=detect_category(normalized),
    )
    _logger.debug(
        "parsed %d chars: amount=%s type=%s category=%s",
        len(text),
        parsed.amount,
        parsed.type,
        parsed.category,
    )
    return parsed


__all__ = ["parse_transaction"]
