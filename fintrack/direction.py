"""Income/expense classification of OCR text.

Payment apps label the counterparty with ``From:`` (money arriving) or
``To:`` (money leaving). Those labels are the strongest signal and are
checked first; keyword phrases come next, and a lone ``To:`` label is the
weakest fallback. The first decisive rule wins:

1. ``from`` + optional colon + a non-blank value  -> income
2. an expense phrase, unless ``from:`` appears    -> expense
3. an income phrase                               -> income
4. a ``to`` label with no ``from`` label anywhere -> expense
5. otherwise                                      -> ``None``
"""

from __future__ import annotations

import re

from .keywords import EXPENSE_KEYWORDS, INCOME_KEYWORDS
from .logging_setup import get_logger
from .models import TransactionType

_FROM_RE = re.compile(r"from\s*:?\s*([^\n]+)", re.IGNORECASE)
_TO_RE = re.compile(r"to\s*:?\s*([^\n]+)", re.IGNORECASE)

_logger = get_logger("fintrack.direction")


def _first_phrase(text: str, phrases: tuple[str, ...]) -> str | None:
    for phrase in phrases:
        if phrase in text:
            return phrase
    return None


def detect_type(text: str) -> TransactionType | None:
    """Classify ``text`` as income or expense; ``None`` when undecided.

    ``text`` is expected to be lowercased already (the orchestrator does this
    once); phrase matching is plain substring containment.
    """

    text = text.lower()

    from_values = [m.group(1) for m in _FROM_RE.finditer(text)]
    for value in from_values:
        if value.strip():
            _logger.debug("income: 'from' label with value %r", value.strip())
            return TransactionType.INCOME

    phrase = _first_phrase(text, EXPENSE_KEYWORDS)
    if phrase is not None and "from:" not in text:
        _logger.debug("expense: matched phrase %r", phrase)
        return TransactionType.EXPENSE

    phrase = _first_phrase(text, INCOME_KEYWORDS)
    if phrase is not None:
        _logger.debug("income: matched phrase %r", phrase)
        return TransactionType.INCOME

    if not from_values and _TO_RE.search(text) is not None:
        _logger.debug("expense: only a 'to' label present")
        return TransactionType.EXPENSE

    return None


__all__ = ["detect_type"]
