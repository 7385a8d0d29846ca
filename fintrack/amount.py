"""Amount extraction from OCR text.

Receipts and payment screenshots mix the transaction amount with dates,
years, reference numbers and balances. Extraction therefore runs five
independent passes over the text, each emitting :class:`AmountCandidate`
values tagged with a priority that reflects how strong the surrounding
evidence is:

===========  ===============================================================
Priority     Evidence
===========  ===============================================================
100          adjacent to a currency marker (``₹``, ``Rs``/``Rs.``, ``INR``)
80           a line consisting only of a number
70           directly after a payment keyword (``paid``, ``amount``, ...)
60           the integer part of any number with a two-digit fraction
50           a bare 1-3 digit integer that is not part of a calendar date
===========  ===============================================================

The winner is the highest-priority candidate; ties go to the smallest value,
since incidental numbers on a receipt (balances, totals of other orders) tend
to be larger than the amount actually paid. Integer parts in 2020-2030 are
always rejected as years, in every pass.

Nothing here raises for ``str`` input: unparseable digit groups are skipped.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from decimal import Decimal, InvalidOperation

from .keywords import (
    AMOUNT_CONTEXT_WORDS,
    AMOUNT_KEYWORD_TOKENS,
    EXCLUDED_YEARS,
    MONTH_ABBREVIATIONS,
    RUPEE_SIGN,
)
from .logging_setup import get_logger
from .models import AmountCandidate

# ---- Priorities and limits ---------------------------------------------------

PRIORITY_CURRENCY = 100
PRIORITY_STANDALONE_LINE = 80
PRIORITY_KEYWORD = 70
PRIORITY_DECIMAL = 60
PRIORITY_SMALL_INTEGER = 50

_CURRENCY_LIMIT = Decimal("100000000")
_KEYWORD_LIMIT = Decimal("100000000")
_STANDALONE_LIMIT = Decimal("1000000")
_DECIMAL_LIMIT = Decimal("1000000")
_SMALL_NUMBER_MAX = Decimal("999")
_CONTEXT_LINES = 2
_DATE_CONTEXT_CHARS = 20

# ---- Patterns ----------------------------------------------------------------

_CURRENCY_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(RUPEE_SIGN + r"\s*([0-9,]+\.[0-9]{2})"),
    re.compile(RUPEE_SIGN + r"\s*([0-9,]+)"),
    re.compile(r"([0-9,]+\.[0-9]{2})\s*" + RUPEE_SIGN),
    re.compile(r"([0-9,]+)\s*" + RUPEE_SIGN),
    re.compile(r"rs\.?\s*([0-9,]+\.[0-9]{2})", re.IGNORECASE),
    re.compile(r"rs\.?\s*([0-9,]+)", re.IGNORECASE),
    re.compile(r"inr\s*([0-9,]+\.[0-9]{2})", re.IGNORECASE),
    re.compile(r"inr\s*([0-9,]+)", re.IGNORECASE),
)

_STANDALONE_RE = re.compile(r"^\s*([0-9,]+(?:\.[0-9]{2})?)\s*$")
_CONTEXT_RE = re.compile("|".join(AMOUNT_CONTEXT_WORDS))
_KEYWORD_RE = re.compile(
    "(?:"
    + "|".join(re.escape(t) for t in AMOUNT_KEYWORD_TOKENS)
    + r")[\s:]*([0-9,]+(?:\.[0-9]{2})?)",
    re.IGNORECASE,
)
# Only the integer part before the fraction is kept.
_DECIMAL_RE = re.compile(r"([0-9,]+)\.[0-9]{2}")
_SMALL_INTEGER_RE = re.compile(r"\b([0-9]{1,3})\b")
_MONTHS_ALT = "|".join(MONTH_ABBREVIATIONS)


_logger = get_logger("fintrack.amount")


# ---- Helpers -----------------------------------------------------------------


def _to_decimal(raw: str) -> Decimal | None:
    """Parse a digit group with thousands separators; ``None`` when invalid."""

    s = raw.replace(",", "").strip()
    if not s:
        return None
    try:
        return Decimal(s)
    except InvalidOperation:
        return None


def _is_year(value: Decimal) -> bool:
    return int(value) in EXCLUDED_YEARS


def _accept(raw: str, *, limit: Decimal) -> Decimal | None:
    value = _to_decimal(raw)
    if value is None or value <= 0 or value >= limit:
        return None
    if _is_year(value):
        return None
    return value


def _is_date_context(text: str, start: int, number: int) -> bool:
    # Window starts 20 chars before the match and ends 20 chars after its start.
    lo = max(0, start - _DATE_CONTEXT_CHARS)
    hi = min(len(text), start + _DATE_CONTEXT_CHARS)
    window = text[lo:hi].lower()
    pattern = rf"(?:{_MONTHS_ALT})\s*{number}|{number}\s*(?:{_MONTHS_ALT})"
    return re.search(pattern, window) is not None


# ---- Passes ------------------------------------------------------------------


def _currency_candidates(text: str) -> list[AmountCandidate]:
    out: list[AmountCandidate] = []
    for pattern in _CURRENCY_PATTERNS:
        for m in pattern.finditer(text):
            value = _accept(m.group(1), limit=_CURRENCY_LIMIT)
            if value is not None:
                out.append(AmountCandidate(value, PRIORITY_CURRENCY))
    return out


def _standalone_line_candidates(lines: Sequence[str]) -> list[AmountCandidate]:
    out: list[AmountCandidate] = []
    for i, line in enumerate(lines):
        m = _STANDALONE_RE.match(line)
        if m is None:
            continue
        value = _accept(m.group(1), limit=_STANDALONE_LIMIT)
        if value is None:
            continue
        if value <= _SMALL_NUMBER_MAX:
            out.append(AmountCandidate(value, PRIORITY_STANDALONE_LINE))
            continue
        window = lines[max(0, i - _CONTEXT_LINES) : i + _CONTEXT_LINES + 1]
        if _CONTEXT_RE.search(" ".join(window).lower()):
            out.append(AmountCandidate(value, PRIORITY_STANDALONE_LINE))
    return out


def _keyword_candidates(text: str) -> list[AmountCandidate]:
    out: list[AmountCandidate] = []
    for m in _KEYWORD_RE.finditer(text):
        value = _accept(m.group(1), limit=_KEYWORD_LIMIT)
        if value is not None:
            out.append(AmountCandidate(value, PRIORITY_KEYWORD))
    return out


def _decimal_candidates(text: str) -> list[AmountCandidate]:
    out: list[AmountCandidate] = []
    for m in _DECIMAL_RE.finditer(text):
        value = _accept(m.group(1), limit=_DECIMAL_LIMIT)
        if value is not None:
            out.append(AmountCandidate(value, PRIORITY_DECIMAL))
    return out


def _small_integer_candidates(text: str) -> list[AmountCandidate]:
    out: list[AmountCandidate] = []
    for m in _SMALL_INTEGER_RE.finditer(text):
        value = Decimal(m.group(1))
        if value <= 0 or value > _SMALL_NUMBER_MAX or _is_year(value):
            continue
        if _is_date_context(text, m.start(), int(value)):
            continue
        out.append(AmountCandidate(value, PRIORITY_SMALL_INTEGER))
    return out


# ---- Public API --------------------------------------------------------------


def collect_candidates(text: str) -> list[AmountCandidate]:
    """Run every pass over ``text`` and return all surviving candidates.

    Candidates are returned in pass order (priority 100 first), and in match
    order within a pass.
    """

    lines = [line.strip() for line in text.split("\n")]
    candidates: list[AmountCandidate] = []
    candidates.extend(_currency_candidates(text))
    candidates.extend(_standalone_line_candidates(lines))
    candidates.extend(_keyword_candidates(text))
    candidates.extend(_decimal_candidates(text))
    candidates.extend(_small_integer_candidates(text))
    return candidates


def select_amount(candidates: Iterable[AmountCandidate]) -> Decimal | None:
    """Pick the highest-priority candidate, preferring the smaller value on ties."""

    best = min(candidates, key=lambda c: (-c.priority, c.value), default=None)
    return best.value if best is not None else None


def extract_amount(text: str) -> Decimal | None:
    """Return the most likely transaction amount in ``text``, or ``None``."""

    candidates = collect_candidates(text)
    amount = select_amount(candidates)
    if amount is not None:
        _logger.debug("amount %s chosen from %d candidates", amount, len(candidates))
    return amount


__all__ = [
    "PRIORITY_CURRENCY",
    "PRIORITY_DECIMAL",
    "PRIORITY_KEYWORD",
    "PRIORITY_SMALL_INTEGER",
    "PRIORITY_STANDALONE_LINE",
    "collect_candidates",
    "extract_amount",
    "select_amount",
]
