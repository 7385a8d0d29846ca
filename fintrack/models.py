"""Data models for ``fintrack``.

The parser produces a single immutable value per call,
:class:`ParsedTransaction`. Every field is optional: an absent signal is
represented as ``None`` rather than as an error, so callers can prefill what
was recognized and leave the rest blank for manual entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum
from typing import Any, NamedTuple

# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class TransactionType(StrEnum):
    """Direction of money relative to the user's account."""

    INCOME = "income"
    EXPENSE = "expense"


class Category(StrEnum):
    """Spending categories the keyword tables can assign.

    Declaration order matches the order categories are tried during
    detection (see :data:`fintrack.keywords.CATEGORY_KEYWORDS`).
    """

    FOOD = "Food"
    TRANSPORT = "Transport"
    BILLS = "Bills"
    ENTERTAINMENT = "Entertainment"
    HEALTH = "Health"
    SHOPPING = "Shopping"
    GROCERY = "Grocery"


# ---------------------------------------------------------------------------
# Parse result
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParsedTransaction:
    """Best-effort structured guess extracted from OCR text.

    Attributes
    ----------
    amount:
        Most likely transaction amount (always positive), or ``None`` when no
        plausible amount survived the heuristics.
    type:
        :class:`TransactionType` when a directional signal was found.
    category:
        :class:`Category` of the first keyword table entry that matched.
    """

    amount: Decimal | None = None
    type: TransactionType | None = None
    category: Category | None = None

    @property
    def is_empty(self) -> bool:
        return self.amount is None and self.type is None and self.category is None

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping (absent fields map to ``None``)."""

        return {
            "amount": str(self.amount) if self.amount is not None else None,
            "type": self.type.value if self.type is not None else None,
            "category": self.category.value if self.category is not None else None,
        }


class AmountCandidate(NamedTuple):
    """A possible amount together with the strength of its evidence."""

    value: Decimal
    priority: int


__all__ = ["AmountCandidate", "Category", "ParsedTransaction", "TransactionType"]
