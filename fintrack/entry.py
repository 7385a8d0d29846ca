"""Transaction entry form state: prefill from a parse, then confirm.

A parse result is advisory only. :class:`TransactionDraft` models the
editable form the user sees (amount, category and description as text, plus
the income/expense screen it belongs to); :meth:`TransactionDraft.confirm`
applies the form's validation and returns a validated
:class:`TransactionEntry` ready to be handed to the storage backend.
Persistence itself is outside this package.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pydantic import BaseModel, ConfigDict, ValidationError, ValidationInfo, field_validator

from .models import ParsedTransaction, TransactionType

# ---------------------------------------------------------------------------
# Category choices offered by the entry screens
# ---------------------------------------------------------------------------

EXPENSE_CATEGORIES: tuple[str, ...] = (
    "Grocery",
    "Transport",
    "Food",
    "Shopping",
    "Entertainment",
    "Bills",
    "Health",
    "Other",
)

INCOME_CATEGORIES: tuple[str, ...] = (
    "Salary",
    "Business",
    "Investment",
    "Gift",
    "Other",
)

INVALID_AMOUNT_MESSAGE = "Please enter a valid amount"
MISSING_CATEGORY_MESSAGE = "Please select a category"

# What the amount field accepts while typing: digits, one dot, two decimals.
_AMOUNT_INPUT_RE = re.compile(r"^\d*\.?\d{0,2}$")


class EntryValidationError(ValueError):
    """The form cannot be submitted; the message is user-facing."""


def categories_for(entry_type: TransactionType) -> tuple[str, ...]:
    if entry_type is TransactionType.INCOME:
        return INCOME_CATEGORIES
    return EXPENSE_CATEGORIES


def _format_amount(amount: Decimal) -> str:
    # At most two decimals, no trailing zeros: 15000.00 -> "15000", 12.50 -> "12.5".
    s = f"{amount.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _parse_amount(raw: str) -> Decimal | None:
    try:
        return Decimal(raw)
    except InvalidOperation:
        return None


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------


class TransactionEntry(BaseModel):
    """A confirmed transaction, validated and immutable."""

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid", str_strip_whitespace=True)

    amount: Decimal
    type: TransactionType
    category: str
    description: str = ""

    @field_validator("amount")
    @classmethod
    def _amount_positive(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v <= 0:
            raise ValueError(INVALID_AMOUNT_MESSAGE)
        return v

    @field_validator("category")
    @classmethod
    def _category_offered(cls, v: str, info: ValidationInfo) -> str:
        entry_type = info.data.get("type")
        if not v or (entry_type is not None and v not in categories_for(entry_type)):
            raise ValueError(MISSING_CATEGORY_MESSAGE)
        return v

    @property
    def balance_delta(self) -> Decimal:
        """Signed change this entry applies to the running balance."""

        return self.amount if self.type is TransactionType.INCOME else -self.amount


class TransactionDraft(BaseModel):
    """Editable form state; every field may still be blank."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    type: TransactionType = TransactionType.EXPENSE
    amount: str = ""
    category: str = ""
    description: str = ""

    @field_validator("amount")
    @classmethod
    def _amount_input(cls, v: str) -> str:
        if not _AMOUNT_INPUT_RE.match(v):
            raise ValueError("amount may only contain digits and up to two decimals")
        return v

    @classmethod
    def prefill(
        cls,
        parsed: ParsedTransaction,
        *,
        entry_type: TransactionType | None = None,
        description: str = "",
    ) -> TransactionDraft:
        """Build a draft from a parse result, leaving unknown fields blank.

        ``entry_type`` defaults to income only when income was detected. A
        detected category that the target screen does not offer is dropped.
        """

        target = entry_type
        if target is None:
            target = (
                TransactionType.INCOME
                if parsed.type is TransactionType.INCOME
                else TransactionType.EXPENSE
            )
        amount = _format_amount(parsed.amount) if parsed.amount is not None else ""
        category = ""
        if parsed.category is not None and parsed.category.value in categories_for(target):
            category = parsed.category.value
        return cls(type=target, amount=amount, category=category, description=description)

    def confirm(self) -> TransactionEntry:
        """Validate the form and return the entry to submit.

        Raises
        ------
        EntryValidationError
            With the same message the form shows: an invalid amount is
            reported before a missing category.
        """

        amount = _parse_amount(self.amount) if self.amount else None
        if amount is None or amount <= 0:
            raise EntryValidationError(INVALID_AMOUNT_MESSAGE)
        if not self.category:
            raise EntryValidationError(MISSING_CATEGORY_MESSAGE)
        try:
            return TransactionEntry(
                amount=amount,
                type=self.type,
                category=self.category,
                description=self.description,
            )
        except ValidationError as exc:
            err = exc.errors()[0]
            cause = (err.get("ctx") or {}).get("error")
            raise EntryValidationError(str(cause) if cause else err["msg"]) from exc


__all__ = [
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "EntryValidationError",
    "TransactionDraft",
    "TransactionEntry",
    "categories_for",
]
