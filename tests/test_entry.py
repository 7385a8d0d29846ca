from decimal import Decimal

import pytest
from pydantic import ValidationError

from fintrack import (
    EntryValidationError,
    ParsedTransaction,
    TransactionDraft,
    TransactionType,
    parse_transaction,
)
from fintrack.entry import categories_for


def test_prefill_from_expense_receipt():
    draft = TransactionDraft.prefill(parse_transaction("Swiggy order\nTotal: ₹347\nPaid via UPI"))

    assert draft.type is TransactionType.EXPENSE
    assert draft.amount == "347"
    assert draft.category == "Food"

    entry = draft.confirm()
    assert entry.amount == Decimal("347")
    assert entry.category == "Food"
    assert entry.balance_delta == Decimal("-347")


def test_prefill_income_leaves_unoffered_category_blank():
    parsed = ParsedTransaction(
        amount=Decimal("15000.00"),
        type=TransactionType.INCOME,
        category=None,
    )

    draft = TransactionDraft.prefill(parsed, description="October salary")

    assert draft.type is TransactionType.INCOME
    assert draft.amount == "15000"
    assert draft.category == ""
    with pytest.raises(EntryValidationError, match="Please select a category"):
        draft.confirm()

    draft.category = "Salary"
    entry = draft.confirm()
    assert entry.description == "October salary"
    assert entry.balance_delta == Decimal("15000")


def test_expense_category_is_dropped_on_income_screen():
    parsed = parse_transaction("Swiggy order\nTotal: ₹347")

    draft = TransactionDraft.prefill(parsed, entry_type=TransactionType.INCOME)

    assert draft.category == ""
    assert "Food" not in categories_for(TransactionType.INCOME)


def test_empty_parse_gives_blank_expense_form():
    draft = TransactionDraft.prefill(ParsedTransaction())

    assert draft.model_dump(mode="json") == {
        "type": "expense",
        "amount": "",
        "category": "",
        "description": "",
    }
    with pytest.raises(EntryValidationError, match="Please enter a valid amount"):
        draft.confirm()


def test_fractional_amount_is_prefilled_with_two_decimals_at_most():
    draft = TransactionDraft.prefill(ParsedTransaction(amount=Decimal("12.50")))

    assert draft.amount == "12.5"


@pytest.mark.parametrize("amount", ["0", "0.00", "."])
def test_non_positive_amount_is_rejected(amount):
    draft = TransactionDraft(amount=amount, category="Food")

    with pytest.raises(EntryValidationError, match="Please enter a valid amount"):
        draft.confirm()


def test_amount_input_rejects_more_than_two_decimals():
    draft = TransactionDraft()

    with pytest.raises(ValidationError):
        draft.amount = "12.345"
    with pytest.raises(ValidationError):
        TransactionDraft(amount="12a")


def test_category_must_be_offered_for_the_screen():
    draft = TransactionDraft(type=TransactionType.INCOME, amount="10", category="Food")

    with pytest.raises(EntryValidationError, match="Please select a category"):
        draft.confirm()


def test_confirmed_entry_is_immutable():
    entry = TransactionDraft(amount="99.99", category="Bills").confirm()

    with pytest.raises(ValidationError):
        entry.amount = Decimal("1")
