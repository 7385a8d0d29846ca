import pytest

from fintrack import Category, detect_category
from fintrack.keywords import CATEGORY_KEYWORDS


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("swiggy order", Category.FOOD),
        ("uber trip", Category.TRANSPORT),
        ("jio recharge", Category.BILLS),
        ("netflix subscription", Category.ENTERTAINMENT),
        ("apollo pharmacy", Category.HEALTH),
        ("amazon order", Category.SHOPPING),
        ("d-mart", Category.SHOPPING),
        ("bigbasket", Category.GROCERY),
    ],
)
def test_detect_category(text, expected):
    assert detect_category(text) is expected


def test_whole_word_matching_rejects_substrings():
    assert detect_category("foodie magazine") is None
    assert detect_category("automatic") is None


def test_earlier_category_wins_on_overlap():
    # "uber eats" (Food) is declared before "uber" (Transport); "swiggy"
    # (Food) before "instamart" (Grocery).
    assert detect_category("uber eats") is Category.FOOD
    assert detect_category("swiggy instamart") is Category.FOOD


def test_matching_is_case_insensitive():
    assert detect_category("STARBUCKS Coffee") is Category.FOOD


def test_table_order_is_fixed():
    assert [c for c, _ in CATEGORY_KEYWORDS] == list(Category)
    assert all(kw == kw.lower() for _, kws in CATEGORY_KEYWORDS for kw in kws)
