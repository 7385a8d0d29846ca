"""Static keyword tables used by the parser.

All tables are tuples (or frozensets where only membership matters) so they
cannot be mutated at runtime. ``CATEGORY_KEYWORDS`` is an ordered sequence of
``(category, keywords)`` pairs rather than a mapping: the first category
whose keyword matches wins, so declaration order is part of the behavior.
Keywords are lowercase.
"""

from __future__ import annotations

from .models import Category

# ---------------------------------------------------------------------------
# Category detection
# ---------------------------------------------------------------------------

CATEGORY_KEYWORDS: tuple[tuple[Category, tuple[str, ...]], ...] = (
    (
        Category.FOOD,
        (
            # delivery apps
            "swiggy", "zomato", "uber eats", "ubereats", "foodpanda", "dunzo",
            # restaurants and fast food
            "mcdonalds", "mcd", "burger", "pizza", "dominos", "pizza hut", "kfc",
            "subway", "starbucks", "cafe", "coffee", "restaurant", "dining",
            "food", "meal", "lunch", "dinner", "breakfast", "snack", "eat",
        ),
    ),
    (
        Category.TRANSPORT,
        (
            # ride hailing
            "uber", "ola", "rapido", "in-drive", "indrive",
            # fuel
            "petrol", "fuel", "diesel", "gas", "gasoline", "bpcl", "hpcl", "ioc",
            # public transport
            "metro", "bus", "train", "railway", "irctc", "auto", "rickshaw", "tuk-tuk",
            "travel", "travelling", "trip", "journey", "commute", "commuting",
            "taxi", "cab", "transport", "transportation", "booking", "make my trip",
            "makemytrip",
            # vehicle
            "parking", "toll", "tollgate", "fastag",
        ),
    ),
    (
        Category.BILLS,
        (
            # telecom
            "jio", "airtel", "vodafone", "idea", "bsnl", "vi", "recharge", "prepaid",
            "postpaid",
            # utilities
            "electricity", "bescom", "tneb", "msedcl", "water", "municipal", "corporation",
            # internet and tv
            "internet", "wifi", "broadband", "act", "airtel fiber", "jio fiber", "tata sky",
            "dish tv",
            "phone", "mobile", "bill", "utility", "utilities", "payment", "dues",
        ),
    ),
    (
        Category.ENTERTAINMENT,
        (
            # streaming
            "netflix", "prime", "prime video", "hotstar", "disney", "sony liv", "zee5", "voot",
            # movies
            "cinema", "bookmyshow", "pvr", "inox", "carnival", "movie", "theatre", "theater",
            # music and gaming
            "spotify", "youtube", "youtube premium", "gaming", "playstation", "xbox", "steam",
            "entertainment", "streaming", "subscription",
        ),
    ),
    (
        Category.HEALTH,
        (
            # medical services
            "pharmacy", "apollo", "fortis", "max", "medanta", "hospital", "clinic", "doctor",
            "dr",
            # medicines
            "medicine", "medicines", "pharma", "pharmaceutical", "1mg", "netmeds", "practo",
            # fitness
            "fitness", "gym", "health", "wellness", "yoga", "pilates", "workout",
        ),
    ),
    (
        Category.SHOPPING,
        (
            # e-commerce
            "amazon", "flipkart", "myntra", "nykaa", "meesho", "ajio", "snapdeal", "paytm mall",
            # retail
            "d-mart", "dmart", "reliance", "big bazaar", "spencer", "more", "hypercity",
            "shopping", "mall", "store", "purchase", "buy", "retail", "fashion", "clothing",
        ),
    ),
    (
        Category.GROCERY,
        (
            # grocery delivery
            "bigbasket", "grofers", "zepto", "blinkit", "instamart", "swiggy instamart",
            "grocery", "groceries", "supermarket", "hypermarket",
            "vegetables", "fruits", "vegetable", "fruit", "milk", "bread", "eggs", "rice",
            "wheat",
        ),
    ),
)

# ---------------------------------------------------------------------------
# Direction detection (substring phrases, checked in order)
# ---------------------------------------------------------------------------

EXPENSE_KEYWORDS: tuple[str, ...] = (
    "paid to",
    "paid",
    "debit",
    "sent to",
    "payment to",
    "transferred to",
    "to:",
    "you paid",
    "payment sent",
)

INCOME_KEYWORDS: tuple[str, ...] = (
    "received from",
    "received",
    "credited to",
    "credited",
    "bank transfer",
    "credit",
    "money received",
    "added to",
    "from:",
    "you received",
    "money added",
)

# ---------------------------------------------------------------------------
# Amount extraction
# ---------------------------------------------------------------------------

# Words that make a standalone numeric line count as a transaction amount even
# when it is above the small-number threshold.
AMOUNT_CONTEXT_WORDS: tuple[str, ...] = (
    "transaction",
    "paid",
    "amount",
    "sent",
    "received",
    "transfer",
    "upi",
    "gpay",
    "payment",
)

# Tokens a number may directly follow to count as keyword-adjacent.
AMOUNT_KEYWORD_TOKENS: tuple[str, ...] = (
    "transaction",
    "paid",
    "amount",
    "rs",
    "₹",
    "inr",
    "sent",
    "received",
    "transfer",
    "upi",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)

# Integer values in this range read as calendar years, never as amounts.
EXCLUDED_YEARS: frozenset[int] = frozenset(range(2020, 2031))

RUPEE_SIGN = "₹"


__all__ = [
    "AMOUNT_CONTEXT_WORDS",
    "AMOUNT_KEYWORD_TOKENS",
    "CATEGORY_KEYWORDS",
    "EXCLUDED_YEARS",
    "EXPENSE_KEYWORDS",
    "INCOME_KEYWORDS",
    "MONTH_ABBREVIATIONS",
    "RUPEE_SIGN",
]
