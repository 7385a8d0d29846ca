"""Public interface for the ``fintrack`` package.

Re-exports the parser entry point, its detectors, the result models and the
scan/entry helpers as the stable import surface. No runtime logic here.
"""

from .amount import collect_candidates, extract_amount
from .categorize import detect_category
from .direction import detect_type
from .entry import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    EntryValidationError,
    TransactionDraft,
    TransactionEntry,
)
from .models import AmountCandidate, Category, ParsedTransaction, TransactionType
from .parser import parse_transaction
from .scanner import RecognitionError, ScanResult, TextRecognizer, scan_receipt

__all__ = [
    # Parser
    "parse_transaction",
    "extract_amount",
    "collect_candidates",
    "detect_type",
    "detect_category",
    # Models / types
    "ParsedTransaction",
    "TransactionType",
    "Category",
    "AmountCandidate",
    # Scanning and entry
    "scan_receipt",
    "ScanResult",
    "TextRecognizer",
    "RecognitionError",
    "TransactionDraft",
    "TransactionEntry",
    "EntryValidationError",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
]
