"""Receipt scanning: text recognition followed by parsing.

The OCR engine itself is an external collaborator. Anything that implements
:class:`TextRecognizer` can be plugged in; the recognizer is awaited first and
only its successful output is handed to :func:`fintrack.parser.parse_transaction`.
When recognition fails the scan falls back to an empty result, which routes
the user to manual expense entry, the same screen an unknown direction opens.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from .logging_setup import get_logger
from .models import ParsedTransaction, TransactionType
from .parser import parse_transaction

_logger = get_logger("fintrack.scanner")


class RecognitionError(Exception):
    """Raised by recognizers that cannot turn an image into text."""


@runtime_checkable
class TextRecognizer(Protocol):
    async def recognize(self, image: bytes) -> str:  # pragma: no cover - protocol
        ...


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of scanning one image.

    ``error`` is set (and ``parsed`` is empty) when recognition failed.
    """

    text: str = ""
    parsed: ParsedTransaction = field(default_factory=ParsedTransaction)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def entry_type(self) -> TransactionType:
        """Entry form to open: income only when income was detected."""

        if self.parsed.type is TransactionType.INCOME:
            return TransactionType.INCOME
        return TransactionType.EXPENSE


async def scan_receipt(recognizer: TextRecognizer, image: bytes) -> ScanResult:
    """Recognize text in ``image`` and parse it into a transaction guess."""

    if not image:
        _logger.warning("Failed to scan image: Failed to decode image")
        return ScanResult(error="Failed to decode image")

    try:
        text = await recognizer.recognize(image)
    except Exception as exc:  # noqa: BLE001 - any recognizer failure means manual entry
        _logger.warning("Failed to scan image: %s", exc)
        return ScanResult(error=str(exc) or type(exc).__name__)

    parsed = parse_transaction(text)
    _logger.debug("scan produced %s", parsed.as_dict())
    return ScanResult(text=text or "", parsed=parsed)


__all__ = ["RecognitionError", "ScanResult", "TextRecognizer", "scan_receipt"]
