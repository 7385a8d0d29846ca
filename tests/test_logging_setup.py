import io
import logging

import pytest

from fintrack import parse_transaction
from fintrack.logging_setup import configure_logging, get_logger


def test_get_logger_is_silent_before_configuration():
    logger = get_logger("fintrack.parser")

    assert logger.name == "fintrack.parser"
    assert any(isinstance(h, logging.NullHandler) for h in logging.getLogger("fintrack").handlers)


def test_configure_logging_routes_parser_debug_output():
    buf = io.StringIO()
    configure_logging("DEBUG", stream=buf)

    parse_transaction("Swiggy order\nTotal: ₹347\nPaid via UPI")

    out = buf.getvalue()
    assert "fintrack.parser DEBUG parsed" in out
    assert "fintrack.categorize" in out


def test_configure_logging_runs_once():
    first, second = io.StringIO(), io.StringIO()
    configure_logging("INFO", stream=first)
    configure_logging("DEBUG", stream=second)

    get_logger("fintrack.cli").info("hello")

    assert "hello" in first.getvalue()
    assert second.getvalue() == ""
    assert logging.getLogger("fintrack").level == logging.INFO


def test_level_falls_back_to_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FINTRACK_LOG_LEVEL", "warning")

    configure_logging(stream=io.StringIO())

    assert logging.getLogger("fintrack").level == logging.WARNING


@pytest.mark.parametrize(
    ("level", "expected"),
    [("debug", logging.DEBUG), ("30", logging.WARNING), ("chatty", logging.INFO)],
)
def test_level_names_and_numbers_are_accepted(level, expected):
    configure_logging(level, stream=io.StringIO())

    assert logging.getLogger("fintrack").level == expected
