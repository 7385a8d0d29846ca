"""Pytest configuration for test isolation.

The CLI reads ``FINTRACK_LOG_LEVEL`` and ``FINTRACK_OUTPUT_FORMAT`` from the
environment (possibly populated from a developer's ``.env``), and configures
the package logger once per process. Both would leak between tests, so an
autouse fixture clears the variables and detaches any configured handler
after each test.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from fintrack.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def _isolate_env_and_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("FINTRACK_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FINTRACK_OUTPUT_FORMAT", raising=False)
    yield
    reset_logging()
