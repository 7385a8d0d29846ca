"""Logger wiring for ``fintrack``.

Every module logs through ``get_logger("fintrack.<module>")``; the amount,
direction and category detectors explain their choices at DEBUG. Nothing is
printed until a host calls ``configure_logging``, which the ``fintrack`` CLI
does from its root callback using ``--log-level`` or ``FINTRACK_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "fintrack"
_LEVEL_ENV_VAR = "FINTRACK_LOG_LEVEL"
_DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_configured_handler: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = logging.getLevelNamesMapping().get(name)
    return numeric if numeric is not None else logging.INFO


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        return _level_from_name(level)
    env_val = os.getenv(_LEVEL_ENV_VAR)
    return _level_from_name(env_val) if env_val else logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send ``fintrack`` log records to ``stream``; later calls are no-ops.

    ``level`` accepts a level name or number. Unset, it is read from
    ``FINTRACK_LOG_LEVEL`` and falls back to INFO; unknown names also mean
    INFO. ``stream`` defaults to whatever ``sys.stderr`` is when called.
    """

    global _configured_handler
    if _configured_handler is not None:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or _DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Records stop here; the root logger never sees them twice.
    logger.propagate = False

    _configured_handler = handler


def reset_logging() -> None:
    """Undo :func:`configure_logging` so the next call takes effect."""

    global _configured_handler
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    if _configured_handler is not None:
        logger.removeHandler(_configured_handler)
        _configured_handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``, keeping ``fintrack`` quiet until configured."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if _configured_handler is None and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging"]
