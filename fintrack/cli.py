"""CLI for the ``fintrack`` package.

Exposes callable command handlers (``cmd_parse``, ``cmd_prefill``) and a
Typer-based console interface on top of them. Environment variables are
loaded from a local ``.env`` using ``python-dotenv`` before any command runs;
parsing logic lives in :mod:`fintrack.parser`.
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .entry import TransactionDraft
from .logging_setup import configure_logging, get_logger
from .models import ParsedTransaction
from .parser import parse_transaction

_OUTPUT_FORMATS = ("json", "text")
_FORMAT_ENV_VAR = "FINTRACK_OUTPUT_FORMAT"

_logger = get_logger("fintrack.cli")


# ---- Helpers -----------------------------------------------------------------


def _resolve_format(fmt: str | None) -> str:
    """Explicit option, else ``FINTRACK_OUTPUT_FORMAT``, else ``json``."""

    candidate = (fmt or os.getenv(_FORMAT_ENV_VAR) or "json").strip().lower()
    if candidate not in _OUTPUT_FORMATS:
        raise ValueError(
            f"unknown output format {candidate!r} (expected one of: {', '.join(_OUTPUT_FORMATS)})"
        )
    return candidate


def _read_text(text_path: str) -> str:
    if text_path == "-":
        return sys.stdin.read()
    with open(text_path, encoding="utf-8") as f:
        return f.read()


def _format_text_row(parsed: ParsedTransaction) -> str:
    row = parsed.as_dict()
    return "\t".join(row[k] or "" for k in ("amount", "type", "category"))


def _load_or_report(text_path: str) -> str | None:
    """Read the input file, printing a concise error and returning ``None`` on failure."""

    try:
        return _read_text(text_path)
    except FileNotFoundError:
        print(f"Error: File not found: {text_path}", file=sys.stderr)
    except PermissionError:
        print(f"Error: Permission denied: {text_path}", file=sys.stderr)
    except UnicodeDecodeError as e:
        print(f"Error: '{text_path}' is not valid UTF-8 text: {e}", file=sys.stderr)
    except OSError as e:
        print(f"Error: Unexpected failure reading '{text_path}': {e}", file=sys.stderr)
    return None


# ---- Command handlers --------------------------------------------------------


def cmd_parse(text_path: str, *, output_format: str | None = None) -> int:
    """Parse recognized text from ``text_path`` (``-`` for stdin) and print it.

    ``json`` output is the :meth:`ParsedTransaction.as_dict` mapping; ``text``
    output is a single ``amount<TAB>type<TAB>category`` line with empty
    columns for absent fields. Returns a process exit code.
    """

    try:
        fmt = _resolve_format(output_format)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    text = _load_or_report(text_path)
    if text is None:
        return 1

    parsed = parse_transaction(text)
    if parsed.is_empty:
        _logger.info("no transaction details recognized in %s", text_path)

    if fmt == "json":
        print(json.dumps(parsed.as_dict(), ensure_ascii=False))
    else:
        print(_format_text_row(parsed))
    return 0


def cmd_prefill(text_path: str, *, description: str = "") -> int:
    """Parse ``text_path`` and print the prefilled entry form as JSON."""

    text = _load_or_report(text_path)
    if text is None:
        return 1

    draft = TransactionDraft.prefill(parse_transaction(text), description=description)
    print(json.dumps(draft.model_dump(mode="json"), ensure_ascii=False))
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Turn OCR text from receipts and payment screenshots into transaction "
        "guesses (amount, income/expense, category)."
    ),
)

# Module-level option object so parameter defaults contain no calls.
TEXT_PATH_OPTION: OptionInfo = typer.Option(
    ...,
    "--text-path",
    help="Path to a UTF-8 text file with recognized text, or '-' for stdin.",
)


@app.command("parse")
def parse_cmd(
    text_path: Annotated[str, TEXT_PATH_OPTION],
    *,
    output_format: str | None = typer.Option(
        None,
        "--format",
        help="Output format: json or text (falls back to FINTRACK_OUTPUT_FORMAT, then json).",
    ),
) -> None:
    """Parse recognized text and print the transaction guess."""

    code = cmd_parse(text_path, output_format=output_format)
    if code:
        raise typer.Exit(code)


@app.command("prefill")
def prefill_cmd(
    text_path: Annotated[str, TEXT_PATH_OPTION],
    *,
    description: str = typer.Option("", help="Description to put on the draft."),
) -> None:
    """Print the entry form a scan would open, prefilled from the text."""

    code = cmd_prefill(text_path, description=description)
    if code:
        raise typer.Exit(code)


@app.callback(invoke_without_command=True)
def _root(
    ctx: typer.Context,
    *,
    log_level: str | None = typer.Option(
        None, help="Log level (falls back to FINTRACK_LOG_LEVEL, then INFO)."
    ),
) -> None:
    """Root command.

    Loads ``.env`` from the current working directory without overriding
    variables that are already set, then configures logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging(log_level)

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


def main() -> None:  # pragma: no cover - console script shim
    app()


if __name__ == "__main__":  # pragma: no cover
    app()
