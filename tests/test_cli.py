import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from fintrack.cli import app, cmd_parse

RECEIPT = "Swiggy order\nTotal: ₹347\nPaid via UPI\n"

runner = CliRunner()


@pytest.fixture
def receipt_path(tmp_path: Path) -> Path:
    p = tmp_path / "receipt.txt"
    p.write_text(RECEIPT, encoding="utf-8")
    return p


def _last_json_line(output: str) -> dict:
    return json.loads(output.strip().splitlines()[-1])


def test_parse_prints_json_by_default(receipt_path: Path):
    result = runner.invoke(app, ["parse", "--text-path", str(receipt_path)])

    assert result.exit_code == 0, result.output
    assert _last_json_line(result.stdout) == {
        "amount": "347",
        "type": "expense",
        "category": "Food",
    }


def test_parse_text_format(receipt_path: Path):
    result = runner.invoke(app, ["parse", "--text-path", str(receipt_path), "--format", "text"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip().splitlines()[-1] == "347\texpense\tFood"


def test_output_format_from_environment(receipt_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("FINTRACK_OUTPUT_FORMAT", "text")

    result = runner.invoke(app, ["parse", "--text-path", str(receipt_path)])

    assert result.exit_code == 0, result.output
    assert "347\texpense\tFood" in result.stdout


def test_parse_reads_stdin():
    result = runner.invoke(app, ["parse", "--text-path", "-"], input="To: Rahul\n500\n")

    assert result.exit_code == 0, result.output
    assert _last_json_line(result.stdout) == {"amount": "500", "type": "expense", "category": None}


def test_missing_file_reports_error(tmp_path: Path):
    missing = tmp_path / "nope.txt"

    result = runner.invoke(app, ["parse", "--text-path", str(missing)])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_unknown_format_is_rejected(receipt_path: Path, capsys: pytest.CaptureFixture[str]):
    code = cmd_parse(str(receipt_path), output_format="xml")

    assert code == 2
    assert "unknown output format" in capsys.readouterr().err


def test_prefill_prints_form_fields(receipt_path: Path):
    result = runner.invoke(
        app, ["prefill", "--text-path", str(receipt_path), "--description", "dinner"]
    )

    assert result.exit_code == 0, result.output
    assert _last_json_line(result.stdout) == {
        "type": "expense",
        "amount": "347",
        "category": "Food",
        "description": "dinner",
    }


def test_root_without_subcommand_exits_nonzero():
    result = runner.invoke(app, ["--log-level", "WARNING"])

    assert result.exit_code == 1
    assert "No subcommand provided" in result.output
