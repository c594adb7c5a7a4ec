import json
import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from statement_ingest.cli import app

runner = CliRunner()

GERMAN_EXPORT = textwrap.dedent(
    """\
    Buchungstag;Verwendungszweck;Betrag
    02.01.2024;LIDL SAGT DANKE;-23,45
    05.01.2024;PAYPAL *NETFLIX;-9,99
    09.01.2024;LIDL SAGT DANKE;-5,00
    31.01.2024;ACME GMBH;2.500,00
    """
)


@pytest.fixture
def export_file(tmp_path: Path) -> Path:
    path = tmp_path / "export.csv"
    path.write_text(GERMAN_EXPORT, encoding="utf-8")
    return path


def _write_json(path: Path, payload) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def _json_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_parse_prints_json_lines(export_file: Path):
    result = runner.invoke(app, ["parse", "--file", str(export_file)])

    assert result.exit_code == 0, result.output
    rows = _json_lines(result.stdout)
    assert rows[0] == {
        "id": "tx-0",
        "date": "2024-01-02",
        "description": "LIDL SAGT DANKE",
        "amount": "-23.45",
        "merchant": "Lidl Sagt Danke",
        "category": "Groceries",
        "type": "expense",
    }
    assert [r["id"] for r in rows] == ["tx-0", "tx-1", "tx-2", "tx-3"]
    assert rows[3]["amount"] == "2500.00"
    assert rows[3]["type"] == "income"


def test_parse_strips_byte_order_mark(tmp_path: Path):
    path = tmp_path / "bom.csv"
    path.write_text("\ufeff" + GERMAN_EXPORT, encoding="utf-8")

    result = runner.invoke(app, ["parse", "-f", str(path)])

    assert result.exit_code == 0, result.output
    assert len(_json_lines(result.stdout)) == 4


def test_parse_with_ai_mapping_and_overrides(tmp_path: Path, export_file: Path):
    ai_path = _write_json(
        tmp_path / "ai.json",
        [{"originalDescription": "LIDL SAGT DANKE", "cleanMerchant": "Lidl", "category": "Food"}],
    )
    overrides_path = _write_json(tmp_path / "overrides.json", {"Netflix": "Entertainment"})

    result = runner.invoke(
        app,
        [
            "parse",
            "--file",
            str(export_file),
            "--ai-mapping",
            str(ai_path),
            "--overrides",
            str(overrides_path),
        ],
    )

    assert result.exit_code == 0, result.output
    rows = _json_lines(result.stdout)
    assert [(r["merchant"], r["category"]) for r in rows] == [
        ("Lidl", "Food"),
        ("Netflix", "Entertainment"),
        ("Lidl", "Food"),
        ("Acme Gmbh", "Other"),
    ]


def test_parse_income_by_sign(export_file: Path):
    result = runner.invoke(app, ["parse", "--file", str(export_file), "--income-by-sign"])

    assert result.exit_code == 0, result.output
    assert _json_lines(result.stdout)[3]["category"] == "Income"


def test_missing_file_reports_error(tmp_path: Path):
    result = runner.invoke(app, ["parse", "--file", str(tmp_path / "nope.csv")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_file_without_header_reports_no_transactions(tmp_path: Path):
    path = tmp_path / "junk.csv"
    path.write_text("foo,bar\n1,2\n", encoding="utf-8")

    result = runner.invoke(app, ["report", "--file", str(path)])

    assert result.exit_code == 1
    assert "No valid transactions found" in result.output


def test_ai_mapping_must_be_a_list(tmp_path: Path, export_file: Path):
    ai_path = _write_json(tmp_path / "ai.json", {"originalDescription": "LIDL"})

    result = runner.invoke(app, ["parse", "--file", str(export_file), "--ai-mapping", str(ai_path)])

    assert result.exit_code == 1
    assert "must be a JSON array" in result.output


def test_invalid_json_overrides(tmp_path: Path, export_file: Path):
    bad = tmp_path / "overrides.json"
    bad.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["parse", "--file", str(export_file), "--overrides", str(bad)])

    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_categorize_prints_distinct_descriptions(export_file: Path):
    result = runner.invoke(app, ["categorize", "--file", str(export_file)])

    assert result.exit_code == 0, result.output
    assert result.stdout.splitlines() == [
        "LIDL SAGT DANKE\tLidl Sagt Danke\tGroceries",
        "PAYPAL *NETFLIX\tNetflix\tSubscriptions",
        "ACME GMBH\tAcme Gmbh\tOther",
    ]


def test_report_prints_monthly_and_category_totals(export_file: Path):
    result = runner.invoke(app, ["report", "--file", str(export_file)])

    assert result.exit_code == 0, result.output
    assert "2024-01" in result.stdout
    assert "2,500.00" in result.stdout
    assert "2,461.56" in result.stdout
    assert "Groceries" in result.stdout
    assert "28.45" in result.stdout


def test_dotenv_sets_log_level(tmp_path: Path, export_file: Path):
    # conftest chdirs into tmp_path, where the CLI looks for .env.
    (tmp_path / ".env").write_text("STATEMENT_INGEST_LOG_LEVEL=DEBUG\n", encoding="utf-8")

    result = runner.invoke(app, ["categorize", "--file", str(export_file)])

    assert result.exit_code == 0, result.output
    assert "delimiter" in result.output


def test_ai_mapping_with_null_category_keeps_local_result(tmp_path: Path, export_file: Path):
    ai_path = _write_json(
        tmp_path / "ai.json",
        [{"originalDescription": "PAYPAL *NETFLIX", "cleanMerchant": "Netflix", "category": None}],
    )

    result = runner.invoke(app, ["parse", "--file", str(export_file), "--ai-mapping", str(ai_path)])

    assert result.exit_code == 0, result.output
    assert _json_lines(result.stdout)[1]["category"] == "Subscriptions"
