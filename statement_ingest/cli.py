"""CLI for the ``statement_ingest`` package.

Command handlers (``cmd_parse``, ``cmd_categorize``, ``cmd_report``) return a
process exit code and print errors to stderr; the Typer commands below are thin
wrappers around them. Environment variables (``STATEMENT_INGEST_LOG_LEVEL``)
may be provided through a local ``.env`` file, loaded with ``python-dotenv``
without overriding variables already set.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging, get_logger
from .models import AiCategorization, EnrichedRecord

_log = get_logger("statement_ingest.cli")

NO_TRANSACTIONS_MESSAGE = (
    "No valid transactions found. Make sure the file has a header row with "
    "a date column and an amount (or debit/credit) column."
)


class _InputError(Exception):
    """A user-facing problem with an input file."""


# ---- Small module-level helpers used by CLI commands -------------------------


def _read_text(path: str | Path) -> str:
    # utf-8-sig strips a leading byte-order mark, which the parser expects gone.
    try:
        return Path(path).read_text(encoding="utf-8-sig")
    except FileNotFoundError as e:
        raise _InputError(f"File not found: {path}") from e
    except PermissionError as e:
        raise _InputError(f"Permission denied: {path}") from e
    except UnicodeDecodeError as e:
        raise _InputError(f"File is not valid UTF-8: {path}") from e


def _read_json(path: str | Path) -> Any:
    try:
        return json.loads(_read_text(path))
    except json.JSONDecodeError as e:
        raise _InputError(f"Invalid JSON in {path}: {e}") from e


def _load_ai_mapping(path: str | Path | None) -> dict[str, AiCategorization] | None:
    if path is None:
        return None
    from .enrich import parse_ai_mapping

    data = _read_json(path)
    if not isinstance(data, list):
        raise _InputError(f"AI mapping must be a JSON array: {path}")
    try:
        return parse_ai_mapping(data)
    except ValueError as e:
        raise _InputError(str(e)) from e


def _load_overrides(path: str | Path | None) -> dict[str, str] | None:
    if path is None:
        return None
    data = _read_json(path)
    if not isinstance(data, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        raise _InputError(f"Overrides must be a JSON object of merchant -> category: {path}")
    return dict(data)


def _ingest(
    csv_path: str | Path,
    *,
    ai_mapping_path: str | Path | None = None,
    overrides_path: str | Path | None = None,
    income_by_sign: bool = False,
) -> list[EnrichedRecord]:
    from .api import ingest_statement

    text = _read_text(csv_path)
    records = ingest_statement(
        text,
        ai_mapping=_load_ai_mapping(ai_mapping_path),
        overrides=_load_overrides(overrides_path),
        income_by_sign=income_by_sign,
    )
    _log.debug("ingested %d records from %s", len(records), csv_path)
    return records


# ---- Command handlers ----------------------------------------------------------


def cmd_parse(
    csv_path: str | Path,
    *,
    ai_mapping_path: str | Path | None = None,
    overrides_path: str | Path | None = None,
    income_by_sign: bool = False,
) -> int:
    """Print one JSON object per enriched record."""

    try:
        records = _ingest(
            csv_path,
            ai_mapping_path=ai_mapping_path,
            overrides_path=overrides_path,
            income_by_sign=income_by_sign,
        )
    except _InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not records:
        print(f"Error: {NO_TRANSACTIONS_MESSAGE}", file=sys.stderr)
        return 1

    for r in records:
        print(json.dumps(r.to_dict(), ensure_ascii=False))
    return 0


def cmd_categorize(csv_path: str | Path) -> int:
    """Print ``description<TAB>merchant<TAB>category`` per distinct description."""

    from .categorization import categorize_all
    from .normalizers import parse_statement

    try:
        raw = parse_statement(_read_text(csv_path))
    except _InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not raw:
        print(f"Error: {NO_TRANSACTIONS_MESSAGE}", file=sys.stderr)
        return 1

    for desc, match in categorize_all(r.description for r in raw).items():
        print(f"{desc}\t{match.merchant}\t{match.category}")
    return 0


def cmd_report(
    csv_path: str | Path,
    *,
    ai_mapping_path: str | Path | None = None,
    overrides_path: str | Path | None = None,
    income_by_sign: bool = False,
) -> int:
    """Print monthly and per-category totals."""

    from .reports import report_trends

    try:
        records = _ingest(
            csv_path,
            ai_mapping_path=ai_mapping_path,
            overrides_path=overrides_path,
            income_by_sign=income_by_sign,
        )
    except _InputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not records:
        print(f"Error: {NO_TRANSACTIONS_MESSAGE}", file=sys.stderr)
        return 1

    print(report_trends(records))
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Parse delimited bank exports into categorized transactions using local "
        "heuristics only. Loads environment variables from a local .env first."
    ),
)

# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults). Used inside ``Annotated``, so positional arguments are option
# names and defaults are set in the signatures.
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--file",
    "-f",
    help="Path to a delimited bank export (CSV/TSV/semicolon/pipe separated)",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
AI_MAPPING_OPTION: OptionInfo = typer.Option(
    "--ai-mapping",
    help=(
        "JSON array of {originalDescription, cleanMerchant, category} suggestions "
        "that take precedence over local rules."
    ),
    dir_okay=False,
)
OVERRIDES_OPTION: OptionInfo = typer.Option(
    "--overrides",
    help="JSON object mapping merchant name to a user-chosen category.",
    dir_okay=False,
)
INCOME_BY_SIGN_OPTION: OptionInfo = typer.Option(
    "--income-by-sign",
    help="Categorize every positive amount as Income.",
)


@app.command("parse")
def parse_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    ai_mapping: Annotated[Path | None, AI_MAPPING_OPTION] = None,
    overrides: Annotated[Path | None, OVERRIDES_OPTION] = None,
    income_by_sign: Annotated[bool, INCOME_BY_SIGN_OPTION] = False,
) -> None:
    """Parse and categorize a bank export; print JSON lines."""

    raise typer.Exit(
        cmd_parse(
            csv_path,
            ai_mapping_path=ai_mapping,
            overrides_path=overrides,
            income_by_sign=income_by_sign,
        )
    )


@app.command("categorize")
def categorize_cmd(csv_path: Annotated[Path, CSV_PATH_OPTION]) -> None:
    """Show the local merchant/category mapping for each distinct description."""

    raise typer.Exit(cmd_categorize(csv_path))


@app.command("report")
def report_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    ai_mapping: Annotated[Path | None, AI_MAPPING_OPTION] = None,
    overrides: Annotated[Path | None, OVERRIDES_OPTION] = None,
    income_by_sign: Annotated[bool, INCOME_BY_SIGN_OPTION] = False,
) -> None:
    """Print monthly income/expense/savings and spending per category."""

    raise typer.Exit(
        cmd_report(
            csv_path,
            ai_mapping_path=ai_mapping,
            overrides_path=overrides,
            income_by_sign=income_by_sign,
        )
    )


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


def main() -> None:  # pragma: no cover - console script entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    # Running as a module: `python -m statement_ingest.cli`
    main()
