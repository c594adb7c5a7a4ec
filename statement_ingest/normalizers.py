"""Delimited-export → :class:`RawRecord` normalization.

Unlike provider-specific adapters, nothing about the input schema is assumed:
the separator is sniffed, the header row is located heuristically and columns
are mapped to roles by keyword. The pipeline is best-effort and never raises
on well-formed text input:

- no qualifying header → ``[]``
- unparseable amount → ``0``
- unparseable date → original cell text
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from decimal import Decimal

from .amounts import ZERO, parse_amount
from .dates import normalize_date
from .delimiters import SAMPLE_LINES, detect_delimiter
from .headers import locate_header
from .logging_setup import get_logger
from .models import ColumnMap, RawRecord
from .tokenizer import parse_line, split_lines

_log = get_logger("statement_ingest.normalizers")

UNKNOWN_DESCRIPTION = "Unknown Transaction"

_MIN_DESCRIPTION_LEN = 3
_MIN_FALLBACK_LEN = 5
_WHITESPACE_RE = re.compile(r"\s+")
# A cell that begins like a number (amounts, balances, value dates, reference
# numbers) is never used as fallback description text.
_NUMERIC_LEAD_RE = re.compile(r"^\s*[+-]?(?:\d|\.\d)")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _cell(fields: Sequence[str], index: int | None) -> str:
    if index is None or index >= len(fields):
        return ""
    return fields[index]


def _collapse(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def _looks_numeric(text: str) -> bool:
    return _NUMERIC_LEAD_RE.match(text) is not None


def _build_description(fields: Sequence[str], columns: ColumnMap) -> str:
    payee = _cell(fields, columns.payee)
    memo = _cell(fields, columns.memo)

    if columns.payee is not None and columns.memo is not None and columns.payee != columns.memo:
        description = f"{payee} {memo}".strip()
    else:
        description = payee or memo

    if len(description) < _MIN_DESCRIPTION_LEN:
        excluded = columns.value_columns
        fallback = next(
            (
                f
                for i, f in enumerate(fields)
                if i not in excluded and len(f) > _MIN_FALLBACK_LEN and not _looks_numeric(f)
            ),
            None,
        )
        if fallback is not None:
            description = fallback

    return _collapse(description) or UNKNOWN_DESCRIPTION


def _compute_amount(fields: Sequence[str], columns: ColumnMap) -> Decimal:
    if columns.amount is not None:
        return parse_amount(_cell(fields, columns.amount))
    if columns.debit is not None and columns.credit is not None:
        debit = parse_amount(_cell(fields, columns.debit))
        credit = parse_amount(_cell(fields, columns.credit))
        # Both flows may be exported unsigned; expense negative, income positive.
        return abs(credit) - abs(debit)
    return ZERO


# ---------------------------------------------------------------------------
# Row and statement normalization
# ---------------------------------------------------------------------------


def normalize_row(fields: Sequence[str], columns: ColumnMap) -> RawRecord | None:
    """Build a record from one tokenized data row, or ``None`` to drop it.

    Rows with fewer than two fields or an empty date cell are dropped.
    """

    if len(fields) < 2:
        return None
    date_cell = _cell(fields, columns.date).strip()
    if not date_cell:
        return None

    return RawRecord(
        date=normalize_date(date_cell),
        description=_build_description(fields, columns),
        amount=_compute_amount(fields, columns),
    )


def iter_records(text: str) -> Iterator[RawRecord]:
    """Yield records from ``text`` in input row order."""

    if not isinstance(text, str):
        raise TypeError(f"statement text must be str, got {type(text).__name__}")

    lines = split_lines(text)
    if not lines:
        _log.warning("statement text is empty")
        return

    delimiter = detect_delimiter(lines[:SAMPLE_LINES])
    header = locate_header(lines, delimiter)
    if header is None:
        _log.warning("no header row found; delimiter=%r lines=%d", delimiter, len(lines))
        return

    dropped = 0
    for line in lines[header.index + 1 :]:
        record = normalize_row(parse_line(line, delimiter), header.columns)
        if record is None:
            dropped += 1
            continue
        yield record

    if dropped:
        _log.debug("dropped %d structurally unusable rows", dropped)


def parse_statement(text: str) -> list[RawRecord]:
    """Parse a delimited export into raw records.

    Raises ``TypeError`` when ``text`` is ``None`` or not a string; all other
    problems degrade to defaults or an empty list.
    """

    records = list(iter_records(text))
    _log.debug("parsed %d records", len(records))
    return records


class StatementNormalizer:
    """Normalize delimited export text into :class:`RawRecord` rows.

    Usage
    -----
    rows = StatementNormalizer.normalize(text=...)  # -> list[RawRecord]
    """

    @staticmethod
    def normalize(*, text: str) -> list[RawRecord]:
        return parse_statement(text)


__all__ = [
    "UNKNOWN_DESCRIPTION",
    "StatementNormalizer",
    "iter_records",
    "normalize_row",
    "parse_statement",
]
