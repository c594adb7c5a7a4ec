"""Header row location and column role mapping.

Bank exports frequently start with a preamble (account holder, IBAN, period,
opening balance) before the real header. Rather than trusting the first line,
each of the leading rows is scored against multilingual keyword lists and the
best row that names both a date column and some money column wins.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .logging_setup import get_logger
from .models import ColumnMap, HeaderMatch
from .tokenizer import parse_line

_log = get_logger("statement_ingest.headers")

HEADER_SCAN_LIMIT = 25

# (role, keywords) in test order; a cell takes the first role it matches.
# Keywords match as substrings of the lowercased cell.
ROLE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("date", ("date", "time", "datum", "buchungstag", "valuta", "zeit")),
    ("amount", ("amount", "value", "amt", "net", "betrag", "umsatz", "saldo", "amount (eur)")),
    # Who the money went to
    (
        "payee",
        (
            "payee",
            "merchant",
            "beguenstigter",
            "empfaenger",
            "name",
            "partei",
            "auftraggeber",
            "counterparty",
        ),
    ),
    # What it was for; often carries reference codes
    (
        "memo",
        (
            "description",
            "desc",
            "memo",
            "narrative",
            "details",
            "verwendungszweck",
            "buchungstext",
            "text",
            "referenz",
            "purpose",
        ),
    ),
    ("debit", ("debit", "withdrawal", "paid out", "soll", "ausgang", "belastung")),
    ("credit", ("credit", "deposit", "paid in", "hab", "eingang", "gutschrift")),
)

ROLE_WEIGHTS: Mapping[str, int] = MappingProxyType(
    {"date": 3, "amount": 3, "payee": 2, "memo": 2, "debit": 2, "credit": 2}
)


def _match_role(cell: str) -> str | None:
    for role, keywords in ROLE_KEYWORDS:
        if any(k in cell for k in keywords):
            return role
    return None


def map_columns(cells: Sequence[str]) -> tuple[int, ColumnMap]:
    """Score a candidate header row and map its columns to roles.

    Every matching cell adds its role weight to the score, but only the first
    cell matching a role is assigned to it.
    """

    score = 0
    assigned: dict[str, int] = {}
    for index, raw in enumerate(cells):
        role = _match_role(raw.strip().lower())
        if role is None:
            continue
        score += ROLE_WEIGHTS[role]
        assigned.setdefault(role, index)
    return score, ColumnMap(**assigned)


def locate_header(lines: Sequence[str], delimiter: str) -> HeaderMatch | None:
    """Return the best header candidate among the first rows, or ``None``.

    A row qualifies when it maps a date column and at least one of amount,
    debit or credit. The highest score wins; the earliest row wins ties.
    """

    best: HeaderMatch | None = None
    for i, line in enumerate(lines[:HEADER_SCAN_LIMIT]):
        score, columns = map_columns(parse_line(line, delimiter))
        if columns.date is None or not columns.has_money:
            continue
        if best is None or score > best.score:
            best = HeaderMatch(index=i, score=score, columns=columns)

    if best is not None:
        _log.debug("header row=%d score=%d columns=%s", best.index, best.score, best.columns)
    return best


__all__ = ["HEADER_SCAN_LIMIT", "ROLE_KEYWORDS", "ROLE_WEIGHTS", "locate_header", "map_columns"]
