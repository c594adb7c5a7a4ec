"""Public API orchestration for the ``statement_ingest`` package.

The stages live in their own modules and are re-exported here; this module
adds the one-call convenience :func:`ingest_statement`.
"""

from __future__ import annotations

from collections.abc import Mapping

from .categorization import categorize_all, categorize_transaction
from .enrich import enrich_records, parse_ai_mapping
from .merchants import clean_merchant_name
from .models import AiCategorization, EnrichedRecord
from .normalizers import parse_statement
from .reports import report_trends


def ingest_statement(
    text: str,
    *,
    ai_mapping: Mapping[str, AiCategorization] | None = None,
    overrides: Mapping[str, str] | None = None,
    income_by_sign: bool = False,
) -> list[EnrichedRecord]:
    """Parse ``text`` and enrich every record.

    Returns an empty list when no header could be located; callers should
    surface that to the user as "no valid transactions found".
    """

    return enrich_records(
        parse_statement(text),
        ai_mapping=ai_mapping,
        overrides=overrides,
        income_by_sign=income_by_sign,
    )


__all__ = [
    "categorize_all",
    "categorize_transaction",
    "clean_merchant_name",
    "enrich_records",
    "ingest_statement",
    "parse_ai_mapping",
    "parse_statement",
    "report_trends",
]
