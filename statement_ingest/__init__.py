"""Public interface for the ``statement_ingest`` package.

This module exposes the package's API functions and public models as the
stable import surface. There is no runtime logic here, only re-exports.
"""

from .amounts import parse_amount
from .api import (
    categorize_all,
    categorize_transaction,
    clean_merchant_name,
    enrich_records,
    ingest_statement,
    parse_ai_mapping,
    parse_statement,
    report_trends,
)
from .dates import normalize_date
from .delimiters import detect_delimiter
from .headers import locate_header, map_columns
from .models import (
    AiCategorization,
    CategoryRule,
    CategoryTotal,
    ColumnMap,
    EnrichedRecord,
    HeaderMatch,
    MerchantCategory,
    MonthlySummary,
    RawRecord,
)
from .normalizers import StatementNormalizer, normalize_row
from .reports import category_totals, monthly_summary
from .rules import CATEGORY_RULES, INCOME_PATTERNS
from .tokenizer import parse_line, split_lines

__all__ = [
    # API
    "ingest_statement",
    "parse_statement",
    "enrich_records",
    "parse_ai_mapping",
    "categorize_all",
    "categorize_transaction",
    "clean_merchant_name",
    "report_trends",
    "monthly_summary",
    "category_totals",
    # Pipeline stages
    "split_lines",
    "parse_line",
    "detect_delimiter",
    "locate_header",
    "map_columns",
    "normalize_row",
    "parse_amount",
    "normalize_date",
    "StatementNormalizer",
    # Tables
    "CATEGORY_RULES",
    "INCOME_PATTERNS",
    # Models / types
    "RawRecord",
    "EnrichedRecord",
    "ColumnMap",
    "HeaderMatch",
    "CategoryRule",
    "MerchantCategory",
    "AiCategorization",
    "MonthlySummary",
    "CategoryTotal",
]
