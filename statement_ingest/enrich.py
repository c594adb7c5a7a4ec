"""Merge local categorization with external suggestions and user overrides.

Precedence per description, highest first:

1. a user override keyed by merchant name (or description when the merchant
   is empty),
2. an AI suggestion whose category is not a default value,
3. the local rule engine.

Inputs are never mutated; every call returns new :class:`EnrichedRecord`
objects.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from .categorization import categorize_all
from .logging_setup import get_logger
from .models import AiCategorization, EnrichedRecord, MerchantCategory, RawRecord
from .rules import INCOME_CATEGORY

_log = get_logger("statement_ingest.enrich")

# Compared case-insensitively after trimming.
DEFAULT_CATEGORIES: frozenset[str] = frozenset({"", "uncategorized", "other"})


def parse_ai_mapping(items: Iterable[Mapping[str, Any]]) -> dict[str, AiCategorization]:
    """Validate AI suggestions and key them by original description.

    Raises ``ValueError`` naming the position of the first invalid item. When
    a description appears more than once the last suggestion wins.
    """

    parsed: dict[str, AiCategorization] = {}
    for pos, item in enumerate(items):
        try:
            suggestion = AiCategorization.model_validate(item)
        except ValidationError as exc:
            raise ValueError(f"invalid AI categorization at position {pos}: {exc}") from exc
        parsed[suggestion.original_description] = suggestion
    return parsed


def _usable(suggestion: AiCategorization | None) -> bool:
    if suggestion is None or suggestion.category is None:
        return False
    return suggestion.category.strip().lower() not in DEFAULT_CATEGORIES


def resolve_mapping(
    descriptions: Iterable[str],
    ai_mapping: Mapping[str, AiCategorization] | None = None,
) -> dict[str, MerchantCategory]:
    """Return the effective ``{merchant, category}`` per distinct description."""

    local = categorize_all(descriptions)
    if not ai_mapping:
        return local

    resolved: dict[str, MerchantCategory] = {}
    ai_used = 0
    for desc, fallback in local.items():
        suggestion = ai_mapping.get(desc)
        if _usable(suggestion):
            ai_used += 1
            resolved[desc] = MerchantCategory(
                merchant=suggestion.clean_merchant or fallback.merchant,
                category=suggestion.category,
            )
        else:
            resolved[desc] = fallback
    _log.debug("AI suggestions applied to %d of %d descriptions", ai_used, len(local))
    return resolved


def enrich_records(
    records: Sequence[RawRecord],
    *,
    ai_mapping: Mapping[str, AiCategorization] | None = None,
    overrides: Mapping[str, str] | None = None,
    income_by_sign: bool = False,
) -> list[EnrichedRecord]:
    """Attach merchant, category and direction to each record.

    Parameters
    ----------
    records:
        Parsed records in input order; ``id`` reflects the position here.
    ai_mapping:
        Suggestions keyed by original description, typically from
        :func:`parse_ai_mapping`.
    overrides:
        User-chosen categories keyed by merchant name.
    income_by_sign:
        When true, any positive amount is categorized as ``"Income"`` before
        overrides are applied.
    """

    mapping = resolve_mapping((r.description for r in records), ai_mapping)
    overrides = overrides or {}

    enriched: list[EnrichedRecord] = []
    for index, record in enumerate(records):
        match = mapping[record.description]
        category = match.category
        if income_by_sign and record.amount > 0:
            category = INCOME_CATEGORY
        merchant_key = match.merchant or record.description
        category = overrides.get(merchant_key, category)
        enriched.append(
            EnrichedRecord.from_raw(index, record, merchant=match.merchant, category=category)
        )
    return enriched


__all__ = ["DEFAULT_CATEGORIES", "enrich_records", "parse_ai_mapping", "resolve_mapping"]
