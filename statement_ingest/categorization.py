"""Deterministic local categorization.

This engine is a fallback: an external AI-categorization service or a user
override may supersede its result per description (see
:mod:`statement_ingest.enrich`). It never performs I/O and is a pure function
of the description and the rule table.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .merchants import clean_merchant_name
from .models import CategoryRule, MerchantCategory
from .rules import CATEGORY_RULES, INCOME_CATEGORY, INCOME_PATTERNS, OTHER_CATEGORY


def is_income_description(description: str) -> bool:
    """Return ``True`` when ``description`` uses income wording.

    The amount sign is not consulted: a debit described as a "refund" is
    still classified as income.
    """

    return any(p.search(description) for p in INCOME_PATTERNS)


def categorize_transaction(
    description: str, rules: Sequence[CategoryRule] = CATEGORY_RULES
) -> str:
    """Return the category for a raw (uncleaned) ``description``."""

    if is_income_description(description):
        return INCOME_CATEGORY

    lowered = description.lower()
    for rule in rules:
        if rule.matches(lowered):
            return rule.category
    return OTHER_CATEGORY


def categorize_all(descriptions: Iterable[str]) -> dict[str, MerchantCategory]:
    """Map each distinct description to its cleaned merchant and local category.

    Keys keep first-seen order.
    """

    mapping: dict[str, MerchantCategory] = {}
    for desc in descriptions:
        if desc in mapping:
            continue
        mapping[desc] = MerchantCategory(
            merchant=clean_merchant_name(desc),
            category=categorize_transaction(desc),
        )
    return mapping


__all__ = ["categorize_all", "categorize_transaction", "is_income_description"]
