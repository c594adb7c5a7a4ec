"""Monthly and per-category aggregation of enriched records.

Months are taken from the ``YYYY-MM`` prefix of ISO dates. Records whose date
could not be normalized are grouped under ``"unknown"`` rather than dropped,
so totals always reconcile with the input.
"""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal

from .models import CategoryTotal, EnrichedRecord, MonthlySummary

UNKNOWN_MONTH = "unknown"

_ISO_MONTH_RE = re.compile(r"^(\d{4}-\d{2})-\d{2}$")


def _month_of(date: str) -> str:
    m = _ISO_MONTH_RE.match(date)
    return m.group(1) if m else UNKNOWN_MONTH


def monthly_summary(records: Iterable[EnrichedRecord]) -> list[MonthlySummary]:
    income: dict[str, Decimal] = defaultdict(Decimal)
    expense: dict[str, Decimal] = defaultdict(Decimal)
    for r in records:
        month = _month_of(r.date)
        if r.amount > 0:
            income[month] += r.amount
        elif r.amount < 0:
            expense[month] += abs(r.amount)
        else:
            # Zero-amount rows still make the month visible.
            income.setdefault(month, Decimal(0))

    # "unknown" sorts after every "YYYY-MM" key.
    months = sorted(set(income) | set(expense))
    return [
        MonthlySummary(
            month=m,
            income=income[m],
            expense=expense[m],
            savings=income[m] - expense[m],
        )
        for m in months
    ]


def category_totals(records: Iterable[EnrichedRecord]) -> list[CategoryTotal]:
    """Absolute expense totals per category, largest first."""

    totals: dict[str, Decimal] = defaultdict(Decimal)
    for r in records:
        if r.amount < 0:
            totals[r.category] += abs(r.amount)
    ordered = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
    return [CategoryTotal(category=c, total=t) for c, t in ordered]


def _fmt(d: Decimal) -> str:
    return f"{d:,.2f}"


def report_trends(records: Iterable[EnrichedRecord]) -> str:
    """Render monthly totals and category totals as a plain-text table.

    Rendering/printing of the string is the caller's responsibility.
    """

    items = list(records)
    lines = [f"{'Month':<10} {'Income':>14} {'Expense':>14} {'Savings':>14}"]
    for s in monthly_summary(items):
        lines.append(
            f"{s.month:<10} {_fmt(s.income):>14} {_fmt(s.expense):>14} {_fmt(s.savings):>14}"
        )

    lines.append("")
    lines.append(f"{'Category':<24} {'Spent':>14}")
    for c in category_totals(items):
        lines.append(f"{c.category:<24} {_fmt(c.total):>14}")
    return "\n".join(lines)


__all__ = ["UNKNOWN_MONTH", "category_totals", "monthly_summary", "report_trends"]
