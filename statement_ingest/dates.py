"""Date normalization to ISO ``YYYY-MM-DD``.

Ambiguous numeric dates are resolved with a component-size heuristic: a
component above 12 cannot be a month. When both components are 12 or less,
four-digit-year dates default to day-first and two-digit-year dates to
month-first. Text that cannot be interpreted is returned unchanged (trimmed),
so a bad cell never aborts an import.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from dateutil import parser as dtparse

_ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_DAY_MONTH_YEAR_RE = re.compile(r"^(\d{1,2})[./-](\d{1,2})[./-](\d{4})$")
_MONTH_DAY_YEAR_RE = re.compile(r"^(\d{1,2})[./-](\d{1,2})[./-](\d{2,4})$")
_YEAR_MONTH_DAY_RE = re.compile(r"^(\d{4})[./-](\d{1,2})[./-](\d{1,2})$")

# Fill fields absent from free-form text so results never depend on today.
# Parsing against both reveals which fields the text actually supplied.
_FALLBACK_DEFAULT = datetime(2000, 1, 1)
_ALTERNATE_DEFAULT = datetime(2001, 3, 2)


def _make_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _expand_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        return 1900 + year if year > 50 else 2000 + year
    return year


def _day_month_year(cleaned: str) -> date | None:
    m = _DAY_MONTH_YEAR_RE.match(cleaned)
    if m is None:
        return None
    first, second, year = (int(g) for g in m.groups())
    if first <= 12 and second > 12:
        return _make_date(year, first, second)
    return _make_date(year, second, first)


def _month_day_year(cleaned: str) -> date | None:
    m = _MONTH_DAY_YEAR_RE.match(cleaned)
    if m is None:
        return None
    first, second = int(m.group(1)), int(m.group(2))
    year = _expand_year(m.group(3))
    if first > 12:
        return _make_date(year, second, first)
    return _make_date(year, first, second)


def _year_month_day(cleaned: str) -> date | None:
    m = _YEAR_MONTH_DAY_RE.match(cleaned)
    if m is None:
        return None
    year, month, day = (int(g) for g in m.groups())
    return _make_date(year, month, day)


def _free_form(cleaned: str) -> date | None:
    try:
        first = dtparse.parse(cleaned, default=_FALLBACK_DEFAULT)
        second = dtparse.parse(cleaned, default=_ALTERNATE_DEFAULT)
    except (ValueError, OverflowError):
        return None
    # Year, month and day all taken from the defaults: the text names no date.
    if (
        first.year != second.year
        and first.month != second.month
        and first.day != second.day
    ):
        return None
    return first.date()


_ATTEMPTS = (_day_month_year, _month_day_year, _year_month_day, _free_form)


def normalize_date(raw: str) -> str:
    """Return ``raw`` as ``YYYY-MM-DD`` when parseable, else ``raw`` trimmed."""

    cleaned = raw.strip()
    if not cleaned:
        return ""
    if _ISO_RE.match(cleaned):
        return cleaned

    for attempt in _ATTEMPTS:
        parsed = attempt(cleaned)
        if parsed is not None:
            return parsed.isoformat()
    return cleaned


__all__ = ["normalize_date"]
