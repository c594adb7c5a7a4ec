"""Locale-aware amount parsing.

Handles both decimal-comma (``1.234,56``) and decimal-point (``1,234.56``)
exports and accounting-style parenthesis negatives. Parsing never raises:
text without a numeric prefix yields ``Decimal(0)``.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

_NON_NUMERIC_RE = re.compile(r"[^0-9.,-]")
# Leading numeric prefix only, so "12.50-" or "1.2.3" parse like a lenient
# float parse would instead of failing outright.
_NUMERIC_PREFIX_RE = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")

ZERO = Decimal(0)


def is_decimal_comma(text: str) -> bool:
    """Return ``True`` when ``text`` uses a comma as the decimal separator."""

    last_comma = text.rfind(",")
    last_dot = text.rfind(".")
    return last_comma != -1 and last_comma > last_dot


def parse_amount(raw: str | None) -> Decimal:
    """Parse a raw money cell into a signed :class:`~decimal.Decimal`.

    - ``"(42.00)"`` is negative regardless of any sign inside the parentheses.
    - When the last comma follows the last period (or there is a comma and no
      period) periods are thousands separators and the first comma is the
      decimal point; otherwise commas are thousands separators.
    - Currency symbols, spaces and letters are discarded.
    """

    if raw is None:
        return ZERO
    s = raw.strip()
    if not s:
        return ZERO

    paren_negative = len(s) >= 2 and s.startswith("(") and s.endswith(")")
    if paren_negative:
        s = s[1:-1]

    decimal_comma = is_decimal_comma(s)
    s = _NON_NUMERIC_RE.sub("", s)
    if decimal_comma:
        s = s.replace(".", "").replace(",", ".", 1)
    else:
        s = s.replace(",", "")

    m = _NUMERIC_PREFIX_RE.match(s)
    if m is None:
        return ZERO
    try:
        value = Decimal(m.group(0))
    except InvalidOperation:  # pragma: no cover - the regex only admits valid literals
        return ZERO

    return -abs(value) if paren_negative else value


__all__ = ["ZERO", "is_decimal_comma", "parse_amount"]
