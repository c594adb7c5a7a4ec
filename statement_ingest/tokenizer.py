"""Line and field splitting for delimited bank exports.

Quoting follows a deliberately small subset of RFC 4180: a double quote
toggles the in-quotation state and the delimiter is literal while quoted.
Doubled quotes (``""``) are *not* treated as an escaped quote character, and
quoted fields cannot span lines. Exports relying on either will tokenize
differently from :mod:`csv`.
"""

from __future__ import annotations

import re

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``/``\\r\\n`` and drop blank lines."""

    return [line for line in _LINE_BREAK_RE.split(text) if line.strip()]


def _strip_field(value: str) -> str:
    value = value.strip()
    # One enclosing pair at most; the scanner has already consumed balanced quotes.
    value = value.removeprefix('"').removesuffix('"')
    return value.strip()


def parse_line(line: str, delimiter: str) -> list[str]:
    """Split one line into trimmed fields on ``delimiter``."""

    fields: list[str] = []
    current: list[str] = []
    in_quote = False

    for ch in line:
        if ch == '"':
            in_quote = not in_quote
        elif ch == delimiter and not in_quote:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))

    return [_strip_field(f) for f in fields]


__all__ = ["parse_line", "split_lines"]
