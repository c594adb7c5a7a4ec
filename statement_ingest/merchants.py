"""Merchant name cleaning.

Bank descriptions carry processor markers, card network names, terminal and
authorization codes, dates, ZIP codes and phone numbers around the actual
merchant. :func:`clean_merchant_name` strips that noise through a fixed chain
of pure ``str -> str`` steps (see :data:`CLEANING_STEPS`) and then maps known
brand spellings to a canonical name.
"""

from __future__ import annotations

import re
from collections.abc import Callable

# Applied in sequence, so "PAYPAL *ONLINE ..." sheds both markers.
_PREFIX_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"^(PAYPAL \*|PAYPAL\*|PP\*|SQ \*|SQ\*|SQUARE \*|TST\*|CHK |DEBIT |CREDIT |POS |ACH "
        r"|CHECKCARD |PURCHASE |PREAUTH )",
        re.IGNORECASE,
    ),
    re.compile(r"^(VISA |MASTERCARD |AMEX |DISCOVER |CARD |CHECK CARD |DEBIT CARD )", re.IGNORECASE),
    re.compile(r"^(ONLINE |INTERNET |WEB |MOBILE |RECURRING |AUTO-?PAY )", re.IGNORECASE),
)

_NOISE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\s+\d{4,}"), ""),  # transaction / authorization codes
    (re.compile(r"\s+#\d+"), ""),  # store numbers
    (re.compile(r"\s+\d{1,2}/\d{1,2}"), ""),  # MM/DD fragments
    (re.compile(r"\s+[A-Z]{2}\s*\d{5}"), ""),  # state + ZIP
    (re.compile(r"\s+(USA|US|UK|CA|AU|DE|FR|NL|IT|ES)$", re.IGNORECASE), ""),
    (re.compile(r"\s+\d{3}-\d{3}-\d{4}"), ""),  # phone numbers
    (re.compile(r"\*+"), " "),
    (re.compile(r"\s+"), " "),
)

# Ordered: the first fragment found (case-insensitively) replaces the whole name.
BRAND_CORRECTIONS: tuple[tuple[str, str], ...] = (
    ("Amzn", "Amazon"),
    ("Amzn Mktp", "Amazon"),
    ("Amazon Mktplace", "Amazon"),
    ("Amazon.Com", "Amazon"),
    ("Wm Supercenter", "Walmart"),
    ("Wal-Mart", "Walmart"),
    ("Mcdonald's", "McDonald's"),
    ("Mcdonalds", "McDonald's"),
    ("Sbux", "Starbucks"),
    ("Chick-Fil-A", "Chick-fil-A"),
    ("Uber Trip", "Uber"),
    ("Uber Eats", "Uber Eats"),
    ("Lyft Ride", "Lyft"),
)


def strip_prefixes(text: str) -> str:
    for pattern in _PREFIX_PATTERNS:
        text = pattern.sub("", text, count=1)
    return text


def strip_noise(text: str) -> str:
    for pattern, repl in _NOISE_PATTERNS:
        text = pattern.sub(repl, text)
    return text.strip()


def title_case(text: str) -> str:
    """Capitalize the first character of each space-delimited token.

    Unlike :meth:`str.title`, characters after punctuation stay lowercase
    (``"mcdonald's"`` → ``"Mcdonald's"``).
    """

    return " ".join(w[:1].upper() + w[1:] for w in text.lower().split(" "))


def correct_brand(text: str) -> str:
    lowered = text.lower()
    for fragment, canonical in BRAND_CORRECTIONS:
        if fragment.lower() in lowered:
            return canonical
    return text


CLEANING_STEPS: tuple[Callable[[str], str], ...] = (
    str.upper,
    strip_prefixes,
    strip_noise,
    title_case,
    correct_brand,
)


def clean_merchant_name(description: str) -> str:
    """Return a display merchant name for a raw bank ``description``.

    Falls back to ``description`` unchanged when cleaning removes everything.
    """

    cleaned = description
    for step in CLEANING_STEPS:
        cleaned = step(cleaned)
    return cleaned or description


__all__ = [
    "BRAND_CORRECTIONS",
    "CLEANING_STEPS",
    "clean_merchant_name",
    "correct_brand",
    "strip_noise",
    "strip_prefixes",
    "title_case",
]
