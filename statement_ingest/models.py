"""Data models for ``statement_ingest``.

Records are frozen dataclasses: once the pipeline emits a record it is never
mutated. User overrides and AI suggestions are applied while building new
:class:`EnrichedRecord` objects in :mod:`statement_ingest.enrich`.

The only pydantic model here validates data supplied by an external
AI-categorization collaborator, whose payload shape this package does not
control.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------------------------------------------------------------------------
# Pipeline records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RawRecord:
    """A minimally parsed transaction row.

    Attributes
    ----------
    date:
        ``YYYY-MM-DD`` when the source cell was parseable, otherwise the
        original trimmed cell text.
    description:
        Payee and/or memo text with whitespace runs collapsed.
    amount:
        Signed amount. Negative is an expense, positive is income.
    """

    date: str
    description: str
    amount: Decimal


type TransactionType = Literal["income", "expense"]


@dataclass(frozen=True, slots=True)
class EnrichedRecord:
    """A :class:`RawRecord` with merchant, category and direction attached.

    ``id`` is ``"tx-<n>"`` where ``n`` is the position of the source record in
    the parsed sequence. ``type`` is derived solely from the amount sign.
    """

    id: str
    date: str
    description: str
    amount: Decimal
    merchant: str
    category: str
    type: TransactionType

    @classmethod
    def from_raw(
        cls, index: int, record: RawRecord, *, merchant: str, category: str
    ) -> EnrichedRecord:
        return cls(
            id=f"tx-{index}",
            date=record.date,
            description=record.description,
            amount=record.amount,
            merchant=merchant,
            category=category,
            type="income" if record.amount > 0 else "expense",
        )

    def to_dict(self) -> dict[str, str]:
        """Return a JSON-friendly mapping (amount as a plain decimal string)."""

        return {
            "id": self.id,
            "date": self.date,
            "description": self.description,
            "amount": format(self.amount, "f"),
            "merchant": self.merchant,
            "category": self.category,
            "type": self.type,
        }


# ---------------------------------------------------------------------------
# Header mapping
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ColumnMap:
    """Column index per semantic role; ``None`` means the role is absent."""

    date: int | None = None
    payee: int | None = None
    memo: int | None = None
    amount: int | None = None
    debit: int | None = None
    credit: int | None = None

    @property
    def has_money(self) -> bool:
        return self.amount is not None or self.debit is not None or self.credit is not None

    @property
    def value_columns(self) -> frozenset[int]:
        """Indices holding dates or money, never used as description text."""

        return frozenset(
            i for i in (self.date, self.amount, self.debit, self.credit) if i is not None
        )


@dataclass(frozen=True, slots=True)
class HeaderMatch:
    """The located header row and the role mapping derived from it."""

    index: int
    score: int
    columns: ColumnMap


# ---------------------------------------------------------------------------
# Categorization
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CategoryRule:
    """A category and its lowercase keyword substrings, in match order."""

    category: str
    keywords: tuple[str, ...]

    def matches(self, lowered: str) -> bool:
        return any(k in lowered for k in self.keywords)


@dataclass(frozen=True, slots=True)
class MerchantCategory:
    """Cleaned merchant name and category for a single description."""

    merchant: str
    category: str


class AiCategorization(BaseModel):
    """One suggestion from an external AI-categorization service.

    Both snake_case and the camelCase keys emitted by the service
    (``originalDescription``, ``cleanMerchant``) are accepted. A missing or
    ``null`` merchant or category means "no suggestion" for that field.
    """

    model_config = ConfigDict(
        extra="ignore", str_strip_whitespace=True, populate_by_name=True, frozen=True
    )

    original_description: str = Field(alias="originalDescription")
    clean_merchant: str | None = Field(default=None, alias="cleanMerchant")
    category: str | None = None

    @field_validator("original_description")
    @classmethod
    def _description_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("originalDescription must be non-empty")
        return v


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    month: str
    income: Decimal
    expense: Decimal
    savings: Decimal


@dataclass(frozen=True, slots=True)
class CategoryTotal:
    category: str
    total: Decimal


__all__ = [
    "AiCategorization",
    "CategoryRule",
    "CategoryTotal",
    "ColumnMap",
    "EnrichedRecord",
    "HeaderMatch",
    "MerchantCategory",
    "MonthlySummary",
    "RawRecord",
    "TransactionType",
]
