"""Domain models for invoice read-models.

Invoices are derived per request from credit transactions and are never
persisted. Three variants share a common set of fields:

* ``MonthlyInvoice``: one calendar month of credits for a payer at a host;
* ``DateRangeInvoice``: credits for a payer at a host between two months;
* ``TransactionInvoice``: a receipt for a single transaction.
"""

from dataclasses import dataclass
from typing import ClassVar

from src.domain.models.platform_rows import TransactionRow


@dataclass(frozen=True)
class InvoiceDate:
    """Calendar month used to bound invoices (1 == January)."""

    year: int
    month: int


@dataclass(frozen=True)
class InvoiceSlugParts:
    """Components of an invoice slug, or a structured invoice request.

    Attributes:
        date_from: First month included.
        date_to: First month excluded.
        collective_slug: Slug of the host collective.
        from_collective_slug: Slug of the billed collective.
    """

    date_from: InvoiceDate
    date_to: InvoiceDate
    collective_slug: str
    from_collective_slug: str


@dataclass(frozen=True)
class Invoice:
    """Fields shared by every invoice variant."""

    kind: ClassVar[str] = "invoice"

    slug: str
    total_amount: int
    currency: str | None
    host_collective_id: int | None
    from_collective_id: int | None
    transactions: tuple[TransactionRow, ...]


@dataclass(frozen=True)
class MonthlyInvoice(Invoice):
    """Invoice summary for one month at one host."""

    kind: ClassVar[str] = "monthly"

    year: int
    month: int


@dataclass(frozen=True)
class DateRangeInvoice(Invoice):
    """Invoice covering ``[year_from/month_from, year_to/month_to)``."""

    kind: ClassVar[str] = "range"

    title: str
    year_from: int
    month_from: int
    year_to: int
    month_to: int


@dataclass(frozen=True)
class TransactionInvoice(Invoice):
    """Receipt for a single transaction."""

    kind: ClassVar[str] = "transaction"

    title: str
    year_from: int
    month_from: int
    day: int


__all__ = [
    "InvoiceDate",
    "InvoiceSlugParts",
    "Invoice",
    "MonthlyInvoice",
    "DateRangeInvoice",
    "TransactionInvoice",
]
