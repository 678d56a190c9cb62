"""Domain models package."""

from .identity import RemoteUser
from .invoices import (
    DateRangeInvoice,
    Invoice,
    InvoiceDate,
    InvoiceSlugParts,
    MonthlyInvoice,
    TransactionInvoice,
)
from .listing import PaginatedTransactions, Pagination, Sorting
from .platform_rows import CollectiveRow, TransactionRow

__all__ = [
    "CollectiveRow",
    "TransactionRow",
    "RemoteUser",
    "InvoiceDate",
    "InvoiceSlugParts",
    "Invoice",
    "MonthlyInvoice",
    "DateRangeInvoice",
    "TransactionInvoice",
    "Pagination",
    "Sorting",
    "PaginatedTransactions",
]
