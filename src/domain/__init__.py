"""Domain package for business rules and core models."""

from .constants import DEFAULT_INVOICE_TITLE, TRANSACTION_TYPES
from .errors import (
    GenericError,
    NotFoundError,
    PlatformError,
    UnauthorizedError,
    ValidationError,
)
from .models import (
    CollectiveRow,
    DateRangeInvoice,
    Invoice,
    InvoiceDate,
    InvoiceSlugParts,
    MonthlyInvoice,
    PaginatedTransactions,
    Pagination,
    RemoteUser,
    Sorting,
    TransactionInvoice,
    TransactionRow,
)
from .policies import ensure_can_read_invoices, paginate, sort_by
from .services import (
    billable_amount,
    build_invoice_slug,
    group_monthly_invoices,
    parse_invoice_slug,
    sum_host_amounts,
    validate_invoice_date,
)

__all__ = [
    "DEFAULT_INVOICE_TITLE",
    "TRANSACTION_TYPES",
    "GenericError",
    "NotFoundError",
    "PlatformError",
    "UnauthorizedError",
    "ValidationError",
    "CollectiveRow",
    "DateRangeInvoice",
    "Invoice",
    "InvoiceDate",
    "InvoiceSlugParts",
    "MonthlyInvoice",
    "PaginatedTransactions",
    "Pagination",
    "RemoteUser",
    "Sorting",
    "TransactionInvoice",
    "TransactionRow",
    "ensure_can_read_invoices",
    "paginate",
    "sort_by",
    "billable_amount",
    "build_invoice_slug",
    "group_monthly_invoices",
    "parse_invoice_slug",
    "sum_host_amounts",
    "validate_invoice_date",
]
