"""Domain policies package."""

from .invoice_access import ensure_can_read_invoices
from .pagination import PaginationOptions, paginate, sort_by

__all__ = [
    "ensure_can_read_invoices",
    "PaginationOptions",
    "paginate",
    "sort_by",
]
