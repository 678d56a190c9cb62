"""Domain services package."""

from .invoice_slug import (
    build_invoice_slug,
    parse_invoice_slug,
    validate_invoice_date,
)
from .invoices import billable_amount, group_monthly_invoices, sum_host_amounts

__all__ = [
    "build_invoice_slug",
    "parse_invoice_slug",
    "validate_invoice_date",
    "billable_amount",
    "group_monthly_invoices",
    "sum_host_amounts",
]
