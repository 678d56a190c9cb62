"""Domain constants for collective invoices."""

TRANSACTION_TYPE_CREDIT = "CREDIT"
TRANSACTION_TYPE_DEBIT = "DEBIT"
TRANSACTION_TYPES = (TRANSACTION_TYPE_CREDIT, TRANSACTION_TYPE_DEBIT)

DEFAULT_INVOICE_TITLE = "Donation Receipt"
MIN_INVOICE_YEAR = 2015
INVOICE_DATE_FIELD = "InvoiceDateType"

ADMIN_MEMBER_ROLES = (
    "ADMIN",
    "HOST",
)

DEFAULT_PAGE_SIZE = 100
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

SORT_DIRECTIONS = ("ASC", "DESC")


__all__ = [
    "TRANSACTION_TYPE_CREDIT",
    "TRANSACTION_TYPE_DEBIT",
    "TRANSACTION_TYPES",
    "DEFAULT_INVOICE_TITLE",
    "MIN_INVOICE_YEAR",
    "INVOICE_DATE_FIELD",
    "ADMIN_MEMBER_ROLES",
    "DEFAULT_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "SORT_DIRECTIONS",
]
