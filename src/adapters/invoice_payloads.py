"""Serialization of invoices and transactions for API clients.

Field names follow the public invoice type consumed by existing clients.
"""

from typing import Any

from src.domain.models.invoices import (
    DateRangeInvoice,
    Invoice,
    MonthlyInvoice,
    TransactionInvoice,
)
from src.domain.models.listing import PaginatedTransactions
from src.domain.models.platform_rows import TransactionRow


def serialize_transaction(transaction: TransactionRow) -> dict[str, Any]:
    """Return the client payload of a transaction."""
    return {
        "id": transaction.id,
        "uuid": transaction.uuid,
        "createdAt": transaction.created_at.isoformat(),
        "type": transaction.type,
        "amount": transaction.amount,
        "amountInHostCurrency": transaction.amount_in_host_currency,
        "hostCurrency": transaction.host_currency,
        "netAmountInCollectiveCurrency": (
            transaction.net_amount_in_collective_currency
        ),
        "HostCollectiveId": transaction.host_collective_id,
        "FromCollectiveId": transaction.from_collective_id,
        "CollectiveId": transaction.collective_id,
        "UsingVirtualCardFromCollectiveId": (
            transaction.using_virtual_card_from_collective_id
        ),
        "description": transaction.description,
    }


def serialize_invoice(invoice: Invoice) -> dict[str, Any]:
    """Return the client payload of any invoice variant.

    Args:
        invoice: Monthly, date range or single transaction invoice.

    Returns:
        dict[str, Any]: Payload with the shared fields and the date fields
        of the variant.
    """
    payload: dict[str, Any] = {
        "slug": invoice.slug,
        "HostCollectiveId": invoice.host_collective_id,
        "FromCollectiveId": invoice.from_collective_id,
        "totalAmount": invoice.total_amount,
        "currency": invoice.currency,
    }
    if isinstance(invoice, MonthlyInvoice):
        payload["year"] = invoice.year
        payload["month"] = invoice.month
    elif isinstance(invoice, DateRangeInvoice):
        payload["title"] = invoice.title
        payload["yearFrom"] = invoice.year_from
        payload["monthFrom"] = invoice.month_from
        payload["yearTo"] = invoice.year_to
        payload["monthTo"] = invoice.month_to
    elif isinstance(invoice, TransactionInvoice):
        payload["title"] = invoice.title
        payload["yearFrom"] = invoice.year_from
        payload["monthFrom"] = invoice.month_from
        payload["day"] = invoice.day
    payload["transactions"] = [
        serialize_transaction(transaction)
        for transaction in invoice.transactions
    ]
    return payload


def serialize_transactions_page(page: PaginatedTransactions) -> dict[str, Any]:
    """Return the client payload of a transactions page."""
    return {
        "limit": page.limit,
        "offset": page.offset,
        "total": page.total,
        "transactions": [
            serialize_transaction(transaction)
            for transaction in page.transactions
        ],
    }


__all__ = [
    "serialize_transaction",
    "serialize_invoice",
    "serialize_transactions_page",
]
