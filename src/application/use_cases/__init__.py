"""Application use cases package."""

from .collective_cache import CollectiveLookupCache
from .get_all_invoices import GetAllInvoicesUseCase
from .get_collective import GetCollectiveUseCase
from .get_invoice import GetInvoiceUseCase
from .get_transaction import GetTransactionUseCase
from .get_transaction_invoice import GetTransactionInvoiceUseCase
from .list_transactions import (
    ListCollectiveTransactionsUseCase,
    ListTransactionsUseCase,
)

__all__ = [
    "CollectiveLookupCache",
    "GetAllInvoicesUseCase",
    "GetCollectiveUseCase",
    "GetInvoiceUseCase",
    "GetTransactionUseCase",
    "GetTransactionInvoiceUseCase",
    "ListCollectiveTransactionsUseCase",
    "ListTransactionsUseCase",
]
