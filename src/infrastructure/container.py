"""Composition root for wiring infrastructure adapters."""

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.remote_user_repository import (
    RemoteUserRepositoryPort,
)
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.application.use_cases.get_all_invoices import GetAllInvoicesUseCase
from src.application.use_cases.get_invoice import GetInvoiceUseCase
from src.application.use_cases.get_transaction_invoice import (
    GetTransactionInvoiceUseCase,
)
from src.application.use_cases.list_transactions import (
    ListTransactionsUseCase,
)
from src.domain.policies.pagination import PaginationOptions
from src.infrastructure.collective_repository import (
    SqlAlchemyCollectiveRepository,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.remote_user_repository import (
    SqlAlchemyRemoteUserRepository,
)
from src.infrastructure.settings import InvoiceSettings
from src.infrastructure.transaction_repository import (
    SqlAlchemyTransactionRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_collective_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CollectiveRepositoryPort:
    """Return the collectives repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCollectiveRepository(resolved_db)


def build_transaction_repository(
    db_port: DatabaseEnginePort | None = None,
) -> TransactionRepositoryPort:
    """Return the transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyTransactionRepository(resolved_db)


def build_remote_user_repository(
    db_port: DatabaseEnginePort | None = None,
) -> RemoteUserRepositoryPort:
    """Return the repository resolving authenticated callers."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyRemoteUserRepository(resolved_db)


def build_all_invoices_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetAllInvoicesUseCase:
    """Return the monthly invoices use case."""
    resolved_db = db_port or build_database_adapter()
    return GetAllInvoicesUseCase(
        collective_repository=build_collective_repository(resolved_db),
        transaction_repository=build_transaction_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_invoice_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: InvoiceSettings | None = None,
) -> GetInvoiceUseCase:
    """Return the date range invoice use case."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or InvoiceSettings.from_env()
    return GetInvoiceUseCase(
        collective_repository=build_collective_repository(resolved_db),
        transaction_repository=build_transaction_repository(resolved_db),
        logger=get_app_logger(),
        default_title=resolved_settings.default_invoice_title,
    )


def build_transaction_invoice_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: InvoiceSettings | None = None,
) -> GetTransactionInvoiceUseCase:
    """Return the single transaction invoice use case."""
    resolved_db = db_port or build_database_adapter()
    resolved_settings = settings or InvoiceSettings.from_env()
    return GetTransactionInvoiceUseCase(
        collective_repository=build_collective_repository(resolved_db),
        transaction_repository=build_transaction_repository(resolved_db),
        logger=get_app_logger(),
        default_title=resolved_settings.default_invoice_title,
    )


def build_list_transactions_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ListTransactionsUseCase:
    """Return the paginated transactions use case."""
    resolved_db = db_port or build_database_adapter()
    return ListTransactionsUseCase(
        transaction_repository=build_transaction_repository(resolved_db),
        logger=get_app_logger(),
    )


def build_pagination_options(
    settings: InvoiceSettings | None = None,
) -> PaginationOptions:
    """Return page size bounds from the settings."""
    resolved_settings = settings or InvoiceSettings.from_env()
    return PaginationOptions(
        default=resolved_settings.transactions_page_size,
        max=resolved_settings.transactions_max_page_size,
    )


__all__ = [
    "build_database_adapter",
    "build_collective_repository",
    "build_transaction_repository",
    "build_remote_user_repository",
    "build_all_invoices_use_case",
    "build_invoice_use_case",
    "build_transaction_invoice_use_case",
    "build_list_transactions_use_case",
    "build_pagination_options",
]
