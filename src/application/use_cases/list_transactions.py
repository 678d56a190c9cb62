"""Use cases listing transactions."""

from datetime import datetime

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.constants import TRANSACTION_TYPES
from src.domain.errors import GenericError, NotFoundError, ValidationError
from src.domain.models.listing import (
    PaginatedTransactions,
    Pagination,
    Sorting,
)
from src.domain.models.platform_rows import TransactionRow
from src.domain.policies.pagination import paginate, sort_by
from src.infrastructure.logging.logger import get_app_logger


SORTABLE_KEYS = ("id", "createdAt", "amount")


def _validate_type(transaction_type: str | None) -> None:
    if transaction_type is not None and transaction_type not in TRANSACTION_TYPES:
        raise ValidationError(
            f"Invalid transaction type: {transaction_type}. "
            "CREDIT or DEBIT are accepted values",
            ["type"],
        )


class ListTransactionsUseCase:
    """Return a sorted page of all transactions with the total count."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transaction_repository: Port providing transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        pagination: Pagination | None = None,
        sorting: Sorting | None = None,
        transaction_type: str | None = None,
    ) -> PaginatedTransactions:
        """Return one page of transactions.

        Args:
            pagination: Window to read, defaults to the first 100 rows.
            sorting: Sort key among id, createdAt and amount, defaults to
                createdAt descending.
            transaction_type: Optional CREDIT or DEBIT filter.

        Returns:
            PaginatedTransactions: Page of rows and the total matching count.

        Raises:
            ValidationError: If the sort key or type is not supported.
        """
        resolved_pagination = pagination or paginate()
        resolved_sorting = sorting or sort_by(
            default_key="createdAt",
            default_direction="DESC",
        )
        if resolved_sorting.key not in SORTABLE_KEYS:
            raise ValidationError(
                f"Invalid sort key: {resolved_sorting.key}",
                ["orderBy"],
            )
        _validate_type(transaction_type)

        total = self._transaction_repository.count(transaction_type)
        transactions = self._transaction_repository.fetch_page(
            resolved_pagination,
            resolved_sorting,
            transaction_type=transaction_type,
        )
        self._logger.info(
            f"Fetched {len(transactions)} of {total} transactions"
        )
        return PaginatedTransactions(
            limit=resolved_pagination.limit,
            offset=resolved_pagination.offset,
            total=total,
            transactions=transactions,
        )


class ListCollectiveTransactionsUseCase:
    """Return the transactions of one collective, most recent first."""

    def __init__(
        self,
        collective_repository: CollectiveRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        self._collective_repository = collective_repository
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        collective_id: int | None = None,
        collective_slug: str | None = None,
        transaction_type: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        date_from: datetime | None = None,
        date_to: datetime | None = None,
    ) -> list[TransactionRow]:
        """Return transactions owned by the collective.

        Raises:
            GenericError: If neither id nor slug is provided.
            NotFoundError: If the collective does not exist.
            ValidationError: If the type is not CREDIT or DEBIT.
        """
        if not collective_id and not collective_slug:
            raise GenericError("You must specify a collective ID or a Slug")
        if collective_id:
            collective = self._collective_repository.fetch_by_id(collective_id)
        else:
            collective = self._collective_repository.fetch_by_slug(
                collective_slug
            )
        if collective is None:
            raise NotFoundError("This collective does not exist")
        _validate_type(transaction_type)

        transactions = self._transaction_repository.fetch_for_collective(
            collective.id,
            transaction_type=transaction_type,
            limit=limit,
            offset=offset,
            start_date=date_from,
            end_date=date_to,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions for {collective.slug}"
        )
        return transactions


__all__ = [
    "SORTABLE_KEYS",
    "ListTransactionsUseCase",
    "ListCollectiveTransactionsUseCase",
]
