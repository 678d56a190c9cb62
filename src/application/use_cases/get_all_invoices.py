"""Use case to list the monthly invoices of a billed collective."""

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.application.use_cases.collective_cache import CollectiveLookupCache
from src.domain.errors import NotFoundError, UnauthorizedError
from src.domain.models.identity import RemoteUser
from src.domain.models.invoices import MonthlyInvoice
from src.domain.policies.invoice_access import ensure_can_read_invoices
from src.domain.services.invoices import group_monthly_invoices
from src.infrastructure.logging.logger import get_app_logger


class GetAllInvoicesUseCase:
    """Build one invoice per month and host for a billed collective."""

    def __init__(
        self,
        collective_repository: CollectiveRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            collective_repository: Port providing collectives.
            transaction_repository: Port providing transactions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._collective_repository = collective_repository
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        from_collective_slug: str,
        remote_user: RemoteUser | None,
    ) -> list[MonthlyInvoice]:
        """Return the invoices of the collective, most recent first.

        Args:
            from_collective_slug: Slug of the billed user or organization.
            remote_user: Authenticated caller, None when anonymous.

        Returns:
            list[MonthlyInvoice]: One invoice per month and host having at
            least one credit.

        Raises:
            NotFoundError: If the collective does not exist.
            UnauthorizedError: If the caller is not an admin of it.
        """
        from_collective = self._collective_repository.fetch_by_slug(
            from_collective_slug
        )
        if from_collective is None:
            self._logger.warning(
                f"Invoices requested for unknown collective {from_collective_slug}"
            )
            raise NotFoundError("User or organization not found")
        try:
            ensure_can_read_invoices(remote_user, from_collective)
        except UnauthorizedError:
            self._logger.warning(
                f"Rejected invoices request for {from_collective_slug}"
            )
            raise

        transactions = self._transaction_repository.fetch_invoice_credits(
            from_collective.id
        )
        hosts = CollectiveLookupCache(self._collective_repository)
        invoices = group_monthly_invoices(
            transactions,
            from_collective,
            hosts.slug_for,
        )
        self._logger.info(
            f"Built {len(invoices)} invoices from {len(transactions)} "
            f"transactions for {from_collective_slug} "
            f"({hosts.fetched_count} hosts)"
        )
        return invoices


__all__ = ["GetAllInvoicesUseCase"]
