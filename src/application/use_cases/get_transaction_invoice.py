"""Use case to build a receipt for a single transaction."""

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.constants import DEFAULT_INVOICE_TITLE
from src.domain.errors import NotFoundError
from src.domain.models.invoices import TransactionInvoice
from src.domain.services.invoices import billable_amount
from src.infrastructure.logging.logger import get_app_logger


class GetTransactionInvoiceUseCase:
    """Build the invoice of one transaction identified by its uuid."""

    def __init__(
        self,
        collective_repository: CollectiveRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
        default_title: str = DEFAULT_INVOICE_TITLE,
    ) -> None:
        self._collective_repository = collective_repository
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()
        self._default_title = default_title

    def execute(self, transaction_uuid: str) -> TransactionInvoice:
        """Return the invoice for the transaction.

        The billed collective is the payment method provider, so virtual
        card spending is billed to the card issuer.

        Raises:
            NotFoundError: If no transaction has this uuid.
        """
        transaction = self._transaction_repository.fetch_by_uuid(
            transaction_uuid
        )
        if transaction is None:
            raise NotFoundError(f"Transaction {transaction_uuid} doesn't exists")

        host = None
        if transaction.host_collective_id is not None:
            host = self._collective_repository.fetch_by_id(
                transaction.host_collective_id
            )
        title = (host.invoice_title if host else None) or self._default_title
        total_amount = billable_amount(transaction)
        self._logger.info(
            f"Transaction invoice {transaction_uuid} totals {total_amount} "
            f"{transaction.host_currency}"
        )
        return TransactionInvoice(
            slug=f"transaction-{transaction_uuid}",
            total_amount=total_amount,
            currency=transaction.host_currency,
            host_collective_id=host.id if host else None,
            from_collective_id=(
                transaction.payment_method_provider_collective_id()
            ),
            transactions=(transaction,),
            title=title,
            year_from=transaction.created_at.year,
            month_from=transaction.created_at.month,
            day=transaction.created_at.day,
        )


__all__ = ["GetTransactionInvoiceUseCase"]
