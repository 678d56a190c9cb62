"""Use case to build an invoice over a month range at one host."""

from datetime import datetime

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.constants import DEFAULT_INVOICE_TITLE, INVOICE_DATE_FIELD
from src.domain.errors import (
    GenericError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from src.domain.models.identity import RemoteUser
from src.domain.models.invoices import DateRangeInvoice, InvoiceSlugParts
from src.domain.policies.invoice_access import ensure_can_read_invoices
from src.domain.services.invoice_slug import (
    build_invoice_slug,
    parse_invoice_slug,
    validate_invoice_date,
)
from src.domain.services.invoices import sum_host_amounts
from src.infrastructure.logging.logger import get_app_logger


class GetInvoiceUseCase:
    """Build a single invoice for a payer at a host between two months."""

    def __init__(
        self,
        collective_repository: CollectiveRepositoryPort,
        transaction_repository: TransactionRepositoryPort,
        logger=None,
        default_title: str = DEFAULT_INVOICE_TITLE,
    ) -> None:
        """Initialize the use case.

        Args:
            collective_repository: Port providing collectives.
            transaction_repository: Port providing transactions.
            logger: Optional logger compatible with logging.Logger-like API.
            default_title: Title used when the host sets none.
        """
        self._collective_repository = collective_repository
        self._transaction_repository = transaction_repository
        self._logger = logger or get_app_logger()
        self._default_title = default_title

    def execute(
        self,
        invoice_slug: str | None = None,
        invoice_input: InvoiceSlugParts | None = None,
        remote_user: RemoteUser | None = None,
    ) -> DateRangeInvoice:
        """Return the invoice for a slug or a structured request.

        Args:
            invoice_slug: Slug ``YYYYMM.<hostSlug>.<fromSlug>`` covering one
                month. Takes precedence over ``invoice_input``.
            invoice_input: Explicit date range and collective slugs.
            remote_user: Authenticated caller, None when anonymous.

        Returns:
            DateRangeInvoice: Invoice totalling the matching credits.

        Raises:
            GenericError: If neither argument is provided.
            ValidationError: If the slug or dates are invalid.
            NotFoundError: If a collective or any transaction is missing.
            UnauthorizedError: If the caller is not an admin of the payer.
        """
        if invoice_slug:
            parts = parse_invoice_slug(invoice_slug)
        elif invoice_input is not None:
            parts = invoice_input
        else:
            raise GenericError(
                "Please provide an invoiceSlug or an invoiceInputType"
            )

        validate_invoice_date(parts.date_from)
        validate_invoice_date(parts.date_to)

        from_collective = self._collective_repository.fetch_by_slug(
            parts.from_collective_slug
        )
        if from_collective is None:
            raise NotFoundError(
                "User or organization not found for slug "
                f"{parts.from_collective_slug}"
            )
        host = self._collective_repository.fetch_by_slug(parts.collective_slug)
        if host is None:
            raise NotFoundError("Host not found")
        try:
            ensure_can_read_invoices(remote_user, from_collective)
        except UnauthorizedError:
            self._logger.warning(
                f"Rejected invoice request for {parts.from_collective_slug}"
            )
            raise

        starts_at = datetime(parts.date_from.year, parts.date_from.month, 1)
        ends_at = datetime(parts.date_to.year, parts.date_to.month, 1)
        if ends_at < starts_at:
            raise ValidationError(
                "Invalid date object. dateFrom must be before dateTo",
                [INVOICE_DATE_FIELD],
            )

        transactions = self._transaction_repository.fetch_invoice_credits(
            from_collective.id,
            host_collective_id=host.id,
            starts_at=starts_at,
            ends_at=ends_at,
        )
        if not transactions:
            raise NotFoundError("No transactions found")

        total_amount, currency = sum_host_amounts(
            transactions,
            default_currency=host.currency,
        )
        slug = invoice_slug or build_invoice_slug(
            parts.date_from.year,
            parts.date_from.month,
            host.slug,
            from_collective.slug,
        )
        self._logger.info(
            f"Invoice {slug} totals {total_amount} {currency} "
            f"over {len(transactions)} transactions"
        )
        return DateRangeInvoice(
            slug=slug,
            total_amount=total_amount,
            currency=currency,
            host_collective_id=host.id,
            from_collective_id=from_collective.id,
            transactions=tuple(transactions),
            title=host.invoice_title or self._default_title,
            year_from=parts.date_from.year,
            month_from=parts.date_from.month,
            year_to=parts.date_to.year,
            month_to=parts.date_to.month,
        )


__all__ = ["GetInvoiceUseCase"]
