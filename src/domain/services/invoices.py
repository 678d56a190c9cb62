"""Domain services for building invoice read-models."""

from collections.abc import Callable, Iterable

from src.domain.constants import TRANSACTION_TYPE_CREDIT
from src.domain.models.invoices import MonthlyInvoice
from src.domain.models.platform_rows import CollectiveRow, TransactionRow
from src.domain.services.invoice_slug import build_invoice_slug


def group_monthly_invoices(
    transactions: Iterable[TransactionRow],
    from_collective: CollectiveRow,
    host_slug_for: Callable[[int | None], str],
) -> list[MonthlyInvoice]:
    """Group credits into one invoice per month and host.

    The month is the calendar month of ``created_at`` as stored. Currency is
    the last seen host currency of each group; all credits at one host are
    expected to settle in the same currency.

    Args:
        transactions: Credits billed to ``from_collective``.
        from_collective: Billed collective.
        host_slug_for: Returns the slug of a host collective id.

    Returns:
        list[MonthlyInvoice]: Invoices sorted by slug, most recent first.
    """
    totals: dict[str, int] = {}
    grouped: dict[str, list[TransactionRow]] = {}
    metadata: dict[str, tuple[int | None, int, int, str | None]] = {}
    for transaction in transactions:
        year = transaction.created_at.year
        month = transaction.created_at.month
        slug = build_invoice_slug(
            year,
            month,
            host_slug_for(transaction.host_collective_id),
            from_collective.slug,
        )
        if slug not in totals:
            totals[slug] = transaction.amount_in_host_currency
            grouped[slug] = [transaction]
        else:
            totals[slug] += transaction.amount_in_host_currency
            grouped[slug].append(transaction)
        metadata[slug] = (
            transaction.host_collective_id,
            year,
            month,
            transaction.host_currency,
        )

    invoices = []
    for slug in sorted(totals, reverse=True):
        host_collective_id, year, month, currency = metadata[slug]
        invoices.append(
            MonthlyInvoice(
                slug=slug,
                total_amount=totals[slug],
                currency=currency,
                host_collective_id=host_collective_id,
                from_collective_id=from_collective.id,
                transactions=tuple(grouped[slug]),
                year=year,
                month=month,
            )
        )
    return invoices


def sum_host_amounts(
    transactions: Iterable[TransactionRow],
    default_currency: str | None = None,
) -> tuple[int, str | None]:
    """Sum amounts in host currency.

    Args:
        transactions: Transactions to total.
        default_currency: Currency returned when no transaction sets one.

    Returns:
        tuple[int, str | None]: Total amount and the last seen currency.
    """
    total = 0
    currency = None
    for transaction in transactions:
        currency = transaction.host_currency
        total += transaction.amount_in_host_currency
    return total, currency or default_currency


def billable_amount(transaction: TransactionRow) -> int:
    """Return the positive amount owed for a single transaction.

    Credits bill their gross amount; debits carry a negative net amount
    which is flipped.
    """
    if transaction.type == TRANSACTION_TYPE_CREDIT:
        return transaction.amount
    return -1 * transaction.net_amount_in_collective_currency


__all__ = ["group_monthly_invoices", "sum_host_amounts", "billable_amount"]
