"""Tests for the GetInvoiceUseCase."""

from datetime import datetime

import pytest

from src.application.use_cases.get_invoice import GetInvoiceUseCase
from src.domain.errors import (
    GenericError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from src.domain.models import CollectiveRow, InvoiceDate, InvoiceSlugParts


def _request(
    date_from: tuple[int, int],
    date_to: tuple[int, int],
    host: str = "brusselstogether-host",
    payer: str = "xdamman",
) -> InvoiceSlugParts:
    return InvoiceSlugParts(
        date_from=InvoiceDate(*date_from),
        date_to=InvoiceDate(*date_to),
        collective_slug=host,
        from_collective_slug=payer,
    )


@pytest.fixture
def use_case(collectives, transactions, logger) -> GetInvoiceUseCase:
    return GetInvoiceUseCase(
        collective_repository=collectives,
        transaction_repository=transactions,
        logger=logger,
    )


def test_execute_returns_invoice_for_date_range(
    use_case,
    transactions,
    xdamman_user,
) -> None:
    invoice = use_case.execute(
        invoice_input=_request((2017, 10), (2017, 11)),
        remote_user=xdamman_user,
    )

    assert invoice.total_amount == 1500
    assert invoice.currency == "EUR"
    assert len(invoice.transactions) == 2
    assert invoice.host_collective_id == 10
    assert invoice.from_collective_id == 1
    assert invoice.title == "Donation Receipt"
    assert (invoice.year_from, invoice.month_from) == (2017, 10)
    assert (invoice.year_to, invoice.month_to) == (2017, 11)
    assert invoice.slug == "201710.brusselstogether-host.xdamman"
    assert transactions.credit_queries == [
        {
            "from_collective_id": 1,
            "host_collective_id": 10,
            "starts_at": datetime(2017, 10, 1),
            "ends_at": datetime(2017, 11, 1),
        }
    ]


def test_execute_returns_invoice_for_slug(use_case, xdamman_user) -> None:
    invoice = use_case.execute(
        invoice_slug="201710.brusselstogether-host.xdamman",
        remote_user=xdamman_user,
    )

    assert invoice.slug == "201710.brusselstogether-host.xdamman"
    assert invoice.total_amount == 1500
    assert invoice.kind == "range"


def test_execute_spans_several_months(use_case, xdamman_user) -> None:
    invoice = use_case.execute(
        invoice_input=_request((2017, 9), (2017, 12)),
        remote_user=xdamman_user,
    )

    assert invoice.total_amount == 3500
    assert len(invoice.transactions) == 5


def test_execute_uses_host_invoice_title(
    transactions,
    logger,
    xdamman_user,
    collective_repository_factory,
) -> None:
    repository = collective_repository_factory(
        [
            CollectiveRow(id=1, slug="xdamman"),
            CollectiveRow(
                id=10,
                slug="brusselstogether-host",
                currency="EUR",
                settings={"invoiceTitle": "Tax Receipt"},
            ),
        ]
    )
    use_case = GetInvoiceUseCase(repository, transactions, logger=logger)

    invoice = use_case.execute(
        invoice_input=_request((2017, 10), (2017, 11)),
        remote_user=xdamman_user,
    )

    assert invoice.title == "Tax Receipt"


def test_execute_uses_configured_default_title(
    collectives,
    transactions,
    logger,
    xdamman_user,
) -> None:
    use_case = GetInvoiceUseCase(
        collectives,
        transactions,
        logger=logger,
        default_title="Receipt",
    )

    invoice = use_case.execute(
        invoice_input=_request((2017, 10), (2017, 11)),
        remote_user=xdamman_user,
    )

    assert invoice.title == "Receipt"


def test_execute_rejects_date_to_before_date_from(
    use_case,
    xdamman_user,
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        use_case.execute(
            invoice_input=_request((2017, 10), (2016, 11)),
            remote_user=xdamman_user,
        )

    assert "Invalid date" in excinfo.value.message
    assert "dateFrom must be before dateTo" in excinfo.value.message
    assert excinfo.value.fields == ["InvoiceDateType"]


@pytest.mark.parametrize(
    ("date_from", "date_to"),
    [
        ((2014, 10), (2017, 11)),
        ((2017, 10), (2014, 11)),
        ((2017, 0), (2017, 11)),
        ((2017, 10), (2017, 0)),
    ],
)
def test_execute_rejects_invalid_dates(
    use_case,
    xdamman_user,
    date_from,
    date_to,
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        use_case.execute(
            invoice_input=_request(date_from, date_to),
            remote_user=xdamman_user,
        )

    assert "Invalid date" in excinfo.value.message


def test_execute_rejects_december_slug(use_case, xdamman_user) -> None:
    """December slugs produce month 13 as the end of the range."""
    with pytest.raises(ValidationError) as excinfo:
        use_case.execute(
            invoice_slug="201712.brusselstogether-host.xdamman",
            remote_user=xdamman_user,
        )

    assert "Invalid date object" in excinfo.value.message


def test_execute_rejects_anonymous_callers(use_case) -> None:
    with pytest.raises(UnauthorizedError) as excinfo:
        use_case.execute(invoice_input=_request((2017, 10), (2017, 11)))

    assert "You don't have permission to access invoices for this user" in (
        str(excinfo.value)
    )


def test_execute_raises_when_payer_is_unknown(use_case, xdamman_user) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        use_case.execute(
            invoice_input=_request((2017, 10), (2017, 11), payer="nobody"),
            remote_user=xdamman_user,
        )

    assert "nobody" in excinfo.value.message


def test_execute_raises_when_host_is_unknown(use_case, xdamman_user) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        use_case.execute(
            invoice_input=_request((2017, 10), (2017, 11), host="nohost"),
            remote_user=xdamman_user,
        )

    assert excinfo.value.message == "Host not found"


def test_execute_raises_when_no_transactions(use_case, xdamman_user) -> None:
    with pytest.raises(NotFoundError) as excinfo:
        use_case.execute(
            invoice_input=_request((2018, 1), (2018, 2)),
            remote_user=xdamman_user,
        )

    assert excinfo.value.message == "No transactions found"


def test_execute_requires_slug_or_input(use_case, xdamman_user) -> None:
    with pytest.raises(GenericError):
        use_case.execute(remote_user=xdamman_user)


def test_execute_rejects_malformed_slug(use_case, xdamman_user) -> None:
    with pytest.raises(ValidationError) as excinfo:
        use_case.execute(invoice_slug="2017.xdamman", remote_user=xdamman_user)

    assert "Invalid invoiceSlug format" in excinfo.value.message
