"""Tests for invoice slug parsing and invoice date validation."""

import pytest

from src.domain.errors import ValidationError
from src.domain.models import InvoiceDate
from src.domain.services.invoice_slug import (
    build_invoice_slug,
    parse_invoice_slug,
    validate_invoice_date,
)


@pytest.mark.parametrize(
    ("year", "month", "host_slug", "from_slug"),
    [
        (2015, 1, "brusselstogether-host", "xdamman"),
        (2017, 10, "opensource", "google"),
        (2019, 12, "host.with.dots", "payer"),
    ],
)
def test_parse_returns_components_used_to_build_slug(
    year: int,
    month: int,
    host_slug: str,
    from_slug: str,
) -> None:
    """A built slug should parse back to the same components."""
    parts = parse_invoice_slug(
        build_invoice_slug(year, month, host_slug, from_slug)
    )

    assert parts.date_from == InvoiceDate(year=year, month=month)
    assert parts.collective_slug == host_slug
    assert parts.from_collective_slug == from_slug


def test_build_invoice_slug_pads_month() -> None:
    slug = build_invoice_slug(2017, 9, "host", "xdamman")

    assert slug == "201709.host.xdamman"


def test_parse_sets_date_to_to_following_month() -> None:
    parts = parse_invoice_slug("201710.brusselstogether-host.xdamman")

    assert parts.date_from == InvoiceDate(year=2017, month=10)
    assert parts.date_to == InvoiceDate(year=2017, month=11)


def test_parse_december_does_not_roll_over_year() -> None:
    """December slugs keep the same year and produce month 13."""
    parts = parse_invoice_slug("201712.host.xdamman")

    assert parts.date_to == InvoiceDate(year=2017, month=13)
    with pytest.raises(ValidationError):
        validate_invoice_date(parts.date_to)


def test_parse_splits_host_and_payer_on_last_dot() -> None:
    """A dot inside the payer slug is read as part of the host slug."""
    parts = parse_invoice_slug("201710.host.pay.er")

    assert parts.collective_slug == "host.pay"
    assert parts.from_collective_slug == "er"


def test_parse_compares_month_as_number() -> None:
    """Month '09' is September even though '09' < '1' as strings."""
    parts = parse_invoice_slug("201709.host.xdamman")

    assert parts.date_from.month == 9


@pytest.mark.parametrize(
    "slug",
    [
        "201710.xdamman",
        "201710xdamman",
        "201410.host.xdamman",
        "201700.host.xdamman",
        "201713.host.xdamman",
        "2017ab.host.xdamman",
        "abcd10.host.xdamman",
        "",
    ],
)
def test_parse_rejects_invalid_slugs(slug: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        parse_invoice_slug(slug)

    assert "Invalid invoiceSlug format" in excinfo.value.message
    assert excinfo.value.fields == ["invoiceSlug"]


@pytest.mark.parametrize(
    ("year", "month"),
    [(2014, 6), (2017, 0), (2017, 13)],
)
def test_validate_invoice_date_rejects_invalid_dates(
    year: int,
    month: int,
) -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_invoice_date(InvoiceDate(year=year, month=month))

    assert "Invalid date object" in str(excinfo.value)
    assert excinfo.value.fields == ["InvoiceDateType"]


def test_validate_invoice_date_accepts_january_2015() -> None:
    validate_invoice_date(InvoiceDate(year=2015, month=1))
