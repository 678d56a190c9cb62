"""Parsing and validation of invoice slugs and invoice dates."""

from src.domain.constants import INVOICE_DATE_FIELD, MIN_INVOICE_YEAR
from src.domain.errors import ValidationError
from src.domain.models.invoices import InvoiceDate, InvoiceSlugParts


INVALID_SLUG_MESSAGE = (
    "Invalid invoiceSlug format. "
    "Should be :year:2digitMonth.:hostSlug.:fromCollectiveSlug"
)
INVALID_DATE_MESSAGE = (
    "Invalid date object. Must have a valid month, where 1 == January, "
    "and be after 2014"
)


def build_invoice_slug(
    year: int,
    month: int,
    host_slug: str,
    from_collective_slug: str,
) -> str:
    """Return the invoice slug ``YYYYMM.<hostSlug>.<fromCollectiveSlug>``.

    Args:
        year: Four digit year.
        month: Month number, 1 == January.
        host_slug: Slug of the host collective.
        from_collective_slug: Slug of the billed collective.

    Returns:
        str: Invoice slug with a zero padded month.
    """
    return f"{year}{month:02d}.{host_slug}.{from_collective_slug}"


def _is_valid_month_and_year(year: int, month: int) -> bool:
    return year >= MIN_INVOICE_YEAR and 1 <= month <= 12


def parse_invoice_slug(invoice_slug: str) -> InvoiceSlugParts:
    """Split an invoice slug into its date range and collective slugs.

    The host slug runs from index 7 up to the last ``.``; everything after
    the last ``.`` is the billed collective slug. The character at index 6
    is not checked. A slug whose last ``.`` sits before index 7, such as
    ``201710.xdamman`` or ``201710xdamman``, is rejected here rather than
    split into a host slug that cannot exist. ``date_to`` is the month after ``date_from`` without
    year rollover, so a December slug yields month 13.

    Args:
        invoice_slug: Slug formatted as ``YYYYMM.<hostSlug>.<fromSlug>``.

    Returns:
        InvoiceSlugParts: Parsed components.

    Raises:
        ValidationError: If the host part is empty or the year/month are
            not a valid month after 2014.
    """
    raw_year = invoice_slug[0:4]
    raw_month = invoice_slug[4:6]
    last_dot = invoice_slug.rfind(".")
    collective_slug = invoice_slug[7:last_dot] if last_dot >= 0 else ""
    from_collective_slug = invoice_slug[last_dot + 1:]

    try:
        year = int(raw_year)
        month = int(raw_month)
    except ValueError as exc:
        raise ValidationError(INVALID_SLUG_MESSAGE, ["invoiceSlug"]) from exc
    if not collective_slug or not _is_valid_month_and_year(year, month):
        raise ValidationError(INVALID_SLUG_MESSAGE, ["invoiceSlug"])

    return InvoiceSlugParts(
        date_from=InvoiceDate(year=year, month=month),
        date_to=InvoiceDate(year=year, month=month + 1),
        collective_slug=collective_slug,
        from_collective_slug=from_collective_slug,
    )


def validate_invoice_date(invoice_date: InvoiceDate) -> None:
    """Ensure the date is a real month after 2014.

    Args:
        invoice_date: Date to validate.

    Raises:
        ValidationError: If the year is before 2015 or the month is not in
            the 1-12 range.
    """
    if not _is_valid_month_and_year(invoice_date.year, invoice_date.month):
        raise ValidationError(INVALID_DATE_MESSAGE, [INVOICE_DATE_FIELD])


__all__ = [
    "INVALID_SLUG_MESSAGE",
    "INVALID_DATE_MESSAGE",
    "build_invoice_slug",
    "parse_invoice_slug",
    "validate_invoice_date",
]
