"""CLI adapter printing invoices as JSON.

The caller is identified by ``INVOICES_USER_ID``. Depending on the other
variables set, the command prints:

* ``INVOICES_TRANSACTION_UUID``: the invoice of one transaction;
* ``INVOICES_SLUG``: the invoice for ``YYYYMM.<hostSlug>.<fromSlug>``;
* ``INVOICES_FROM_COLLECTIVE``: every monthly invoice of that collective.
"""

import json
import os
import sys

from src.adapters.invoice_payloads import serialize_invoice
from src.domain.errors import PlatformError
from src.infrastructure.container import (
    build_all_invoices_use_case,
    build_database_adapter,
    build_invoice_use_case,
    build_remote_user_repository,
    build_transaction_invoice_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


def _parse_user_id(value: str | None, logger) -> int | None:
    """Parse the caller id.

    Args:
        value: Raw user id.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed id or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid user id '{value}'. Expected an integer.")
        return None


def main() -> None:
    """Run the invoice query selected by environment variables."""
    logger = get_app_logger()
    usage_logger = get_usage_logger()
    transaction_uuid = os.getenv("INVOICES_TRANSACTION_UUID")
    invoice_slug = os.getenv("INVOICES_SLUG")
    from_collective = os.getenv("INVOICES_FROM_COLLECTIVE")
    if not (transaction_uuid or invoice_slug or from_collective):
        logger.warning(
            "Set INVOICES_TRANSACTION_UUID, INVOICES_SLUG or "
            "INVOICES_FROM_COLLECTIVE to select invoices."
        )
        return

    db_adapter = build_database_adapter()
    user_id = _parse_user_id(os.getenv("INVOICES_USER_ID"), logger)
    remote_user = None
    if user_id is not None:
        remote_user = build_remote_user_repository(
            db_adapter
        ).fetch_remote_user(user_id)

    try:
        if transaction_uuid:
            use_case = build_transaction_invoice_use_case(db_adapter)
            payload = serialize_invoice(use_case.execute(transaction_uuid))
        elif invoice_slug:
            use_case = build_invoice_use_case(db_adapter)
            payload = serialize_invoice(
                use_case.execute(
                    invoice_slug=invoice_slug,
                    remote_user=remote_user,
                )
            )
        else:
            use_case = build_all_invoices_use_case(db_adapter)
            payload = [
                serialize_invoice(invoice)
                for invoice in use_case.execute(from_collective, remote_user)
            ]
    except PlatformError as exc:
        logger.error(f"{exc.code}: {exc.message}")
        sys.exit(1)

    usage_logger.info(
        f"user={user_id} read invoices "
        f"{transaction_uuid or invoice_slug or from_collective}"
    )
    print(json.dumps(payload, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
