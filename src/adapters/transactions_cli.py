"""CLI adapter printing transactions as JSON.

``TRANSACTIONS_COLLECTIVE`` lists the transactions of one collective;
otherwise a page of all transactions is printed, selected with
``TRANSACTIONS_PAGE``, ``TRANSACTIONS_PER_PAGE``, ``TRANSACTIONS_SINCE_ID``,
``TRANSACTIONS_SORT``, ``TRANSACTIONS_DIRECTION`` and ``TRANSACTIONS_TYPE``.
"""

import json
import os
import sys

from src.adapters.invoice_payloads import (
    serialize_transaction,
    serialize_transactions_page,
)
from src.application.use_cases.list_transactions import (
    ListCollectiveTransactionsUseCase,
)
from src.domain.errors import PlatformError
from src.domain.policies.pagination import paginate, sort_by
from src.infrastructure.container import (
    build_collective_repository,
    build_database_adapter,
    build_list_transactions_use_case,
    build_pagination_options,
    build_transaction_repository,
)
from src.infrastructure.logging.logger import get_app_logger


def _parse_int(value: str | None, name: str, logger) -> int | None:
    """Parse an optional integer variable.

    Args:
        value: Raw value.
        name: Variable name used in warnings.
        logger: Logger used for warnings.

    Returns:
        int | None: Parsed value or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Invalid {name} '{value}'. Expected an integer.")
        return None


def main() -> None:
    """Print transactions selected by environment variables."""
    logger = get_app_logger()
    db_adapter = build_database_adapter()
    transaction_type = os.getenv("TRANSACTIONS_TYPE") or None
    collective_slug = os.getenv("TRANSACTIONS_COLLECTIVE")

    try:
        if collective_slug:
            use_case = ListCollectiveTransactionsUseCase(
                collective_repository=build_collective_repository(db_adapter),
                transaction_repository=build_transaction_repository(
                    db_adapter
                ),
                logger=logger,
            )
            payload = [
                serialize_transaction(transaction)
                for transaction in use_case.execute(
                    collective_slug=collective_slug,
                    transaction_type=transaction_type,
                )
            ]
        else:
            pagination = paginate(
                page=_parse_int(
                    os.getenv("TRANSACTIONS_PAGE"), "page", logger
                ),
                per_page=_parse_int(
                    os.getenv("TRANSACTIONS_PER_PAGE"), "per_page", logger
                ),
                since_id=_parse_int(
                    os.getenv("TRANSACTIONS_SINCE_ID"), "since_id", logger
                ),
                options=build_pagination_options(),
            )
            sorting = sort_by(
                os.getenv("TRANSACTIONS_SORT"),
                os.getenv("TRANSACTIONS_DIRECTION"),
                default_key="createdAt",
                default_direction="DESC",
            )
            use_case = build_list_transactions_use_case(db_adapter)
            payload = serialize_transactions_page(
                use_case.execute(
                    pagination=pagination,
                    sorting=sorting,
                    transaction_type=transaction_type,
                )
            )
    except PlatformError as exc:
        logger.error(f"{exc.code}: {exc.message}")
        sys.exit(1)

    print(json.dumps(payload, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
