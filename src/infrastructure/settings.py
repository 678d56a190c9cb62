"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from src.domain.constants import (
    DEFAULT_INVOICE_TITLE,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class InvoiceSettings:
    """Settings for invoice and listing use cases.

    Attributes:
        default_invoice_title: Title used when a host sets none.
        transactions_page_size: Default page size for listings.
        transactions_max_page_size: Largest page size accepted.
    """

    default_invoice_title: str = DEFAULT_INVOICE_TITLE
    transactions_page_size: int = DEFAULT_PAGE_SIZE
    transactions_max_page_size: int = MAX_PAGE_SIZE

    @classmethod
    def from_env(cls) -> "InvoiceSettings":
        """Build settings from environment variables.

        Returns:
            InvoiceSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        title = os.getenv("INVOICE_DEFAULT_TITLE", "").strip()
        return cls(
            default_invoice_title=title or DEFAULT_INVOICE_TITLE,
            transactions_page_size=cls._read_int(
                "TRANSACTIONS_PAGE_SIZE",
                DEFAULT_PAGE_SIZE,
                logger=logger,
            ),
            transactions_max_page_size=cls._read_int(
                "TRANSACTIONS_MAX_PAGE_SIZE",
                MAX_PAGE_SIZE,
                logger=logger,
            ),
        )

    @staticmethod
    def _read_int(name: str, default: int, logger) -> int:
        """Read a positive integer variable.

        Args:
            name: Environment variable name.
            default: Value used when missing or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw_value = os.getenv(name)
        if not raw_value:
            return default
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid integer for {name}: {raw_value}. Using {default}."
            )
            return default
        if value < 1:
            logger.warning(f"{name} must be positive. Using {default}.")
            return default
        return value


__all__ = ["InvoiceSettings"]
