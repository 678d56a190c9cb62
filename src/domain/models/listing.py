"""Domain models for paginated and sorted listings."""

from dataclasses import dataclass

from src.domain.models.platform_rows import TransactionRow


@dataclass(frozen=True)
class Pagination:
    """Window of rows to read.

    Attributes:
        limit: Maximum number of rows.
        offset: Number of rows skipped.
        since_id: When set, read rows with an id greater than this value
            instead of using the offset.
    """

    limit: int
    offset: int = 0
    since_id: int | None = None


@dataclass(frozen=True)
class Sorting:
    """Sort key and direction (ASC or DESC)."""

    key: str
    direction: str


@dataclass(frozen=True)
class PaginatedTransactions:
    """One page of transactions with the total count."""

    limit: int
    offset: int
    total: int
    transactions: list[TransactionRow]


__all__ = ["Pagination", "Sorting", "PaginatedTransactions"]
