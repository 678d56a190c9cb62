"""Application port for transaction data access."""

from datetime import datetime
from typing import Protocol

from src.domain.models.listing import Pagination, Sorting
from src.domain.models.platform_rows import TransactionRow


class TransactionRepositoryPort(Protocol):
    """Port exposing read access to transactions."""

    def fetch_invoice_credits(
        self,
        from_collective_id: int,
        host_collective_id: int | None = None,
        starts_at: datetime | None = None,
        ends_at: datetime | None = None,
    ) -> list[TransactionRow]:
        """Return credits billed to a collective.

        A credit is billed to the collective when it paid without a virtual
        card, or when the payment used a virtual card it issued. Optional
        filters restrict the host and the ``[starts_at, ends_at)`` window.
        """

    def fetch_by_uuid(self, uuid: str) -> TransactionRow | None:
        """Return the transaction with this uuid, if any."""

    def fetch_one(
        self,
        transaction_id: int | None = None,
        uuid: str | None = None,
    ) -> TransactionRow | None:
        """Return the transaction matching every given identifier."""

    def count(self, transaction_type: str | None = None) -> int:
        """Return the number of transactions of a type (all when None)."""

    def fetch_page(
        self,
        pagination: Pagination,
        sorting: Sorting,
        transaction_type: str | None = None,
    ) -> list[TransactionRow]:
        """Return one sorted page of transactions."""

    def fetch_for_collective(
        self,
        collective_id: int,
        transaction_type: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[TransactionRow]:
        """Return transactions of a collective, most recent first.

        Includes the debits paid with a virtual card the collective issued.
        """


__all__ = ["TransactionRepositoryPort"]
