"""Fake repositories and fixtures shared by use case tests."""

from datetime import datetime

import pytest

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.models import (
    CollectiveRow,
    Pagination,
    RemoteUser,
    Sorting,
    TransactionRow,
)


class FakeCollectiveRepository(CollectiveRepositoryPort):
    """In-memory collectives counting lookups by id."""

    def __init__(self, collectives: list[CollectiveRow]) -> None:
        self._collectives = list(collectives)
        self.fetch_by_id_calls: list[int] = []

    def fetch_by_slug(self, slug: str) -> CollectiveRow | None:
        for collective in self._collectives:
            if collective.slug == slug:
                return collective
        return None

    def fetch_by_id(self, collective_id: int) -> CollectiveRow | None:
        self.fetch_by_id_calls.append(collective_id)
        for collective in self._collectives:
            if collective.id == collective_id:
                return collective
        return None


class FakeTransactionRepository(TransactionRepositoryPort):
    """In-memory transactions applying the repository filters."""

    def __init__(self, transactions: list[TransactionRow]) -> None:
        self._transactions = list(transactions)
        self.credit_queries: list[dict] = []

    def fetch_invoice_credits(
        self,
        from_collective_id: int,
        host_collective_id: int | None = None,
        starts_at: datetime | None = None,
        ends_at: datetime | None = None,
    ) -> list[TransactionRow]:
        self.credit_queries.append(
            {
                "from_collective_id": from_collective_id,
                "host_collective_id": host_collective_id,
                "starts_at": starts_at,
                "ends_at": ends_at,
            }
        )
        rows = []
        for row in self._transactions:
            if row.type != "CREDIT":
                continue
            billed = (
                row.from_collective_id == from_collective_id
                and row.using_virtual_card_from_collective_id is None
            ) or row.using_virtual_card_from_collective_id == from_collective_id
            if not billed:
                continue
            if (
                host_collective_id is not None
                and row.host_collective_id != host_collective_id
            ):
                continue
            if starts_at and row.created_at < starts_at:
                continue
            if ends_at and row.created_at >= ends_at:
                continue
            rows.append(row)
        return rows

    def fetch_by_uuid(self, uuid: str) -> TransactionRow | None:
        return self.fetch_one(uuid=uuid)

    def fetch_one(
        self,
        transaction_id: int | None = None,
        uuid: str | None = None,
    ) -> TransactionRow | None:
        for row in self._transactions:
            if transaction_id is not None and row.id != transaction_id:
                continue
            if uuid and row.uuid != uuid:
                continue
            return row
        return None

    def count(self, transaction_type: str | None = None) -> int:
        return len(self._filter_type(transaction_type))

    def fetch_page(
        self,
        pagination: Pagination,
        sorting: Sorting,
        transaction_type: str | None = None,
    ) -> list[TransactionRow]:
        attribute = {
            "id": "id",
            "createdAt": "created_at",
            "amount": "amount",
        }[sorting.key]
        rows = sorted(
            self._filter_type(transaction_type),
            key=lambda row: getattr(row, attribute),
            reverse=sorting.direction == "DESC",
        )
        if pagination.since_id:
            rows = [row for row in rows if row.id > pagination.since_id]
            return rows[: pagination.limit]
        return rows[pagination.offset: pagination.offset + pagination.limit]

    def fetch_for_collective(
        self,
        collective_id: int,
        transaction_type: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[TransactionRow]:
        rows = [
            row
            for row in self._filter_type(transaction_type)
            if row.collective_id == collective_id
            or (
                row.using_virtual_card_from_collective_id == collective_id
                and row.type == "DEBIT"
            )
        ]
        rows.sort(key=lambda row: row.created_at, reverse=True)
        start = offset or 0
        return rows[start: start + limit] if limit else rows[start:]

    def _filter_type(self, transaction_type: str | None) -> list[TransactionRow]:
        return [
            row
            for row in self._transactions
            if transaction_type is None or row.type == transaction_type
        ]


def make_transaction(
    transaction_id: int,
    created_at: str,
    amount: int,
    **overrides,
) -> TransactionRow:
    """Build a EUR credit from xdamman to brusselstogether."""
    values = {
        "id": transaction_id,
        "uuid": f"uuid-{transaction_id}",
        "created_at": datetime.fromisoformat(created_at),
        "type": "CREDIT",
        "amount": amount,
        "amount_in_host_currency": amount,
        "host_currency": "EUR",
        "net_amount_in_collective_currency": amount,
        "host_collective_id": 10,
        "from_collective_id": 1,
        "collective_id": 2,
    }
    values.update(overrides)
    return TransactionRow(**values)


@pytest.fixture
def collectives() -> FakeCollectiveRepository:
    return FakeCollectiveRepository(
        [
            CollectiveRow(id=1, slug="xdamman", currency="EUR"),
            CollectiveRow(id=2, slug="brusselstogether", currency="EUR"),
            CollectiveRow(
                id=10,
                slug="brusselstogether-host",
                currency="EUR",
            ),
            CollectiveRow(id=30, slug="pia", currency="USD"),
        ]
    )


@pytest.fixture
def donations() -> list[TransactionRow]:
    """Donations from xdamman between September and November 2017."""
    return [
        make_transaction(1, "2017-09-03 00:00", 1000),
        make_transaction(2, "2017-10-05 00:00", 1000),
        make_transaction(3, "2017-10-25 00:00", 500),
        make_transaction(4, "2017-11-05 00:00", 500),
        make_transaction(5, "2017-11-25 00:00", 500),
    ]


@pytest.fixture
def transactions(donations) -> FakeTransactionRepository:
    return FakeTransactionRepository(donations)


@pytest.fixture
def xdamman_user() -> RemoteUser:
    return RemoteUser(id=100, collective_id=1)


@pytest.fixture
def logger():
    """Silent logger with the logging.Logger-like API."""

    class _Logger:
        def __init__(self) -> None:
            self.messages: list[tuple[str, str]] = []

        def info(self, msg: str) -> None:
            self.messages.append(("info", msg))

        def warning(self, msg: str) -> None:
            self.messages.append(("warning", msg))

        def error(self, msg: str) -> None:
            self.messages.append(("error", msg))

    return _Logger()


@pytest.fixture
def transaction_factory():
    return make_transaction


@pytest.fixture
def transaction_repository_factory():
    return FakeTransactionRepository


@pytest.fixture
def collective_repository_factory():
    return FakeCollectiveRepository
