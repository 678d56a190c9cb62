"""SQLAlchemy-backed repository for transactions."""

from datetime import datetime
from typing import Any

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.constants import (
    SORT_DIRECTIONS,
    TRANSACTION_TYPE_CREDIT,
    TRANSACTION_TYPE_DEBIT,
)
from src.domain.models.listing import Pagination, Sorting
from src.domain.models.platform_rows import TransactionRow


_SELECT_TRANSACTIONS_SQL = """
SELECT id,
       uuid,
       "createdAt" AS created_at,
       type,
       amount,
       "amountInHostCurrency" AS amount_in_host_currency,
       "hostCurrency" AS host_currency,
       "netAmountInCollectiveCurrency" AS net_amount_in_collective_currency,
       "HostCollectiveId" AS host_collective_id,
       "FromCollectiveId" AS from_collective_id,
       "CollectiveId" AS collective_id,
       "UsingVirtualCardFromCollectiveId"
           AS using_virtual_card_from_collective_id,
       description
FROM "Transactions"
WHERE "deletedAt" IS NULL
"""

_SORT_COLUMNS = {
    "id": "id",
    "createdAt": '"createdAt"',
    "amount": "amount",
}


class SqlAlchemyTransactionRepository(TransactionRepositoryPort):
    """Repository backed by SQLAlchemy for transaction reads."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the platform engine.
        """
        self._db_port = db_port

    def fetch_invoice_credits(
        self,
        from_collective_id: int,
        host_collective_id: int | None = None,
        starts_at: datetime | None = None,
        ends_at: datetime | None = None,
    ) -> list[TransactionRow]:
        base_sql = _SELECT_TRANSACTIONS_SQL + """
        AND type = :type
        AND (
            ("FromCollectiveId" = :from_collective_id
             AND "UsingVirtualCardFromCollectiveId" IS NULL)
            OR "UsingVirtualCardFromCollectiveId" = :from_collective_id
        )
        """
        params: dict[str, Any] = {
            "type": TRANSACTION_TYPE_CREDIT,
            "from_collective_id": from_collective_id,
        }
        if host_collective_id is not None:
            base_sql += ' AND "HostCollectiveId" = :host_collective_id'
            params["host_collective_id"] = host_collective_id
        if starts_at:
            base_sql += ' AND "createdAt" >= :starts_at'
            params["starts_at"] = starts_at
        if ends_at:
            base_sql += ' AND "createdAt" < :ends_at'
            params["ends_at"] = ends_at
        base_sql += ' ORDER BY "createdAt", id'
        return self._fetch_all(text(base_sql), params)

    def fetch_by_uuid(self, uuid: str) -> TransactionRow | None:
        return self.fetch_one(uuid=uuid)

    def fetch_one(
        self,
        transaction_id: int | None = None,
        uuid: str | None = None,
    ) -> TransactionRow | None:
        base_sql = _SELECT_TRANSACTIONS_SQL
        params: dict[str, Any] = {}
        if transaction_id is not None:
            base_sql += " AND id = :id"
            params["id"] = transaction_id
        if uuid:
            base_sql += " AND uuid = :uuid"
            params["uuid"] = uuid
        rows = self._fetch_all(text(base_sql + " LIMIT 1"), params)
        return rows[0] if rows else None

    def count(self, transaction_type: str | None = None) -> int:
        base_sql = (
            'SELECT COUNT(*) AS total FROM "Transactions" '
            'WHERE "deletedAt" IS NULL'
        )
        params: dict[str, Any] = {}
        if transaction_type:
            base_sql += " AND type = :type"
            params["type"] = transaction_type
        engine = self._db_port.get_platform_engine()
        with engine.connect() as conn:
            total = conn.execute(text(base_sql), params).scalar_one()
        return int(total)

    def fetch_page(
        self,
        pagination: Pagination,
        sorting: Sorting,
        transaction_type: str | None = None,
    ) -> list[TransactionRow]:
        base_sql = _SELECT_TRANSACTIONS_SQL
        params: dict[str, Any] = {"limit": pagination.limit}
        if transaction_type:
            base_sql += " AND type = :type"
            params["type"] = transaction_type
        if pagination.since_id:
            base_sql += " AND id > :since_id"
            params["since_id"] = pagination.since_id
        base_sql += f" ORDER BY {self._order_clause(sorting)} LIMIT :limit"
        if not pagination.since_id:
            base_sql += " OFFSET :offset"
            params["offset"] = pagination.offset
        return self._fetch_all(text(base_sql), params)

    def fetch_for_collective(
        self,
        collective_id: int,
        transaction_type: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
    ) -> list[TransactionRow]:
        base_sql = _SELECT_TRANSACTIONS_SQL + """
        AND (
            "CollectiveId" = :collective_id
            OR ("UsingVirtualCardFromCollectiveId" = :collective_id
                AND type = :virtual_card_type)
        )
        """
        params: dict[str, Any] = {
            "collective_id": collective_id,
            "virtual_card_type": TRANSACTION_TYPE_DEBIT,
        }
        if transaction_type:
            base_sql += " AND type = :type"
            params["type"] = transaction_type
        if start_date:
            base_sql += ' AND "createdAt" >= :start_date'
            params["start_date"] = start_date
        if end_date:
            base_sql += ' AND "createdAt" < :end_date'
            params["end_date"] = end_date
        base_sql += ' ORDER BY "createdAt" DESC, id DESC'
        if limit:
            base_sql += " LIMIT :limit"
            params["limit"] = limit
        if offset:
            base_sql += " OFFSET :offset"
            params["offset"] = offset
        return self._fetch_all(text(base_sql), params)

    def _fetch_all(
        self,
        query,
        params: dict[str, Any],
    ) -> list[TransactionRow]:
        engine = self._db_port.get_platform_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, params).all()
        return [self._to_row(row) for row in rows]

    @staticmethod
    def _order_clause(sorting: Sorting) -> str:
        column = _SORT_COLUMNS.get(sorting.key)
        direction = sorting.direction.upper()
        if column is None or direction not in SORT_DIRECTIONS:
            raise ValueError(
                f"Unsupported transaction sorting: {sorting.key} {sorting.direction}"
            )
        if column == "id":
            return f"id {direction}"
        return f"{column} {direction}, id {direction}"

    @staticmethod
    def _to_row(row) -> TransactionRow:
        return TransactionRow(
            id=row.id,
            uuid=str(row.uuid),
            created_at=row.created_at,
            type=row.type,
            amount=int(row.amount or 0),
            amount_in_host_currency=int(row.amount_in_host_currency or 0),
            host_currency=row.host_currency,
            net_amount_in_collective_currency=int(
                row.net_amount_in_collective_currency or 0
            ),
            host_collective_id=row.host_collective_id,
            from_collective_id=row.from_collective_id,
            collective_id=row.collective_id,
            using_virtual_card_from_collective_id=(
                row.using_virtual_card_from_collective_id
            ),
            description=row.description,
        )


__all__ = ["SqlAlchemyTransactionRepository"]
