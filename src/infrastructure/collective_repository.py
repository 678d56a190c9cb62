"""SQLAlchemy-backed repository for collectives."""

import json
from collections.abc import Mapping
from typing import Any

from sqlalchemy import text

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.domain.models.platform_rows import CollectiveRow


_SELECT_COLLECTIVE_SQL = """
SELECT id, slug, name, currency, settings
FROM "Collectives"
WHERE "deletedAt" IS NULL
"""


class SqlAlchemyCollectiveRepository(CollectiveRepositoryPort):
    """Repository backed by SQLAlchemy for collective lookups."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the platform engine.
        """
        self._db_port = db_port

    def fetch_by_slug(self, slug: str) -> CollectiveRow | None:
        query = text(_SELECT_COLLECTIVE_SQL + " AND slug = :slug LIMIT 1")
        return self._fetch_first(query, {"slug": slug})

    def fetch_by_id(self, collective_id: int) -> CollectiveRow | None:
        query = text(_SELECT_COLLECTIVE_SQL + " AND id = :id LIMIT 1")
        return self._fetch_first(query, {"id": collective_id})

    def _fetch_first(
        self,
        query,
        params: dict[str, Any],
    ) -> CollectiveRow | None:
        engine = self._db_port.get_platform_engine()
        with engine.connect() as conn:
            row = conn.execute(query, params).first()
        if not row:
            return None
        return CollectiveRow(
            id=row.id,
            slug=row.slug,
            name=row.name,
            currency=row.currency,
            settings=self._coerce_settings(row.settings),
        )

    @staticmethod
    def _coerce_settings(value) -> Mapping[str, Any]:
        if not value:
            return {}
        if isinstance(value, Mapping):
            return dict(value)
        return json.loads(value)


__all__ = ["SqlAlchemyCollectiveRepository"]
