"""Shared fakes for SQLAlchemy-backed repository tests."""

from unittest.mock import MagicMock

import pytest


class _RecordingConnection:
    """Connection returning queued results and recording executed queries."""

    def __init__(self, results):
        self._results = list(results)
        self.executed = []

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def execute(self, query, params=None):
        self.executed.append((query.text, dict(params or {})))
        result = MagicMock()
        rows = self._results.pop(0) if self._results else []
        result.all.return_value = rows
        result.first.return_value = rows[0] if rows else None
        result.scalar_one.return_value = rows[0] if rows else 0
        return result


@pytest.fixture
def db_port_factory():
    """Return a factory building a db port around queued result sets."""

    def _factory(*results):
        conn = _RecordingConnection(results)
        engine = MagicMock()
        engine.connect.return_value = conn
        db_port = MagicMock()
        db_port.get_platform_engine.return_value = engine
        return db_port, conn

    return _factory
