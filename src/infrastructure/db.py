"""Platform database engine.

One pooled SQLAlchemy engine per process, pointed at ``PLATFORM_DB_URL``.
Repositories reach it through ``DatabaseEnginePort`` only.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Return a required setting, reading ``.env`` first.

    Args:
        name: Variable holding the setting.

    Returns:
        str: Non-empty value.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Open a pooled engine on the given URL.

    Args:
        db_url: SQLAlchemy URL, driver and credentials included.

    Returns:
        Engine: Engine with up to ten connections, pinged before reuse.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_platform_engine: Optional[Engine] = None


def get_platform_engine() -> Engine:
    """Return the process-wide platform engine, creating it on first use."""
    global _platform_engine
    if _platform_engine is None:
        _platform_engine = _create_engine(_get_env_var("PLATFORM_DB_URL"))
    return _platform_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Engine port serving the shared platform engine."""

    def get_platform_engine(self) -> Engine:
        return get_platform_engine()


__all__ = [
    "get_platform_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
