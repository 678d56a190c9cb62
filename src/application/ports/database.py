"""Database ports for the invoices read layer.

This module defines the application-layer protocol for accessing the
platform database engine. Infrastructure implementations are expected to
provide concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the platform database engine.

    Application use cases can depend on this protocol instead of concrete
    database drivers or configuration details.
    """

    def get_platform_engine(self) -> Engine:
        """Get the engine for the platform database.

        Returns:
            Engine: SQLAlchemy engine connected to the platform backend.
        """


__all__ = ["DatabaseEnginePort"]
