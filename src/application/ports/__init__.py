"""Application ports package."""

from .collective_repository import CollectiveRepositoryPort
from .database import DatabaseEnginePort
from .remote_user_repository import RemoteUserRepositoryPort
from .transaction_repository import TransactionRepositoryPort

__all__ = [
    "CollectiveRepositoryPort",
    "DatabaseEnginePort",
    "RemoteUserRepositoryPort",
    "TransactionRepositoryPort",
]
