"""Use case to look up a transaction by id or uuid."""

from src.application.ports.transaction_repository import (
    TransactionRepositoryPort,
)
from src.domain.errors import GenericError
from src.domain.models.platform_rows import TransactionRow


class GetTransactionUseCase:
    """Return a single transaction, or None when it does not exist."""

    def __init__(
        self,
        transaction_repository: TransactionRepositoryPort,
    ) -> None:
        self._transaction_repository = transaction_repository

    def execute(
        self,
        transaction_id: int | None = None,
        uuid: str | None = None,
    ) -> TransactionRow | None:
        if transaction_id is None and not uuid:
            raise GenericError("Please provide an id or a uuid")
        return self._transaction_repository.fetch_one(
            transaction_id=transaction_id,
            uuid=uuid,
        )


__all__ = ["GetTransactionUseCase"]
