"""Use case to look up a collective by slug or id."""

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.domain.errors import GenericError, NotFoundError
from src.domain.models.platform_rows import CollectiveRow


class GetCollectiveUseCase:
    """Return a single collective."""

    def __init__(self, collective_repository: CollectiveRepositoryPort) -> None:
        self._collective_repository = collective_repository

    def execute(
        self,
        slug: str | None = None,
        collective_id: int | None = None,
    ) -> CollectiveRow:
        """Return the collective for a slug (case-insensitive) or an id.

        Raises:
            GenericError: If neither slug nor id is provided.
            NotFoundError: If the collective does not exist.
        """
        if slug:
            collective = self._collective_repository.fetch_by_slug(
                slug.lower()
            )
        elif collective_id:
            collective = self._collective_repository.fetch_by_id(collective_id)
        else:
            raise GenericError("Please provide a slug or an id")
        if collective is None:
            raise NotFoundError("Collective not found")
        return collective


__all__ = ["GetCollectiveUseCase"]
