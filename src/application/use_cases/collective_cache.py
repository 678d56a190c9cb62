"""Request-scoped memoization of collective lookups."""

from src.application.ports.collective_repository import (
    CollectiveRepositoryPort,
)
from src.domain.errors import NotFoundError
from src.domain.models.platform_rows import CollectiveRow


class CollectiveLookupCache:
    """Fetch each collective id at most once.

    Instances are created per request and discarded with it.
    """

    def __init__(self, collective_repository: CollectiveRepositoryPort) -> None:
        self._collective_repository = collective_repository
        self._by_id: dict[int | None, CollectiveRow | None] = {}

    def find(self, collective_id: int | None) -> CollectiveRow | None:
        """Return the collective, or None when it does not exist."""
        if collective_id not in self._by_id:
            self._by_id[collective_id] = (
                self._collective_repository.fetch_by_id(collective_id)
                if collective_id is not None
                else None
            )
        return self._by_id[collective_id]

    def get(self, collective_id: int | None) -> CollectiveRow:
        """Return the collective.

        Raises:
            NotFoundError: If the collective does not exist.
        """
        collective = self.find(collective_id)
        if collective is None:
            raise NotFoundError(f"Collective {collective_id} not found")
        return collective

    def slug_for(self, collective_id: int | None) -> str:
        """Return the slug of the collective."""
        return self.get(collective_id).slug

    @property
    def fetched_count(self) -> int:
        """Number of distinct ids looked up so far."""
        return len(self._by_id)


__all__ = ["CollectiveLookupCache"]
