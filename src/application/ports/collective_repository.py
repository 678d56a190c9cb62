"""Port for reading collectives."""

from typing import Protocol

from src.domain.models.platform_rows import CollectiveRow


class CollectiveRepositoryPort(Protocol):
    """Port exposing read access to collectives."""

    def fetch_by_slug(self, slug: str) -> CollectiveRow | None:
        """Return the collective with this slug, if any."""

    def fetch_by_id(self, collective_id: int) -> CollectiveRow | None:
        """Return the collective with this id, if any."""


__all__ = ["CollectiveRepositoryPort"]
