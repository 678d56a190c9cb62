"""Port for resolving the authenticated caller."""

from typing import Protocol

from src.domain.models.identity import RemoteUser


class RemoteUserRepositoryPort(Protocol):
    """Port exposing users with their administered collectives."""

    def fetch_remote_user(self, user_id: int) -> RemoteUser | None:
        """Return the user with its admin memberships, if it exists."""


__all__ = ["RemoteUserRepositoryPort"]
