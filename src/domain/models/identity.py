"""Domain model for the authenticated caller."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RemoteUser:
    """Authenticated user issuing a request.

    Attributes:
        id: User id.
        collective_id: Id of the user's own collective profile.
        admin_collective_ids: Collectives the user administers.
    """

    id: int
    collective_id: int
    admin_collective_ids: frozenset[int] = frozenset()

    def is_admin(self, collective_id: int) -> bool:
        """Return True when the user administers the collective."""
        if collective_id == self.collective_id:
            return True
        return collective_id in self.admin_collective_ids


__all__ = ["RemoteUser"]
