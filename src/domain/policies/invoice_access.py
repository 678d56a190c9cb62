"""Access policy for invoices."""

from src.domain.errors import UnauthorizedError
from src.domain.models.identity import RemoteUser
from src.domain.models.platform_rows import CollectiveRow


FORBIDDEN_INVOICES_MESSAGE = (
    "You don't have permission to access invoices for this user"
)


def ensure_can_read_invoices(
    remote_user: RemoteUser | None,
    from_collective: CollectiveRow,
) -> None:
    """Allow only admins of the billed collective to read its invoices.

    Raises:
        UnauthorizedError: If the caller is anonymous or not an admin.
    """
    if remote_user is None or not remote_user.is_admin(from_collective.id):
        raise UnauthorizedError(FORBIDDEN_INVOICES_MESSAGE)


__all__ = ["FORBIDDEN_INVOICES_MESSAGE", "ensure_can_read_invoices"]
