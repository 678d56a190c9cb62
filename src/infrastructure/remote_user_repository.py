"""SQLAlchemy-backed repository resolving users and their admin rights."""

from sqlalchemy import bindparam, text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.remote_user_repository import (
    RemoteUserRepositoryPort,
)
from src.domain.constants import ADMIN_MEMBER_ROLES
from src.domain.models.identity import RemoteUser


SELECT_USER_SQL = text(
    """
    SELECT id, "CollectiveId" AS collective_id
    FROM "Users"
    WHERE id = :user_id AND "deletedAt" IS NULL
    LIMIT 1
    """
)

SELECT_ADMIN_MEMBERSHIPS_SQL = text(
    """
    SELECT DISTINCT "CollectiveId" AS collective_id
    FROM "Members"
    WHERE "MemberCollectiveId" = :member_collective_id
      AND role IN :roles
      AND "deletedAt" IS NULL
    """
).bindparams(bindparam("roles", expanding=True))


class SqlAlchemyRemoteUserRepository(RemoteUserRepositoryPort):
    """Repository building RemoteUser objects from users and members."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the platform engine.
        """
        self._db_port = db_port

    def fetch_remote_user(self, user_id: int) -> RemoteUser | None:
        engine = self._db_port.get_platform_engine()
        with engine.connect() as conn:
            user = conn.execute(SELECT_USER_SQL, {"user_id": user_id}).first()
            if not user:
                return None
            memberships = conn.execute(
                SELECT_ADMIN_MEMBERSHIPS_SQL,
                {
                    "member_collective_id": user.collective_id,
                    "roles": list(ADMIN_MEMBER_ROLES),
                },
            ).all()
        return RemoteUser(
            id=user.id,
            collective_id=user.collective_id,
            admin_collective_ids=frozenset(
                row.collective_id for row in memberships
            ),
        )


__all__ = ["SqlAlchemyRemoteUserRepository"]
