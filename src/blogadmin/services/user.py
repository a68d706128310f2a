"""UserService: account provisioning for the admin CLI."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blogadmin.domain.ids import UserId
from blogadmin.domain.types import Role
from blogadmin.domain.user import User
from blogadmin.infrastructure.repositories.user import SqlUserRepository
from blogadmin.services.base import BaseService
from blogadmin.services.result import ServiceResult
from blogadmin.services.telemetry import traced

if TYPE_CHECKING:
    from blogadmin.infrastructure.store import Database

logger = logging.getLogger(__name__)


class UserService(BaseService):
    def __init__(self, database: Database, users: SqlUserRepository | None = None) -> None:
        super().__init__(database)
        self._users = users or SqlUserRepository(database)

    @traced
    def create(
        self,
        username: str,
        *,
        full_name: str = "",
        email: str = "",
        admin: bool = False,
    ) -> ServiceResult:
        op = "create_user"
        username = username.strip()
        if not username:
            return ServiceResult.failure(op, "VALIDATION_FAILED", "Username must not be empty")
        if self._users.find_by_username(username) is not None:
            return ServiceResult.failure(
                op, "DUPLICATE_USERNAME", f"Username already taken: {username}"
            )

        user = User(
            id=UserId.generate(),
            username=username,
            full_name=full_name,
            email=email,
            roles=frozenset({Role.ADMIN}) if admin else frozenset(),
        )
        with self._db.transaction() as conn:
            self._users.add(user, conn=conn)

        logger.info("User %s created", username)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "id": str(user.id),
                "username": user.username,
                "roles": sorted(str(role) for role in user.effective_roles),
            },
        )
