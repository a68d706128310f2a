"""User repository over SQLAlchemy Core."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select

from blogadmin.domain.types import Role
from blogadmin.domain.user import User
from blogadmin.infrastructure.database.schema import users
from blogadmin.ports.repository import UserNotFoundError

if TYPE_CHECKING:
    from sqlalchemy import Connection

    from blogadmin.domain.ids import UserId
    from blogadmin.infrastructure.store import Database


class SqlUserRepository:
    """Encapsulates SQL for user accounts."""

    def __init__(self, database: Database) -> None:
        self._db = database

    def find(self, user_id: UserId) -> User:
        with self._db.connect() as conn:
            row = conn.execute(select(users).where(users.c.id == user_id)).mappings().first()
        if row is None:
            raise UserNotFoundError(user_id)
        return self._hydrate(row)

    def find_by_username(self, username: str) -> User | None:
        with self._db.connect() as conn:
            row = (
                conn.execute(select(users).where(users.c.username == username)).mappings().first()
            )
        return self._hydrate(row) if row is not None else None

    def add(self, user: User, *, conn: Connection) -> None:
        conn.execute(
            insert(users).values(
                id=user.id,
                username=user.username,
                full_name=user.full_name,
                email=user.email,
                roles=json.dumps(sorted(str(role) for role in user.roles)),
            )
        )

    @staticmethod
    def _hydrate(row: Any) -> User:
        return User(
            id=row["id"],
            username=row["username"],
            full_name=row["full_name"],
            email=row["email"],
            roles=frozenset(Role(role) for role in json.loads(row["roles"] or "[]")),
        )
