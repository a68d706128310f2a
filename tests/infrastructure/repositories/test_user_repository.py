"""Tests for SqlUserRepository."""

from __future__ import annotations

import pytest

from blogadmin.domain.ids import UserId
from blogadmin.domain.types import Role
from blogadmin.domain.user import User
from blogadmin.infrastructure.repositories.user import SqlUserRepository
from blogadmin.infrastructure.store import Database
from blogadmin.ports.repository import UserNotFoundError


class TestSqlUserRepository:
    def test_add_and_find(self, database: Database) -> None:
        repo = SqlUserRepository(database)
        user = User(
            id=UserId.generate(),
            username="root",
            full_name="Root",
            email="root@example.com",
            roles=frozenset({Role.ADMIN}),
        )
        with database.transaction() as conn:
            repo.add(user, conn=conn)

        assert repo.find(user.id) == user
        assert repo.find_by_username("root") == user

    def test_find_missing_raises(self, database: Database) -> None:
        with pytest.raises(UserNotFoundError):
            SqlUserRepository(database).find(UserId.generate())

    def test_find_by_username_missing(self, database: Database) -> None:
        assert SqlUserRepository(database).find_by_username("nobody") is None
