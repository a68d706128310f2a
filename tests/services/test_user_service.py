"""Tests for UserService."""

from __future__ import annotations

from blogadmin.infrastructure.store import Database
from blogadmin.services.user import UserService


class TestCreateUser:
    def test_create(self, database: Database) -> None:
        result = UserService(database).create("jane", full_name="Jane Doe")
        assert result.ok
        assert result.data["username"] == "jane"
        assert result.data["roles"] == ["ROLE_USER"]

    def test_create_admin(self, database: Database) -> None:
        result = UserService(database).create("root", admin=True)
        assert result.data["roles"] == ["ROLE_ADMIN", "ROLE_USER"]

    def test_strips_username(self, database: Database) -> None:
        assert UserService(database).create("  jane  ").data["username"] == "jane"

    def test_empty_username(self, database: Database) -> None:
        result = UserService(database).create("   ")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "VALIDATION_FAILED"

    def test_duplicate_username(self, database: Database) -> None:
        svc = UserService(database)
        svc.create("jane")
        result = svc.create("jane")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DUPLICATE_USERNAME"
