"""Tests for Database transaction handling."""

from __future__ import annotations

from pathlib import Path

import pytest
from sqlalchemy import func, insert, select

from blogadmin.config.settings import BlogSettings
from blogadmin.domain.ids import UserId
from blogadmin.infrastructure.database.schema import users
from blogadmin.infrastructure.store import Database


def _count_users(database: Database) -> int:
    with database.connect() as conn:
        return conn.execute(select(func.count()).select_from(users)).scalar_one()


class TestTransaction:
    def test_commits_on_success(self, database: Database) -> None:
        with database.transaction() as conn:
            conn.execute(insert(users).values(id=UserId.generate(), username="jane"))
        assert _count_users(database) == 1

    def test_rolls_back_on_error(self, database: Database) -> None:
        with pytest.raises(RuntimeError, match="boom"), database.transaction() as conn:
            conn.execute(insert(users).values(id=UserId.generate(), username="jane"))
            raise RuntimeError("boom")
        assert _count_users(database) == 0


class TestOpen:
    def test_from_settings_uses_database_path(self, tmp_path: Path) -> None:
        settings = BlogSettings.from_cli(root=tmp_path)
        database = Database.from_settings(settings)
        try:
            assert settings.database_path.exists()
            assert database.engine.url.database == str(settings.database_path)
        finally:
            database.close()
