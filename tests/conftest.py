"""Shared pytest fixtures and test helpers for blogadmin tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient

from blogadmin.config.settings import BlogSettings
from blogadmin.domain.ids import PostId
from blogadmin.domain.post import Post
from blogadmin.domain.user import User
from blogadmin.infrastructure.repositories.post import SqlPostRepository
from blogadmin.infrastructure.repositories.user import SqlUserRepository
from blogadmin.infrastructure.store import Database


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's BLOGADMIN_* environment out of the tests."""
    monkeypatch.delenv("BLOGADMIN_CONFIG", raising=False)
    monkeypatch.delenv("BLOGADMIN_DATABASE__PATH", raising=False)


@pytest.fixture(autouse=True)
def _restore_process_state() -> Iterator[None]:
    """Undo the logging and telemetry setup every CLI invocation performs."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("blogadmin")
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)

    from blogadmin.services.telemetry import disable_telemetry

    disable_telemetry()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def database(tmp_path: Path) -> Iterator[Database]:
    """Fresh database with all tables created."""
    db = Database.open(tmp_path / "var" / "blog.db")
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def settings(tmp_path: Path) -> BlogSettings:
    return BlogSettings.from_cli(root=tmp_path)


@pytest.fixture
def author(database: Database) -> User:
    return create_user(database, "jane", full_name="Jane Doe")


@pytest.fixture
def other_user(database: Database) -> User:
    return create_user(database, "tom")


@pytest.fixture
def admin(database: Database) -> User:
    return create_user(database, "root", admin=True)


@pytest.fixture
def client(settings: BlogSettings, database: Database) -> Iterator[TestClient]:
    """HTTP client against the full application, sharing the test database."""
    from blogadmin.web.app import create_app

    app = create_app(settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI works on an isolated project.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (used across test modules)
# ---------------------------------------------------------------------------


def create_user(database: Database, username: str, **kwargs: Any) -> User:
    """Create a user via UserService, asserting success."""
    from blogadmin.services.user import UserService

    result = UserService(database).create(username, **kwargs)
    assert result.ok, result.error
    user = SqlUserRepository(database).find_by_username(username)
    assert user is not None
    return user


def create_post(database: Database, author: User, title: str = "Hello", **kwargs: Any) -> Post:
    """Create a post via PostService, asserting success, and reload it."""
    from blogadmin.services.post import PostService

    kwargs.setdefault("summary", "A summary")
    kwargs.setdefault("content", "Some post content that is long enough.")
    post_id = kwargs.pop("post_id", None)
    result = PostService(database).create(
        title,
        author_id=author.id,
        post_id=PostId(post_id) if isinstance(post_id, str) else post_id,
        **kwargs,
    )
    assert result.ok, result.error
    return SqlPostRepository(database).find(PostId(result.data["id"]))
