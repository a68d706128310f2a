"""Tests for SqlPostRepository."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from sqlalchemy import select

from blogadmin.domain.ids import PostId
from blogadmin.domain.post import Post
from blogadmin.domain.user import User
from blogadmin.infrastructure.database.schema import post_tags
from blogadmin.infrastructure.repositories.post import SqlPostRepository
from blogadmin.infrastructure.store import Database
from blogadmin.ports.repository import PostNotFoundError


def _add(database: Database, post: Post) -> None:
    with database.transaction() as conn:
        SqlPostRepository(database).add(post, conn=conn)


def _post(author: User, post_id: str, **kwargs: object) -> Post:
    return Post(id=PostId(post_id), title=f"Post {post_id}", author_id=author.id, **kwargs)  # type: ignore[arg-type]


class TestFind:
    def test_find_hydrates(self, database: Database, author: User) -> None:
        published = datetime(2024, 5, 1, 12, 0, tzinfo=UTC)
        _add(
            database,
            _post(author, "42", summary="S", content="Body", tags=["b", "a"], published_at=published),
        )

        post = SqlPostRepository(database).find(PostId("42"))

        assert post.id == PostId("42")
        assert post.title == "Post 42"
        assert post.slug == "post-42"
        assert post.author_id == author.id
        assert post.tags == ["b", "a"]
        assert post.published_at == published
        assert post.modified_at is None

    def test_find_missing_raises(self, database: Database) -> None:
        with pytest.raises(PostNotFoundError, match="No post found with ID: 404") as excinfo:
            SqlPostRepository(database).find(PostId("404"))
        assert excinfo.value.post_id == PostId("404")
        assert isinstance(excinfo.value, LookupError)


class TestFindMany:
    def test_newest_first(self, database: Database, author: User) -> None:
        now = datetime(2024, 1, 1, tzinfo=UTC)
        _add(database, _post(author, "old", published_at=now))
        _add(database, _post(author, "new", published_at=now + timedelta(days=1)))

        ids = [str(post.id) for post in SqlPostRepository(database).find_all()]
        assert ids == ["new", "old"]

    def test_find_by_author(self, database: Database, author: User, other_user: User) -> None:
        _add(database, _post(author, "mine"))
        _add(database, _post(other_user, "theirs"))

        posts = SqlPostRepository(database).find_by_author(author.id)
        assert [str(post.id) for post in posts] == ["mine"]

    def test_empty(self, database: Database) -> None:
        assert SqlPostRepository(database).find_all() == []


class TestWrites:
    def test_save_rewrites_tags(self, database: Database, author: User) -> None:
        repo = SqlPostRepository(database)
        _add(database, _post(author, "42", tags=["one", "two"]))
        post = repo.find(PostId("42"))
        post.retag(["three"])
        post.rename("Renamed")

        with database.transaction() as conn:
            assert repo.save(post, conn=conn)

        reloaded = repo.find(PostId("42"))
        assert reloaded.tags == ["three"]
        assert reloaded.slug == "renamed"

    def test_save_missing_returns_false(self, database: Database, author: User) -> None:
        with database.transaction() as conn:
            assert not SqlPostRepository(database).save(_post(author, "ghost"), conn=conn)

    def test_remove_deletes_tags(self, database: Database, author: User) -> None:
        repo = SqlPostRepository(database)
        _add(database, _post(author, "42", tags=["one"]))

        with database.transaction() as conn:
            assert repo.remove(repo.find(PostId("42")), conn=conn)
            assert not repo.exists(PostId("42"), conn=conn)

        with database.connect() as conn:
            assert conn.execute(select(post_tags)).all() == []

    def test_remove_missing_returns_false(self, database: Database, author: User) -> None:
        with database.transaction() as conn:
            assert not SqlPostRepository(database).remove(_post(author, "ghost"), conn=conn)
