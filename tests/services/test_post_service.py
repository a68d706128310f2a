"""Tests for PostService: create, list, update, delete."""

from __future__ import annotations

from sqlalchemy import select

from blogadmin.domain.ids import PostId
from blogadmin.domain.user import User
from blogadmin.infrastructure.database.schema import post_tags
from blogadmin.infrastructure.repositories.post import SqlPostRepository
from blogadmin.infrastructure.store import Database
from blogadmin.ports.form import EditPostCommand
from blogadmin.services.post import PostService
from tests.conftest import create_post


class TestCreate:
    def test_create(self, database: Database, author: User) -> None:
        result = PostService(database).create(
            "Hello World",
            author_id=author.id,
            summary="S",
            content="Body text",
            tags=["Python", "python", "web"],
            post_id=PostId("42"),
        )
        assert result.ok
        assert result.op == "create_post"
        assert result.data == {
            "id": "42",
            "title": "Hello World",
            "slug": "hello-world",
            "author_id": str(author.id),
            "tags": ["python", "web"],
        }
        post = SqlPostRepository(database).find(PostId("42"))
        assert post.published_at.microsecond == 0

    def test_generated_id(self, database: Database, author: User) -> None:
        result = PostService(database).create("Untitled", author_id=author.id)
        assert result.ok
        assert result.data["id"]

    def test_id_collision(self, database: Database, author: User) -> None:
        create_post(database, author, post_id="42")
        result = PostService(database).create("Again", author_id=author.id, post_id=PostId("42"))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ID_COLLISION"

    def test_too_many_distinct_tags(self, database: Database, author: User) -> None:
        result = PostService(database).create(
            "Tagged", author_id=author.id, tags=["a", "b", "c", "d", "e"], post_id=PostId("42")
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "VALIDATION_FAILED"
        assert SqlPostRepository(database).find_all() == []

    def test_duplicate_tags_count_once(self, database: Database, author: User) -> None:
        result = PostService(database).create(
            "Tagged", author_id=author.id, tags=["a", "A", "a", "b", "c", "d"]
        )
        assert result.ok
        assert result.data["tags"] == ["a", "b", "c", "d"]


class TestListPosts:
    def test_all_and_by_author(self, database: Database, author: User, other_user: User) -> None:
        create_post(database, author, post_id="a")
        create_post(database, other_user, post_id="b")
        svc = PostService(database)

        assert svc.list_posts().data["count"] == 2
        mine = svc.list_posts(author_id=author.id).data
        assert mine["count"] == 1
        assert mine["items"][0]["id"] == "a"


class TestUpdate:
    def test_applies_command(self, database: Database, author: User) -> None:
        post = create_post(database, author, "Old", post_id="42", tags=["keep"])
        command = EditPostCommand(
            title="New Title",
            summary=post.summary,
            content="Replacement content",
            tags=["keep", "added"],
        )

        result = PostService(database).update(post, command)

        assert result.ok
        assert result.data["fields_changed"] == ["title", "slug", "content", "tags"]
        reloaded = SqlPostRepository(database).find(PostId("42"))
        assert reloaded.title == "New Title"
        assert reloaded.slug == "new-title"
        assert reloaded.content == "Replacement content"
        assert reloaded.tags == ["keep", "added"]
        assert reloaded.modified_at is not None

    def test_without_command_touches_modified_at(self, database: Database, author: User) -> None:
        post = create_post(database, author, post_id="42")
        result = PostService(database).update(post)
        assert result.ok
        assert result.data["fields_changed"] == []
        assert SqlPostRepository(database).find(PostId("42")).modified_at is not None

    def test_missing_row(self, database: Database, author: User) -> None:
        post = create_post(database, author, post_id="42")
        svc = PostService(database)
        assert svc.delete(post).ok

        result = svc.update(post)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestDelete:
    def test_delete(self, database: Database, author: User) -> None:
        post = create_post(database, author, post_id="42", tags=["x"])

        result = PostService(database).delete(post)

        assert result.ok
        assert result.data == {"id": "42"}
        assert SqlPostRepository(database).find_all() == []
        with database.connect() as conn:
            assert conn.execute(select(post_tags)).all() == []

    def test_delete_twice(self, database: Database, author: User) -> None:
        post = create_post(database, author, post_id="42")
        svc = PostService(database)
        svc.delete(post)
        result = svc.delete(post)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
