"""PostService: create, update, and delete blog posts.

Each public method is one transaction. The edit workflow loads a post,
authorizes it, and then hands the instance (plus the validated edit
command) to :meth:`PostService.update`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from blogadmin.domain.ids import PostId
from blogadmin.domain.post import MAX_TAGS, Post
from blogadmin.infrastructure.repositories.post import SqlPostRepository
from blogadmin.services._helpers import post_payload, utc_now
from blogadmin.services.base import BaseService
from blogadmin.services.result import ServiceResult
from blogadmin.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from blogadmin.domain.ids import UserId
    from blogadmin.infrastructure.store import Database
    from blogadmin.ports.form import EditPostCommand

logger = logging.getLogger(__name__)


class PostService(BaseService):
    """Business operations on posts."""

    def __init__(self, database: Database, posts: SqlPostRepository | None = None) -> None:
        super().__init__(database)
        self._posts = posts or SqlPostRepository(database)

    @traced
    def create(
        self,
        title: str,
        *,
        author_id: UserId,
        summary: str = "",
        content: str = "",
        tags: list[str] | None = None,
        post_id: PostId | None = None,
    ) -> ServiceResult:
        """Publish a new post authored by *author_id*."""
        op = "create_post"
        post = Post(
            id=post_id or PostId.generate(),
            title=title,
            author_id=author_id,
            summary=summary,
            content=content,
            tags=tags or [],
            published_at=utc_now(),
        )
        if len(post.tags) > MAX_TAGS:
            return ServiceResult.failure(
                op, "VALIDATION_FAILED", f"A post takes at most {MAX_TAGS} tags", tags=post.tags
            )
        with self._db.transaction() as conn:
            if self._posts.exists(post.id, conn=conn):
                return ServiceResult.failure(
                    op, "ID_COLLISION", f"A post already exists with ID: {post.id}"
                )
            self._posts.add(post, conn=conn)

        logger.info("Post %s created", post.id)
        return ServiceResult(ok=True, op=op, data=post_payload(post))

    @traced
    def list_posts(self, *, author_id: UserId | None = None) -> ServiceResult:
        """All posts (or one author's), newest first."""
        if author_id is None:
            items = self._posts.find_all()
        else:
            items = self._posts.find_by_author(author_id)
        return ServiceResult(
            ok=True,
            op="list_posts",
            data={"count": len(items), "items": [post_payload(post) for post in items]},
        )

    @traced
    def update(self, post: Post, command: EditPostCommand | None = None) -> ServiceResult:
        """Apply *command* (if given) to *post* and persist it."""
        op = "update_post"
        fields_changed: list[str] = []

        with trace_span("apply"):
            if command is not None:
                if command.title != post.title:
                    post.rename(command.title)
                    fields_changed.extend(["title", "slug"])
                if command.summary != post.summary:
                    post.summary = command.summary
                    fields_changed.append("summary")
                if command.content != post.content:
                    post.content = command.content
                    fields_changed.append("content")
                previous_tags = list(post.tags)
                post.retag(command.tags)
                if post.tags != previous_tags:
                    fields_changed.append("tags")
            post.modified_at = utc_now()

        with trace_span("persist"), self._db.transaction() as conn:
            if not self._posts.save(post, conn=conn):
                return ServiceResult.failure(op, "NOT_FOUND", f"No post found with ID: {post.id}")

        logger.info("Post %s updated (%s)", post.id, ", ".join(fields_changed) or "no changes")
        return ServiceResult(
            ok=True,
            op=op,
            data={**post_payload(post), "fields_changed": fields_changed},
        )

    @traced
    def delete(self, post: Post) -> ServiceResult:
        """Remove *post* and its tag assignments."""
        op = "delete_post"
        with self._db.transaction() as conn:
            if not self._posts.remove(post, conn=conn):
                return ServiceResult.failure(op, "NOT_FOUND", f"No post found with ID: {post.id}")

        logger.info("Post %s deleted", post.id)
        return ServiceResult(ok=True, op=op, data={"id": str(post.id)})
