"""Post repository over SQLAlchemy Core.

Reads open their own connection. Writes take the caller's connection so
they join the service's transaction; commit or rollback is the
caller's responsibility.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, insert, select, update

from blogadmin.domain.post import Post
from blogadmin.infrastructure.database.schema import post_tags, posts
from blogadmin.ports.repository import PostNotFoundError

if TYPE_CHECKING:
    from sqlalchemy import Connection, Select

    from blogadmin.domain.ids import PostId, UserId
    from blogadmin.infrastructure.store import Database


def _to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _from_iso(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class SqlPostRepository:
    """Encapsulates SQL for loading and persisting posts."""

    def __init__(self, database: Database) -> None:
        self._db = database

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find(self, post_id: PostId) -> Post:
        """Load one post with its tags, or raise :class:`PostNotFoundError`."""
        with self._db.connect() as conn:
            row = conn.execute(select(posts).where(posts.c.id == post_id)).mappings().first()
            if row is None:
                raise PostNotFoundError(post_id)
            tags = self._load_tags(conn, [post_id])
        return self._hydrate(row, tags.get(post_id, []))

    def find_all(self) -> list[Post]:
        """All posts, newest first."""
        return self._find_many(select(posts))

    def find_by_author(self, author_id: UserId) -> list[Post]:
        """Posts written by *author_id*, newest first."""
        return self._find_many(select(posts).where(posts.c.author_id == author_id))

    def exists(self, post_id: PostId, *, conn: Connection) -> bool:
        row = conn.execute(select(posts.c.id).where(posts.c.id == post_id)).first()
        return row is not None

    # ------------------------------------------------------------------
    # Writes (caller owns the transaction)
    # ------------------------------------------------------------------

    def add(self, post: Post, *, conn: Connection) -> None:
        conn.execute(insert(posts).values(**self._row_values(post), id=post.id))
        self._write_tags(conn, post)

    def save(self, post: Post, *, conn: Connection) -> bool:
        """Persist changes to an existing post. Returns False if the row is gone."""
        result = conn.execute(
            update(posts).where(posts.c.id == post.id).values(**self._row_values(post))
        )
        if result.rowcount == 0:
            return False
        conn.execute(delete(post_tags).where(post_tags.c.post_id == post.id))
        self._write_tags(conn, post)
        return True

    def remove(self, post: Post, *, conn: Connection) -> bool:
        """Delete a post and its tag rows. Returns False if nothing was deleted."""
        conn.execute(delete(post_tags).where(post_tags.c.post_id == post.id))
        result = conn.execute(delete(posts).where(posts.c.id == post.id))
        return result.rowcount > 0

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find_many(self, stmt: Select[Any]) -> list[Post]:
        stmt = stmt.order_by(posts.c.published_at.desc(), posts.c.id)
        with self._db.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
            tags = self._load_tags(conn, [row["id"] for row in rows])
        return [self._hydrate(row, tags.get(row["id"], [])) for row in rows]

    @staticmethod
    def _load_tags(conn: Connection, post_ids: list[PostId]) -> dict[PostId, list[str]]:
        if not post_ids:
            return {}
        rows = conn.execute(
            select(post_tags.c.post_id, post_tags.c.tag)
            .where(post_tags.c.post_id.in_(post_ids))
            .order_by(post_tags.c.post_id, post_tags.c.position)
        ).all()
        grouped: dict[PostId, list[str]] = defaultdict(list)
        for row in rows:
            grouped[row.post_id].append(row.tag)
        return grouped

    @staticmethod
    def _write_tags(conn: Connection, post: Post) -> None:
        if not post.tags:
            return
        conn.execute(
            insert(post_tags),
            [
                {"post_id": post.id, "tag": tag, "position": position}
                for position, tag in enumerate(post.tags)
            ],
        )

    @staticmethod
    def _row_values(post: Post) -> dict[str, Any]:
        return {
            "title": post.title,
            "slug": post.slug,
            "summary": post.summary,
            "content": post.content,
            "author_id": post.author_id,
            "published_at": _to_iso(post.published_at),
            "modified_at": _to_iso(post.modified_at),
        }

    @staticmethod
    def _hydrate(row: Any, tags: list[str]) -> Post:
        return Post(
            id=row["id"],
            title=row["title"],
            slug=row["slug"],
            summary=row["summary"],
            content=row["content"],
            author_id=row["author_id"],
            tags=list(tags),
            published_at=_from_iso(row["published_at"]),
            modified_at=_from_iso(row["modified_at"]),
        )
