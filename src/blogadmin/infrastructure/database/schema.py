"""SQLAlchemy Core table definitions for the blogadmin database.

Identifier columns use the value-object column types from
:mod:`blogadmin.infrastructure.database.types`, so rows come back
carrying ``PostId`` / ``UserId`` instances rather than raw strings.
"""

from __future__ import annotations

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Table,
    Text,
    UniqueConstraint,
)

from blogadmin.infrastructure.database.types import PostIdType, UserIdType

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", UserIdType, primary_key=True),
    Column("username", Text, nullable=False, unique=True),
    Column("full_name", Text, nullable=False, default="", server_default=""),
    Column("email", Text, nullable=False, default="", server_default=""),
    Column("roles", Text, nullable=False, default="[]", server_default="[]"),  # JSON array
)

posts = Table(
    "posts",
    metadata,
    Column("id", PostIdType, primary_key=True),
    Column("title", Text, nullable=False),
    Column("slug", Text, nullable=False),
    Column("summary", Text, nullable=False, default="", server_default=""),
    Column("content", Text, nullable=False, default="", server_default=""),
    Column("author_id", UserIdType, ForeignKey("users.id"), nullable=False),
    Column("published_at", Text, nullable=False),  # ISO 8601, UTC
    Column("modified_at", Text),
)

post_tags = Table(
    "post_tags",
    metadata,
    Column("post_id", PostIdType, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column("tag", Text, nullable=False),
    Column("position", Integer, nullable=False, default=0, server_default="0"),
    UniqueConstraint("post_id", "tag"),
)

# ---------------------------------------------------------------------------
# Indexes for frequently filtered columns
# ---------------------------------------------------------------------------

Index("ix_posts_author", posts.c.author_id)
Index("ix_posts_slug", posts.c.slug)
Index("ix_post_tags_tag", post_tags.c.tag)
