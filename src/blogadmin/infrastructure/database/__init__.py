"""SQLite database engine, schema, and identifier column types via SQLAlchemy Core."""

from blogadmin.infrastructure.database.engine import create_db_engine, init_database
from blogadmin.infrastructure.database.schema import metadata, post_tags, posts, users
from blogadmin.infrastructure.database.types import (
    PostIdType,
    StringIdType,
    UserIdType,
    UuidIdType,
)

__all__ = [
    "PostIdType",
    "StringIdType",
    "UserIdType",
    "UuidIdType",
    "create_db_engine",
    "init_database",
    "metadata",
    "post_tags",
    "posts",
    "users",
]
