"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blogadmin.domain.post import Post


def utc_now() -> datetime:
    """Current time, timezone-aware UTC, truncated to whole seconds."""
    return datetime.now(UTC).replace(microsecond=0)


def post_payload(post: Post) -> dict[str, Any]:
    """Summarize a post for ``ServiceResult.data``."""
    return {
        "id": str(post.id),
        "title": post.title,
        "slug": post.slug,
        "author_id": str(post.author_id),
        "tags": list(post.tags),
    }
