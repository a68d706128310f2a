"""Immutable view models handed to templates."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blogadmin.domain.post import Post


@dataclass(frozen=True)
class PostSummary:
    id: str
    title: str
    slug: str
    summary: str
    published_at: datetime
    tags: tuple[str, ...]

    @classmethod
    def from_post(cls, post: Post) -> PostSummary:
        return cls(
            id=str(post.id),
            title=post.title,
            slug=post.slug,
            summary=post.summary,
            published_at=post.published_at,
            tags=tuple(post.tags),
        )


@dataclass(frozen=True)
class GetViewModel:
    """Read-only view of one post."""

    id: str
    title: str
    summary: str
    content: str
    author_id: str
    published_at: datetime
    modified_at: datetime | None
    tags: tuple[str, ...]

    @classmethod
    def from_post(cls, post: Post) -> GetViewModel:
        return cls(
            id=str(post.id),
            title=post.title,
            summary=post.summary,
            content=post.content,
            author_id=str(post.author_id),
            published_at=post.published_at,
            modified_at=post.modified_at,
            tags=tuple(post.tags),
        )


@dataclass(frozen=True)
class EditViewModel:
    """Edit page: the post being edited plus its bound form."""

    id: str
    title: str
    form: Any

    @classmethod
    def from_post_and_form(cls, post: Post, form: Any) -> EditViewModel:
        return cls(id=str(post.id), title=post.title, form=form)


@dataclass(frozen=True)
class ListViewModel:
    posts: tuple[PostSummary, ...]

    @classmethod
    def from_posts(cls, posts: list[Post]) -> ListViewModel:
        return cls(posts=tuple(PostSummary.from_post(post) for post in posts))
