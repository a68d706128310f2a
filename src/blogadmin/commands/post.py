"""Command group: posts (creation and listing; editing happens in the web admin)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from blogadmin.commands._base import BlogGroup
from blogadmin.services.result import ServiceResult

if TYPE_CHECKING:
    from blogadmin.commands._context import AppContext
    from blogadmin.domain.user import User

_POST_EXAMPLES = """\
  blogadmin post add --author jane_admin --title "Hello world" --summary "First post"
  blogadmin post add --author tom --title "Tips" --tag python --tag tooling --id 42
  blogadmin --json post list --author tom"""


def _resolve_author(app: AppContext, op: str, username: str) -> User | None:
    from blogadmin.infrastructure.repositories.user import SqlUserRepository

    author = SqlUserRepository(app.database).find_by_username(username)
    if author is None:
        app.emit(ServiceResult.failure(op, "UNKNOWN_AUTHOR", f"No user named {username!r}"))
    return author


@click.group(cls=BlogGroup, examples=_POST_EXAMPLES)
def post() -> None:
    """Create and list posts."""


@post.command("add")
@click.option("--author", required=True, help="Username of the author.")
@click.option("--title", required=True, help="Post title.")
@click.option("--summary", default="", help="One-line summary.")
@click.option("--content", default="", help="Post body.")
@click.option("--tag", "tags", multiple=True, help="Tag (repeatable).")
@click.option("--id", "post_id", default=None, help="Explicit post ID.")
@click.pass_obj
def add_post(
    app: AppContext,
    author: str,
    title: str,
    summary: str,
    content: str,
    tags: tuple[str, ...],
    post_id: str | None,
) -> None:
    """Publish a new post."""
    from blogadmin.domain.ids import PostId
    from blogadmin.services.post import PostService

    user = _resolve_author(app, "create_post", author)
    if user is None:
        return
    result = PostService(app.database).create(
        title,
        author_id=user.id,
        summary=summary,
        content=content,
        tags=list(tags),
        post_id=PostId(post_id) if post_id else None,
    )
    app.emit(result)


@post.command("list")
@click.option("--author", default=None, help="Only posts by this username.")
@click.pass_obj
def list_posts(app: AppContext, author: str | None) -> None:
    """List posts, newest first."""
    from blogadmin.services.post import PostService

    author_id = None
    if author is not None:
        user = _resolve_author(app, "list_posts", author)
        if user is None:
            return
        author_id = user.id
    app.emit(PostService(app.database).list_posts(author_id=author_id))
