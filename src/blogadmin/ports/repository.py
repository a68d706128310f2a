"""Repository ports for posts and users."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from blogadmin.domain.ids import PostId, UserId
    from blogadmin.domain.post import Post
    from blogadmin.domain.user import User


class PostNotFoundError(LookupError):
    """No post exists with the requested identifier."""

    def __init__(self, post_id: PostId | str) -> None:
        super().__init__(f"No post found with ID: {post_id}")
        self.post_id = post_id


class UserNotFoundError(LookupError):
    """No user exists with the requested identifier or username."""

    def __init__(self, key: object) -> None:
        super().__init__(f"No user found: {key}")
        self.key = key


class PostRepository(Protocol):
    """Lookup of posts by identifier."""

    def find(self, post_id: PostId) -> Post:
        """Return the post, or raise :class:`PostNotFoundError`."""
        ...

    def find_all(self) -> list[Post]: ...

    def find_by_author(self, author_id: UserId) -> list[Post]: ...


class UserRepository(Protocol):
    """Lookup of users."""

    def find(self, user_id: UserId) -> User:
        """Return the user, or raise :class:`UserNotFoundError`."""
        ...

    def find_by_username(self, username: str) -> User | None: ...
