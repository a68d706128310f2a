"""Post aggregate and slug derivation."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field
from datetime import UTC, datetime

from blogadmin.domain.ids import PostId, UserId

MAX_TAGS = 4


def slugify(title: str) -> str:
    """Derive a URL slug from a title.

    Examples:
        >>> slugify("Hello, World!")
        'hello-world'
        >>> slugify("  Ünïcödé   tïtle ")
        'unicode-title'
    """
    text = unicodedata.normalize("NFKD", title)
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def normalize_tags(tags: list[str]) -> list[str]:
    """Trim, lowercase and de-duplicate tag names, preserving order."""
    seen: list[str] = []
    for tag in tags:
        name = tag.strip().lower()
        if name and name not in seen:
            seen.append(name)
    return seen


@dataclass
class Post:
    """A blog post.

    Mutable by design of the edit workflow: the post service applies an
    edit command to a loaded instance, then persists it.
    """

    id: PostId
    title: str
    author_id: UserId
    summary: str = ""
    content: str = ""
    slug: str = ""
    tags: list[str] = field(default_factory=list)
    published_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    modified_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.slug:
            self.slug = slugify(self.title)
        self.tags = normalize_tags(self.tags)

    def is_authored_by(self, user_id: UserId | None) -> bool:
        return user_id is not None and self.author_id == user_id

    def rename(self, title: str) -> None:
        """Change the title and re-derive the slug."""
        self.title = title
        self.slug = slugify(title)

    def retag(self, tags: list[str]) -> None:
        self.tags = normalize_tags(tags)
