"""Form port: binding a request body to a validated edit command."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from pydantic import BaseModel, Field, field_validator

from blogadmin.domain.post import MAX_TAGS, normalize_tags

if TYPE_CHECKING:
    from blogadmin.domain.post import Post
    from blogadmin.ports.http import Request


class FormState(StrEnum):
    """Lifecycle of a bound form within one request."""

    NOT_SUBMITTED = "not_submitted"
    INVALID = "invalid"
    VALID = "valid"


class EditPostCommand(BaseModel):
    """Validated field values for editing one post."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    title: str = Field(min_length=1, max_length=255)
    summary: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=10)
    tags: list[str] = Field(default_factory=list, max_length=MAX_TAGS)

    @field_validator("tags", mode="before")
    @classmethod
    def _normalize_tags(cls, value: object) -> object:
        """Split a comma list; the tag limit counts distinct names."""
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list) and all(isinstance(tag, str) for tag in value):
            return normalize_tags(value)
        return value


class EditPostForm(Protocol):
    """A form bound to one post."""

    @property
    def state(self) -> FormState: ...

    @property
    def data(self) -> EditPostCommand | None: ...

    def handle_request(self, request: Request) -> None: ...

    def should_be_processed(self) -> bool:
        """True only when the form was submitted and is valid."""
        ...


class FormFactory(Protocol):
    """Creates forms pre-populated from entities."""

    def create_edit_post_form(self, post: Post, *, action: str | None = None) -> EditPostForm: ...
