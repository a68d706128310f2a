"""Edit form bound to one post, validated through ``EditPostCommand``.

The form never touches the post: on a valid submission it exposes the
validated command as :attr:`BoundEditPostForm.data`, and the post service
applies it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from blogadmin.ports.form import EditPostCommand, FormState

if TYPE_CHECKING:
    from blogadmin.domain.post import Post
    from blogadmin.ports.http import Request

FIELDS = ("title", "summary", "content", "tags")


class BoundEditPostForm:
    """Form state for one request.

    Attributes:
        action: Submission target URL, if rendered.
        values: Current field values (initially from the post, then from
            the submitted body).
        errors: Field name to list of messages, populated on INVALID.
    """

    def __init__(self, post: Post, *, action: str | None = None) -> None:
        self.action = action
        self.values: dict[str, str] = {
            "title": post.title,
            "summary": post.summary,
            "content": post.content,
            "tags": ", ".join(post.tags),
        }
        self.errors: dict[str, list[str]] = {}
        self._state = FormState.NOT_SUBMITTED
        self._data: EditPostCommand | None = None

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def data(self) -> EditPostCommand | None:
        return self._data

    def handle_request(self, request: Request) -> None:
        """Bind and validate the request body if this is a submission."""
        if request.method.upper() != "POST":
            return
        self.submit(request.parsed_body)

    def submit(self, body: Mapping[str, Any]) -> None:
        submitted = {name: body[name] for name in FIELDS if name in body}
        self.values.update({name: str(value) for name, value in submitted.items()})
        self.errors = {}
        self._data = None
        try:
            self._data = EditPostCommand.model_validate(submitted)
        except ValidationError as exc:
            for error in exc.errors():
                field = str(error["loc"][0]) if error["loc"] else "__all__"
                self.errors.setdefault(field, []).append(error["msg"])
            self._state = FormState.INVALID
            return
        self._state = FormState.VALID

    def should_be_processed(self) -> bool:
        return self._state is FormState.VALID


class EditPostFormFactory:
    """FormFactory adapter."""

    def create_edit_post_form(self, post: Post, *, action: str | None = None) -> BoundEditPostForm:
        return BoundEditPostForm(post, action=action)
