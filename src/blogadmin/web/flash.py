"""Session flash bag and the message catalog used to display it."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any

from blogadmin.web.context import current_session

SESSION_KEY = "_flashes"

MESSAGES: dict[str, str] = {
    "post.updated_successfully": "Post updated successfully!",
    "post.deleted_successfully": "Post deleted successfully!",
    "post.created_successfully": "Post created successfully!",
}


def translate(message_key: str) -> str:
    """Catalog lookup; unknown keys are shown as-is."""
    return MESSAGES.get(message_key, message_key)


class SessionFlashMessageService:
    """FlashMessageService storing ``[type, key]`` pairs in the session.

    Messages survive exactly one redirect: :meth:`consume` empties the bag.
    """

    def __init__(
        self,
        session_provider: Callable[[], MutableMapping[str, Any]] = current_session,
    ) -> None:
        self._session = session_provider

    def add(self, message_type: str, message_key: str) -> None:
        session = self._session()
        # Reassign so cookie-backed sessions see the change.
        session[SESSION_KEY] = [*session.get(SESSION_KEY, []), [message_type, message_key]]

    def success(self, message_key: str) -> None:
        self.add("success", message_key)

    def peek(self) -> list[tuple[str, str]]:
        return [(kind, key) for kind, key in self._session().get(SESSION_KEY, [])]

    def consume(self) -> list[tuple[str, str]]:
        messages = self.peek()
        self._session().pop(SESSION_KEY, None)
        return messages
