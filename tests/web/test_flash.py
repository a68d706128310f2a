"""Tests for the session flash bag and message catalog."""

from __future__ import annotations

from typing import Any

from blogadmin.web.flash import SessionFlashMessageService, translate


def _service() -> tuple[SessionFlashMessageService, dict[str, Any]]:
    session: dict[str, Any] = {}
    return SessionFlashMessageService(lambda: session), session


class TestSessionFlashMessageService:
    def test_success_appends_to_session(self) -> None:
        flashes, session = _service()
        flashes.success("post.updated_successfully")
        assert session["_flashes"] == [
            ["success", "post.updated_successfully"],
        ]

    def test_peek_keeps_messages(self) -> None:
        flashes, _ = _service()
        flashes.success("a")
        assert flashes.peek() == [("success", "a")]
        assert flashes.peek() == [("success", "a")]

    def test_consume_empties(self) -> None:
        flashes, session = _service()
        flashes.success("a")
        assert flashes.consume() == [("success", "a")]
        assert flashes.consume() == []
        assert "_flashes" not in session


class TestTranslate:
    def test_known_keys(self) -> None:
        assert translate("post.updated_successfully") == "Post updated successfully!"
        assert translate("post.deleted_successfully") == "Post deleted successfully!"

    def test_unknown_key_passes_through(self) -> None:
        assert translate("some.other.key") == "some.other.key"
