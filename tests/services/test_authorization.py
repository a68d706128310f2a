"""Tests for PostVoter and AuthorizationService."""

from __future__ import annotations

import logging

import pytest

from blogadmin.domain.ids import PostId, UserId
from blogadmin.domain.post import Post
from blogadmin.domain.types import PostAction, Role
from blogadmin.domain.user import User
from blogadmin.services.authorization import AuthorizationService, PostVoter

AUTHOR = User(id=UserId.generate(), username="jane")
STRANGER = User(id=UserId.generate(), username="tom")
ADMIN = User(id=UserId.generate(), username="root", roles=frozenset({Role.ADMIN}))
POST = Post(id=PostId("42"), title="Hello", author_id=AUTHOR.id)


def _service(user: User | None) -> AuthorizationService:
    return AuthorizationService(lambda: user)


class TestPostVoter:
    def test_supports_post_actions_only(self) -> None:
        voter = PostVoter()
        assert voter.supports("edit", POST)
        assert not voter.supports("publish", POST)
        assert not voter.supports("edit", object())

    @pytest.mark.parametrize("action", list(PostAction))
    def test_author_granted_everything(self, action: PostAction) -> None:
        assert PostVoter().vote(action, POST, AUTHOR)

    @pytest.mark.parametrize("action", list(PostAction))
    def test_stranger_denied_everything(self, action: PostAction) -> None:
        assert not PostVoter().vote(action, POST, STRANGER)

    def test_admin_may_delete_any_post(self) -> None:
        voter = PostVoter()
        assert voter.vote(PostAction.DELETE, POST, ADMIN)
        assert not voter.vote(PostAction.EDIT, POST, ADMIN)


class TestAuthorizationService:
    def test_granted(self) -> None:
        decision = _service(AUTHOR).deny_access_unless_granted([], "edit", "nope", POST)
        assert decision.granted
        assert decision.action == "edit"
        assert decision.message == ""

    def test_denied_carries_message(self) -> None:
        decision = _service(STRANGER).deny_access_unless_granted([], "edit", "nope", POST)
        assert decision.denied
        assert decision.message == "nope"

    def test_anonymous_denied(self) -> None:
        assert _service(None).deny_access_unless_granted([], "show", "nope", POST).denied

    def test_missing_role_denied(self) -> None:
        decision = _service(AUTHOR).deny_access_unless_granted(
            [Role.ADMIN], "show", "admins only", POST
        )
        assert decision.denied

    def test_roles_only_check(self) -> None:
        svc = _service(ADMIN)
        assert svc.deny_access_unless_granted(["ROLE_ADMIN"], "manage", "no").granted

    def test_unsupported_action_denied(self) -> None:
        assert _service(AUTHOR).deny_access_unless_granted([], "publish", "no", POST).denied

    def test_denial_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="blogadmin.services.authorization")
        _service(STRANGER).deny_access_unless_granted([], "delete", "Only authors", POST)
        assert "Only authors" in caplog.text

    def test_actor_resolved_per_call(self) -> None:
        actors: list[User | None] = [None, AUTHOR]
        svc = AuthorizationService(lambda: actors.pop(0))
        assert svc.deny_access_unless_granted([], "show", "no", POST).denied
        assert svc.deny_access_unless_granted([], "show", "no", POST).granted
