"""Tests for the request scope."""

from __future__ import annotations

import pytest

from blogadmin.domain.ids import UserId
from blogadmin.domain.user import User
from blogadmin.ports.http import Request
from blogadmin.web.context import current_request, current_session, current_user, request_scope


class TestRequestScope:
    def test_outside_scope(self) -> None:
        assert current_user() is None
        with pytest.raises(RuntimeError, match="No request is active"):
            current_request()

    def test_binds_request(self) -> None:
        user = User(id=UserId.generate(), username="jane")
        request = Request(session={"k": "v"}, user=user)
        with request_scope(request):
            assert current_request() is request
            assert current_session() == {"k": "v"}
            assert current_user() == user
        assert current_user() is None

    def test_nested_scopes_restore(self) -> None:
        outer, inner = Request(), Request()
        with request_scope(outer):
            with request_scope(inner):
                assert current_request() is inner
            assert current_request() is outer

    def test_reset_after_exception(self) -> None:
        with pytest.raises(ValueError), request_scope(Request()):
            raise ValueError
        with pytest.raises(RuntimeError):
            current_request()
