"""Request scope for request-bound collaborators.

Controllers and their collaborators are built once per application.
Collaborators that need per-request state (the session for flashes and
CSRF tokens, the acting user for authorization) read it from the
request bound here for the duration of one dispatch.
"""

from __future__ import annotations

from collections.abc import Generator, MutableMapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from blogadmin.domain.user import User
    from blogadmin.ports.http import Request

_current_request: ContextVar[Request | None] = ContextVar("_current_request", default=None)


@contextmanager
def request_scope(request: Request) -> Generator[Request]:
    """Bind *request* as the current request until the block exits."""
    token = _current_request.set(request)
    try:
        yield request
    finally:
        _current_request.reset(token)


def current_request() -> Request:
    request = _current_request.get()
    if request is None:
        msg = "No request is active; dispatch through request_scope()"
        raise RuntimeError(msg)
    return request


def current_session() -> MutableMapping[str, Any]:
    return current_request().session


def current_user() -> User | None:
    """The acting user, or None when anonymous or outside a request."""
    request = _current_request.get()
    return request.user if request is not None else None
