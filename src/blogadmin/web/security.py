"""Session-stored CSRF tokens.

One token per intention (``"delete"``, ``"edit"``...) is generated on
first use and kept in the session under ``_csrf/<intention>``.
"""

from __future__ import annotations

import hmac
import logging
import secrets
from collections.abc import Callable, MutableMapping
from typing import Any

from blogadmin.web.context import current_session

logger = logging.getLogger(__name__)

SESSION_PREFIX = "_csrf/"

SessionProvider = Callable[[], MutableMapping[str, Any]]


class CsrfTokenManager:
    """AuthenticationService adapter validating anti-forgery tokens."""

    def __init__(
        self, session_provider: SessionProvider = current_session, *, nbytes: int = 32
    ) -> None:
        self._session = session_provider
        self._nbytes = nbytes

    def get_token(self, intention: str) -> str:
        """Return the session's token for *intention*, creating it if needed."""
        session = self._session()
        key = SESSION_PREFIX + intention
        token = session.get(key)
        if not token:
            token = secrets.token_urlsafe(self._nbytes)
            session[key] = token
        return str(token)

    def is_csrf_token_valid(self, intention: str, token: str) -> bool:
        expected = self._session().get(SESSION_PREFIX + intention)
        if not expected or not token:
            return False
        valid = hmac.compare_digest(str(expected).encode(), str(token).encode())
        if not valid:
            logger.info("Invalid CSRF token for intention %r", intention)
        return valid
