"""Authorization and authentication ports.

INVARIANT: Authorization never raises for a denial. A denied check
returns an :class:`AuthorizationDecision` with ``granted=False`` and the
caller short-circuits on it.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol

from pydantic import BaseModel


class AuthorizationDecision(BaseModel):
    """Outcome of one ``(action, actor, resource)`` check."""

    model_config = {"frozen": True}

    granted: bool
    action: str
    message: str = ""

    @property
    def denied(self) -> bool:
        return not self.granted

    @classmethod
    def allow(cls, action: str) -> AuthorizationDecision:
        return cls(granted=True, action=action)

    @classmethod
    def deny(cls, action: str, message: str) -> AuthorizationDecision:
        return cls(granted=False, action=action, message=message)


class AuthorizationService(Protocol):
    """Evaluates access policy for the acting user of the current request."""

    def deny_access_unless_granted(
        self,
        roles: Sequence[str],
        action: str,
        message: str,
        resource: Any = None,
    ) -> AuthorizationDecision:
        """Check *action* on *resource*; every role in *roles* must also be held."""
        ...


class AuthenticationService(Protocol):
    """Anti-forgery token validation for state-changing requests."""

    def is_csrf_token_valid(self, intention: str, token: str) -> bool: ...
