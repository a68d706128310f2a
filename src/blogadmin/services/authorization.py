"""Access decisions for posts.

:class:`PostVoter` holds the policy; :class:`AuthorizationService`
resolves the acting user and turns votes into
:class:`~blogadmin.ports.auth.AuthorizationDecision` values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from blogadmin.domain.post import Post
from blogadmin.domain.types import PostAction
from blogadmin.domain.user import User
from blogadmin.ports.auth import AuthorizationDecision

logger = logging.getLogger(__name__)

ActorProvider = Callable[[], User | None]


class PostVoter:
    """Authors may show and edit their posts; admins may also delete any post."""

    def supports(self, action: str, resource: Any) -> bool:
        return isinstance(resource, Post) and action in set(PostAction)

    def vote(self, action: str, post: Post, user: User) -> bool:
        if action == PostAction.DELETE and user.is_admin:
            return True
        return post.is_authored_by(user.id)


class AuthorizationService:
    """Decide ``(roles, action, resource)`` for the actor of the current request.

    Denied when there is no actor, when the actor lacks any of the
    required roles, when no voter supports the action, or when the
    supporting voter votes no.
    """

    def __init__(
        self,
        actor_provider: ActorProvider,
        voters: Sequence[PostVoter] | None = None,
    ) -> None:
        self._actor_provider = actor_provider
        self._voters = list(voters) if voters is not None else [PostVoter()]

    def deny_access_unless_granted(
        self,
        roles: Sequence[str],
        action: str,
        message: str,
        resource: Any = None,
    ) -> AuthorizationDecision:
        decision = self._decide(roles, action, message, resource)
        if decision.denied:
            logger.info("Access denied for %r: %s", action, message)
        return decision

    def _decide(
        self,
        roles: Sequence[str],
        action: str,
        message: str,
        resource: Any,
    ) -> AuthorizationDecision:
        user = self._actor_provider()
        if user is None:
            return AuthorizationDecision.deny(action, message)
        if not all(user.has_role(role) for role in roles):
            return AuthorizationDecision.deny(action, message)
        if resource is None:
            return AuthorizationDecision.allow(action)

        for voter in self._voters:
            if voter.supports(action, resource):
                if voter.vote(action, resource, user):
                    return AuthorizationDecision.allow(action)
                return AuthorizationDecision.deny(action, message)
        return AuthorizationDecision.deny(action, message)
