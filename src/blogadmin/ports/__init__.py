"""Ports: the interfaces controllers depend on.

Concrete adapters live in :mod:`blogadmin.infrastructure` (persistence,
templates) and :mod:`blogadmin.web` (routing, sessions, forms, security).
"""

from blogadmin.ports.auth import AuthenticationService, AuthorizationDecision, AuthorizationService
from blogadmin.ports.flash import FlashMessageService
from blogadmin.ports.form import EditPostCommand, EditPostForm, FormFactory, FormState
from blogadmin.ports.http import Request, Response, ResponseFactory, TemplateEngine, UrlGenerator
from blogadmin.ports.repository import (
    PostNotFoundError,
    PostRepository,
    UserNotFoundError,
    UserRepository,
)

__all__ = [
    "AuthenticationService",
    "AuthorizationDecision",
    "AuthorizationService",
    "EditPostCommand",
    "EditPostForm",
    "FlashMessageService",
    "FormFactory",
    "FormState",
    "PostNotFoundError",
    "PostRepository",
    "Request",
    "Response",
    "ResponseFactory",
    "TemplateEngine",
    "UrlGenerator",
    "UserNotFoundError",
    "UserRepository",
]
