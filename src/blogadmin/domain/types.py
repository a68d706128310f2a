"""Roles and post actions.

Role names keep the ``ROLE_`` prefix used by the security layer's
role hierarchy; actions are the attributes the post voter decides on.
"""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Security roles a user can hold."""

    USER = "ROLE_USER"
    ADMIN = "ROLE_ADMIN"


class PostAction(StrEnum):
    """Actions that can be authorized against a single post."""

    SHOW = "show"
    EDIT = "edit"
    DELETE = "delete"
