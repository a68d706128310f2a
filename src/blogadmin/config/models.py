"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, blogadmin.toml only contains
overrides. A fresh install needs only ``[web] secret_key``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BlogConfig(BaseModel):
    """[blog] section."""

    model_config = {"frozen": True}

    name: str = "Blog admin"


class DatabaseConfig(BaseModel):
    """[database] section.

    Relative paths resolve against the project root (the directory that
    holds ``blogadmin.toml``).
    """

    model_config = {"frozen": True}

    path: str = "var/blogadmin.db"


class WebConfig(BaseModel):
    """[web] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 8000
    secret_key: str = "change-me"
    session_cookie: str = "blogadmin_session"
    # Header set by the authenticating reverse proxy.
    remote_user_header: str = "X-Remote-User"


class BlogAdminConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    blog: BlogConfig = Field(default_factory=BlogConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
