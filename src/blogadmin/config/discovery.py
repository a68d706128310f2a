"""Locating and reading ``blogadmin.toml``.

Lookup order: an explicit ``--config`` path, then ``$BLOGADMIN_CONFIG``,
then the nearest ``blogadmin.toml`` in the start directory or any parent.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from blogadmin.config.models import BlogAdminConfig

CONFIG_FILENAME = "blogadmin.toml"
CONFIG_ENV_VAR = "BLOGADMIN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: CWD), if any.

    A set but dangling ``$BLOGADMIN_CONFIG`` means "no config", not
    "keep searching".
    """
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        env_path = Path(from_env)
        return env_path if env_path.is_file() else None

    start_dir = (start or Path.cwd()).resolve()
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; syntax errors surface as CLI usage errors."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> BlogAdminConfig:
    """Validated file contents, or all defaults when no file applies."""
    path = path or find_config(cwd)
    if path is None:
        return BlogAdminConfig()
    return BlogAdminConfig.model_validate(read_toml(path))
