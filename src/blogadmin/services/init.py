"""Project initialization: config file and database.

Pipeline: CHECK → WRITE CONFIG → CREATE DATABASE → RESPOND
"""

from __future__ import annotations

import secrets
from pathlib import Path

from blogadmin.config.discovery import CONFIG_FILENAME, load_config
from blogadmin.config.models import DatabaseConfig
from blogadmin.infrastructure.database.engine import init_database
from blogadmin.infrastructure.templates import build_template_environment
from blogadmin.services.result import ServiceResult


def init_project(root: Path, *, name: str, database_path: str | None = None) -> ServiceResult:
    """Create ``blogadmin.toml`` (with a fresh secret key) and the database under *root*.

    An existing config file is left untouched and reported as a warning;
    the database is created either way.
    """
    op = "init"
    warnings: list[str] = []
    root.mkdir(parents=True, exist_ok=True)
    config_file = root / CONFIG_FILENAME
    if config_file.exists():
        db_setting = database_path or load_config(config_file).database.path
        warnings.append(f"{CONFIG_FILENAME} already exists; not overwritten")
    else:
        db_setting = database_path or DatabaseConfig().path
        template = build_template_environment().get_template("config/blogadmin.toml.j2")
        config_file.write_text(
            template.render(
                name=name,
                database_path=db_setting,
                secret_key=secrets.token_hex(32),
            ),
            encoding="utf-8",
        )

    db_file = Path(db_setting)
    if not db_file.is_absolute():
        db_file = root / db_file
    engine = init_database(db_file)
    engine.dispose()

    return ServiceResult(
        ok=True,
        op=op,
        data={"root": str(root), "config": str(config_file), "database": str(db_file)},
        warnings=warnings,
    )
