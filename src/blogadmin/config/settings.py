"""Runtime settings for the CLI and the web server.

Sources, highest priority first:

1. keyword arguments (the CLI's global flags),
2. ``BLOGADMIN_*`` environment variables (``__`` separates sections, as in
   ``BLOGADMIN_WEB__PORT=9000``),
3. the ``blogadmin.toml`` found by :func:`~blogadmin.config.discovery.find_config`,
4. the defaults in :mod:`blogadmin.config.models`.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from blogadmin.config.discovery import find_config, read_toml
from blogadmin.config.models import BlogConfig, DatabaseConfig, WebConfig

# The TOML file for the settings object currently being built.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class BlogSettings(BaseSettings):
    """Resolved settings.

    Attributes:
        root: Project directory. Relative paths in the config resolve
            against it; defaults to the config file's directory, else CWD.
        config_path: The ``blogadmin.toml`` in effect, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="BLOGADMIN_",
        env_nested_delimiter="__",
    )

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    blog: BlogConfig = Field(default_factory=BlogConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_file = _toml_file.get()
        if toml_file is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_file))
        return tuple(sources)

    @property
    def database_path(self) -> Path:
        return self._under_root(self.database.path)

    @property
    def templates_dir(self) -> Path:
        """Project-level template overrides (``<root>/templates``)."""
        return self.root / "templates"

    def _under_root(self, value: str) -> Path:
        path = Path(value)
        return path if path.is_absolute() else self.root / path

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> BlogSettings:
        """Build settings for one CLI invocation or app start.

        An explicit *config_path* that does not exist is ignored rather
        than falling back to discovery.

        Raises:
            click.ClickException: The config file is not valid TOML.
        """
        if config_path:
            explicit = Path(config_path)
            toml_file = explicit if explicit.is_file() else None
        else:
            toml_file = find_config(root)

        if toml_file is not None:
            # Fail with a CLI error before pydantic-settings reads the file.
            read_toml(toml_file)

        if root is None:
            root = toml_file.parent if toml_file is not None else Path.cwd()

        token = _toml_file.set(toml_file)
        try:
            return cls(root=root, config_path=toml_file, **cli_flags)
        finally:
            _toml_file.reset(token)
