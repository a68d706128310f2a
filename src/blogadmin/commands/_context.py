"""AppContext: the object every command receives via ``@click.pass_obj``.

It holds the resolved settings, opens the database on first use and
closes it when the root context tears down, and turns ServiceResults
into output and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from blogadmin.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from blogadmin.config.settings import BlogSettings
    from blogadmin.infrastructure.store import Database
    from blogadmin.services.result import ServiceResult


class AppContext:
    def __init__(self, settings: BlogSettings) -> None:
        from blogadmin.config.logging import configure_logging
        from blogadmin.services.telemetry import disable_telemetry, enable_telemetry

        self.settings = settings
        self._database: Database | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    @property
    def database(self) -> Database:
        """Opened (and created if missing) on first access only.

        ``--help``, ``--version`` and ``--examples`` never get here.
        """
        if self._database is None:
            from blogadmin.infrastructure.store import Database

            self._database = Database.from_settings(self.settings)
        return self._database

    def close(self) -> None:
        if self._database is not None:
            self._database.close()
            self._database = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result also exits with status 1.

        Successful output goes to stdout. Failures go to stderr, as do
        warnings outside JSON mode (in JSON they are part of the payload).
        """
        settings = self.output_settings
        rendered = format_result(result, settings=settings)
        if not result.ok:
            click.echo(rendered, err=True)
            raise SystemExit(1)

        click.echo(rendered)
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
