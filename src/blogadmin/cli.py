"""``blogadmin`` entry point: global flags, settings, and the command tree."""

from __future__ import annotations

from pathlib import Path

import click

from blogadmin import __version__
from blogadmin.commands import register_commands
from blogadmin.commands._base import BlogGroup
from blogadmin.commands._context import AppContext
from blogadmin.config.settings import BlogSettings

_CLI_EXAMPLES = """\
    blogadmin init /srv/blog --name "Engineering blog"
    blogadmin -r /srv/blog user add jane_admin --admin
    blogadmin -r /srv/blog --json post list
    BLOGADMIN_WEB__PORT=9000 blogadmin -r /srv/blog serve"""


@click.group(cls=BlogGroup, invoke_without_command=True, examples=_CLI_EXAMPLES)
@click.version_option(version=__version__, prog_name="blogadmin")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the operation line.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and telemetry spans.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option("-c", "--config", "config_path", default=None, help="Use this blogadmin.toml.")
@click.option(
    "-r",
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: where blogadmin.toml is found, else CWD).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    root: Path | None,
) -> None:
    """blogadmin: blog administration backend."""
    settings = BlogSettings.from_cli(
        config_path=config_path,
        root=root.resolve() if root is not None else None,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
