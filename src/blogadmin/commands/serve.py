"""serve: run the admin web application under uvicorn."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from blogadmin.commands._base import BlogCommand

if TYPE_CHECKING:
    from blogadmin.commands._context import AppContext


@click.command(
    cls=BlogCommand,
    examples="""\
  # Bind to the configured [web] host/port
  blogadmin serve

  # Override the bind address
  blogadmin serve --host 0.0.0.0 --port 9000""",
)
@click.option("--host", default=None, help="Bind address (default: [web] host).")
@click.option("--port", default=None, type=int, help="Listen port (default: [web] port).")
@click.pass_obj
def serve(app: AppContext, host: str | None, port: int | None) -> None:
    """Start the admin web server."""
    import uvicorn

    from blogadmin.web.app import create_app

    web_app = create_app(app.settings, database=app.database)
    uvicorn.run(
        web_app,
        host=host or app.settings.web.host,
        port=port or app.settings.web.port,
        log_config=None,
    )
