"""Command: project initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from blogadmin.commands._base import BlogCommand

if TYPE_CHECKING:
    from blogadmin.commands._context import AppContext

_INIT_EXAMPLES = """\
  blogadmin init
  blogadmin init /srv/blog --name "Engineering blog"
  blogadmin init . --database /var/lib/blogadmin/blog.db"""


@click.command("init", cls=BlogCommand, examples=_INIT_EXAMPLES)
@click.argument("path", required=False, default=".")
@click.option("--name", default=None, help="Blog name (defaults to the directory name).")
@click.option("--database", "database_path", default=None, help="Database file path.")
@click.pass_obj
def init_cmd(app: AppContext, path: str, name: str | None, database_path: str | None) -> None:
    """Create blogadmin.toml and the database."""
    from blogadmin.services.init import init_project

    root = Path(path).resolve()
    result = init_project(root, name=name or root.name, database_path=database_path)
    app.emit(result)
