"""Subcommand modules for blogadmin.

Provides register_commands(), which uses deferred imports to keep
``blogadmin --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from blogadmin.commands.post import post
    from blogadmin.commands.user import user

    cli.add_command(user)
    cli.add_command(post)

    # --- Standalone commands ---
    from blogadmin.commands.init_cmd import init_cmd
    from blogadmin.commands.serve import serve

    cli.add_command(init_cmd)
    cli.add_command(serve)
