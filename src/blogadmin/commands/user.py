"""Command group: user accounts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from blogadmin.commands._base import BlogGroup

if TYPE_CHECKING:
    from blogadmin.commands._context import AppContext

_USER_EXAMPLES = """\
  blogadmin user add jane_admin --admin --full-name "Jane Doe"
  blogadmin --json user add tom --email tom@example.com"""


@click.group(cls=BlogGroup, examples=_USER_EXAMPLES)
def user() -> None:
    """Manage user accounts."""


@user.command("add")
@click.argument("username")
@click.option("--full-name", default="", help="Display name.")
@click.option("--email", default="", help="Contact address.")
@click.option("--admin", is_flag=True, help="Grant ROLE_ADMIN.")
@click.pass_obj
def add_user(app: AppContext, username: str, full_name: str, email: str, admin: bool) -> None:
    """Create a user account."""
    from blogadmin.services.user import UserService

    result = UserService(app.database).create(
        username, full_name=full_name, email=email, admin=admin
    )
    app.emit(result)
