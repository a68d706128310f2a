"""Click classes whose commands can show usage examples on demand.

``--help`` stays short; ``--examples`` prints the command's example block
and exits before any argument validation or database access.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click

EXAMPLES_HINT = "Run with --examples to see usage examples."


def examples_option(examples: str) -> click.Option:
    """An eager, value-less ``--examples`` flag printing *examples*."""
    text = textwrap.indent(textwrap.dedent(examples).strip("\n"), "  ")

    def _print(ctx: click.Context, _param: click.Parameter, requested: bool) -> None:
        if not requested or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n\n{text}")
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        is_eager=True,
        expose_value=False,
        callback=_print,
        help="Show usage examples.",
    )


def _with_examples(cmd: click.Command, examples: str | None) -> None:
    if not examples:
        return
    cmd.params.append(examples_option(examples))
    cmd.epilog = cmd.epilog or EXAMPLES_HINT


class BlogCommand(click.Command):
    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _with_examples(self, examples)


class BlogGroup(click.Group):
    """Group whose subcommands are :class:`BlogCommand` by default."""

    command_class = BlogCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        _with_examples(self, examples)
