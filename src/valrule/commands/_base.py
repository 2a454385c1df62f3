"""Custom Click base class with --examples support.

When ``--examples`` is passed, the command prints usage examples and exits.
"""

from __future__ import annotations

import json
from typing import Any

import click


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class RuleCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def parse_value(raw: str) -> Any:
    """Parse a command-line VALUE as JSON, falling back to the raw string.

    Examples:
        >>> parse_value("5")
        5
        >>> parse_value("null") is None
        True
        >>> parse_value("hello")
        'hello'
    """
    try:
        return json.loads(raw)
    except ValueError:
        return raw
