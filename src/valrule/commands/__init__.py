"""Subcommand modules for valrule.

Provides register_commands() which uses deferred imports to keep
``valrule --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the rule commands on the root CLI group."""
    from valrule.commands.not_empty import not_empty
    from valrule.commands.range import range_cmd

    cli.add_command(not_empty)
    cli.add_command(range_cmd)
