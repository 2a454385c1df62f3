"""Command: check that a value is present and has content."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valrule.commands._base import RuleCommand, parse_value

if TYPE_CHECKING:
    from valrule.commands._context import AppContext


@click.command(
    "not-empty",
    cls=RuleCommand,
    examples="""\
  valrule not-empty '"hello"'
  valrule not-empty '[]'
  valrule not-empty null --message "name is required"
  valrule --json not-empty '{"a": 1}'""",
)
@click.argument("value")
@click.option("--message", default=None, help="Custom failure message.")
@click.pass_obj
def not_empty(app: AppContext, value: str, message: str | None) -> None:
    """Fail if VALUE is null or zero-length. VALUE is parsed as JSON."""
    from valrule.rules.base import check
    from valrule.rules.not_empty import NOT_EMPTY

    rule = NOT_EMPTY
    message = message or app.settings.messages.not_empty
    if message:
        rule = rule.with_message(message)
    app.emit(check(rule, parse_value(value)))
