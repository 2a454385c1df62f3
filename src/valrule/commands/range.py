"""Command: check that a number lies within bounds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valrule.commands._base import RuleCommand, parse_value

if TYPE_CHECKING:
    from valrule.commands._context import AppContext


@click.command(
    "range",
    cls=RuleCommand,
    examples="""\
  valrule range 5 --min 1 --max 10
  valrule range 11 --max 10
  valrule range 0.9999999 --min 1
  valrule range --min 0 -- -1""",
)
@click.argument("value")
@click.option("--min", "min_", type=float, default=None, help="Inclusive lower bound.")
@click.option("--max", "max_", type=float, default=None, help="Inclusive upper bound (0 = none).")
@click.option("--message", default=None, help="Custom failure message.")
@click.pass_obj
def range_cmd(
    app: AppContext,
    value: str,
    min_: float | None,
    max_: float | None,
    message: str | None,
) -> None:
    """Fail if numeric VALUE is outside [--min, --max]. VALUE is parsed as JSON."""
    from valrule.rules.base import check
    from valrule.rules.range import range_rule

    rule = range_rule(min_, max_, accuracy=app.settings.range.accuracy)
    message = message or app.settings.messages.range
    if message:
        rule = rule.with_message(message)
    app.emit(check(rule, parse_value(value)))
