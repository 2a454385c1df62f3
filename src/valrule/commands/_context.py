"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Centralizes result emission (stdout/stderr routing
and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valrule.output.formatters import format_result

if TYPE_CHECKING:
    from valrule.config.settings import ValruleSettings
    from valrule.rules.result import CheckResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ValruleSettings) -> None:
        self.settings = settings

        from valrule.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: CheckResult) -> None:
        """Format and output a CheckResult with correct exit semantics.

        * Pass: writes to stdout, returns normally.
        * Fail: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
