"""Human/JSON output helpers.

The CLI renders CheckResult for humans or for machines (--json).
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from valrule.rules.result import CheckResult


def _format_value(value: Any) -> str:
    """Render the checked value compactly."""
    try:
        return _json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError):
        return repr(value)


def format_result(result: CheckResult, *, json_output: bool = False, quiet: bool = False) -> str:
    """Format a CheckResult for display.

    Args:
        result: The check result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
        quiet: If True, return only ``OK`` or the error message.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if quiet:
        return "OK" if result.ok else (result.error.message if result.error else "ERROR")
    value = _format_value(result.value)
    if result.ok:
        return f"OK: {result.rule} {value}"
    if result.error is None:
        return f"ERROR: {result.rule} {value}"
    return f"ERROR: {result.rule} {value} - {result.error.message} [{result.error.code}]"
