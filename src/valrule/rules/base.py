"""Rule — the contract every validation rule implements.

A rule inspects one value and returns ``None`` when the value is valid
or a :class:`~valrule.rules.result.RuleError` describing the failure.
Rules are immutable; ``with_message`` returns a reconfigured copy.
"""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, Self, runtime_checkable

from valrule.rules.result import CheckResult, RuleError


@runtime_checkable
class Rule(Protocol):
    """Structural type for validation rules."""

    name: ClassVar[str]
    message: str

    def validate(self, value: Any) -> RuleError | None: ...

    def with_message(self, message: str) -> Self: ...


def check(rule: Rule, value: Any) -> CheckResult:
    """Apply *rule* to *value* and wrap the outcome in a CheckResult."""
    error = rule.validate(value)
    return CheckResult(ok=error is None, rule=rule.name, value=value, error=error)
