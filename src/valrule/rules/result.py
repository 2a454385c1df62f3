"""RuleError hierarchy and CheckResult.

INVARIANT: Rules return a RuleError on failure and None on success.
Failures are data; ``validate`` never raises for a bad value.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class RuleError(BaseModel):
    """Structured failure returned by a rule."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class EmptyValueError(RuleError):
    """The value is absent or has no content."""

    code: Literal["empty"] = "empty"


class BelowMinimumError(RuleError):
    """The value is below the lower bound by more than the tolerance."""

    code: Literal["below_min"] = "below_min"


class AboveMaximumError(RuleError):
    """The value is above the upper bound by more than the tolerance."""

    code: Literal["above_max"] = "above_max"


class InvalidTypeError(RuleError):
    """The value is not of a type the rule can judge."""

    code: Literal["invalid_type"] = "invalid_type"


class CheckResult(BaseModel):
    """Outcome of applying one rule to one value.

    Attributes:
        ok: Whether the value passed.
        rule: Name of the rule (e.g. ``"range"``).
        value: The value as given to the rule.
        error: The failure if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    rule: str
    value: Any = None
    error: RuleError | None = None
