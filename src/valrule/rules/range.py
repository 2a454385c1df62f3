"""RangeRule — bounds a numeric value with floating-point tolerance.

Bounds are ``float | None``; ``None`` leaves that side open. A maximum
of exactly ``0`` is treated as open. A minimum of ``0`` is a real lower
bound, so negative values fail it; pass ``None`` for no lower bound.

Values within :data:`ACCURACY` of a bound count as equal to it.
Absent and empty values pass: presence is a separate rule's concern.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from pydantic import BaseModel

from valrule.domain.numbers import to_float
from valrule.domain.values import indirect, is_empty
from valrule.rules.result import (
    AboveMaximumError,
    BelowMinimumError,
    InvalidTypeError,
    RuleError,
)

logger = logging.getLogger(__name__)

ACCURACY = 1e-7


def format_number(number: float) -> str:
    """Render a number the shortest way: ``10``, ``2.5``, ``-3``.

    Examples:
        >>> format_number(10.0)
        '10'
        >>> format_number(2.5)
        '2.5'
    """
    number = float(number)
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def default_message(min: float | None, max: float | None) -> str:
    """Describe the bound combination for a user."""
    has_min = min is not None and min != 0
    has_max = max is not None and max != 0
    if has_min and has_max:
        return f"must be between {format_number(min)} and {format_number(max)}"
    if has_max:
        return f"must be no more than {format_number(max)}"
    if has_min:
        return f"must be no less than {format_number(min)}"
    return "must be empty"


class RangeRule(BaseModel):
    """Inclusive ``[min, max]`` check over numeric values.

    Build instances with :func:`range_rule`, which derives ``message``.
    Bound failures carry a diagnostic message (``"smaller than 1: 0.5"``)
    unless a custom message was set with :meth:`with_message`.
    """

    model_config = {"frozen": True}

    name: ClassVar[str] = "range"

    min: float | None = None
    max: float | None = None
    message: str = "must be empty"
    accuracy: float = ACCURACY
    custom_message: bool = False

    def validate(self, value: Any) -> RuleError | None:
        value, is_absent = indirect(value)
        if is_absent or is_empty(value):
            return None

        try:
            number = to_float(value)
        except TypeError:
            logger.debug("Non-numeric value rejected: %r", value)
            return InvalidTypeError(
                message=self._message(f"invalid value type: {value!r}"),
                detail={"value": value, "type": type(value).__name__},
            )

        if (
            self.min is not None
            and number <= self.min
            and abs(number - self.min) > self.accuracy
        ):
            diagnostic = f"smaller than {format_number(self.min)}: {format_number(number)}"
            logger.debug("Range check failed: %s", diagnostic)
            return BelowMinimumError(
                message=self._message(diagnostic),
                detail={"min": self.min, "value": value, "diagnostic": diagnostic},
            )
        if (
            self.max is not None
            and number >= self.max
            and abs(number - self.max) > self.accuracy
        ):
            diagnostic = f"bigger than {format_number(self.max)}: {format_number(number)}"
            logger.debug("Range check failed: %s", diagnostic)
            return AboveMaximumError(
                message=self._message(diagnostic),
                detail={"max": self.max, "value": value, "diagnostic": diagnostic},
            )
        return None

    def with_message(self, message: str) -> RangeRule:
        """Return a copy of this rule whose failures carry *message*."""
        return self.model_copy(update={"message": message, "custom_message": True})

    def _message(self, diagnostic: str) -> str:
        return self.message if self.custom_message else diagnostic


def range_rule(
    min: float | None = None,
    max: float | None = None,
    *,
    accuracy: float = ACCURACY,
) -> RangeRule:
    """Build a RangeRule with a message derived from its bounds.

    A *max* of ``0`` means no upper bound.

    Examples:
        >>> range_rule(0, 10).message
        'must be no more than 10'
        >>> range_rule(1, 10).message
        'must be between 1 and 10'
    """
    lower = None if min is None else float(min)
    upper = None if max is None or max == 0 else float(max)
    return RangeRule(
        min=lower,
        max=upper,
        message=default_message(min, max),
        accuracy=accuracy,
    )
