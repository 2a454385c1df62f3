"""valrule — composable single-value validation rules."""

from __future__ import annotations

from valrule.domain.numbers import Number, NumericKind, to_float
from valrule.domain.values import Ref, indirect, is_empty
from valrule.rules.base import Rule
from valrule.rules.not_empty import NOT_EMPTY, NotEmptyRule, not_empty
from valrule.rules.range import ACCURACY, RangeRule, range_rule
from valrule.rules.result import (
    AboveMaximumError,
    BelowMinimumError,
    CheckResult,
    EmptyValueError,
    InvalidTypeError,
    RuleError,
)

__version__ = "0.1.0"

__all__ = [
    "ACCURACY",
    "NOT_EMPTY",
    "AboveMaximumError",
    "BelowMinimumError",
    "CheckResult",
    "EmptyValueError",
    "InvalidTypeError",
    "NotEmptyRule",
    "Number",
    "NumericKind",
    "RangeRule",
    "Ref",
    "Rule",
    "RuleError",
    "__version__",
    "indirect",
    "is_empty",
    "not_empty",
    "range_rule",
    "to_float",
]
