"""Numeric kinds and float coercion.

The range rule compares every number as a 64-bit float. Native ``int``
and ``float`` convert directly; fixed-width values are tagged
explicitly with :class:`Number` so the set of accepted kinds stays
closed.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class NumericKind(StrEnum):
    """Fixed-width numeric representations."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"


INTEGER_BOUNDS: dict[NumericKind, tuple[int, int]] = {
    NumericKind.INT8: (-(2**7), 2**7 - 1),
    NumericKind.INT16: (-(2**15), 2**15 - 1),
    NumericKind.INT32: (-(2**31), 2**31 - 1),
    NumericKind.INT64: (-(2**63), 2**63 - 1),
    NumericKind.UINT8: (0, 2**8 - 1),
    NumericKind.UINT16: (0, 2**16 - 1),
    NumericKind.UINT32: (0, 2**32 - 1),
    NumericKind.UINT64: (0, 2**64 - 1),
}


def _round_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True, slots=True)
class Number:
    """A number tagged with its fixed-width kind.

    Raises:
        ValueError: If *value* does not fit *kind*.
        TypeError: If *value* is not an int or float.
    """

    value: int | float
    kind: NumericKind

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            msg = f"Number value must be int or float, got {type(self.value).__name__}"
            raise TypeError(msg)
        kind = NumericKind(self.kind)
        object.__setattr__(self, "kind", kind)
        bounds = INTEGER_BOUNDS.get(kind)
        if bounds is not None:
            if isinstance(self.value, float):
                if not self.value.is_integer():
                    msg = f"{kind} cannot hold non-integral value {self.value!r}"
                    raise ValueError(msg)
                object.__setattr__(self, "value", int(self.value))
            low, high = bounds
            if not low <= self.value <= high:
                msg = f"{self.value} out of range for {kind} [{low}, {high}]"
                raise ValueError(msg)
        else:
            object.__setattr__(self, "value", self._as_float(kind))

    def _as_float(self, kind: NumericKind) -> float:
        msg = f"{self.value} out of range for {kind}"
        try:
            converted = float(self.value)
            if kind is NumericKind.FLOAT32:
                converted = _round_float32(converted)
        except OverflowError as exc:
            raise ValueError(msg) from exc
        # struct.pack rounds to inf instead of raising on some interpreters.
        if math.isinf(converted) and not (
            isinstance(self.value, float) and math.isinf(self.value)
        ):
            raise ValueError(msg)
        return converted


def to_float(value: Any) -> float:
    """Coerce a numeric value to ``float``.

    Integers too large for a float become signed infinity.

    Raises:
        TypeError: For booleans and any non-numeric value.
    """
    match value:
        case bool():
            raise TypeError(f"not a number: {value!r}")
        case float():
            return value
        case int():
            try:
                return float(value)
            except OverflowError:
                return math.inf if value > 0 else -math.inf
        case Number(value=raw, kind=kind):
            return _kind_to_float(raw, kind)
        case _:
            raise TypeError(f"not a number: {value!r}")


def _kind_to_float(raw: int | float, kind: NumericKind) -> float:
    match kind:
        case (
            NumericKind.INT8
            | NumericKind.INT16
            | NumericKind.INT32
            | NumericKind.INT64
            | NumericKind.UINT8
            | NumericKind.UINT16
            | NumericKind.UINT32
            | NumericKind.UINT64
        ):
            return float(int(raw))
        case NumericKind.FLOAT32 | NumericKind.FLOAT64:
            return float(raw)
    raise TypeError(f"unknown numeric kind: {kind!r}")
