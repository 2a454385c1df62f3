"""Value normalization shared by every rule.

Rules accept raw values, explicit references, or chains of references
uniformly. ``indirect`` unwraps the chain; ``is_empty`` judges the
concrete value left at the end of it.
"""

from __future__ import annotations

from collections.abc import Sized
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Ref:
    """Explicit reference to a value.

    ``target`` may be ``None`` (a nil reference) or another ``Ref``.
    """

    target: Any = None


def indirect(value: Any) -> tuple[Any, bool]:
    """Follow references down to a concrete value.

    Returns ``(value, is_absent)``. ``is_absent`` is True as soon as a
    ``None`` is reached anywhere in the chain.

    Examples:
        >>> indirect(Ref(Ref(3)))
        (3, False)
        >>> indirect(Ref(Ref(None)))
        (None, True)
        >>> indirect("abc")
        ('abc', False)
    """
    while True:
        match value:
            case None:
                return None, True
            case Ref(target=target):
                value = target
            case _:
                return value, False


def is_empty(value: Any) -> bool:
    """Return True if an already-normalized value has no content.

    Strings, bytes, and sized containers are empty at length zero.
    Numbers, booleans, and other scalars are never empty.
    """
    match value:
        case None:
            return True
        case Sized():
            return len(value) == 0
        case _:
            return False
