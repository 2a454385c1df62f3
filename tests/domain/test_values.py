"""Tests for reference unwrapping and emptiness."""

from collections import OrderedDict, deque
from dataclasses import dataclass

import pytest

from valrule.domain.values import Ref, indirect, is_empty


@dataclass
class Point:
    x: int = 0
    y: int = 0


class TestIndirect:
    def test_plain_value_unchanged(self) -> None:
        assert indirect(42) == (42, False)

    def test_none_is_absent(self) -> None:
        assert indirect(None) == (None, True)

    def test_single_ref(self) -> None:
        assert indirect(Ref("abc")) == ("abc", False)

    def test_nested_refs(self) -> None:
        assert indirect(Ref(Ref(Ref([1, 2])))) == ([1, 2], False)

    @pytest.mark.parametrize("depth", [1, 2, 5])
    def test_nil_at_any_depth_is_absent(self, depth: int) -> None:
        value: object = None
        for _ in range(depth):
            value = Ref(value)
        assert indirect(value) == (None, True)

    def test_default_ref_is_nil(self) -> None:
        assert indirect(Ref()) == (None, True)

    def test_empty_container_is_not_absent(self) -> None:
        """Absence only comes from None; an empty list is still present."""
        assert indirect(Ref([])) == ([], False)


class TestIsEmpty:
    @pytest.mark.parametrize(
        "value",
        ["", b"", bytearray(), [], (), set(), frozenset(), {}, OrderedDict(), deque(), range(0)],
    )
    def test_zero_length_is_empty(self, value: object) -> None:
        assert is_empty(value) is True

    @pytest.mark.parametrize(
        "value",
        ["a", b"x", [None], (0,), {0}, {"k": None}, range(3)],
    )
    def test_non_zero_length_is_not_empty(self, value: object) -> None:
        assert is_empty(value) is False

    @pytest.mark.parametrize("value", [0, 0.0, False, True, -1, Point(), object()])
    def test_scalars_are_never_empty(self, value: object) -> None:
        assert is_empty(value) is False

    def test_none_is_empty(self) -> None:
        assert is_empty(None) is True

    def test_custom_sized(self) -> None:
        class Bag:
            def __init__(self, n: int) -> None:
                self.n = n

            def __len__(self) -> int:
                return self.n

        assert is_empty(Bag(0)) is True
        assert is_empty(Bag(2)) is False
