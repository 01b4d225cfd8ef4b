"""Tests for destinations and the decorator builders."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from filterargs import (
    DurationArg,
    DurationDef,
    DurationList,
    EnumDef,
    FloatArg,
    IntArg,
    IntList,
    MixedArg,
    OptionalDef,
    StringArg,
    StringList,
    TimeArg,
    duration,
    enum,
    optional,
)


class TestDestinations:
    def test_zero_values(self) -> None:
        assert IntArg().value == 0
        assert FloatArg().value == 0.0
        assert StringArg().value == ""
        assert DurationArg().value == timedelta(0)
        assert TimeArg().value is None
        assert MixedArg().value is None

    def test_sequences_do_not_share_lists(self) -> None:
        a, b = IntList(), IntList()
        a.values.append(1)
        assert b.values == []

    def test_destinations_are_mutable(self) -> None:
        s = StringArg("default")
        s.value = "set"
        assert s.value == "set"


class TestEnum:
    def test_scalar(self) -> None:
        s = StringArg()
        assert enum(s, "a", "b") == EnumDef(s, ("a", "b"))

    def test_sequence(self) -> None:
        s = StringList()
        assert enum(s, "a") == EnumDef(s, ("a",))

    @pytest.mark.parametrize(
        "target", [IntArg(), DurationArg(), IntList(), None, "string"]
    )
    def test_wrong_kind_is_marked_invalid(self, target: object) -> None:
        got = enum(target, "a")
        assert isinstance(got, EnumDef)
        assert got.invalid
        assert got.target is None

    def test_nested_enum_is_invalid(self) -> None:
        assert enum(enum(StringArg(), "a"), "b").invalid

    def test_optional_is_lifted(self) -> None:
        s = StringArg()
        assert enum(optional(s), "a") == optional(enum(s, "a"))

    def test_invalid_under_optional(self) -> None:
        got = enum(optional(IntArg()), "a")
        assert isinstance(got, OptionalDef)
        assert got.target == EnumDef(None, invalid=True)

    def test_frozen(self) -> None:
        definition = enum(StringArg(), "a")
        with pytest.raises(FrozenInstanceError):
            definition.options = ("b",)  # type: ignore[misc]


class TestDuration:
    def test_scalar(self) -> None:
        d = DurationArg()
        unit = timedelta(seconds=1)
        assert duration(d, unit) == DurationDef(d, unit)

    def test_sequence(self) -> None:
        d = DurationList()
        assert duration(d, timedelta(minutes=1)).target is d

    @pytest.mark.parametrize("target", [IntArg(), StringArg(), StringList(), None])
    def test_wrong_kind_is_marked_invalid(self, target: object) -> None:
        got = duration(target, timedelta(seconds=1))
        assert isinstance(got, DurationDef)
        assert got.invalid

    def test_optional_is_lifted(self) -> None:
        d = DurationArg()
        unit = timedelta(seconds=1)
        assert duration(optional(d), unit) == optional(duration(d, unit))

    def test_doubly_optional_is_lifted(self) -> None:
        d = DurationArg()
        unit = timedelta(seconds=1)
        got = duration(optional(optional(d)), unit)
        assert got == optional(optional(duration(d, unit)))


class TestOptional:
    def test_wraps_anything(self) -> None:
        s = StringList()
        assert optional(s).target is s

    def test_builders_never_raise(self) -> None:
        for target in (IntArg(), StringList(), object(), None, optional(IntArg())):
            enum(target)
            duration(target, timedelta(seconds=1))
            optional(target)
