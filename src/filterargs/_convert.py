"""Scalar and collection converters.

Each scalar converter turns one raw argument into one typed value or raises
InvalidArgsError. Collection converters apply a scalar converter to every
remaining argument and fail on the first element that does not convert.

``bool`` is rejected everywhere even though Python treats it as an int:
route arguments are numbers and strings only.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from filterargs._definitions import DEFAULT_DURATION_UNIT
from filterargs._timeparse import parse_duration, parse_rfc3339
from filterargs._types import InvalidArgsError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _wrong_type(expected: str, arg: object) -> InvalidArgsError:
    return InvalidArgsError(f"expected {expected}, got {type(arg).__name__}")


def convert_int(arg: object) -> int:
    match arg:
        case bool():
            raise _wrong_type("number", arg)
        case int():
            return arg
        case float():
            try:
                return int(arg)
            except (OverflowError, ValueError) as e:
                msg = f"cannot convert {arg!r} to int"
                raise InvalidArgsError(msg) from e
        case _:
            raise _wrong_type("number", arg)


def convert_float(arg: object) -> float:
    match arg:
        case bool():
            raise _wrong_type("number", arg)
        case float():
            return arg
        case int():
            try:
                return float(arg)
            except OverflowError as e:
                msg = f"cannot convert {arg!r} to float"
                raise InvalidArgsError(msg) from e
        case _:
            raise _wrong_type("number", arg)


def convert_string(arg: object) -> str:
    if not isinstance(arg, str):
        raise _wrong_type("string", arg)
    return arg


def convert_duration(arg: object, unit: timedelta = DEFAULT_DURATION_UNIT) -> timedelta:
    """Numbers are multiplied by ``unit``, strings are parsed."""
    match arg:
        case bool():
            raise _wrong_type("duration", arg)
        case int() | float():
            try:
                return unit * arg
            except (OverflowError, ValueError) as e:
                msg = f"duration out of range: {arg!r}"
                raise InvalidArgsError(msg) from e
        case str():
            try:
                return parse_duration(arg)
            except (OverflowError, ValueError) as e:
                raise InvalidArgsError(str(e)) from e
        case _:
            raise _wrong_type("duration", arg)


def convert_time(arg: object) -> datetime:
    """Numbers are Unix timestamps in seconds, strings are RFC 3339.

    Numeric timestamps are returned in UTC.
    """
    match arg:
        case bool():
            raise _wrong_type("time", arg)
        case int():
            seconds, fraction = arg, 0.0
        case float():
            try:
                seconds = math.floor(arg)
            except (OverflowError, ValueError) as e:
                msg = f"invalid timestamp {arg!r}"
                raise InvalidArgsError(msg) from e
            fraction = arg - seconds
        case str():
            try:
                return parse_rfc3339(arg)
            except ValueError as e:
                raise InvalidArgsError(str(e)) from e
        case _:
            raise _wrong_type("time", arg)

    try:
        return _EPOCH + timedelta(seconds=seconds, microseconds=int(fraction * 1e6))
    except OverflowError as e:
        msg = f"timestamp out of range: {arg!r}"
        raise InvalidArgsError(msg) from e


def convert_enum(arg: object, options: Sequence[str]) -> str:
    if not isinstance(arg, str):
        raise _wrong_type("string", arg)
    if arg not in options:
        msg = f"{arg!r} is not one of {list(options)}"
        raise InvalidArgsError(msg)
    return arg


def convert_mixed(arg: object) -> int | float | str:
    match arg:
        case bool():
            raise _wrong_type("number or string", arg)
        case int() | float() | str():
            return arg
        case _:
            raise _wrong_type("number or string", arg)


def convert_all[T](convert: Callable[[object], T], args: Sequence[object]) -> list[T]:
    """Convert every argument in order. An empty input yields an empty list."""
    return [convert(arg) for arg in args]
