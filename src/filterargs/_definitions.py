"""Capture definitions: destinations and the decorators that wrap them.

A destination is a small mutable slot owned by the caller. capture() writes
converted values into it, and the caller reads ``.value`` (or ``.values`` for
sequences) afterwards::

    hits = IntArg()
    window = DurationArg()
    capture(hits, duration(window, timedelta(seconds=1)), [240, 6])

Decorators wrap a destination:

| builder                 | definition  | effect                              |
|-------------------------|-------------|-------------------------------------|
| enum(target, *options)  | EnumDef     | restrict strings to the options     |
| duration(target, unit)  | DurationDef | unit applied to numeric durations   |
| optional(target)        | OptionalDef | skipped when no argument remains    |

Builders never raise. enum() and duration() applied to a destination of the
wrong kind return a definition marked invalid, which capture() rejects when
it reaches it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta

DEFAULT_DURATION_UNIT = timedelta(milliseconds=1)

# ═══════════════════════════════════════════════════════════════════════════════
# Scalar destinations
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class IntArg:
    """Integer destination. Floats are truncated toward zero."""

    value: int = 0


@dataclass(slots=True)
class FloatArg:
    """Float destination. Integers are widened."""

    value: float = 0.0


@dataclass(slots=True)
class StringArg:
    value: str = ""


@dataclass(slots=True)
class DurationArg:
    """Duration destination.

    Accepts a duration string, or a number of milliseconds (see duration()
    for other units).
    """

    value: timedelta = field(default_factory=timedelta)


@dataclass(slots=True)
class TimeArg:
    """Timestamp destination.

    Accepts an RFC 3339 string, or a number of seconds since the Unix epoch.
    """

    value: datetime | None = None


@dataclass(slots=True)
class MixedArg:
    """Untyped destination: any int, float or string, kept as is."""

    value: int | float | str | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Sequence (variadic) destinations, only valid as the last definition
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(slots=True)
class IntList:
    values: list[int] = field(default_factory=list)


@dataclass(slots=True)
class FloatList:
    values: list[float] = field(default_factory=list)


@dataclass(slots=True)
class StringList:
    values: list[str] = field(default_factory=list)


@dataclass(slots=True)
class DurationList:
    values: list[timedelta] = field(default_factory=list)


@dataclass(slots=True)
class TimeList:
    values: list[datetime] = field(default_factory=list)


@dataclass(slots=True)
class MixedList:
    values: list[int | float | str] = field(default_factory=list)


type ScalarDestination = (
    IntArg | FloatArg | StringArg | DurationArg | TimeArg | MixedArg
)

type SequenceDestination = (
    IntList | FloatList | StringList | DurationList | TimeList | MixedList
)

type Destination = ScalarDestination | SequenceDestination

# ═══════════════════════════════════════════════════════════════════════════════
# Decorators (frozen; identity is the wrapped destination)
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class EnumDef:
    """String destination restricted to a fixed set of options.

    Options are compared case-sensitively.
    """

    target: StringArg | StringList | None
    options: tuple[str, ...] = ()
    invalid: bool = False


@dataclass(frozen=True, slots=True)
class DurationDef:
    """Duration destination with a custom unit for numeric arguments.

    The unit is ignored for duration strings.
    """

    target: DurationArg | DurationList | None
    unit: timedelta = DEFAULT_DURATION_UNIT
    invalid: bool = False


@dataclass(frozen=True, slots=True)
class OptionalDef:
    """Definition that keeps its destination's value when no argument remains."""

    target: Definition


type Definition = Destination | EnumDef | DurationDef | OptionalDef


def enum(target: object, *options: str) -> EnumDef | OptionalDef:
    """Limit a StringArg or StringList to the given options.

    enum(optional(x), ...) is normalized to optional(enum(x, ...)).
    """
    match target:
        case StringArg() | StringList():
            return EnumDef(target, tuple(options))
        case OptionalDef(target=inner):
            return optional(enum(inner, *options))
        case _:
            return EnumDef(None, invalid=True)


def duration(target: object, unit: timedelta) -> DurationDef | OptionalDef:
    """Use ``unit`` when a DurationArg or DurationList receives a number.

    The default unit is one millisecond, in which case the plain destination
    is enough. duration(optional(x), unit) is normalized to
    optional(duration(x, unit)).
    """
    match target:
        case DurationArg() | DurationList():
            return DurationDef(target, unit)
        case OptionalDef(target=inner):
            return optional(duration(inner, unit))
        case _:
            return DurationDef(None, invalid=True)


def optional(target: Definition) -> OptionalDef:
    """Make a definition optional.

    Only the trailing definitions of a capture() call can be optional, and
    a sequence destination cannot be wrapped.
    """
    return OptionalDef(target)
