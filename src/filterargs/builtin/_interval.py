"""Time interval predicate specs.

    Between("2016-01-01T12:00:00+02:00", "2016-02-01T12:00:00+02:00")
    Between(1451642400, 1454320800)
    Before("2016-01-01T12:00:00+02:00")
    After(1451642400)

Timestamps are RFC 3339 strings or Unix seconds. Between matches from the
first timestamp (inclusive) to the second (exclusive), and requires the
first to be earlier.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from filterargs._capture import capture
from filterargs._definitions import TimeArg
from filterargs._types import InvalidArgsError

if TYPE_CHECKING:
    from datetime import datetime

    from filterargs._types import Arguments


class IntervalType(StrEnum):
    BETWEEN = "Between"
    BEFORE = "Before"
    AFTER = "After"


@dataclass(frozen=True, slots=True)
class IntervalPredicate:
    """Matches a point in time against the configured interval."""

    type: IntervalType
    begin: datetime | None = None
    end: datetime | None = None

    def match(self, now: datetime) -> bool:
        after_begin = self.begin is None or self.begin <= now
        before_end = self.end is None or now < self.end
        return after_begin and before_end


@dataclass(frozen=True, slots=True)
class IntervalSpec:
    type: IntervalType

    @property
    def name(self) -> str:
        return str(self.type)

    def create(self, args: Arguments, /) -> IntervalPredicate:
        match self.type:
            case IntervalType.BEFORE:
                end = TimeArg()
                capture(end, args)
                return IntervalPredicate(IntervalType.BEFORE, end=end.value)
            case IntervalType.AFTER:
                begin = TimeArg()
                capture(begin, args)
                return IntervalPredicate(IntervalType.AFTER, begin=begin.value)
            case _:
                begin, end = TimeArg(), TimeArg()
                capture(begin, end, args)
                if begin.value is None or end.value is None or begin.value >= end.value:
                    msg = "Between requires the first time to be before the second"
                    raise InvalidArgsError(msg)
                return IntervalPredicate(IntervalType.BETWEEN, begin.value, end.value)


def between() -> IntervalSpec:
    return IntervalSpec(IntervalType.BETWEEN)


def before() -> IntervalSpec:
    return IntervalSpec(IntervalType.BEFORE)


def after() -> IntervalSpec:
    return IntervalSpec(IntervalType.AFTER)
