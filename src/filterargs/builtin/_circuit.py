"""Circuit breaker filter specs.

    consecutiveBreaker(15)
    consecutiveBreaker(15, "10s", 3, "1h")
    rateBreaker(30, 300)
    rateBreaker(30, 300, 60000, 3)
    disableBreaker()

The trailing arguments are all optional: timeout (milliseconds or duration
string), half-open requests (integer) and idle TTL (milliseconds or
duration string).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import StrEnum
from typing import TYPE_CHECKING

from filterargs._capture import capture
from filterargs._definitions import DurationArg, IntArg, optional

if TYPE_CHECKING:
    from filterargs._types import Arguments

CONSECUTIVE_BREAKER_NAME = "consecutiveBreaker"
RATE_BREAKER_NAME = "rateBreaker"
DISABLE_BREAKER_NAME = "disableBreaker"


class BreakerType(StrEnum):
    CONSECUTIVE = "consecutive"
    RATE = "rate"
    DISABLED = "disabled"


@dataclass(frozen=True, slots=True)
class BreakerSettings:
    type: BreakerType
    failures: int = 0
    window: int = 0
    timeout: timedelta = timedelta(0)
    half_open_requests: int = 0
    idle_ttl: timedelta = timedelta(0)


@dataclass(frozen=True, slots=True)
class BreakerSpec:
    type: BreakerType

    @property
    def name(self) -> str:
        match self.type:
            case BreakerType.CONSECUTIVE:
                return CONSECUTIVE_BREAKER_NAME
            case BreakerType.RATE:
                return RATE_BREAKER_NAME
            case _:
                return DISABLE_BREAKER_NAME

    def create(self, args: Arguments, /) -> BreakerSettings:
        if self.type == BreakerType.DISABLED:
            capture(args)
            return BreakerSettings(type=BreakerType.DISABLED)

        failures = IntArg()
        window = IntArg()
        timeout = DurationArg()
        half_open_requests = IntArg()
        idle_ttl = DurationArg()

        leading = (failures, window) if self.type == BreakerType.RATE else (failures,)
        capture(
            *leading,
            optional(timeout),
            optional(half_open_requests),
            optional(idle_ttl),
            args,
        )

        return BreakerSettings(
            type=self.type,
            failures=failures.value,
            window=window.value,
            timeout=timeout.value,
            half_open_requests=half_open_requests.value,
            idle_ttl=idle_ttl.value,
        )


def consecutive_breaker() -> BreakerSpec:
    return BreakerSpec(BreakerType.CONSECUTIVE)


def rate_breaker() -> BreakerSpec:
    return BreakerSpec(BreakerType.RATE)


def disable_breaker() -> BreakerSpec:
    return BreakerSpec(BreakerType.DISABLED)
