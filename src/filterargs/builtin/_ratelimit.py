"""Rate limit filter specs.

    ratelimit(20, "1m")                  service wide: 20 hits per minute
    localRatelimit(240, 6, "auth")       per client: 240 hits per 6 seconds
    disableRatelimit()

Numeric time windows are seconds. The optional lookup of localRatelimit
selects how clients are told apart: ``"auth"`` by the Authorization header,
``"ip"`` (the default) by X-Forwarded-For. disableRatelimit ignores its
arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import StrEnum
from typing import TYPE_CHECKING

from filterargs._capture import capture
from filterargs._definitions import (
    DurationArg,
    IntArg,
    StringArg,
    duration,
    enum,
    optional,
)

if TYPE_CHECKING:
    from filterargs._types import Arguments

SERVICE_RATELIMIT_NAME = "ratelimit"
LOCAL_RATELIMIT_NAME = "localRatelimit"
DISABLE_RATELIMIT_NAME = "disableRatelimit"

# Local rate limit buckets are swept this many windows after last use.
CLEAN_INTERVAL_FACTOR = 10


class RatelimitType(StrEnum):
    SERVICE = "service"
    LOCAL = "local"
    DISABLED = "disabled"


class Lookup(StrEnum):
    """How requests are grouped into rate limit buckets."""

    SAME_BUCKET = "same-bucket"
    AUTH = "auth"
    X_FORWARDED_FOR = "x-forwarded-for"


@dataclass(frozen=True, slots=True)
class RatelimitSettings:
    type: RatelimitType
    max_hits: int = 0
    time_window: timedelta = timedelta(0)
    clean_interval: timedelta = timedelta(0)
    lookup: Lookup = Lookup.SAME_BUCKET


@dataclass(frozen=True, slots=True)
class RatelimitSpec:
    """Creates RatelimitSettings for one of the rate limit filter flavors."""

    type: RatelimitType
    name: str

    def create(self, args: Arguments, /) -> RatelimitSettings:
        match self.type:
            case RatelimitType.SERVICE:
                return _service(args)
            case RatelimitType.LOCAL:
                return _local(args)
            case _:
                return RatelimitSettings(type=RatelimitType.DISABLED)


def service_ratelimit() -> RatelimitSpec:
    return RatelimitSpec(RatelimitType.SERVICE, SERVICE_RATELIMIT_NAME)


def local_ratelimit() -> RatelimitSpec:
    return RatelimitSpec(RatelimitType.LOCAL, LOCAL_RATELIMIT_NAME)


def disable_ratelimit() -> RatelimitSpec:
    return RatelimitSpec(RatelimitType.DISABLED, DISABLE_RATELIMIT_NAME)


def _service(args: Arguments) -> RatelimitSettings:
    max_hits = IntArg()
    window = DurationArg()
    capture(max_hits, duration(window, timedelta(seconds=1)), args)
    return RatelimitSettings(
        type=RatelimitType.SERVICE,
        max_hits=max_hits.value,
        time_window=window.value,
    )


def _local(args: Arguments) -> RatelimitSettings:
    max_hits = IntArg()
    window = DurationArg()
    lookup_type = StringArg()
    capture(
        max_hits,
        duration(window, timedelta(seconds=1)),
        optional(enum(lookup_type, "auth", "ip")),
        args,
    )

    lookup = Lookup.AUTH if lookup_type.value == "auth" else Lookup.X_FORWARDED_FOR
    return RatelimitSettings(
        type=RatelimitType.LOCAL,
        max_hits=max_hits.value,
        time_window=window.value,
        clean_interval=CLEAN_INTERVAL_FACTOR * window.value,
        lookup=lookup,
    )
