"""Builtin spec registration for the filterargs registry.

Registers every builtin filter and predicate spec under its route name so
invocations can be created from config.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from filterargs.builtin._circuit import (
    consecutive_breaker,
    disable_breaker,
    rate_breaker,
)
from filterargs.builtin._filters import (
    BasicAuthSpec,
    CopyHeaderSpec,
    Direction,
    PreserveHostSpec,
    StaticSpec,
    StatusSpec,
    StripQuerySpec,
)
from filterargs.builtin._interval import after, before, between
from filterargs.builtin._params import CookieSpec, QueryParamSpec
from filterargs.builtin._ratelimit import (
    disable_ratelimit,
    local_ratelimit,
    service_ratelimit,
)

if TYPE_CHECKING:
    from filterargs._registry import RegistryBuilder


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register all builtin filter and predicate specs.

    Filters: ratelimit, localRatelimit, disableRatelimit, consecutiveBreaker,
    rateBreaker, disableBreaker, status, requestCopyHeader,
    responseCopyHeader, preserveHost, stripQuery, static, basicAuth.

    Predicates: Between, Before, After, QueryParam, Cookie.
    """
    return (
        builder.register(service_ratelimit())
        .register(local_ratelimit())
        .register(disable_ratelimit())
        .register(consecutive_breaker())
        .register(rate_breaker())
        .register(disable_breaker())
        .register(StatusSpec())
        .register(CopyHeaderSpec(Direction.REQUEST))
        .register(CopyHeaderSpec(Direction.RESPONSE))
        .register(PreserveHostSpec())
        .register(StripQuerySpec())
        .register(StaticSpec())
        .register(BasicAuthSpec())
        .register(between())
        .register(before())
        .register(after())
        .register(QueryParamSpec())
        .register(CookieSpec())
    )
