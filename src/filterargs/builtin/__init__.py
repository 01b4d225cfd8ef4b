"""filterargs.builtin — filter and predicate specs built on capture().

Each spec turns a route invocation's raw arguments into an immutable
settings or predicate object. Nothing here performs I/O; the proxy runtime
that applies the settings lives elsewhere.
"""

from filterargs.builtin._circuit import (
    BreakerSettings,
    BreakerSpec,
    BreakerType,
    consecutive_breaker,
    disable_breaker,
    rate_breaker,
)
from filterargs.builtin._filters import (
    BasicAuthSettings,
    BasicAuthSpec,
    CopyHeaderSettings,
    CopyHeaderSpec,
    Direction,
    PreserveHostSettings,
    PreserveHostSpec,
    StaticSettings,
    StaticSpec,
    StatusSettings,
    StatusSpec,
    StripQuerySettings,
    StripQuerySpec,
)
from filterargs.builtin._interval import (
    IntervalPredicate,
    IntervalSpec,
    IntervalType,
    after,
    before,
    between,
)
from filterargs.builtin._params import (
    CookiePredicate,
    CookieSpec,
    QueryParamPredicate,
    QueryParamSpec,
)
from filterargs.builtin._ratelimit import (
    Lookup,
    RatelimitSettings,
    RatelimitSpec,
    RatelimitType,
    disable_ratelimit,
    local_ratelimit,
    service_ratelimit,
)
from filterargs.builtin._registry import register

__all__ = [
    # Rate limits
    "RatelimitSpec",
    "RatelimitSettings",
    "RatelimitType",
    "Lookup",
    "service_ratelimit",
    "local_ratelimit",
    "disable_ratelimit",
    # Circuit breakers
    "BreakerSpec",
    "BreakerSettings",
    "BreakerType",
    "consecutive_breaker",
    "rate_breaker",
    "disable_breaker",
    # Interval predicates
    "IntervalSpec",
    "IntervalPredicate",
    "IntervalType",
    "between",
    "before",
    "after",
    # Parameter predicates
    "QueryParamSpec",
    "QueryParamPredicate",
    "CookieSpec",
    "CookiePredicate",
    # Simple filters
    "StatusSpec",
    "StatusSettings",
    "CopyHeaderSpec",
    "CopyHeaderSettings",
    "Direction",
    "PreserveHostSpec",
    "PreserveHostSettings",
    "StripQuerySpec",
    "StripQuerySettings",
    "StaticSpec",
    "StaticSettings",
    "BasicAuthSpec",
    "BasicAuthSettings",
    # Registry
    "register",
]
