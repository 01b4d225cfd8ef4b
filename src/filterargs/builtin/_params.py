"""Query parameter and cookie predicate specs.

    QueryParam("page")                   the parameter exists
    QueryParam("page", "^[0-9]+$")       some value of it matches
    Cookie("tcial", "^enabled$")

Patterns are compiled with ``google-re2`` at creation time and matched with
search semantics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import re2

from filterargs._capture import capture
from filterargs._definitions import StringArg, optional
from filterargs._types import InvalidArgsError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from filterargs._types import Arguments

QUERY_PARAM_NAME = "QueryParam"
COOKIE_NAME = "Cookie"


def _compile(pattern: str) -> re2.Pattern[str]:
    try:
        return re2.compile(pattern)
    except re2.error as e:
        msg = f'invalid regex pattern "{pattern}": {e}'
        raise InvalidArgsError(msg) from e


@dataclass(frozen=True, slots=True)
class QueryParamPredicate:
    """Matches a parsed query: name → list of values.

    Without a pattern, the parameter only has to be present.
    """

    param_name: str
    pattern: str | None = None
    _compiled: re2.Pattern[str] | None = field(
        init=False, default=None, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.pattern is not None:
            object.__setattr__(self, "_compiled", _compile(self.pattern))

    def match(self, query: Mapping[str, Sequence[str]]) -> bool:
        values = query.get(self.param_name)
        if values is None:
            return False
        if self._compiled is None:
            return True
        return any(self._compiled.search(v) is not None for v in values)


@dataclass(frozen=True, slots=True)
class CookiePredicate:
    """Matches a parsed cookie jar: name → value."""

    cookie_name: str
    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", _compile(self.pattern))

    def match(self, cookies: Mapping[str, str]) -> bool:
        value = cookies.get(self.cookie_name)
        if value is None:
            return False
        return self._compiled.search(value) is not None


@dataclass(frozen=True, slots=True)
class QueryParamSpec:
    name: str = QUERY_PARAM_NAME

    def create(self, args: Arguments, /) -> QueryParamPredicate:
        param_name = StringArg()
        pattern = StringArg()
        capture(param_name, optional(pattern), args)

        if not pattern.value:
            return QueryParamPredicate(param_name.value)
        return QueryParamPredicate(param_name.value, pattern.value)


@dataclass(frozen=True, slots=True)
class CookieSpec:
    name: str = COOKIE_NAME

    def create(self, args: Arguments, /) -> CookiePredicate:
        cookie_name = StringArg()
        pattern = StringArg()
        capture(cookie_name, pattern, args)
        return CookiePredicate(cookie_name.value, pattern.value)
