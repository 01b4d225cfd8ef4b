"""Simple filter specs with fixed argument lists.

    status(404)
    requestCopyHeader("X-Foo", "X-Bar")
    responseCopyHeader("X-Foo", "X-Bar")
    preserveHost("true")
    stripQuery()
    stripQuery("true")
    static("/images", "/var/www/images")
    basicAuth("/path/to/htpasswd")
    basicAuth("/path/to/htpasswd", "My Website")
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from filterargs._capture import capture
from filterargs._definitions import IntArg, StringArg, enum, optional
from filterargs._types import InvalidArgsError

if TYPE_CHECKING:
    from filterargs._types import Arguments

STATUS_NAME = "status"
REQUEST_COPY_HEADER_NAME = "requestCopyHeader"
RESPONSE_COPY_HEADER_NAME = "responseCopyHeader"
PRESERVE_HOST_NAME = "preserveHost"
STRIP_QUERY_NAME = "stripQuery"
STATIC_NAME = "static"
BASIC_AUTH_NAME = "basicAuth"

DEFAULT_REALM_NAME = "Basic Realm"

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599


# ── status ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class StatusSettings:
    code: int


@dataclass(frozen=True, slots=True)
class StatusSpec:
    """Sets the response status to a fixed value."""

    name: str = STATUS_NAME

    def create(self, args: Arguments, /) -> StatusSettings:
        code = IntArg()
        capture(code, args)
        if not MIN_STATUS_CODE <= code.value <= MAX_STATUS_CODE:
            msg = f"status code {code.value} out of range"
            raise InvalidArgsError(msg)
        return StatusSettings(code.value)


# ── copy header ─────────────────────────────────────────────────────────────


class Direction(StrEnum):
    REQUEST = "request"
    RESPONSE = "response"


@dataclass(frozen=True, slots=True)
class CopyHeaderSettings:
    direction: Direction
    source: str
    target: str


@dataclass(frozen=True, slots=True)
class CopyHeaderSpec:
    """Copies one header into another, on the request or on the response."""

    direction: Direction

    @property
    def name(self) -> str:
        if self.direction == Direction.REQUEST:
            return REQUEST_COPY_HEADER_NAME
        return RESPONSE_COPY_HEADER_NAME

    def create(self, args: Arguments, /) -> CopyHeaderSettings:
        source, target = StringArg(), StringArg()
        capture(source, target, args)
        return CopyHeaderSettings(self.direction, source.value, target.value)


# ── preserveHost / stripQuery ───────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PreserveHostSettings:
    preserve: bool


@dataclass(frozen=True, slots=True)
class PreserveHostSpec:
    """Overrides the proxy-wide preserve-host behavior for one route."""

    name: str = PRESERVE_HOST_NAME

    def create(self, args: Arguments, /) -> PreserveHostSettings:
        preserve = StringArg()
        capture(enum(preserve, "true", "false"), args)
        return PreserveHostSettings(preserve.value == "true")


@dataclass(frozen=True, slots=True)
class StripQuerySettings:
    preserve_as_header: bool


@dataclass(frozen=True, slots=True)
class StripQuerySpec:
    """Drops the query string, optionally keeping it as X-Query-Param-* headers."""

    name: str = STRIP_QUERY_NAME

    def create(self, args: Arguments, /) -> StripQuerySettings:
        preserve = StringArg()
        capture(optional(enum(preserve, "true", "false")), args)
        return StripQuerySettings(preserve.value == "true")


# ── static / basicAuth ──────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class StaticSettings:
    web_root: str
    root: str


@dataclass(frozen=True, slots=True)
class StaticSpec:
    """Serves files below ``root`` for request paths below ``web_root``."""

    name: str = STATIC_NAME

    def create(self, args: Arguments, /) -> StaticSettings:
        web_root, root = StringArg(), StringArg()
        capture(web_root, root, args)
        return StaticSettings(web_root.value, root.value)


@dataclass(frozen=True, slots=True)
class BasicAuthSettings:
    config_file: str
    realm: str

    @property
    def realm_definition(self) -> str:
        """Value of the WWW-Authenticate header sent with a 401."""
        return f'Basic realm="{self.realm}"'


@dataclass(frozen=True, slots=True)
class BasicAuthSpec:
    name: str = BASIC_AUTH_NAME

    def create(self, args: Arguments, /) -> BasicAuthSettings:
        config_file = StringArg()
        realm = StringArg(DEFAULT_REALM_NAME)
        capture(config_file, optional(realm), args)
        return BasicAuthSettings(config_file.value, realm.value)
