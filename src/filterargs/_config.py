"""Config types for filter and predicate invocations.

An invocation is one call in a route's filter or predicate chain, e.g.
``localRatelimit(240, "6s", "ip")``. In dict form (JSON/YAML)::

    {"name": "localRatelimit", "args": [240, "6s", "ip"]}

Config-driven construction path:
  dict → parse_invocation_config() → InvocationConfig → Registry.load() → object

Parsing checks the shape only. Whether the argument values fit the filter
or predicate is decided by capture() when the registry creates the instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from filterargs._types import RawArg

# ═══════════════════════════════════════════════════════════════════════════════
# Limits
# ═══════════════════════════════════════════════════════════════════════════════

MAX_ARGUMENTS = 256
MAX_CHAIN_LENGTH = 256

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class InvocationConfig:
    """A named filter or predicate with its raw positional arguments."""

    name: str
    args: tuple[RawArg, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


class TooManyArgumentsError(ConfigParseError):
    """An invocation carries more raw arguments than allowed."""

    def __init__(self, name: str, count: int, max_: int) -> None:
        self.name = name
        self.count = count
        self.max = max_
        super().__init__(
            f"too many arguments for {name!r}: {count} exceeds maximum {max_}"
        )


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════


def parse_invocation_config(data: dict[str, Any]) -> InvocationConfig:
    """Parse a dict into an InvocationConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
        TooManyArgumentsError: If ``args`` exceeds MAX_ARGUMENTS.
    """
    if not isinstance(data, dict):
        msg = f"invocation must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    name = data.get("name")
    if name is None:
        msg = "invocation missing required field 'name'"
        raise ConfigParseError(msg)
    if not isinstance(name, str) or not name:
        msg = "invocation 'name' must be a non-empty string"
        raise ConfigParseError(msg)

    raw_args = data.get("args")
    if raw_args is None:
        return InvocationConfig(name=name)
    if not isinstance(raw_args, list):
        msg = f"'args' of {name!r} must be a list, got {type(raw_args).__name__}"
        raise ConfigParseError(msg)
    if len(raw_args) > MAX_ARGUMENTS:
        raise TooManyArgumentsError(name, len(raw_args), MAX_ARGUMENTS)

    return InvocationConfig(name=name, args=tuple(raw_args))


def parse_chain_config(data: list[dict[str, Any]]) -> tuple[InvocationConfig, ...]:
    """Parse a list of invocation dicts, keeping their order.

    Raises:
        ConfigParseError: If the list or any invocation is malformed.
    """
    if not isinstance(data, list):
        msg = f"chain must be a list, got {type(data).__name__}"
        raise ConfigParseError(msg)
    if len(data) > MAX_CHAIN_LENGTH:
        msg = f"chain length {len(data)} exceeds maximum {MAX_CHAIN_LENGTH}"
        raise ConfigParseError(msg)

    return tuple(parse_invocation_config(item) for item in data)
