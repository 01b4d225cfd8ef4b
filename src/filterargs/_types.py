"""Core type aliases, protocols and errors for filterargs.

Raw arguments are the untyped literal values taken from a route definition:
numbers and strings. The capture engine turns them into typed values held by
caller-owned destinations, or fails with a CaptureError.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

# One literal from a filter or predicate invocation.
type RawArg = int | float | str

# The trailing position of a capture() call. None is the same as empty.
type Arguments = Sequence[RawArg] | None


class CaptureError(Exception):
    """Base class for everything capture() and the registry raise."""


class InvalidArgsError(CaptureError):
    """The arguments could not be captured with the given definitions.

    This is the one error callers branch on. The reason is diagnostic only:
    a wrong type, a missing or leftover argument, a misplaced variadic and a
    malformed duration all surface as the same class.
    """

    def __init__(self, reason: str = "invalid args") -> None:
        self.reason = reason
        super().__init__(reason)


class UnsupportedDefinitionError(CaptureError):
    """A capture definition is not a known destination or decorator.

    Signals a programming error in a spec, not a configuration error.
    """

    def __init__(self, definition: Any) -> None:
        self.definition = definition
        super().__init__(
            f"not supported capture type: {type(definition).__name__}"
        )


@runtime_checkable
class Spec(Protocol):
    """A named factory for one kind of filter or predicate.

    Implementations call capture() exactly once per create(), right after
    allocating their destinations, and let any CaptureError propagate.
    """

    @property
    def name(self) -> str: ...

    def create(self, args: Arguments, /) -> Any: ...
