"""Test utilities for filterargs.

Provides a minimal custom spec for use in tests and examples. It is NOT a
real filter: it only shows the shape every spec follows, allocate the
destinations, capture once, build the instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from filterargs._capture import capture
from filterargs._definitions import StringArg

if TYPE_CHECKING:
    from filterargs._registry import RegistryBuilder
    from filterargs._types import Arguments


@dataclass(frozen=True, slots=True)
class PrefixFilter:
    """Instance created by PrefixSpec."""

    prefix: str


@dataclass(frozen=True, slots=True)
class PrefixSpec:
    """Spec whose instances carry a single string argument.

    >>> from filterargs.testing import PrefixSpec
    >>> PrefixSpec("logPrefix").create(["api request"])
    PrefixFilter(prefix='api request')
    """

    name: str = "testPrefix"

    def create(self, args: Arguments, /) -> PrefixFilter:
        prefix = StringArg()
        capture(prefix, args)
        return PrefixFilter(prefix.value)


def register(builder: RegistryBuilder) -> RegistryBuilder:
    """Register the test-domain PrefixSpec under the name ``testPrefix``."""
    return builder.register(PrefixSpec())
