"""Spec registry for config-driven filter and predicate construction.

Architecture:
- RegistryBuilder → .build() → Registry (immutable)
- Specs are registered under their own name
- load() resolves an InvocationConfig to its spec and calls create() with
  the raw arguments; capture errors propagate unchanged

Example::

    builder = RegistryBuilder()
    builder.register(PrefixSpec("logPrefix"))
    registry = builder.build()

    config = parse_invocation_config({"name": "logPrefix", "args": ["api"]})
    instance = registry.load(config)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from filterargs._types import CaptureError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from filterargs._config import InvocationConfig
    from filterargs._types import Arguments, Spec

logger = logging.getLogger(__name__)


class UnknownSpecError(CaptureError):
    """A filter or predicate name was not found in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            registered = ", ".join(self.available)
            msg = f"unknown spec: {name!r} (registered: {registered})"
        else:
            msg = f"unknown spec: {name!r} (no specs are registered)"
        super().__init__(msg)


class DuplicateSpecError(CaptureError):
    """Two specs were registered under the same name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"spec already registered: {name!r}")


# ═══════════════════════════════════════════════════════════════════════════════
# Builder
# ═══════════════════════════════════════════════════════════════════════════════


class RegistryBuilder:
    """Builder for constructing a Registry.

    Register specs, then call build() to produce an immutable Registry.
    No registration is possible after build.
    """

    def __init__(self) -> None:
        self._specs: dict[str, Spec] = {}

    def register(self, spec: Spec) -> RegistryBuilder:
        """Register a spec under its name.

        Raises:
            DuplicateSpecError: If the name is already taken.
        """
        if spec.name in self._specs:
            raise DuplicateSpecError(spec.name)
        self._specs[spec.name] = spec
        logger.debug("registered spec %s", spec.name)
        return self

    def build(self) -> Registry:
        """Freeze the registry."""
        return Registry(_specs=MappingProxyType(dict(self._specs)))


# ═══════════════════════════════════════════════════════════════════════════════
# Registry
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class Registry:
    """Immutable registry of filter and predicate specs.

    Constructed via RegistryBuilder.
    """

    _specs: MappingProxyType[str, Spec] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def create(self, name: str, args: Arguments) -> Any:
        """Create an instance of the named spec from raw arguments.

        Raises:
            UnknownSpecError: name not registered
            InvalidArgsError: the arguments do not fit the named filter or
                predicate
        """
        spec = self._specs.get(name)
        if spec is None:
            logger.warning("unknown spec %s", name)
            raise UnknownSpecError(name, list(self._specs.keys()))

        instance = spec.create(args)
        logger.debug("created %s with %d argument(s)", name, len(args or ()))
        return instance

    def load(self, config: InvocationConfig) -> Any:
        """Create an instance from a parsed invocation config."""
        return self.create(config.name, list(config.args))

    def load_chain(self, configs: Iterable[InvocationConfig]) -> list[Any]:
        """Create every invocation in order. The first failure aborts."""
        return [self.load(config) for config in configs]

    @property
    def count(self) -> int:
        """Number of registered specs."""
        return len(self._specs)

    def contains(self, name: str) -> bool:
        """Check if a spec name is registered."""
        return name in self._specs

    def names(self) -> list[str]:
        """Return all registered spec names (sorted)."""
        return sorted(self._specs.keys())
