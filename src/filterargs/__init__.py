"""filterargs — typed argument capture for gateway filters and predicates.

All public types are exported from this module for flat imports:

    from filterargs import capture, IntArg, StringArg, enum, optional
"""

__version__ = "0.1.0"

# Capture engine
from filterargs._capture import capture

# Config types: see filterargs._config for details
from filterargs._config import (
    MAX_ARGUMENTS,
    MAX_CHAIN_LENGTH,
    ConfigParseError,
    InvocationConfig,
    TooManyArgumentsError,
    parse_chain_config,
    parse_invocation_config,
)

# Definitions
from filterargs._definitions import (
    DEFAULT_DURATION_UNIT,
    Definition,
    Destination,
    DurationArg,
    DurationDef,
    DurationList,
    EnumDef,
    FloatArg,
    FloatList,
    IntArg,
    IntList,
    MixedArg,
    MixedList,
    OptionalDef,
    StringArg,
    StringList,
    TimeArg,
    TimeList,
    duration,
    enum,
    optional,
)

# Registry: see filterargs._registry for details
from filterargs._registry import (
    DuplicateSpecError,
    Registry,
    RegistryBuilder,
    UnknownSpecError,
)

# Grammars
from filterargs._timeparse import parse_duration, parse_rfc3339
from filterargs._types import (
    Arguments,
    CaptureError,
    InvalidArgsError,
    RawArg,
    Spec,
    UnsupportedDefinitionError,
)

__all__ = [
    # Protocols and aliases
    "Spec",
    "RawArg",
    "Arguments",
    # Capture
    "capture",
    # Scalar destinations
    "IntArg",
    "FloatArg",
    "StringArg",
    "DurationArg",
    "TimeArg",
    "MixedArg",
    # Sequence destinations
    "IntList",
    "FloatList",
    "StringList",
    "DurationList",
    "TimeList",
    "MixedList",
    # Decorators
    "EnumDef",
    "DurationDef",
    "OptionalDef",
    "enum",
    "duration",
    "optional",
    "Definition",
    "Destination",
    "DEFAULT_DURATION_UNIT",
    # Grammars
    "parse_duration",
    "parse_rfc3339",
    # Errors
    "CaptureError",
    "InvalidArgsError",
    "UnsupportedDefinitionError",
    # Config types
    "InvocationConfig",
    "ConfigParseError",
    "TooManyArgumentsError",
    "parse_invocation_config",
    "parse_chain_config",
    "MAX_ARGUMENTS",
    "MAX_CHAIN_LENGTH",
    # Registry
    "RegistryBuilder",
    "Registry",
    "UnknownSpecError",
    "DuplicateSpecError",
]
