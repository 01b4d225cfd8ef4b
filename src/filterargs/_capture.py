"""The capture driver.

capture() matches an ordered list of definitions against an ordered list of
raw arguments in one left-to-right pass. Every definition is first checked
structurally against the current position, then converted:

- a required definition needs an argument at its position, and cannot
  follow an optional definition that consumed one
- a sequence definition must be the last one, and collects every remaining
  argument
- an optional definition is skipped when no argument remains, leaving its
  destination at the value the caller put there

Arguments left over after the last definition fail the call, unless a
trailing sequence definition collected them.

The engine keeps no state between calls. Concurrent calls are safe as long
as they do not share destinations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from filterargs._convert import (
    convert_all,
    convert_duration,
    convert_enum,
    convert_float,
    convert_int,
    convert_mixed,
    convert_string,
    convert_time,
)
from filterargs._definitions import (
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
)
from filterargs._types import InvalidArgsError, UnsupportedDefinitionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from filterargs._types import RawArg

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Position:
    """Where the scan stands when a definition is validated."""

    remaining: int
    last: bool
    after_optional: bool = False

    @property
    def has_args(self) -> bool:
        return self.remaining > 0


def capture(*items: object) -> None:
    """Capture raw arguments into the given definitions.

    The last item is always the raw argument list (or None for no arguments);
    every item before it is a capture definition::

        name = StringArg()
        value = StringArg()
        capture(name, optional(value), ["page", "^[0-9]+$"])

    Raises:
        InvalidArgsError: the arguments do not fit the definitions, or the
            definitions themselves are malformed.
        UnsupportedDefinitionError: an item is not a capture definition.
    """
    try:
        _capture(*_split(items))
    except InvalidArgsError as e:
        logger.debug("capture rejected: %s", e.reason)
        raise


def _split(items: tuple[object, ...]) -> tuple[tuple[object, ...], Sequence[RawArg]]:
    if not items:
        msg = "last argument must be a list of arguments or None"
        raise InvalidArgsError(msg)

    *definitions, args = items
    if args is None:
        return tuple(definitions), ()
    if not isinstance(args, list | tuple):
        msg = (
            "last argument must be a list of arguments or None, "
            f"got {type(args).__name__}"
        )
        raise InvalidArgsError(msg)
    return tuple(definitions), args


def _capture(definitions: tuple[object, ...], args: Sequence[RawArg]) -> None:
    if not definitions:
        if args:
            msg = f"expected no arguments, got {len(args)}"
            raise InvalidArgsError(msg)
        return

    after_optional = False
    rest_consumed = False
    for index, definition in enumerate(definitions):
        position = _Position(
            remaining=max(len(args) - index, 0),
            last=index == len(definitions) - 1,
            after_optional=after_optional,
        )
        _validate(definition, position)
        if not position.has_args:
            continue

        rest_consumed = _bind(definition, args[index:])
        if isinstance(definition, OptionalDef):
            after_optional = True

    if not rest_consumed and len(args) > len(definitions):
        msg = (
            f"too many arguments: expected at most {len(definitions)}, "
            f"got {len(args)}"
        )
        raise InvalidArgsError(msg)


# ═══════════════════════════════════════════════════════════════════════════════
# Structural validation
# ═══════════════════════════════════════════════════════════════════════════════


def _validate(definition: object, position: _Position) -> None:
    match definition:
        case (
            IntArg() | FloatArg() | StringArg() | DurationArg() | TimeArg() | MixedArg()
        ):
            if position.after_optional:
                msg = "expecting optional or vararg after an optional argument"
                raise InvalidArgsError(msg)
            if not position.has_args:
                msg = "missing required argument"
                raise InvalidArgsError(msg)
        case (
            IntList()
            | FloatList()
            | StringList()
            | DurationList()
            | TimeList()
            | MixedList()
        ):
            if not position.last:
                msg = "variadic must be the last arg"
                raise InvalidArgsError(msg)
        case EnumDef(invalid=True):
            msg = "invalid enum definition"
            raise InvalidArgsError(msg)
        case DurationDef(invalid=True):
            msg = "invalid duration definition"
            raise InvalidArgsError(msg)
        case EnumDef(target=target) | DurationDef(target=target):
            _validate(target, position)
        case OptionalDef(target=target):
            if _is_sequence(target):
                msg = "optional cannot wrap a variadic definition"
                raise InvalidArgsError(msg)
            if not position.has_args:
                if not _is_known(target):
                    raise UnsupportedDefinitionError(target)
                return
            _validate(target, replace(position, after_optional=False))
        case _:
            raise UnsupportedDefinitionError(definition)


def _is_sequence(definition: object) -> bool:
    match definition:
        case (
            IntList()
            | FloatList()
            | StringList()
            | DurationList()
            | TimeList()
            | MixedList()
        ):
            return True
        case (
            EnumDef(target=target)
            | DurationDef(target=target)
            | OptionalDef(target=target)
        ):
            return _is_sequence(target)
        case _:
            return False


def _is_known(definition: object) -> bool:
    """Whether a definition is built from known destinations and decorators.

    Enum and duration builders already reduce a wrong target to an invalid
    marker, so only optional wrappers need to be looked through.
    """
    match definition:
        case (
            IntArg()
            | FloatArg()
            | StringArg()
            | DurationArg()
            | TimeArg()
            | MixedArg()
            | IntList()
            | FloatList()
            | StringList()
            | DurationList()
            | TimeList()
            | MixedList()
            | EnumDef()
            | DurationDef()
        ):
            return True
        case OptionalDef(target=target):
            return _is_known(target)
        case _:
            return False


# ═══════════════════════════════════════════════════════════════════════════════
# Binding
# ═══════════════════════════════════════════════════════════════════════════════


def _bind(definition: object, args: Sequence[RawArg]) -> bool:
    """Convert and store. Returns True when the rest of the args were consumed.

    Sequence destinations are assigned only after every element converted.
    """
    match definition:
        case IntArg():
            definition.value = convert_int(args[0])
        case FloatArg():
            definition.value = convert_float(args[0])
        case StringArg():
            definition.value = convert_string(args[0])
        case DurationArg():
            definition.value = convert_duration(args[0])
        case TimeArg():
            definition.value = convert_time(args[0])
        case MixedArg():
            definition.value = convert_mixed(args[0])
        case IntList():
            definition.values = convert_all(convert_int, args)
            return True
        case FloatList():
            definition.values = convert_all(convert_float, args)
            return True
        case StringList():
            definition.values = convert_all(convert_string, args)
            return True
        case DurationList():
            definition.values = convert_all(convert_duration, args)
            return True
        case TimeList():
            definition.values = convert_all(convert_time, args)
            return True
        case MixedList():
            definition.values = convert_all(convert_mixed, args)
            return True
        case EnumDef(target=StringArg() as target, options=options):
            target.value = convert_enum(args[0], options)
        case EnumDef(target=StringList() as target, options=options):
            target.values = convert_all(lambda a: convert_enum(a, options), args)
            return True
        case DurationDef(target=DurationArg() as target, unit=unit):
            target.value = convert_duration(args[0], unit)
        case DurationDef(target=DurationList() as target, unit=unit):
            target.values = convert_all(lambda a: convert_duration(a, unit), args)
            return True
        case OptionalDef(target=target):
            return _bind(target, args)
        case _:  # pragma: no cover
            raise UnsupportedDefinitionError(definition)
    return False

