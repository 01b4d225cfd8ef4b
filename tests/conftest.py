"""Conformance fixture loader for filterargs.

Loads YAML fixtures from tests/fixtures/ and turns their small definition
language into capture definitions for parametrized testing.

Definition language:
- scalar kinds: int, float, string, duration, time, mixed
- sequence kinds: int_list, float_list, string_list, duration_list,
  time_list, mixed_list
- ``{enum: [options...], of: string | string_list}``
- ``{duration_unit_ms: N, of: duration | duration_list}``
- ``{optional: <definition>, default: <value>}``
- ``{invalid_enum: <kind>}`` / ``{invalid_duration: <kind>}``

Captured values are normalized for comparison: durations become float
milliseconds, timestamps become ISO 8601 strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any

import yaml

from filterargs import (
    DurationArg,
    DurationList,
    FloatArg,
    FloatList,
    IntArg,
    IntList,
    MixedArg,
    MixedList,
    StringArg,
    StringList,
    TimeArg,
    TimeList,
    duration,
    enum,
    optional,
)

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

_KINDS: dict[str, type] = {
    "int": IntArg,
    "float": FloatArg,
    "string": StringArg,
    "duration": DurationArg,
    "time": TimeArg,
    "mixed": MixedArg,
    "int_list": IntList,
    "float_list": FloatList,
    "string_list": StringList,
    "duration_list": DurationList,
    "time_list": TimeList,
    "mixed_list": MixedList,
}


@dataclass
class CaptureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    definitions: list[Any]
    args: list[Any] | None
    expect: list[Any]
    error: bool


# ─── YAML → definition conversion ───────────────────────────────────────────


def parse_definition(spec: Any) -> tuple[Any, Any]:
    """Return (definition passed to capture, destination read afterwards)."""
    if isinstance(spec, str):
        dest = _KINDS[spec]()
        return dest, dest
    if "enum" in spec:
        definition, dest = parse_definition(spec.get("of", "string"))
        return enum(definition, *spec["enum"]), dest
    if "duration_unit_ms" in spec:
        definition, dest = parse_definition(spec.get("of", "duration"))
        unit = timedelta(milliseconds=spec["duration_unit_ms"])
        return duration(definition, unit), dest
    if "optional" in spec:
        definition, dest = parse_definition(spec["optional"])
        if "default" in spec:
            dest.value = _denormalize(spec["default"], dest)
        return optional(definition), dest
    if "invalid_enum" in spec:
        dest = _KINDS[spec["invalid_enum"]]()
        return enum(dest, "x"), dest
    if "invalid_duration" in spec:
        dest = _KINDS[spec["invalid_duration"]]()
        return duration(dest, timedelta(seconds=1)), dest
    msg = f"Unknown definition: {spec}"
    raise ValueError(msg)


def read_value(dest: Any) -> Any:
    if hasattr(dest, "values"):
        return [normalize(v) for v in dest.values]
    return normalize(dest.value)


def normalize(value: Any) -> Any:
    if isinstance(value, timedelta):
        return value / timedelta(milliseconds=1)
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _denormalize(value: Any, dest: Any) -> Any:
    if isinstance(dest, DurationArg):
        return timedelta(milliseconds=value)
    return value


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_all_fixtures() -> list[CaptureCase]:
    """Load every YAML fixture as a flat list of CaptureCase."""
    cases: list[CaptureCase] = []
    for path in sorted(FIXTURE_DIR.glob("*.yaml")):
        with path.open() as f:
            data = yaml.safe_load(f)
        for case in data["cases"]:
            cases.append(
                CaptureCase(
                    fixture_name=data["name"],
                    case_name=case["name"],
                    definitions=case["definitions"],
                    args=case.get("args"),
                    expect=case.get("expect", []),
                    error=case.get("error", False),
                )
            )
    return cases
