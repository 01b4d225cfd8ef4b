"""Duration and timestamp string grammars.

Both grammars are compiled with ``google-re2``, so parsing a hostile route
argument is linear in its length.

Durations use the sign + (decimal, unit) sequence known from Go and most
proxy configs: ``"300ms"``, ``"1h15m"``, ``"-1.5s"``, ``".5us"``. A bare
``"0"`` is accepted without a unit. Supported units are ns, us (also µs and
μs), ms, s, m and h. The total must fit a signed 64 bit nanosecond count.

Timestamps follow RFC 3339 with an uppercase ``T`` separator and either
``Z`` or a numeric ``±HH:MM`` offset. Fractional seconds are truncated to
microseconds.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import re2

_NS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # U+00B5 micro sign
    "μs": 1_000,  # U+03BC greek small letter mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_MIN_NANOSECONDS = -(2**63)
_MAX_NANOSECONDS = 2**63 - 1

# ms before m and s: alternation is leftmost-first.
_UNIT = r"(?:ns|us|µs|μs|ms|s|m|h)"
_NUMBER = r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"

_DURATION = re2.compile(rf"([-+]?)((?:{_NUMBER}{_UNIT})+)")
_COMPONENT = re2.compile(rf"({_NUMBER})({_UNIT})")
_ZERO_DURATIONS = frozenset({"0", "+0", "-0"})

_RFC3339 = re2.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})"
    r"T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:\.([0-9]+))?"
    r"(?:(Z)|([+-])([0-9]{2}):([0-9]{2}))"
)


def parse_duration(text: str) -> timedelta:
    """Parse a duration string such as ``"1h30m"`` or ``"250ms"``.

    Raises:
        ValueError: If the string does not match the grammar or the total
            does not fit a signed 64 bit nanosecond count.
    """
    if text in _ZERO_DURATIONS:
        return timedelta(0)

    m = _DURATION.fullmatch(text)
    if m is None:
        msg = f"invalid duration {text!r}"
        raise ValueError(msg)

    total = Decimal(0)
    for component in _COMPONENT.finditer(m.group(2)):
        total += Decimal(component.group(1)) * _NS_PER_UNIT[component.group(2)]

    nanoseconds = int(total)
    if m.group(1) == "-":
        nanoseconds = -nanoseconds
    if not _MIN_NANOSECONDS <= nanoseconds <= _MAX_NANOSECONDS:
        msg = f"invalid duration {text!r}: out of range"
        raise ValueError(msg)
    return timedelta(microseconds=_truncate_div(nanoseconds, 1000))


def parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp into a timezone-aware datetime.

    Raises:
        ValueError: If the string is not RFC 3339 or names an impossible
            date, time or offset.
    """
    m = _RFC3339.fullmatch(text)
    if m is None:
        msg = f"invalid RFC 3339 time {text!r}"
        raise ValueError(msg)

    year, month, day, hour, minute, second = (int(m.group(i)) for i in range(1, 7))
    fraction = m.group(7) or ""
    microsecond = int(fraction[:6].ljust(6, "0"))

    if m.group(8) is not None:
        tz = UTC
    else:
        offset_hours, offset_minutes = int(m.group(10)), int(m.group(11))
        if offset_minutes >= 60:
            msg = f"invalid RFC 3339 time {text!r}: bad offset"
            raise ValueError(msg)
        offset = timedelta(hours=offset_hours, minutes=offset_minutes)
        tz = timezone(-offset if m.group(9) == "-" else offset)

    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)


def _truncate_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // b
    return q if a >= 0 else -q
