"""Capture benchmarks for filterargs.

Measures the per-route cost of capture(): fixed argument lists, optional
tails, variadic collection at growing sizes, and the string grammars.

Run: uv run pytest tests/bench/test_bench_capture.py --benchmark-only
"""

from __future__ import annotations

from datetime import timedelta

from filterargs import (
    DurationArg,
    FloatArg,
    IntArg,
    IntList,
    InvalidArgsError,
    MixedList,
    StringArg,
    capture,
    duration,
    enum,
    optional,
    parse_duration,
    parse_rfc3339,
)

# ── Fixed and optional ──────────────────────────────────────────────────────


def _fixed(args: list[object]) -> None:
    capture(IntArg(), FloatArg(), StringArg(), enum(StringArg(), "red", "green"), args)


def test_bench_fixed_capture(benchmark):
    benchmark(_fixed, [42, 3.0, "foo", "red"])


def _optional_tail(args: list[object]) -> None:
    capture(
        IntArg(),
        duration(DurationArg(), timedelta(seconds=1)),
        optional(enum(StringArg(), "auth", "ip")),
        args,
    )


def test_bench_optional_present_capture(benchmark):
    benchmark(_optional_tail, [240, "6s", "ip"])


def test_bench_optional_absent_capture(benchmark):
    benchmark(_optional_tail, [240, 6])


def _rejected(args: list[object]) -> None:
    try:
        capture(IntArg(), StringArg(), args)
    except InvalidArgsError:
        pass


def test_bench_rejected_capture(benchmark):
    benchmark(_rejected, [42, 3.0])


# ── Scaling: variadic length ────────────────────────────────────────────────


def _variadic(args: list[object]) -> None:
    capture(StringArg(), IntList(), args)


def test_bench_variadic_10_capture(benchmark):
    benchmark(_variadic, ["head", *range(10)])


def test_bench_variadic_100_capture(benchmark):
    benchmark(_variadic, ["head", *range(100)])


def test_bench_variadic_255_capture(benchmark):
    benchmark(_variadic, ["head", *range(255)])


def test_bench_mixed_variadic_100_capture(benchmark):
    args = [v for i in range(50) for v in (i, f"s{i}")]
    benchmark(capture, MixedList(), args)


# ── Grammars ────────────────────────────────────────────────────────────────


def test_bench_parse_duration_simple(benchmark):
    benchmark(parse_duration, "300ms")


def test_bench_parse_duration_compound(benchmark):
    benchmark(parse_duration, "1h15m30.918273645s")


def test_bench_parse_rfc3339(benchmark):
    benchmark(parse_rfc3339, "2016-01-01T12:00:00.123456789+02:00")
