"""Signed 64-bit integers, the only numeric type."""

from __future__ import annotations

from typing import Any

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
I64_DIGITS = len(str(I64_MAX))


def is_integer(value: Any) -> bool:
    # bool subclasses int but is never a sigma value
    return isinstance(value, int) and not isinstance(value, bool)


def wrap_i64(value: int) -> int:
    """Reduce `value` to the i64 range with two's-complement wrap-around."""
    return ((value - I64_MIN) % 2 ** 64) + I64_MIN


def fits_i64(value: int) -> bool:
    return I64_MIN <= value <= I64_MAX
