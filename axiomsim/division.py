"""Integer division with explicit rounding modes.

Three modes are offered for 32- and 64-bit signed operands:
truncation toward zero, floor toward negative infinity, and rounding to
nearest with halves away from zero. Division by zero raises
ZeroDivisionError under the TRAP policy and saturates by the dividend's
sign under the SATURATE policy.
"""

from __future__ import annotations

from axiomsim.overflow import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    OverflowPolicy,
    saturate_div_zero_i32,
    saturate_div_zero_i64,
)


def _wrap(value: int, lo: int, hi: int) -> int:
    """Reduce ``value`` to two's complement within ``[lo, hi]``."""
    span = hi - lo + 1
    return (value - lo) % span + lo


def _zero_divisor(a: int, policy: OverflowPolicy, saturated: int) -> int:
    if policy is OverflowPolicy.TRAP:
        raise ZeroDivisionError("division by zero")
    return saturated


def _trunc(a: int, b: int) -> tuple[int, int]:
    """Quotient truncated toward zero and the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def _floor(a: int, b: int) -> int:
    q, r = _trunc(a, b)
    if r != 0 and (a < 0) != (b < 0):
        q -= 1
    return q


def _round(a: int, b: int) -> int:
    q, r = _trunc(a, b)
    if r != 0 and 2 * abs(r) >= abs(b):
        q += 1 if (a < 0) == (b < 0) else -1
    return q


def div_trunc_i32(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.SATURATE) -> int:
    """32-bit division truncating toward zero."""
    if b == 0:
        return _zero_divisor(a, policy, saturate_div_zero_i32(a))
    return _wrap(_trunc(a, b)[0], INT32_MIN, INT32_MAX)


def div_trunc_i64(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.SATURATE) -> int:
    """64-bit division truncating toward zero."""
    if b == 0:
        return _zero_divisor(a, policy, saturate_div_zero_i64(a))
    return _wrap(_trunc(a, b)[0], INT64_MIN, INT64_MAX)


def div_floor_i32(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.SATURATE) -> int:
    """32-bit division rounding toward negative infinity."""
    if b == 0:
        return _zero_divisor(a, policy, saturate_div_zero_i32(a))
    return _wrap(_floor(a, b), INT32_MIN, INT32_MAX)


def div_floor_i64(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.SATURATE) -> int:
    """64-bit division rounding toward negative infinity."""
    if b == 0:
        return _zero_divisor(a, policy, saturate_div_zero_i64(a))
    return _wrap(_floor(a, b), INT64_MIN, INT64_MAX)


def div_round_i32(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.SATURATE) -> int:
    """32-bit division rounding to nearest, halves away from zero."""
    if b == 0:
        return _zero_divisor(a, policy, saturate_div_zero_i32(a))
    return _wrap(_round(a, b), INT32_MIN, INT32_MAX)


def div_round_i64(a: int, b: int, policy: OverflowPolicy = OverflowPolicy.SATURATE) -> int:
    """64-bit division rounding to nearest, halves away from zero."""
    if b == 0:
        return _zero_divisor(a, policy, saturate_div_zero_i64(a))
    return _wrap(_round(a, b), INT64_MIN, INT64_MAX)