"""Integer bounds, overflow detection and saturation for canonical quantities.

Temperatures are 32-bit signed milliKelvin values; masses and energies are
64-bit signed milligram and milliJoule values. Python integers are unbounded,
so every helper here checks or clamps against the fixed-width bounds
explicitly.
"""

from __future__ import annotations

import enum

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

TEMP_MK_MIN = INT32_MIN
TEMP_MK_MAX = INT32_MAX
MASS_MG_MIN = INT64_MIN
MASS_MG_MAX = INT64_MAX
ENERGY_MJ_MIN = INT64_MIN
ENERGY_MJ_MAX = INT64_MAX


class OverflowPolicy(enum.Enum):
    """What arithmetic does when a result leaves its type's range.

    TRAP raises (the debug behaviour); SATURATE clamps to the type bounds
    and, for division by zero, returns a bound chosen by the dividend's sign.
    """

    TRAP = "trap"
    SATURATE = "saturate"


class ArithmeticOverflowError(OverflowError):
    """Raised under the TRAP policy when a result would overflow."""


def _fits(value: int, lo: int, hi: int) -> bool:
    return lo <= value <= hi


def would_overflow_add_i32(a: int, b: int) -> bool:
    """True if ``a + b`` does not fit in a signed 32-bit integer."""
    if b > 0 and a > INT32_MAX - b:
        return True
    return b < 0 and a < INT32_MIN - b


def would_overflow_sub_i32(a: int, b: int) -> bool:
    """True if ``a - b`` does not fit in a signed 32-bit integer."""
    if b < 0 and a > INT32_MAX + b:
        return True
    return b > 0 and a < INT32_MIN + b


def would_overflow_add_i64(a: int, b: int) -> bool:
    """True if ``a + b`` does not fit in a signed 64-bit integer."""
    if b > 0 and a > INT64_MAX - b:
        return True
    return b < 0 and a < INT64_MIN - b


def would_overflow_sub_i64(a: int, b: int) -> bool:
    """True if ``a - b`` does not fit in a signed 64-bit integer."""
    if b < 0 and a > INT64_MAX + b:
        return True
    return b > 0 and a < INT64_MIN + b


def would_overflow_mul_i32(a: int, b: int) -> bool:
    """True if ``a * b`` does not fit in a signed 32-bit integer."""
    return not _fits(a * b, INT32_MIN, INT32_MAX)


def would_overflow_mul_i64(a: int, b: int) -> bool:
    """True if ``a * b`` does not fit in a signed 64-bit integer."""
    return not _fits(a * b, INT64_MIN, INT64_MAX)


def saturate_add_i32(a: int, b: int) -> int:
    """``a + b`` clamped to the signed 32-bit range."""
    if b > 0 and a > INT32_MAX - b:
        return INT32_MAX
    if b < 0 and a < INT32_MIN - b:
        return INT32_MIN
    return a + b


def saturate_sub_i32(a: int, b: int) -> int:
    """``a - b`` clamped to the signed 32-bit range."""
    if b < 0 and a > INT32_MAX + b:
        return INT32_MAX
    if b > 0 and a < INT32_MIN + b:
        return INT32_MIN
    return a - b


def saturate_add_i64(a: int, b: int) -> int:
    """``a + b`` clamped to the signed 64-bit range."""
    if b > 0 and a > INT64_MAX - b:
        return INT64_MAX
    if b < 0 and a < INT64_MIN - b:
        return INT64_MIN
    return a + b


def saturate_sub_i64(a: int, b: int) -> int:
    """``a - b`` clamped to the signed 64-bit range."""
    if b < 0 and a > INT64_MAX + b:
        return INT64_MAX
    if b > 0 and a < INT64_MIN + b:
        return INT64_MIN
    return a - b


def saturate_mul_i32(a: int, b: int) -> int:
    """``a * b`` clamped to the signed 32-bit range."""
    return clamp(a * b, INT32_MIN, INT32_MAX)


def saturate_mul_i64(a: int, b: int) -> int:
    """``a * b`` clamped to the signed 64-bit range."""
    return clamp(a * b, INT64_MIN, INT64_MAX)


def saturate_div_zero_i32(a: int) -> int:
    """Result of ``a / 0`` under saturation: the bound matching a's sign."""
    return INT32_MAX if a >= 0 else INT32_MIN


def saturate_div_zero_i64(a: int) -> int:
    """Result of ``a / 0`` under saturation: the bound matching a's sign."""
    return INT64_MAX if a >= 0 else INT64_MIN


def clamp(val, lo, hi):
    """Return ``val`` limited to the closed range ``[lo, hi]``."""
    if val < lo:
        return lo
    if val > hi:
        return hi
    return val