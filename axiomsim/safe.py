"""Overflow-checked arithmetic for the canonical quantity types.

Temperatures (milliKelvin) are 32-bit signed; masses (milligrams) and
energies (milliJoules) are 64-bit signed. Under the SATURATE policy an
overflowing result is clamped to the type's bounds; under TRAP it raises
ArithmeticOverflowError. Division truncates toward zero and handles a zero
divisor according to the same policy.
"""

from __future__ import annotations

from axiomsim.division import div_trunc_i32, div_trunc_i64
from axiomsim.overflow import (
    ArithmeticOverflowError,
    OverflowPolicy,
    clamp,
    saturate_add_i32,
    saturate_add_i64,
    saturate_mul_i32,
    saturate_mul_i64,
    saturate_sub_i32,
    saturate_sub_i64,
    would_overflow_add_i32,
    would_overflow_add_i64,
    would_overflow_mul_i32,
    would_overflow_mul_i64,
    would_overflow_sub_i32,
    would_overflow_sub_i64,
)

_DEFAULT = OverflowPolicy.SATURATE


def _on_overflow(policy: OverflowPolicy, what: str) -> None:
    if policy is OverflowPolicy.TRAP:
        raise ArithmeticOverflowError(f"arithmetic overflow in {what}")


def _add_i32(a: int, b: int, policy: OverflowPolicy, what: str) -> int:
    if would_overflow_add_i32(a, b):
        _on_overflow(policy, what)
        return saturate_add_i32(a, b)
    return a + b


def _sub_i32(a: int, b: int, policy: OverflowPolicy, what: str) -> int:
    if would_overflow_sub_i32(a, b):
        _on_overflow(policy, what)
        return saturate_sub_i32(a, b)
    return a - b


def _mul_i32(a: int, b: int, policy: OverflowPolicy, what: str) -> int:
    if would_overflow_mul_i32(a, b):
        _on_overflow(policy, what)
        return saturate_mul_i32(a, b)
    return a * b


def _add_i64(a: int, b: int, policy: OverflowPolicy, what: str) -> int:
    if would_overflow_add_i64(a, b):
        _on_overflow(policy, what)
        return saturate_add_i64(a, b)
    return a + b


def _sub_i64(a: int, b: int, policy: OverflowPolicy, what: str) -> int:
    if would_overflow_sub_i64(a, b):
        _on_overflow(policy, what)
        return saturate_sub_i64(a, b)
    return a - b


def _mul_i64(a: int, b: int, policy: OverflowPolicy, what: str) -> int:
    if would_overflow_mul_i64(a, b):
        _on_overflow(policy, what)
        return saturate_mul_i64(a, b)
    return a * b


# Temperature (milliKelvin, 32-bit)


def temp_add(a: int, b: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Add two temperatures."""
    return _add_i32(a, b, policy, "temperature addition")


def temp_sub(a: int, b: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Subtract temperature ``b`` from ``a``."""
    return _sub_i32(a, b, policy, "temperature subtraction")


def temp_mul(a: int, scalar: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Multiply a temperature by a 32-bit scalar."""
    return _mul_i32(a, scalar, policy, "temperature multiplication")


def temp_div(a: int, divisor: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Divide a temperature by a scalar, truncating toward zero."""
    return div_trunc_i32(a, divisor, policy)


def temp_clamp(val: int, lo: int, hi: int) -> int:
    """Limit a temperature to ``[lo, hi]``."""
    return clamp(val, lo, hi)


# Mass (milligrams, 64-bit)


def mass_add(a: int, b: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Add two masses."""
    return _add_i64(a, b, policy, "mass addition")


def mass_sub(a: int, b: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Subtract mass ``b`` from ``a``."""
    return _sub_i64(a, b, policy, "mass subtraction")


def mass_mul(a: int, scalar: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Multiply a mass by a 64-bit scalar."""
    return _mul_i64(a, scalar, policy, "mass multiplication")


def mass_div(a: int, divisor: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Divide a mass by a scalar, truncating toward zero."""
    return div_trunc_i64(a, divisor, policy)


def mass_clamp(val: int, lo: int, hi: int) -> int:
    """Limit a mass to ``[lo, hi]``."""
    return clamp(val, lo, hi)


# Energy (milliJoules, 64-bit)


def energy_add(a: int, b: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Add two energies."""
    return _add_i64(a, b, policy, "energy addition")


def energy_sub(a: int, b: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Subtract energy ``b`` from ``a``."""
    return _sub_i64(a, b, policy, "energy subtraction")


def energy_mul(a: int, scalar: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Multiply an energy by a 64-bit scalar."""
    return _mul_i64(a, scalar, policy, "energy multiplication")


def energy_div(a: int, divisor: int, policy: OverflowPolicy = _DEFAULT) -> int:
    """Divide an energy by a scalar, truncating toward zero."""
    return div_trunc_i64(a, divisor, policy)


def energy_clamp(val: int, lo: int, hi: int) -> int:
    """Limit an energy to ``[lo, hi]``."""
    return clamp(val, lo, hi)