"""Deterministic arithmetic battery that reduces to a 64-bit checksum.

The same seed always yields the same checksum, so two implementations that
agree on every operation agree on the checksum. Under the TRAP policy the
overflow cases are left out, as they would trap; the checksum therefore
differs between the two policies.
"""

from __future__ import annotations

from axiomsim import safe
from axiomsim.division import (
    div_floor_i32,
    div_floor_i64,
    div_round_i32,
    div_round_i64,
    div_trunc_i32,
    div_trunc_i64,
)
from axiomsim.overflow import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    OverflowPolicy,
)

MATH_VERSION = 1
"""Version of the arithmetic behaviour; bumped on any change to it."""

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def rotl64(x: int, r: int) -> int:
    """Rotate a 64-bit value left by ``r`` bits (0 < r < 64)."""
    x &= _MASK64
    return ((x << r) | (x >> (64 - r))) & _MASK64


def mix(h: int, v: int) -> int:
    """Fold value ``v`` into hash state ``h``."""
    h ^= (v + 0x9E3779B97F4A7C15) & _MASK64
    h = rotl64(h, 27)
    h = (h * 0xC2B2AE3D27D4EB4F) & _MASK64
    h ^= h >> 33
    return h


class Xorshift32:
    """Xorshift32 generator; a zero seed is replaced by 0xA5A5A5A5."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK32
        self._state = seed if seed else 0xA5A5A5A5

    def next(self) -> int:
        """Next unsigned 32-bit value."""
        x = self._state
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self._state = x
        return x

    def next_i32(self) -> int:
        """Next value reinterpreted as signed 32-bit."""
        return _to_signed(self.next(), 32)

    def next_i64(self) -> int:
        """Signed 64-bit value built from two draws, high word first."""
        hi = self.next()
        lo = self.next()
        return _to_signed((hi << 32) | lo, 64)

    def next_nonzero_i32(self) -> int:
        """Signed 32-bit value, with zero replaced by one."""
        return self.next_i32() or 1

    def next_nonzero_i64(self) -> int:
        """Signed 64-bit value, with zero replaced by one."""
        return self.next_i64() or 1


def _fold_i32(h: int, v: int) -> int:
    return mix(h, v & _MASK32)


def _fold_i64(h: int, v: int) -> int:
    return mix(h, v & _MASK64)


def selftest_checksum(seed: int, policy: OverflowPolicy = OverflowPolicy.SATURATE) -> int:
    """Run the arithmetic battery for ``seed`` and return its checksum."""
    h = mix(0, seed & _MASK32)
    h = mix(h, MATH_VERSION)
    rng = Xorshift32(seed)

    for _ in range(50):
        a = rng.next() % 20000001 - 10000000
        b = rng.next() % 20000001 - 10000000
        scalar = rng.next() % 100 + 1
        divisor = rng.next_nonzero_i32()
        h = _fold_i32(h, safe.temp_add(a, b, policy))
        h = _fold_i32(h, safe.temp_sub(a, b, policy))
        h = _fold_i32(h, safe.temp_mul(a, scalar, policy))
        h = _fold_i32(h, safe.temp_div(a, divisor, policy))
        h = _fold_i32(h, safe.temp_clamp(a, -1000000, 1000000))

    for add, sub, mul, div, clamp in (
        (safe.mass_add, safe.mass_sub, safe.mass_mul, safe.mass_div, safe.mass_clamp),
        (safe.energy_add, safe.energy_sub, safe.energy_mul, safe.energy_div, safe.energy_clamp),
    ):
        for _ in range(50):
            a = rng.next() % 2000000000001 - 1000000000000
            b = rng.next() % 2000000000001 - 1000000000000
            scalar = rng.next() % 1000 + 1
            divisor = rng.next_nonzero_i64()
            h = _fold_i64(h, add(a, b, policy))
            h = _fold_i64(h, sub(a, b, policy))
            h = _fold_i64(h, mul(a, scalar, policy))
            h = _fold_i64(h, div(a, divisor, policy))
            h = _fold_i64(h, clamp(a, -1000000000, 1000000000))

    for _ in range(30):
        a32 = rng.next_i32()
        b32 = rng.next_nonzero_i32()
        a64 = rng.next_i64()
        b64 = rng.next_nonzero_i64()
        h = _fold_i32(h, div_trunc_i32(a32, b32, policy))
        h = _fold_i32(h, div_floor_i32(a32, b32, policy))
        h = _fold_i32(h, div_round_i32(a32, b32, policy))
        h = _fold_i64(h, div_trunc_i64(a64, b64, policy))
        h = _fold_i64(h, div_floor_i64(a64, b64, policy))
        h = _fold_i64(h, div_round_i64(a64, b64, policy))

    # Edge cases that never overflow.
    for value in (
        safe.temp_add(0, 0, policy),
        safe.temp_sub(0, 0, policy),
        safe.temp_mul(0, 12345, policy),
        safe.temp_mul(12345, 0, policy),
        safe.temp_div(0, 1, policy),
    ):
        h = _fold_i32(h, value)
    for value in (
        safe.mass_add(0, 0, policy),
        safe.mass_sub(0, 0, policy),
        safe.mass_mul(0, 12345, policy),
        safe.mass_mul(12345, 0, policy),
        safe.mass_div(0, 1, policy),
    ):
        h = _fold_i64(h, value)
    for value in (
        div_trunc_i32(7, 3, policy),
        div_trunc_i32(-7, 3, policy),
        div_floor_i32(7, 3, policy),
        div_floor_i32(-7, 3, policy),
        div_round_i32(-7, 3, policy),
        div_round_i32(8, 3, policy),
        safe.temp_clamp(500, 0, 1000),
        safe.temp_clamp(-500, 0, 1000),
        safe.temp_clamp(1500, 0, 1000),
        safe.temp_add(INT32_MAX - 1, 1, policy),
        safe.temp_sub(INT32_MIN + 1, 1, policy),
    ):
        h = _fold_i32(h, value)
    h = _fold_i64(h, safe.mass_add(INT64_MAX - 1, 1, policy))
    h = _fold_i64(h, safe.mass_sub(INT64_MIN + 1, 1, policy))

    if policy is OverflowPolicy.SATURATE:
        h = _fold_i32(h, safe.temp_add(INT32_MAX, 1))
        h = _fold_i32(h, safe.temp_add(INT32_MIN, -1))
        h = _fold_i64(h, safe.mass_add(INT64_MAX, 1))
        h = _fold_i64(h, safe.mass_add(INT64_MIN, -1))

        h = _fold_i32(h, safe.temp_sub(INT32_MIN, 1))
        h = _fold_i32(h, safe.temp_sub(INT32_MAX, -1))
        h = _fold_i64(h, safe.mass_sub(INT64_MIN, 1))
        h = _fold_i64(h, safe.mass_sub(INT64_MAX, -1))

        h = _fold_i32(h, safe.temp_mul(INT32_MAX, 2))
        h = _fold_i32(h, safe.temp_mul(INT32_MIN, 2))
        h = _fold_i64(h, safe.mass_mul(INT64_MAX, 2))
        h = _fold_i64(h, safe.mass_mul(INT64_MIN, 2))

        h = _fold_i32(h, div_trunc_i32(100, 0))
        h = _fold_i32(h, div_trunc_i32(-100, 0))
        h = _fold_i64(h, div_trunc_i64(100, 0))
        h = _fold_i64(h, div_trunc_i64(-100, 0))

        h = _fold_i32(h, div_floor_i32(50, 0))
        h = _fold_i32(h, div_round_i32(-50, 0))
        h = _fold_i64(h, div_floor_i64(50, 0))
        h = _fold_i64(h, div_round_i64(-50, 0))

    h ^= h >> 33
    h = (h * 0xFF51AFD7ED558CCD) & _MASK64
    h ^= h >> 33
    h = (h * 0xC4CEB9FE1A85EC53) & _MASK64
    h ^= h >> 33
    return h