import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from axiomsim.division import (
    div_floor_i32,
    div_floor_i64,
    div_round_i32,
    div_round_i64,
    div_trunc_i32,
    div_trunc_i64,
)
from axiomsim.overflow import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, OverflowPolicy

i32 = st.integers(min_value=INT32_MIN, max_value=INT32_MAX)
i64 = st.integers(min_value=INT64_MIN, max_value=INT64_MAX)


def test_documented_examples():
    assert div_trunc_i32(7, 3) == 2
    assert div_floor_i32(-7, 3) == -3
    assert div_round_i32(-5, 2) == -3


def test_zero_divisor_saturates_i32():
    assert div_trunc_i32(100, 0) == INT32_MAX
    assert div_trunc_i32(0, 0) == INT32_MAX
    assert div_trunc_i32(-100, 0) == INT32_MIN
    assert div_floor_i32(100, 0) == INT32_MAX
    assert div_floor_i32(-100, 0) == INT32_MIN
    assert div_round_i32(0, 0) == INT32_MAX
    assert div_round_i32(-100, 0) == INT32_MIN
    assert div_floor_i32(50, 0, OverflowPolicy.SATURATE) == INT32_MAX
    assert div_round_i32(-50, 0, OverflowPolicy.SATURATE) == INT32_MIN


def test_zero_divisor_saturates_i64():
    assert div_trunc_i64(100, 0) == INT64_MAX
    assert div_trunc_i64(0, 0) == INT64_MAX
    assert div_trunc_i64(-100, 0) == INT64_MIN
    assert div_floor_i64(100, 0) == INT64_MAX
    assert div_floor_i64(-100, 0) == INT64_MIN
    assert div_round_i64(0, 0) == INT64_MAX
    assert div_round_i64(-100, 0) == INT64_MIN
    assert div_floor_i64(50, 0, OverflowPolicy.SATURATE) == INT64_MAX
    assert div_round_i64(-50, 0, OverflowPolicy.SATURATE) == INT64_MIN


def test_zero_divisor_traps():
    with pytest.raises(ZeroDivisionError):
        div_trunc_i32(100, 0, OverflowPolicy.TRAP)
    with pytest.raises(ZeroDivisionError):
        div_floor_i32(100, 0, OverflowPolicy.TRAP)
    with pytest.raises(ZeroDivisionError):
        div_round_i32(100, 0, OverflowPolicy.TRAP)
    with pytest.raises(ZeroDivisionError):
        div_trunc_i64(100, 0, OverflowPolicy.TRAP)
    with pytest.raises(ZeroDivisionError):
        div_floor_i64(100, 0, OverflowPolicy.TRAP)
    with pytest.raises(ZeroDivisionError):
        div_round_i64(100, 0, OverflowPolicy.TRAP)


def test_trap_policy_matches_on_nonzero():
    assert div_trunc_i32(-7, 3, OverflowPolicy.TRAP) == -2
    assert div_floor_i32(-7, 3, OverflowPolicy.TRAP) == -3
    assert div_round_i32(-7, 3, OverflowPolicy.TRAP) == -2
    assert div_trunc_i64(-7, 3, OverflowPolicy.TRAP) == -2
    assert div_floor_i64(-7, 3, OverflowPolicy.TRAP) == -3
    assert div_round_i64(-7, 3, OverflowPolicy.TRAP) == -2
    assert div_round_i32(8, 3, OverflowPolicy.TRAP) == 3
    assert div_round_i64(8, 3, OverflowPolicy.TRAP) == 3


@given(i32, i32)
def test_trunc_i32_invariants(a, b):
    assume(b != 0 and not (a == INT32_MIN and b == -1))
    q = div_trunc_i32(a, b)
    r = a - q * b
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)
    assert abs(q * b) <= abs(a)


@given(i64, i64)
def test_trunc_i64_invariants(a, b):
    assume(b != 0 and not (a == INT64_MIN and b == -1))
    q = div_trunc_i64(a, b)
    r = a - q * b
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


@given(i32, i32)
def test_floor_i32_invariants(a, b):
    assume(b != 0 and not (a == INT32_MIN and b == -1))
    q = div_floor_i32(a, b)
    r = a - q * b
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (b < 0)
    if (a < 0) == (b < 0):
        assert q == div_trunc_i32(a, b)


@given(i64, i64)
def test_floor_i64_invariants(a, b):
    assume(b != 0 and not (a == INT64_MIN and b == -1))
    q = div_floor_i64(a, b)
    r = a - q * b
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (b < 0)
    assert q <= div_trunc_i64(a, b)


@given(i32, i32)
def test_round_i32_is_nearest(a, b):
    assume(b != 0 and not (a == INT32_MIN and b == -1))
    q = div_round_i32(a, b)
    r = a - q * b
    assert 2 * abs(r) <= abs(b)
    assert abs(q - div_trunc_i32(a, b)) <= 1


@given(i64, i64)
def test_round_i64_is_nearest(a, b):
    assume(b != 0 and not (a == INT64_MIN and b == -1))
    q = div_round_i64(a, b)
    r = a - q * b
    assert 2 * abs(r) <= abs(b)
    assert abs(q - div_trunc_i64(a, b)) <= 1


@given(st.integers(min_value=0, max_value=10**6))
def test_round_half_goes_away_from_zero(k):
    odd = 2 * k + 1
    assert div_round_i32(odd, 2) == k + 1
    assert div_round_i32(-odd, 2) == -(k + 1)
    assert div_round_i64(odd, -2) == -(k + 1)
    assert div_round_i64(-odd, -2) == k + 1