from hypothesis import given
from hypothesis import strategies as st

from axiomsim.overflow import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN, OverflowPolicy
from axiomsim.selftest import MATH_VERSION, Xorshift32, mix, rotl64, selftest_checksum

u64 = st.integers(min_value=0, max_value=2**64 - 1)
u32 = st.integers(min_value=0, max_value=2**32 - 1)


def test_xorshift_first_value_for_seed_one():
    assert Xorshift32(1).next() == 270369


def test_zero_seed_uses_fallback_state():
    a = Xorshift32(0)
    b = Xorshift32(0xA5A5A5A5)
    assert [a.next() for _ in range(5)] == [b.next() for _ in range(5)]


@given(u32)
def test_next_stays_in_u32(seed):
    rng = Xorshift32(seed)
    for _ in range(10):
        assert 0 <= rng.next() <= 0xFFFFFFFF


@given(u32)
def test_next_i32_is_signed_view_of_next(seed):
    raw = Xorshift32(seed).next()
    signed = Xorshift32(seed).next_i32()
    assert INT32_MIN <= signed <= INT32_MAX
    assert signed % 2**32 == raw


@given(u32)
def test_next_i64_combines_two_draws(seed):
    ref = Xorshift32(seed)
    hi, lo = ref.next(), ref.next()
    value = Xorshift32(seed).next_i64()
    assert INT64_MIN <= value <= INT64_MAX
    assert value % 2**64 == (hi << 32) | lo


@given(u32)
def test_nonzero_variants_follow_plain_draws(seed):
    rng = Xorshift32(seed)
    ref = Xorshift32(seed)
    for _ in range(10):
        got32 = rng.next_nonzero_i32()
        raw32 = ref.next_i32()
        assert INT32_MIN <= got32 <= INT32_MAX
        assert got32 == (raw32 or 1)
        got64 = rng.next_nonzero_i64()
        raw64 = ref.next_i64()
        assert INT64_MIN <= got64 <= INT64_MAX
        assert got64 == (raw64 or 1)


@given(u64, st.integers(min_value=1, max_value=63))
def test_rotl64_round_trip(x, r):
    rotated = rotl64(x, r)
    assert 0 <= rotated < 2**64
    assert rotl64(rotated, 64 - r) == x


@given(u64, u64)
def test_mix_stays_in_u64_and_is_deterministic(h, v):
    result = mix(h, v)
    assert 0 <= result < 2**64
    assert result == mix(h, v)


def test_checksum_deterministic_across_interleaved_runs():
    first_zero = selftest_checksum(0)
    first_42 = selftest_checksum(42)
    assert 0 < first_zero < 2**64
    assert first_zero != first_42
    assert selftest_checksum(0) == first_zero
    assert selftest_checksum(42) == first_42


def test_checksum_nonzero_and_in_range():
    assert MATH_VERSION == 1
    value = selftest_checksum(0)
    assert 0 < value < 2**64


def test_different_seeds_give_different_checksums():
    values = {selftest_checksum(seed) for seed in (0, 1, 2, 42, 1000)}
    assert len(values) == 5


def test_trap_policy_skips_overflow_cases():
    trapped = selftest_checksum(0, OverflowPolicy.TRAP)
    assert trapped == selftest_checksum(0, OverflowPolicy.TRAP)
    assert trapped != selftest_checksum(0, OverflowPolicy.SATURATE)


def test_default_policy_is_saturate():
    assert selftest_checksum(7) == selftest_checksum(7, OverflowPolicy.SATURATE)