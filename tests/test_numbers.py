import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.numbers import climb_stairs, hamming_weight, integer_sqrt, is_palindrome


@given(st.from_regex(r"[1-9][0-9]{0,8}", fullmatch=True))
def test_mirrored_digits_are_palindromes(prefix):
    assert is_palindrome(int(prefix + prefix[::-1])) is True
    assert is_palindrome(int(prefix + "7" + prefix[::-1])) is True


@given(st.integers(min_value=1, max_value=10**9))
def test_negative_numbers_are_not_palindromes(x):
    assert is_palindrome(-x) is False


@given(st.integers(min_value=1, max_value=10**9))
def test_trailing_zero_is_not_palindrome(x):
    assert is_palindrome(x * 10) is False


def test_single_digits_are_palindromes():
    assert all(is_palindrome(d) for d in range(10))


def test_climb_stairs_base_cases():
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


@given(st.integers(min_value=3, max_value=80))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


@pytest.mark.parametrize("n", [0, -3])
def test_climb_stairs_rejects_non_positive(n):
    with pytest.raises(ValueError):
        climb_stairs(n)


def test_hamming_weight_of_zero():
    assert hamming_weight(0) == 0


@given(st.integers(min_value=0, max_value=64))
def test_hamming_weight_of_all_ones(k):
    assert hamming_weight(2**k - 1) == k


@given(st.integers(min_value=0, max_value=2**40))
def test_hamming_weight_shift_invariants(n):
    assert hamming_weight(n << 1) == hamming_weight(n)
    assert hamming_weight(2 * n + 1) == hamming_weight(n) + 1


def test_hamming_weight_rejects_negative():
    with pytest.raises(ValueError):
        hamming_weight(-1)


@pytest.mark.parametrize("x", [0, 1])
def test_integer_sqrt_small_values(x):
    assert integer_sqrt(x) == x


@given(st.integers(min_value=0, max_value=2**62))
def test_integer_sqrt_is_floor(x):
    r = integer_sqrt(x)
    assert r * r <= x < (r + 1) * (r + 1)


@given(st.integers(min_value=0, max_value=2**31))
def test_integer_sqrt_of_square(r):
    assert integer_sqrt(r * r) == r


def test_integer_sqrt_rejects_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-4)