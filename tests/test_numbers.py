import math

import pytest
from hypothesis import given
from hypothesis import strategies as st
from collections import Counter

from algonotes.numbers import (
    armstrong_numbers,
    fibonacci_binet,
    hanoi_moves,
    is_armstrong,
    modes,
    newton_sqrt,
    power_of_two_bounds,
    prime_factorization,
    taxicab_numbers,
    vedic_deviations,
    vedic_sqrt,
)


@pytest.mark.parametrize("n", [153, 370, 371, 407])
def test_three_digit_armstrong(n):
    assert is_armstrong(n) is True


def test_non_armstrong():
    assert is_armstrong(10) is False


def test_armstrong_up_to_1000():
    assert armstrong_numbers(1000) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 153, 370, 371, 407]


def test_armstrong_negative_raises():
    with pytest.raises(ValueError):
        is_armstrong(-1)


@given(st.integers(min_value=2, max_value=100_000))
def test_factorization_product_and_primality(n):
    factors = prime_factorization(n)
    product = 1
    for prime, exponent in factors.items():
        product *= prime ** exponent
        assert prime_factorization(prime) == {prime: 1}
    assert product == n


def test_factorization_of_one_is_empty():
    assert prime_factorization(1) == {}


def test_factorization_rejects_zero():
    with pytest.raises(ValueError):
        prime_factorization(0)


def test_binet_base_cases():
    assert fibonacci_binet(0) == 0
    assert fibonacci_binet(1) == 1


@pytest.mark.parametrize("n", range(2, 61))
def test_binet_recurrence(n):
    assert fibonacci_binet(n) == fibonacci_binet(n - 1) + fibonacci_binet(n - 2)


def test_modes_in_order_reached():
    assert modes([1, 1, 2, 2, 3]) == [1, 2]


@given(st.lists(st.integers(min_value=-5, max_value=5), min_size=1))
def test_modes_have_top_frequency(values):
    counts = Counter(values)
    top = max(counts.values())
    result = modes(values)
    assert sorted(result) == sorted(v for v, c in counts.items() if c == top)
    assert len(set(result)) == len(result)


def test_modes_empty():
    assert modes([]) == []


def test_power_of_two_bounds_are_tight():
    bounds = power_of_two_bounds(9)
    assert [y for y, _ in bounds] == list(range(1, 10))
    for y, x in bounds:
        assert 2 ** x >= 10 ** y > 2 ** (x - 1)


def test_hardy_ramanujan_number():
    assert taxicab_numbers(100_000)[1729] == [(1, 12), (9, 10)]


def test_taxicab_invariants():
    found = taxicab_numbers(100_000)
    assert list(found) == sorted(found)
    for total, pairs in found.items():
        assert total < 100_000
        assert len(pairs) > 1
        for a, b in pairs:
            assert a <= b
            assert a ** 3 + b ** 3 == total


@given(st.floats(min_value=0.001, max_value=1e6))
def test_newton_sqrt_converges(x):
    assert newton_sqrt(x, 10.0) == pytest.approx(math.sqrt(x), rel=1e-9)


def test_newton_sqrt_rejects_nonpositive():
    with pytest.raises(ValueError):
        newton_sqrt(0.0, 10.0)


def test_newton_sqrt_rejects_zero_guess():
    with pytest.raises(ValueError):
        newton_sqrt(4.0, 0)


def test_hanoi_zero():
    assert hanoi_moves(0) == 0


@given(st.integers(min_value=1, max_value=200))
def test_hanoi_recurrence(h):
    assert hanoi_moves(h) == 2 * hanoi_moves(h - 1) + 1


def test_hanoi_negative_raises():
    with pytest.raises(ValueError):
        hanoi_moves(-1)


@given(st.integers(min_value=1, max_value=300))
def test_vedic_exact_on_squares(r):
    assert vedic_sqrt(r * r) == r


@given(st.integers(min_value=1, max_value=10 ** 6))
def test_vedic_overestimates(x):
    assert vedic_sqrt(x) >= math.sqrt(x) - 1e-9


def test_vedic_rejects_zero():
    with pytest.raises(ValueError):
        vedic_sqrt(0)


def test_vedic_deviations_sorted_and_above_threshold():
    found = vedic_deviations(1000, 5.0)
    assert found
    deviations = [d for _, d in found]
    assert deviations == sorted(deviations, reverse=True)
    for x, d in found:
        assert 1 <= x < 1000
        assert d > 5.0
        estimate = vedic_sqrt(x)
        assert d == pytest.approx(abs(estimate - math.sqrt(x)) / estimate * 100)