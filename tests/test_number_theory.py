from itertools import combinations
from math import gcd, isqrt

import pytest

from cpsolver.number_theory import (
    common_divisors,
    count_divisors,
    power_tower,
    sum_of_divisors,
)

MOD = 10**9 + 7


def test_common_divisors_single_number():
    assert common_divisors([12]) == 1


def test_common_divisors_duplicate():
    assert common_divisors([30, 30]) == 30


@pytest.mark.parametrize(
    "numbers",
    [[3, 14, 15, 7, 9], [2, 3, 5, 7], [100, 75, 40, 64], [18, 12, 8, 27, 36], [1, 1]],
)
def test_common_divisors_is_best_pair_gcd(numbers):
    expected = max(gcd(a, b) for a, b in combinations(numbers, 2))
    assert common_divisors(numbers) == expected


def test_common_divisors_rejects_zero():
    with pytest.raises(ValueError):
        common_divisors([0, 4])


@pytest.mark.parametrize("x", range(1, 120))
def test_count_divisors_matches_enumeration(x):
    assert count_divisors(x) == sum(1 for d in range(1, x + 1) if x % d == 0)


def test_count_divisors_rejects_zero():
    with pytest.raises(ValueError):
        count_divisors(0)


@pytest.mark.parametrize("a,b,c", [(3, 4, 2), (2, 10, 3), (7, 3, 5), (5, 0, 4), (9, 2, 0)])
def test_power_tower_matches_direct_power(a, b, c):
    assert power_tower(a, b, c) == pow(a, b**c, MOD)


def test_power_tower_result_in_range():
    assert 0 <= power_tower(123456789, 987654321, 555555555) < MOD


def test_sum_of_divisors_trivial():
    assert sum_of_divisors(0) == 0
    assert sum_of_divisors(1) == 1


@pytest.mark.parametrize("n", range(1, 60))
def test_sum_of_divisors_bounds(n):
    result = sum_of_divisors(n)
    full = sum(d * (n // d) for d in range(1, n + 1))
    low = sum(d * (n // d) for d in range(1, isqrt(n) + 1))
    assert low <= result <= full


def test_sum_of_divisors_is_reduced():
    assert 0 <= sum_of_divisors(10**12) < MOD


def test_sum_of_divisors_rejects_negative():
    with pytest.raises(ValueError):
        sum_of_divisors(-1)