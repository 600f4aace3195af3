"""Divisor and modular exponent problems."""

from __future__ import annotations

from math import isqrt

MOD = 1_000_000_007


def common_divisors(numbers: list[int]) -> int:
    """Largest value dividing two of the numbers; 1 if no pair shares more."""
    seen: set[int] = set()
    best = 1
    for x in numbers:
        if x < 1:
            raise ValueError("numbers must be positive")
        if x in seen:
            best = max(best, x)
            continue
        for i in range(1, isqrt(x) + 1):
            if x % i == 0:
                pair = (i, x // i)
                best = max([best, *(d for d in pair if d in seen)])
                seen.update(pair)
    return best


def count_divisors(x: int) -> int:
    """Number of positive divisors of ``x``."""
    if x < 1:
        raise ValueError("x must be positive")
    count = 0
    i = 1
    while i * i <= x:
        if x % i == 0:
            count += 1 if i * i == x else 2
        i += 1
    return count


def power_tower(a: int, b: int, c: int) -> int:
    """a ** (b ** c) modulo 1e9+7, reducing the exponent modulo 1e9+6."""
    return pow(a, pow(b, c, MOD - 1), MOD)


def sum_of_divisors(n: int) -> int:
    """Sum of v * (n // v) over the distinct v in {d, n // d} for d <= isqrt(n), mod 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    values = {v for d in range(1, isqrt(n) + 1) for v in (d, n // d)}
    return sum(v * (n // v) for v in values) % MOD