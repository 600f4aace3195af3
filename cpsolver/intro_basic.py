"""Introductory counting and construction problems."""

from __future__ import annotations

from collections import Counter
from itertools import groupby

MOD = 1_000_000_007


def collatz_sequence(n: int) -> list[int]:
    """Return the values visited by the 3n+1 process from ``n`` down to 1."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    sequence = []
    while n != 1:
        sequence.append(n)
        n = n // 2 if n % 2 == 0 else 3 * n + 1
    sequence.append(n)
    return sequence


def missing_number(n: int, numbers: list[int]) -> int:
    """Return the one value of 1..n that is absent from ``numbers``."""
    if len(numbers) != n - 1:
        raise ValueError("expected exactly n - 1 numbers")
    return n * (n + 1) // 2 - sum(numbers)


def longest_repetition(dna: str) -> int:
    """Length of the longest run of one repeated character (at least 1)."""
    letters = "".join(dna.split())
    return max((sum(1 for _ in run) for _, run in groupby(letters)), default=1)


def increasing_array_moves(numbers: list[int]) -> int:
    """Minimum total increments that make ``numbers`` non-decreasing."""
    moves = 0
    current = None
    for value in numbers:
        if current is not None and value < current:
            moves += current - value
        else:
            current = value
    return moves


def beautiful_permutation(n: int) -> list[int] | None:
    """A permutation of 1..n with no adjacent values differing by 1, or None."""
    if n == 1:
        return [1]
    if n <= 3:
        return None
    prefix: list[int] = []
    suffix: list[int] = []
    remainder = n % 4
    if remainder == 3:
        prefix = [n - 1]
        suffix = [n - 2, n]
    elif remainder == 2:
        prefix = [n - 1]
        suffix = [n]
    elif remainder == 1:
        suffix = [n]
    body = [
        value
        for start in range(1, n - 2, 4)
        for value in (start + 1, start + 3, start, start + 2)
    ]
    return prefix + body + suffix


def number_spiral(row: int, col: int) -> int:
    """Value at (row, col) of the infinite number spiral, both 1-based."""
    if row < 1 or col < 1:
        raise ValueError("coordinates are 1-based")
    ring = max(row, col)
    layer = 2 * (ring - 1)
    half = ring - 1
    base = (layer * layer + layer) // 2 - (half * half + half)
    if ring % 2 == 1:
        offset = col if row > col else 2 * col - row
    else:
        offset = row if col > row else 2 * row - col
    return base + offset


def two_knights(k: int) -> int:
    """Ways to place two non-attacking knights on a k x k board."""
    if k < 1:
        raise ValueError("k must be a positive integer")
    small = {1: 0, 2: 6, 3: 28}
    if k in small:
        return small[k]
    total = k * k * (k * k - 1)
    reduced = k * k * 8 - (8 * 5 + 6 * 4 + 4 * 4 + 24 * max(k - 4, 0))
    return (total - reduced) // 2


def two_knights_counts(n: int) -> list[int]:
    """Answers of :func:`two_knights` for every board size 1..n."""
    return [two_knights(k) for k in range(1, n + 1)]


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two lists of equal sum, or None if impossible."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n % 4 == 0:
        quarter = n // 4
        first = [v for i in range(quarter) for v in (i + 1, n - i)]
        second = [v for i in range(quarter, 2 * quarter) for v in (i + 1, n - i)]
        return first, second
    if (n + 1) % 4 == 0:
        quarter = (n + 1) // 4
        first = [n] + [v for i in range(quarter - 1) for v in (i + 1, n - i - 1)]
        second = [i + 1 for i in range(quarter - 1, n - quarter)]
        return first, second
    return None


def bit_strings(n: int) -> int:
    """Number of bit strings of length n, modulo 1e9+7."""
    if n < 0:
        raise ValueError("n must not be negative")
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Number of trailing zeros of n!."""
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def coin_piles(a: int, b: int) -> bool:
    """Whether both piles can be emptied by removing (2, 1) or (1, 2) coins."""
    if (a - 2 * b) % 3 != 0:
        return False
    x = (2 * b - a) // 3
    y = b - 2 * x
    return x >= 0 and y >= 0


def palindrome_reorder(text: str) -> str | None:
    """Rearrange the letters of ``text`` into a palindrome, or None if impossible."""
    counts = Counter("".join(text.split()))
    middle = ""
    halves = []
    for letter in sorted(counts):
        count = counts[letter]
        if count % 2:
            if middle:
                return None
            middle = letter
        halves.append(letter * (count // 2))
    left = "".join(halves)
    return left + middle + left[::-1]


def apple_division(weights: list[int]) -> int:
    """Minimum difference between the weights of two groups of apples."""
    reachable = {0}
    for weight in weights:
        reachable |= {s + weight for s in reachable}
    total = sum(weights)
    return min(abs(total - 2 * s) for s in reachable)