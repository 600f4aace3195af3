"""Optimisation problems solved by dynamic programming."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import inf


class MaxFenwickTree:
    """Binary indexed tree answering prefix maxima over indices 0..size-1."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._tree = [0] * (size + 1)

    def __len__(self) -> int:
        return self._size

    def _check(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError("index out of range")

    def update(self, index: int, value: int) -> None:
        """Raise the value stored at ``index`` to at least ``value``."""
        self._check(index)
        i = index + 1
        while i <= self._size:
            self._tree[i] = max(self._tree[i], value)
            i += i & -i

    def query(self, index: int) -> int:
        """Largest value stored at indices 0..index (0 if none)."""
        self._check(index)
        best = 0
        i = index + 1
        while i > 0:
            best = max(best, self._tree[i])
            i -= i & -i
        return best


def edit_distance(s: str, t: str) -> int:
    """Fewest insertions, deletions and substitutions turning ``s`` into ``t``."""
    previous = list(range(len(t) + 1))
    for i, a in enumerate(s, start=1):
        current = [i]
        for j, b in enumerate(t, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (a != b),
                )
            )
        previous = current
    return previous[-1]


def elevator_rides(weights: Sequence[int], capacity: int) -> int:
    """Fewest elevator rides carrying everyone with the given maximum load."""
    n = len(weights)
    best = [(0, 0)] * (1 << n)
    for subset in range(1, 1 << n):
        options = []
        for person, weight in enumerate(weights):
            bit = 1 << person
            if subset & bit:
                rides, load = best[subset ^ bit]
                if load + weight <= capacity:
                    options.append((rides, load + weight))
                else:
                    options.append((rides + 1, weight))
        best[subset] = min(options)
    rides, load = best[-1]
    return rides + (load != 0)


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    n = len(values)
    if n == 0:
        return 0
    # Equal values are visited right to left so they cannot extend each other.
    order = sorted(range(n), key=lambda i: (values[i], -i))
    tree = MaxFenwickTree(n)
    best = 0
    for i in order:
        length = tree.query(i) + 1
        tree.update(i, length)
        best = max(best, length)
    return best


def max_project_reward(projects: Iterable[tuple[int, int, int]]) -> int:
    """Largest total reward of projects (start, end, reward) with disjoint days."""
    ordered = sorted(projects, key=lambda project: project[1])
    ends = [end for _, end, _ in ordered]
    best: list[int] = []
    for start, _, reward in ordered:
        compatible = bisect_left(ends, start)
        with_this = reward + (best[compatible - 1] if compatible else 0)
        best.append(max(best[-1] if best else 0, with_this))
    return best[-1] if best else 0


def rectangle_cuts(a: int, b: int) -> int:
    """Fewest straight cuts splitting an a x b rectangle into squares."""
    if a < 1 or b < 1:
        raise ValueError("sides must be positive")
    cuts = [[0] * (b + 1) for _ in range(a + 1)]
    for i in range(1, a + 1):
        for j in range(1, b + 1):
            if i == j:
                continue
            best = inf
            for k in range(1, i // 2 + 1):
                best = min(best, cuts[k][j] + cuts[i - k][j])
            for k in range(1, j // 2 + 1):
                best = min(best, cuts[i][k] + cuts[i][j - k])
            cuts[i][j] = int(best) + 1
    return cuts[a][b]


def removal_game(values: Sequence[int]) -> int:
    """Score of the first player when both take from either end optimally."""
    n = len(values)
    if n == 0:
        return 0
    prefix = list(accumulate(values, initial=0))
    best = list(values)
    for length in range(2, n + 1):
        best = [
            prefix[i + length] - prefix[i] - min(best[i + 1], best[i])
            for i in range(n - length + 1)
        ]
    return best[0]


def removing_digits(n: int) -> int:
    """Fewest steps to reach 0, each step subtracting one digit of the number."""
    if n < 0:
        raise ValueError("n must not be negative")
    steps = [0] * (n + 1)
    for value in range(1, n + 1):
        steps[value] = 1 + min(
            steps[value - int(digit)] for digit in str(value) if digit != "0"
        )
    return steps[n]