"""Counting and knapsack style dynamic programming problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import inf

MOD = 1_000_000_007

TRAP = "*"
FREE = "."


def _check_coins(coins: Sequence[int], x: int) -> None:
    if x < 0:
        raise ValueError("the target sum must not be negative")
    if any(coin < 1 for coin in coins):
        raise ValueError("coin values must be positive")


def array_descriptions(values: Sequence[int], m: int) -> int:
    """Ways to fill the zeros of ``values`` with 1..m so that neighbours
    differ by at most one, modulo 1e9+7."""
    if not values:
        raise ValueError("the array must not be empty")
    if m < 1:
        raise ValueError("m must be a positive integer")
    if any(v < 0 or v > m for v in values):
        raise ValueError("values must lie between 0 and m")
    # Index 0 and m + 1 are padding that always holds zero.
    state = [0] * (m + 2)
    first = values[0]
    if first:
        state[first] = 1
    else:
        state[1 : m + 1] = [1] * m
    for x in values[1:]:
        if x == 0:
            state = (
                [0]
                + [(state[i - 1] + state[i] + state[i + 1]) % MOD for i in range(1, m + 1)]
                + [0]
            )
        else:
            fixed = [0] * (m + 2)
            fixed[x] = (state[x - 1] + state[x] + state[x + 1]) % MOD
            state = fixed
    return sum(state) % MOD


def coin_combinations_ordered(coins: Sequence[int], x: int) -> int:
    """Ordered sequences of coins summing to ``x``, modulo 1e9+7."""
    _check_coins(coins, x)
    ways = [1] + [0] * x
    for total in range(1, x + 1):
        ways[total] = sum(ways[total - coin] for coin in coins if coin <= total) % MOD
    return ways[x]


def coin_combinations_unordered(coins: Sequence[int], x: int) -> int:
    """Multisets of coins summing to ``x``, modulo 1e9+7."""
    _check_coins(coins, x)
    ways = [1] + [0] * x
    for coin in coins:
        for total in range(coin, x + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[x]


def counting_towers(heights: Sequence[int]) -> list[int]:
    """For each height, the number of towers of width 2 and that height, mod 1e9+7."""
    if not heights:
        return []
    if min(heights) < 1:
        raise ValueError("heights must be positive")
    answers = [2]
    joined = split = 1
    for _ in range(1, max(heights)):
        joined, split = (2 * joined + split) % MOD, (joined + 4 * split) % MOD
        answers.append((joined + split) % MOD)
    return [answers[h - 1] for h in heights]


def dice_combinations(n: int) -> int:
    """Ways to reach sum ``n`` with ordered throws of a six-sided die, mod 1e9+7."""
    return coin_combinations_ordered(range(1, 7), n)


def _grid_rows(grid: str | Iterable[str]) -> list[str]:
    rows = grid.split() if isinstance(grid, str) else [row.strip() for row in grid]
    if not rows or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("the grid must be a non-empty rectangle")
    if any(set(row) - {FREE, TRAP} for row in rows):
        raise ValueError("squares must be '.' (free) or '*' (trap)")
    return rows


def grid_paths(grid: str | Iterable[str]) -> int:
    """Right/down paths from the upper-left to the lower-right square that
    avoid traps, modulo 1e9+7."""
    rows = _grid_rows(grid)
    if rows[0][0] == TRAP:
        return 0
    width = len(rows[0])
    counts = [0] * width
    counts[0] = 1
    for r, row in enumerate(rows):
        for c, square in enumerate(row):
            if square == TRAP:
                counts[c] = 0
            elif c > 0:
                counts[c] = (counts[c] + counts[c - 1]) % MOD
            elif r > 0:
                counts[c] %= MOD
    return counts[-1] % MOD


def two_sets_count(n: int) -> int:
    """Ways to split 1..n into two sets of equal sum, modulo 1e9+7."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if n % 4 not in (0, 3):
        return 0
    target = n * (n + 1) // 4
    ways = [1] + [0] * target
    # Fixing n on one side counts each split once.
    for value in range(1, n):
        for total in range(target, value - 1, -1):
            ways[total] = (ways[total] + ways[total - value]) % MOD
    return ways[target]


def money_sums(coins: Iterable[int]) -> list[int]:
    """Sorted sums of every non-empty subset of ``coins``."""
    sums: set[int] = set()
    for coin in coins:
        sums |= {coin + s for s in sums}
        sums.add(coin)
    return sorted(sums)


def book_shop(budget: int, prices: Sequence[int], pages: Sequence[int]) -> int:
    """Most pages obtainable buying each book at most once within ``budget``."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError("the budget must not be negative")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")
    best = [0] * (budget + 1)
    for price, count in zip(prices, pages):
        for money in range(budget, price - 1, -1):
            best[money] = max(best[money], best[money - price] + count)
    return best[budget]


def minimizing_coins(coins: Sequence[int], x: int) -> int | None:
    """Fewest coins summing to ``x``, or None if no combination does."""
    _check_coins(coins, x)
    fewest: list[float] = [0] + [inf] * x
    for total in range(1, x + 1):
        fewest[total] = min(
            (fewest[total - coin] + 1 for coin in coins if coin <= total), default=inf
        )
    return None if fewest[x] == inf else int(fewest[x])