"""Introductory search, recursion and enumeration problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from functools import lru_cache

BOARD_SIZE = 8
GRID_PATH_LENGTH = 48

_HANOI_FIRST_HALF = {1: 1, 2: 3, 3: 2}
_HANOI_SECOND_HALF = {1: 2, 2: 1, 3: 3}

_GRID_MOVES = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
_GRID_SIDE = 9
_GRID_START = (1, 1)
_GRID_TARGET = (7, 1)


def grey_code(n: int) -> list[str]:
    """Every n-bit string, ordered by interleaving groups of equal popcount."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    buckets: list[list[str]] = [[] for _ in range(n + 2)]
    for value in range(1 << n):
        buckets[bin(value).count("1")].append(format(value, f"0{n}b"))
    codes = []
    for current, following in zip(buckets, buckets[1:]):
        while current:
            codes.append(current.pop())
            if following and current:
                codes.append(following.pop())
    return codes


@lru_cache(maxsize=None)
def _hanoi(n: int) -> tuple[tuple[int, int], ...]:
    if n == 1:
        return ((1, 3),)
    smaller = _hanoi(n - 1)
    first = tuple((_HANOI_FIRST_HALF[a], _HANOI_FIRST_HALF[b]) for a, b in smaller)
    second = tuple((_HANOI_SECOND_HALF[a], _HANOI_SECOND_HALF[b]) for a, b in smaller)
    return first + ((1, 3),) + second


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Optimal moves (from stack, to stack) taking n disks from stack 1 to stack 3."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    return list(_hanoi(n))


def _arrangements(counts: Counter[str], length: int) -> Iterator[str]:
    if length == 0:
        yield ""
        return
    for letter in sorted(counts):
        if counts[letter]:
            counts[letter] -= 1
            for rest in _arrangements(counts, length - 1):
                yield letter + rest
            counts[letter] += 1


def distinct_permutations(text: str) -> list[str]:
    """All distinct rearrangements of the letters of ``text``, in sorted order."""
    letters = "".join(text.split())
    if not letters:
        return []
    return list(_arrangements(Counter(letters), len(letters)))


def _board_rows(board: str | Iterable[str]) -> list[str]:
    rows = board.split() if isinstance(board, str) else [row.strip() for row in board]
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError("the board must be 8 rows of 8 squares")
    if any(set(row) - {".", "*"} for row in rows):
        raise ValueError("squares must be '.' (free) or '*' (reserved)")
    return rows


def count_queen_placements(board: str | Iterable[str]) -> int:
    """Ways to place eight non-attacking queens on the free squares of ``board``."""
    rows = _board_rows(board)

    def place(row: int, cols: int, diagonals: int, anti_diagonals: int) -> int:
        if row == BOARD_SIZE:
            return 1
        total = 0
        for col, square in enumerate(rows[row]):
            diagonal = row + col
            anti_diagonal = BOARD_SIZE - 1 + row - col
            if (
                square == "*"
                or cols >> col & 1
                or diagonals >> diagonal & 1
                or anti_diagonals >> anti_diagonal & 1
            ):
                continue
            total += place(
                row + 1,
                cols | 1 << col,
                diagonals | 1 << diagonal,
                anti_diagonals | 1 << anti_diagonal,
            )
        return total

    return place(0, 0, 0, 0)


def digit_at(k: int) -> int:
    """Digit at 1-based position ``k`` of the string 123456789101112..."""
    if k < 1:
        raise ValueError("positions are 1-based")
    remaining = k
    width = 1
    block = 9
    first = 1
    while remaining > width * block:
        remaining -= width * block
        first *= 10
        block *= 10
        width += 1
    number = first + (remaining - 1) // width
    return int(str(number)[(remaining - 1) % width])


def count_grid_paths(path: str) -> int:
    """Paths through a 7x7 grid from its upper-left to its lower-left corner
    visiting every square once and matching ``path``, where '?' is any move."""
    if len(path) != GRID_PATH_LENGTH:
        raise ValueError(f"the path must have {GRID_PATH_LENGTH} moves")
    if set(path) - set(_GRID_MOVES) - {"?"}:
        raise ValueError("moves must be U, D, L, R or ?")
    edge = _GRID_SIDE - 1
    visited = [
        [r in (0, edge) or c in (0, edge) for c in range(_GRID_SIDE)]
        for r in range(_GRID_SIDE)
    ]

    def search(row: int, col: int, moves: int) -> int:
        if (row, col) == _GRID_TARGET:
            return int(moves == GRID_PATH_LENGTH)
        left, right = visited[row][col - 1], visited[row][col + 1]
        up, down = visited[row - 1][col], visited[row + 1][col]
        if left and right and not up and not down:
            return 0
        if up and down and not left and not right:
            return 0
        if moves >= GRID_PATH_LENGTH:
            return 0
        step = path[moves]
        options = _GRID_MOVES.values() if step == "?" else (_GRID_MOVES[step],)
        visited[row][col] = True
        total = sum(
            search(row + dr, col + dc, moves + 1)
            for dr, dc in options
            if not visited[row + dr][col + dc]
        )
        visited[row][col] = False
        return total

    return search(*_GRID_START, 0)