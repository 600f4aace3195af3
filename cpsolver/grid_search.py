"""Path finding on character grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from math import inf

Cell = tuple[int, int]

WALL = "#"

_LABYRINTH_STEPS = (("D", (1, 0)), ("U", (-1, 0)), ("R", (0, 1)), ("L", (0, -1)))
_ESCAPE_STEPS = (("U", (-1, 0)), ("R", (0, 1)), ("D", (1, 0)), ("L", (0, -1)))


def _rows(grid: str | Iterable[str]) -> list[str]:
    rows = grid.split() if isinstance(grid, str) else [row.strip() for row in grid]
    if not rows or any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("the grid must be a non-empty rectangle")
    return rows


def _locate(rows: list[str], mark: str) -> Cell:
    for r, row in enumerate(rows):
        c = row.find(mark)
        if c != -1:
            return r, c
    raise ValueError(f"the grid has no {mark!r} square")


def _is_open(rows: list[str], cell: Cell) -> bool:
    r, c = cell
    return 0 <= r < len(rows) and 0 <= c < len(rows[0]) and rows[r][c] != WALL


def _trace(came_from: dict[Cell, tuple[Cell, str] | None], end: Cell) -> str:
    steps = []
    link = came_from[end]
    while link is not None:
        cell, name = link
        steps.append(name)
        link = came_from[cell]
    return "".join(reversed(steps))


def labyrinth_path(grid: str | Iterable[str]) -> str | None:
    """Shortest walk of U/D/L/R moves from 'A' to 'B' avoiding '#', or None."""
    rows = _rows(grid)
    start = _locate(rows, "A")
    end = _locate(rows, "B")
    came_from: dict[Cell, tuple[Cell, str] | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        if cell == end:
            return _trace(came_from, end)
        for name, (dr, dc) in _LABYRINTH_STEPS:
            nxt = (cell[0] + dr, cell[1] + dc)
            if nxt not in came_from and _is_open(rows, nxt):
                came_from[nxt] = (cell, name)
                queue.append(nxt)
    return None


def escape_monsters(grid: str | Iterable[str]) -> str | None:
    """Moves taking 'A' to the edge of the grid, always reaching a square
    strictly before any 'M' can; '' if already on the edge, None if trapped."""
    rows = _rows(grid)
    height, width = len(rows), len(rows[0])
    start = _locate(rows, "A")

    def on_border(cell: Cell) -> bool:
        r, c = cell
        return r in (0, height - 1) or c in (0, width - 1)

    if on_border(start):
        return ""

    monster_time: dict[Cell, int] = {
        (r, c): 0 for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == "M"
    }
    frontier = deque(monster_time)
    while frontier:
        cell = frontier.popleft()
        for _, (dr, dc) in _ESCAPE_STEPS:
            nxt = (cell[0] + dr, cell[1] + dc)
            if nxt not in monster_time and _is_open(rows, nxt):
                monster_time[nxt] = monster_time[cell] + 1
                frontier.append(nxt)

    came_from: dict[Cell, tuple[Cell, str] | None] = {start: None}
    queue = deque([(start, 0)])
    while queue:
        cell, time = queue.popleft()
        for name, (dr, dc) in _ESCAPE_STEPS:
            nxt = (cell[0] + dr, cell[1] + dc)
            if nxt in came_from or not _is_open(rows, nxt):
                continue
            if monster_time.get(nxt, inf) <= time + 1:
                continue
            came_from[nxt] = (cell, name)
            if on_border(nxt):
                return _trace(came_from, nxt)
            queue.append((nxt, time + 1))
    return None