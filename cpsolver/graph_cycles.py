"""Cycle detection, topological order and successor-graph queries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_WHITE, _GREY, _BLACK = 0, 1, 2


def _check_nodes(n: int, nodes: Iterable[int]) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside 1..{n}")


def _adjacency(
    n: int, edges: Iterable[tuple[int, int]], *, undirected: bool = False
) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_nodes(n, (a, b))
        adjacency[a].append(b)
        if undirected:
            adjacency[b].append(a)
    return adjacency


def course_schedule(n: int, requirements: Iterable[tuple[int, int]]) -> list[int] | None:
    """Order of courses 1..n in which every (a, b) has a before b, or None if cyclic."""
    adjacency = _adjacency(n, requirements)
    state = [_WHITE] * (n + 1)
    finished: list[int] = []
    for start in range(1, n + 1):
        if state[start] != _WHITE:
            continue
        state[start] = _GREY
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == _GREY:
                    return None
                if state[nxt] == _WHITE:
                    state[nxt] = _GREY
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                state[node] = _BLACK
                finished.append(node)
    return finished[::-1]


def round_trip(n: int, roads: Iterable[tuple[int, int]]) -> list[int] | None:
    """A closed walk over undirected roads that starts and ends in one city
    and repeats no other city, or None if the road network has no cycle."""
    adjacency = _adjacency(n, roads, undirected=True)
    visited = [False] * (n + 1)
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, 0, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt == parent:
                    continue
                if visited[nxt]:
                    path = [city for city, _, _ in stack]
                    return path[path.index(nxt) :] + [nxt]
                visited[nxt] = True
                stack.append((nxt, node, iter(adjacency[nxt])))
                break
            else:
                stack.pop()
    return None


def round_trip_directed(n: int, flights: Iterable[tuple[int, int]]) -> list[int] | None:
    """A directed cycle of cities, first city repeated at the end, or None."""
    adjacency = _adjacency(n, flights)
    state = [_WHITE] * (n + 1)
    for start in range(1, n + 1):
        if state[start] != _WHITE:
            continue
        state[start] = _GREY
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if state[nxt] == _GREY:
                    path = [city for city, _ in stack]
                    return path[path.index(nxt) :] + [nxt]
                if state[nxt] == _WHITE:
                    state[nxt] = _GREY
                    stack.append((nxt, iter(adjacency[nxt])))
                    break
            else:
                stack.pop()
                state[node] = _BLACK
    return None


def _successor_table(successors: Sequence[int]) -> list[int]:
    n = len(successors)
    _check_nodes(n, successors)
    return [0, *successors]


@dataclass
class _Layout:
    depth: list[int]
    entry: list[int]
    cycle: list[int]
    position: list[int]
    cycle_lengths: list[int]


def _layout(table: list[int]) -> _Layout:
    n = len(table) - 1
    depth = [0] * (n + 1)
    entry = [0] * (n + 1)
    cycle = [-1] * (n + 1)
    position = [0] * (n + 1)
    lengths: list[int] = []
    state = [_WHITE] * (n + 1)
    for planet in range(1, n + 1):
        path: list[int] = []
        current = planet
        while state[current] == _WHITE:
            state[current] = _GREY
            path.append(current)
            current = table[current]
        if state[current] == _GREY:
            start = path.index(current)
            ring = path[start:]
            cycle_id = len(lengths)
            lengths.append(len(ring))
            for index, node in enumerate(ring):
                cycle[node] = cycle_id
                position[node] = index
                entry[node] = node
                state[node] = _BLACK
            del path[start:]
        for node in reversed(path):
            succ = table[node]
            depth[node] = depth[succ] + 1
            entry[node] = entry[succ]
            cycle[node] = cycle[succ]
            state[node] = _BLACK
    return _Layout(depth, entry, cycle, position, lengths)


class _Jumper:
    """Binary lifting over a successor table, doubling levels on demand."""

    def __init__(self, table: list[int]) -> None:
        self._levels = [table]

    def jump(self, node: int, steps: int) -> int:
        level = 0
        while steps:
            if level == len(self._levels):
                previous = self._levels[-1]
                self._levels.append([previous[v] for v in previous])
            if steps & 1:
                node = self._levels[level][node]
            steps >>= 1
            level += 1
        return node


def planet_cycles(successors: Sequence[int]) -> list[int]:
    """For each planet, how many distinct planets are visited before a repeat.

    ``successors[i]`` is the planet that planet ``i + 1`` teleports to.
    """
    table = _successor_table(successors)
    layout = _layout(table)
    return [
        layout.depth[p] + layout.cycle_lengths[layout.cycle[p]]
        for p in range(1, len(table))
    ]


def planet_queries(
    successors: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each (start, steps), the planet reached after that many teleports."""
    table = _successor_table(successors)
    n = len(successors)
    jumper = _Jumper(table)
    answers = []
    for start, steps in queries:
        _check_nodes(n, (start,))
        if steps < 0:
            raise ValueError("the number of steps must not be negative")
        answers.append(jumper.jump(start, steps))
    return answers


def planet_distances(
    successors: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int | None]:
    """For each (a, b), the fewest teleports from a to b, or None if unreachable."""
    table = _successor_table(successors)
    n = len(successors)
    layout = _layout(table)
    jumper = _Jumper(table)
    depth, cycle = layout.depth, layout.cycle
    answers: list[int | None] = []
    for a, b in queries:
        _check_nodes(n, (a, b))
        if a == b:
            answers.append(0)
        elif cycle[a] != cycle[b]:
            answers.append(None)
        elif depth[b] == 0:
            ring = layout.cycle_lengths[cycle[a]]
            around = (layout.position[b] - layout.position[layout.entry[a]]) % ring
            answers.append(depth[a] + around)
        elif depth[a] > depth[b] and jumper.jump(a, depth[a] - depth[b]) == b:
            answers.append(depth[a] - depth[b])
        else:
            answers.append(None)
    return answers