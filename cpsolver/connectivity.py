"""Connectivity problems on undirected and directed graphs."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

FLOOR = "."
WALL = "#"


class DisjointSet:
    """Union-find over the elements 0..size-1 with union by size."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._size = [1] * size
        self.components = size
        self.largest = 1 if size else 0

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Representative of the set holding ``x``."""
        if not 0 <= x < len(self._parent):
            raise IndexError("element out of range")
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; False if they were already one."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self.components -= 1
        self.largest = max(self.largest, self._size[root_a])
        return True

    def component_size(self, x: int) -> int:
        """Number of elements in the set holding ``x``."""
        return self._size[self.find(x)]


def _check_nodes(n: int, nodes: Iterable[int]) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside 1..{n}")


def _undirected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_nodes(n, (a, b))
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _directed(n: int, edges: Iterable[tuple[int, int]]) -> tuple[list[list[int]], list[list[int]]]:
    forward: list[list[int]] = [[] for _ in range(n + 1)]
    backward: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_nodes(n, (a, b))
        forward[a].append(b)
        backward[b].append(a)
    return forward, backward


def building_roads(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """New roads joining the smallest city of each component to the next one."""
    sets = DisjointSet(n + 1)
    for a, b in roads:
        _check_nodes(n, (a, b))
        sets.union(a, b)
    delegates: list[int] = []
    seen: set[int] = set()
    for city in range(1, n + 1):
        root = sets.find(city)
        if root not in seen:
            seen.add(root)
            delegates.append(city)
    return list(zip(delegates, delegates[1:]))


def building_teams(n: int, friendships: Iterable[tuple[int, int]]) -> list[int] | None:
    """Team (1 or 2) of each pupil so that friends differ, or None if impossible.

    The component of pupil 1 is coloured from pupil 1, every other component
    from its largest pupil; pupils without friends (other than 1) join team 2.
    """
    adjacency = _undirected(n, friendships)
    team: dict[int, int] = {}
    roots = [1] + list(range(n, 1, -1)) if n >= 1 else []
    for root in roots:
        if root in team or (root != 1 and not adjacency[root]):
            continue
        team[root] = 1
        queue = deque([root])
        while queue:
            pupil = queue.popleft()
            other = 3 - team[pupil]
            for friend in adjacency[pupil]:
                if friend not in team:
                    team[friend] = other
                    queue.append(friend)
                elif team[friend] != other:
                    return None
    return [team.get(pupil, 2) for pupil in range(1, n + 1)]


def count_rooms(grid: str | Iterable[str]) -> int:
    """Number of 4-connected regions of floor squares ('.') in the map."""
    rows = grid.split() if isinstance(grid, str) else [row.strip() for row in grid]
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("the map must be a rectangle")
    if any(set(row) - {FLOOR, WALL} for row in rows):
        raise ValueError("squares must be '.' (floor) or '#' (wall)")
    floor = {(r, c) for r, row in enumerate(rows) for c, ch in enumerate(row) if ch == FLOOR}
    rooms = 0
    while floor:
        rooms += 1
        queue = deque([floor.pop()])
        while queue:
            r, c = queue.popleft()
            for cell in ((r + 1, c), (r, c + 1), (r - 1, c), (r, c - 1)):
                if cell in floor:
                    floor.remove(cell)
                    queue.append(cell)
    return rooms


def road_construction(n: int, roads: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """After each road: (number of components, size of the largest one)."""
    sets = DisjointSet(n + 1)
    components = n
    report = []
    for a, b in roads:
        _check_nodes(n, (a, b))
        if sets.union(a, b):
            components -= 1
        report.append((components, sets.largest))
    return report


def road_reparation(n: int, roads: Iterable[tuple[int, int, int]]) -> int | None:
    """Cheapest total cost of repairs connecting every city, or None."""
    sets = DisjointSet(n + 1)
    components = n
    total = 0
    for a, b, cost in sorted(roads, key=lambda road: road[2]):
        _check_nodes(n, (a, b))
        if components == 1:
            break
        if sets.union(a, b):
            components -= 1
            total += cost
    return total if components == 1 else None


def planets_and_kingdoms(n: int, teleporters: Iterable[tuple[int, int]]) -> tuple[int, list[int]]:
    """Strongly connected components: (count, kingdom of each planet 1..n).

    Kingdoms are numbered from 1 in the order their first planet appears.
    """
    forward, backward = _directed(n, teleporters)
    visited = [False] * (n + 1)
    finished: list[int] = []
    for start in range(1, n + 1):
        if visited[start]:
            continue
        visited[start] = True
        stack = [(start, iter(forward[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(forward[nxt])))
                    break
            else:
                stack.pop()
                finished.append(node)

    component = [0] * (n + 1)
    count = 0
    for start in reversed(finished):
        if component[start]:
            continue
        count += 1
        component[start] = count
        stack_nodes = [start]
        while stack_nodes:
            node = stack_nodes.pop()
            for prev in backward[node]:
                if not component[prev]:
                    component[prev] = count
                    stack_nodes.append(prev)

    numbering: dict[int, int] = {}
    labels = [numbering.setdefault(component[p], len(numbering) + 1) for p in range(1, n + 1)]
    return len(numbering), labels


def _unreached(adjacency: Sequence[list[int]], n: int) -> int | None:
    seen = {1}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return next((node for node in range(1, n + 1) if node not in seen), None)


def flight_routes_check(n: int, flights: Iterable[tuple[int, int]]) -> tuple[int, int] | None:
    """None if every city reaches every other, else a pair (a, b) with no route a -> b."""
    if n < 1:
        raise ValueError("there must be at least one city")
    forward, backward = _directed(n, flights)
    stuck = _unreached(backward, n)
    if stuck is not None:
        return stuck, 1
    unreachable = _unreached(forward, n)
    if unreachable is not None:
        return 1, unreachable
    return None


def message_route(n: int, connections: Iterable[tuple[int, int]]) -> list[int] | None:
    """Fewest-hop route of computers from 1 to n, or None if there is none."""
    if n < 1:
        raise ValueError("there must be at least one computer")
    adjacency = _undirected(n, connections)
    parent: dict[int, int | None] = {1: None}
    queue = deque([1])
    while queue:
        node = queue.popleft()
        if node == n:
            route = []
            step: int | None = node
            while step is not None:
                route.append(step)
                step = parent[step]
            return route[::-1]
        for nxt in adjacency[node]:
            if nxt not in parent:
                parent[nxt] = node
                queue.append(nxt)
    return None