"""Shortest, cheapest and longest routes on weighted and unweighted graphs."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable
from math import inf

MOD = 1_000_000_007


def _check_nodes(n: int, nodes: Iterable[int]) -> None:
    for node in nodes:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside 1..{n}")


def _weighted(n: int, edges: Iterable[tuple[int, int, int]]) -> list[list[tuple[int, int]]]:
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for a, b, w in edges:
        _check_nodes(n, (a, b))
        adjacency[a].append((b, w))
    return adjacency


def _plain(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        _check_nodes(n, (a, b))
        adjacency[a].append(b)
    return adjacency


def _topological_order(adjacency: list[list[int]]) -> list[int]:
    n = len(adjacency) - 1
    indegree = [0] * (n + 1)
    for targets in adjacency:
        for t in targets:
            indegree[t] += 1
    queue = deque(v for v in range(1, n + 1) if indegree[v] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adjacency[node]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                queue.append(nxt)
    if len(order) != n:
        raise ValueError("the graph must not contain a cycle")
    return order


def shortest_routes(n: int, flights: Iterable[tuple[int, int, int]]) -> list[int | None]:
    """Cheapest price from city 1 to each city 1..n; None where unreachable."""
    if n < 1:
        raise ValueError("there must be at least one city")
    adjacency = _weighted(n, flights)
    dist: list[float] = [inf] * (n + 1)
    dist[1] = 0
    heap = [(0, 1)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nxt, w in adjacency[node]:
            if d + w < dist[nxt]:
                dist[nxt] = d + w
                heapq.heappush(heap, (d + w, nxt))
    return [None if d == inf else int(d) for d in dist[1:]]


def all_pairs_shortest(
    n: int, roads: Iterable[tuple[int, int, int]], queries: Iterable[tuple[int, int]]
) -> list[int | None]:
    """Shortest undirected distance for each (a, b) query; None if unconnected."""
    dist: list[list[float]] = [[inf] * (n + 1) for _ in range(n + 1)]
    for v in range(1, n + 1):
        dist[v][v] = 0
    for a, b, w in roads:
        _check_nodes(n, (a, b))
        if a != b and w < dist[a][b]:
            dist[a][b] = dist[b][a] = w
    for k in range(1, n + 1):
        through = dist[k]
        for i in range(1, n + 1):
            row = dist[i]
            to_k = row[k]
            if to_k == inf:
                continue
            for j in range(1, n + 1):
                candidate = to_k + through[j]
                if candidate < row[j]:
                    row[j] = candidate
    answers: list[int | None] = []
    for a, b in queries:
        _check_nodes(n, (a, b))
        d = dist[a][b]
        answers.append(None if d == inf else int(d))
    return answers


def flight_discount(n: int, flights: Iterable[tuple[int, int, int]]) -> int | None:
    """Cheapest price from 1 to n when one flight may be bought at half price
    (rounded down); None if n cannot be reached."""
    if n < 1:
        raise ValueError("there must be at least one city")
    adjacency = _weighted(n, flights)
    dist: list[list[float]] = [[inf, inf] for _ in range(n + 1)]
    dist[1][0] = 0
    heap = [(0, 1, 0)]
    while heap:
        d, node, used = heapq.heappop(heap)
        if d > dist[node][used]:
            continue
        for nxt, w in adjacency[node]:
            if d + w < dist[nxt][used]:
                dist[nxt][used] = d + w
                heapq.heappush(heap, (d + w, nxt, used))
            if not used and d + w // 2 < dist[nxt][1]:
                dist[nxt][1] = d + w // 2
                heapq.heappush(heap, (d + w // 2, nxt, 1))
    best = min(dist[n])
    return None if best == inf else int(best)


def k_cheapest_routes(n: int, flights: Iterable[tuple[int, int, int]], k: int) -> list[int]:
    """Prices of the k cheapest routes from 1 to n, ascending (fewer if fewer exist)."""
    if n < 1:
        raise ValueError("there must be at least one city")
    if k < 1:
        raise ValueError("k must be a positive integer")
    adjacency = _weighted(n, flights)
    visits = [0] * (n + 1)
    prices: list[int] = []
    heap = [(0, 1)]
    while heap:
        cost, node = heapq.heappop(heap)
        if visits[node] >= k:
            continue
        visits[node] += 1
        if node == n:
            prices.append(cost)
            if len(prices) == k:
                break
        for nxt, w in adjacency[node]:
            if visits[nxt] < k:
                heapq.heappush(heap, (cost + w, nxt))
    return prices


def negative_cycle(n: int, edges: Iterable[tuple[int, int, int]]) -> list[int] | None:
    """A cycle of negative total weight, first node repeated at the end, or None."""
    edge_list = list(edges)
    for a, b, _ in edge_list:
        _check_nodes(n, (a, b))
    dist = [0] * (n + 1)
    parent = [0] * (n + 1)
    last = None
    for _ in range(n):
        last = None
        for s, t, w in edge_list:
            if dist[s] + w < dist[t]:
                dist[t] = dist[s] + w
                parent[t] = s
                last = t
        if last is None:
            return None
    node = last
    for _ in range(n):
        node = parent[node]
    cycle = [node]
    step = parent[node]
    while step != node:
        cycle.append(step)
        step = parent[step]
    cycle.append(node)
    cycle.reverse()
    return cycle


def _reachable(adjacency: list[list[int]], sources: Iterable[int]) -> set[int]:
    seen = set(sources)
    queue = deque(seen)
    while queue:
        node = queue.popleft()
        for nxt in adjacency[node]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def high_score(n: int, tunnels: Iterable[tuple[int, int, int]]) -> int | None:
    """Largest score on a walk from 1 to n; None if it can grow without bound."""
    if n < 1:
        raise ValueError("there must be at least one room")
    edge_list = list(tunnels)
    adjacency = _plain(n, ((a, b) for a, b, _ in edge_list))
    best: dict[int, int] = {1: 0}
    for _ in range(n - 1):
        changed = False
        for s, t, w in edge_list:
            if s in best and (t not in best or best[s] + w > best[t]):
                best[t] = best[s] + w
                changed = True
        if not changed:
            break
    if n not in best:
        raise ValueError(f"room {n} cannot be reached from room 1")
    growing = [t for s, t, w in edge_list if s in best and best[s] + w > best[t]]
    if n in _reachable(adjacency, growing):
        return None
    return best[n]


def investigation(
    n: int, flights: Iterable[tuple[int, int, int]]
) -> tuple[int, int, int, int] | None:
    """(cheapest price, number of cheapest routes mod 1e9+7, fewest and most
    flights on a cheapest route) from 1 to n, or None if n is unreachable."""
    if n < 1:
        raise ValueError("there must be at least one city")
    adjacency = _weighted(n, flights)
    dist: list[float] = [inf] * (n + 1)
    ways = [0] * (n + 1)
    fewest = [0] * (n + 1)
    most = [0] * (n + 1)
    dist[1] = 0
    ways[1] = 1
    heap = [(0, 1)]
    done = [False] * (n + 1)
    while heap:
        d, node = heapq.heappop(heap)
        if done[node] or d > dist[node]:
            continue
        done[node] = True
        for nxt, w in adjacency[node]:
            candidate = d + w
            if candidate < dist[nxt]:
                dist[nxt] = candidate
                ways[nxt] = ways[node]
                fewest[nxt] = fewest[node] + 1
                most[nxt] = most[node] + 1
                heapq.heappush(heap, (candidate, nxt))
            elif candidate == dist[nxt]:
                ways[nxt] = (ways[nxt] + ways[node]) % MOD
                fewest[nxt] = min(fewest[nxt], fewest[node] + 1)
                most[nxt] = max(most[nxt], most[node] + 1)
    if dist[n] == inf:
        return None
    return int(dist[n]), ways[n] % MOD, fewest[n], most[n]


def game_routes(n: int, teleporters: Iterable[tuple[int, int]]) -> int:
    """Number of routes from level 1 to level n in an acyclic graph, mod 1e9+7."""
    if n < 1:
        raise ValueError("there must be at least one level")
    adjacency = _plain(n, teleporters)
    ways = [0] * (n + 1)
    ways[1] = 1
    for node in _topological_order(adjacency):
        if ways[node]:
            for nxt in adjacency[node]:
                ways[nxt] = (ways[nxt] + ways[node]) % MOD
    return ways[n]


def longest_flight_route(n: int, flights: Iterable[tuple[int, int]]) -> list[int] | None:
    """Route from 1 to n visiting the most cities in an acyclic graph, or None."""
    if n < 1:
        raise ValueError("there must be at least one city")
    adjacency = _plain(n, flights)
    length = [0] * (n + 1)
    parent = [0] * (n + 1)
    length[1] = 1
    for node in _topological_order(adjacency):
        if not length[node]:
            continue
        for nxt in adjacency[node]:
            if length[node] + 1 > length[nxt]:
                length[nxt] = length[node] + 1
                parent[nxt] = node
    if not length[n]:
        return None
    route = [n]
    while route[-1] != 1:
        route.append(parent[route[-1]])
    return route[::-1]