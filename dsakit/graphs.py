"""Adjacency-list graphs with traversals, cycle checks, orderings and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass


class Graph:
    """A graph on vertices 0..vertices-1 stored as adjacency lists."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError("the number of vertices must not be negative")
        self.vertices = vertices
        self.directed = directed
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise IndexError(f"vertex {vertex} is not in 0..{self.vertices - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Add an edge from u to v, and from v to u when the graph is undirected."""
        self._check(u)
        self._check(v)
        self._adjacency[u].append(v)
        if not self.directed:
            self._adjacency[v].append(u)

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Vertices reachable from vertex by one edge, in insertion order."""
        self._check(vertex)
        return tuple(self._adjacency[vertex])

    def describe(self) -> str:
        """One line per vertex listing its neighbours, each followed by a comma."""
        return "\n".join(
            f"vertex {vertex}:" + "".join(f"{n}," for n in targets)
            for vertex, targets in enumerate(self._adjacency)
        )

    def bfs(self, start: int = 0) -> list[int]:
        """Vertices in breadth-first order from start."""
        self._check(start)
        visited = {start}
        order: list[int] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for nxt in self._adjacency[vertex]:
                if nxt not in visited:
                    visited.add(nxt)
                    pending.append(nxt)
        return order

    def _dfs_from(self, start: int, visited: set[int]) -> list[int]:
        visited.add(start)
        order = [start]
        stack = [iter(self._adjacency[start])]
        while stack:
            for nxt in stack[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    stack.append(iter(self._adjacency[nxt]))
                    break
            else:
                stack.pop()
        return order

    def dfs(self, start: int = 0) -> list[int]:
        """Vertices in depth-first preorder from start."""
        self._check(start)
        return self._dfs_from(start, set())

    def has_path(self, source: int, destination: int) -> bool:
        """True when destination can be reached from source."""
        self._check(source)
        self._check(destination)
        if source == destination:
            return True
        return destination in self._dfs_from(source, set())

    def has_cycle(self) -> bool:
        """True when the graph contains a cycle."""
        return self._directed_cycle() if self.directed else self._undirected_cycle()

    def _directed_cycle(self) -> bool:
        # 0: unseen, 1: on the current path, 2: finished
        state = [0] * self.vertices
        for start in range(self.vertices):
            if state[start]:
                continue
            state[start] = 1
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                vertex, targets = stack[-1]
                for nxt in targets:
                    if state[nxt] == 1:
                        return True
                    if state[nxt] == 0:
                        state[nxt] = 1
                        stack.append((nxt, iter(self._adjacency[nxt])))
                        break
                else:
                    state[vertex] = 2
                    stack.pop()
        return False

    def _undirected_cycle(self) -> bool:
        visited: set[int] = set()
        for start in range(self.vertices):
            if start in visited:
                continue
            visited.add(start)
            stack = [(start, -1, iter(self._adjacency[start]))]
            while stack:
                vertex, parent, targets = stack[-1]
                for nxt in targets:
                    if nxt not in visited:
                        visited.add(nxt)
                        stack.append((nxt, vertex, iter(self._adjacency[nxt])))
                        break
                    if nxt != parent:
                        return True
                else:
                    stack.pop()
        return False

    def connected_components(self) -> list[list[int]]:
        """Groups of vertices reachable from one another, each in depth-first order."""
        visited: set[int] = set()
        return [
            self._dfs_from(vertex, visited)
            for vertex in range(self.vertices)
            if vertex not in visited
        ]

    def is_bipartite(self) -> bool:
        """True when the vertices can be coloured with two colours along every edge."""
        colour: dict[int, int] = {}
        for start in range(self.vertices):
            if start in colour:
                continue
            colour[start] = 0
            pending = deque([start])
            while pending:
                vertex = pending.popleft()
                for nxt in self._adjacency[vertex]:
                    if nxt not in colour:
                        colour[nxt] = 1 - colour[vertex]
                        pending.append(nxt)
                    elif colour[nxt] == colour[vertex]:
                        return False
        return True

    def _require_dag(self) -> None:
        if not self.directed:
            raise ValueError("a topological order needs a directed graph")
        if self._directed_cycle():
            raise ValueError("the graph has a cycle")

    def topological_sort(self) -> list[int]:
        """A topological order found by depth-first search."""
        self._require_dag()
        visited: set[int] = set()
        finished: list[int] = []
        for start in range(self.vertices):
            if start in visited:
                continue
            visited.add(start)
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                vertex, targets = stack[-1]
                for nxt in targets:
                    if nxt not in visited:
                        visited.add(nxt)
                        stack.append((nxt, iter(self._adjacency[nxt])))
                        break
                else:
                    finished.append(vertex)
                    stack.pop()
        return finished[::-1]

    def kahn_topological_sort(self) -> list[int]:
        """A topological order found by repeatedly removing vertices of in-degree zero."""
        if not self.directed:
            raise ValueError("a topological order needs a directed graph")
        indegree = [0] * self.vertices
        for targets in self._adjacency:
            for target in targets:
                indegree[target] += 1
        pending = deque(v for v, degree in enumerate(indegree) if degree == 0)
        order: list[int] = []
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for nxt in self._adjacency[vertex]:
                indegree[nxt] -= 1
                if indegree[nxt] == 0:
                    pending.append(nxt)
        if len(order) < self.vertices:
            raise ValueError("the graph has a cycle")
        return order


@dataclass(frozen=True)
class Edge:
    """A weighted edge to a target vertex."""

    target: int
    weight: int


def dijkstra(adjacency: Sequence[Sequence[Edge]], source: int) -> list[float]:
    """Shortest distance from source to every vertex; unreachable ones are infinite."""
    count = len(adjacency)
    if not 0 <= source < count:
        raise IndexError(f"vertex {source} is not in 0..{count - 1}")
    for edges in adjacency:
        for edge in edges:
            if edge.weight < 0:
                raise ValueError("edge weights must not be negative")
            if not 0 <= edge.target < count:
                raise IndexError(f"vertex {edge.target} is not in 0..{count - 1}")
    dist: list[float] = [math.inf] * count
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        distance, vertex = heapq.heappop(heap)
        if distance > dist[vertex]:
            continue
        for edge in adjacency[vertex]:
            candidate = distance + edge.weight
            if candidate < dist[edge.target]:
                dist[edge.target] = candidate
                heapq.heappush(heap, (candidate, edge.target))
    return dist