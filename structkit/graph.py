"""Adjacency-list graph with breadth-first and depth-first traversal."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, MutableSet
from typing import Generic, TypeVar

V = TypeVar("V", bound=Hashable)


class Graph(Generic[V]):
    """A directed or undirected graph stored as an adjacency list.

    Neighbours keep the order in which their edges were added, and the graph
    keeps the order in which vertices first appeared as an edge's source.
    """

    def __init__(self, num_vertices: int, directed: bool) -> None:
        self.num_vertices = num_vertices
        self.directed = directed
        self._adjacency: dict[V, dict[V, None]] = {}

    def add_edge(self, start: V, end: V) -> None:
        """Add an edge; an undirected graph also gets the reverse edge."""
        self._adjacency.setdefault(start, {})[end] = None
        if not self.directed:
            self._adjacency.setdefault(end, {})[start] = None

    def neighbours(self, vertex: V) -> tuple[V, ...]:
        """Return the vertices reachable by one edge from ``vertex``."""
        return tuple(self._adjacency.get(vertex, ()))

    def bfs(self, start: V) -> list[V]:
        """Return the breadth-first visiting order from ``start``.

        Raises KeyError when ``start`` has no entry in the adjacency list.
        """
        if start not in self._adjacency:
            raise KeyError(start)
        order: list[V] = []
        seen = {start}
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self._adjacency.get(vertex, ()):
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs(self, start: V, visited: MutableSet[V] | None = None) -> list[V]:
        """Return the depth-first visiting order from ``start``.

        Vertices already in ``visited`` are skipped; every vertex visited is
        added to it, so one set can be shared across several calls.
        """
        if visited is None:
            visited = set()
        order: list[V] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            stack.extend(
                neighbour
                for neighbour in self._adjacency.get(vertex, ())
                if neighbour not in visited
            )
        return order

    def dfs_all(self, start: V) -> list[list[V]]:
        """Run depth-first search from ``start``, then from every unvisited vertex.

        Returns one visiting order per search; each begins with its start vertex.
        """
        visited: set[V] = set()
        components = [self.dfs(start, visited)]
        for vertex in list(self._adjacency):
            if vertex not in visited:
                components.append(self.dfs(vertex, visited))
        return components