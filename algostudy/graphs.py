"""Adjacency-list graphs with traversals, bipartite check and shortest paths."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Iterable, Iterator, Sequence

BOARD_SIZE = 100
DIE_FACES = 6


class Graph:
    """A graph on vertices ``0 .. num_vertices - 1`` stored as adjacency lists.

    Neighbours are reported most recently added first, which fixes the
    order in which traversals visit them.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError("number of vertices must be non-negative")
        self.num_vertices = num_vertices
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(num_vertices)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} is not in the graph")

    def add_edge(self, src: int, dest: int, directed: bool = False, weight: float = 0.0) -> None:
        """Connect ``src`` to ``dest``; undirected edges are added both ways."""
        self._check_vertex(src)
        self._check_vertex(dest)
        self._adjacency[src].append((dest, weight))
        if not directed:
            self._adjacency[dest].append((src, weight))

    def neighbours(self, vertex: int) -> list[tuple[int, float]]:
        """``(destination, weight)`` pairs leaving ``vertex``, newest first."""
        self._check_vertex(vertex)
        return list(reversed(self._adjacency[vertex]))

    def bfs(self, origin: int) -> list[int]:
        """Vertices reachable from ``origin`` in breadth-first order."""
        self._check_vertex(origin)
        seen = {origin}
        order: list[int] = []
        queue = deque([origin])
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for dest, _ in self.neighbours(vertex):
                if dest not in seen:
                    seen.add(dest)
                    queue.append(dest)
        return order

    def dfs(self, origin: int) -> list[int]:
        """Vertices reachable from ``origin`` in depth-first (pre-)order."""
        self._check_vertex(origin)
        seen = {origin}
        order = [origin]
        stack: list[Iterator[tuple[int, float]]] = [iter(self.neighbours(origin))]
        while stack:
            for dest, _ in stack[-1]:
                if dest not in seen:
                    seen.add(dest)
                    order.append(dest)
                    stack.append(iter(self.neighbours(dest)))
                    break
            else:
                stack.pop()
        return order

    def is_bipartite(self, origin: int) -> bool:
        """True when the part reachable from ``origin`` has no edge within one BFS level."""
        self._check_vertex(origin)
        level = {origin: 0}
        queue = deque([origin])
        while queue:
            vertex = queue.popleft()
            for dest, _ in self.neighbours(vertex):
                if dest not in level:
                    level[dest] = level[vertex] + 1
                    queue.append(dest)
                elif level[dest] == level[vertex]:
                    return False
        return True

    def shortest_path(self, origin: int, destination: int) -> float:
        """Length of the lightest path, by Dijkstra's algorithm; ``inf`` if unreachable.

        Edge weights must be non-negative.
        """
        self._check_vertex(origin)
        self._check_vertex(destination)
        distance = {origin: 0.0}
        done: set[int] = set()
        pending = [(0.0, origin)]
        while pending:
            length, vertex = heapq.heappop(pending)
            if vertex in done:
                continue
            if vertex == destination:
                return length
            done.add(vertex)
            for dest, weight in self.neighbours(vertex):
                candidate = length + weight
                if candidate < distance.get(dest, math.inf):
                    distance[dest] = candidate
                    heapq.heappush(pending, (candidate, dest))
        return math.inf


def even_tree_removable_edges(num_vertices: int, edges: Iterable[tuple[int, int]]) -> int:
    """Most edges that can be cut from a tree on vertices ``1 .. num_vertices``
    so that every remaining component has an even number of vertices.
    """
    if num_vertices < 1:
        raise ValueError("a tree needs at least one vertex")
    graph = Graph(num_vertices + 1)
    for a, b in edges:
        if not (1 <= a <= num_vertices and 1 <= b <= num_vertices):
            raise IndexError("tree vertices are numbered from 1")
        graph.add_edge(a, b)

    parent = {1: 0}
    order: list[int] = []
    stack = [1]
    while stack:
        vertex = stack.pop()
        order.append(vertex)
        for dest, _ in graph.neighbours(vertex):
            if dest not in parent:
                parent[dest] = vertex
                stack.append(dest)

    size = dict.fromkeys(order, 1)
    removable = 0
    for vertex in reversed(order):
        if vertex == 1:
            continue
        if size[vertex] % 2 == 0:
            removable += 1
        else:
            size[parent[vertex]] += size[vertex]
    return removable


def snakes_and_ladders_moves(
    ladders: Sequence[tuple[int, int]], snakes: Sequence[tuple[int, int]]
) -> int:
    """Fewest die rolls from square 1 to square 100, or -1 if it cannot be reached.

    ``ladders`` holds ``(bottom, top)`` pairs and ``snakes`` ``(head, tail)``
    pairs; a roll that would pass square 100 is not allowed.
    """
    jumps: dict[int, int] = {}
    for start, end, kind in [(s, e, "ladder") for s, e in ladders] + [
        (s, e, "snake") for s, e in snakes
    ]:
        if not (1 <= start <= BOARD_SIZE and 1 <= end <= BOARD_SIZE):
            raise ValueError(f"{kind} squares must lie on the board")
        if kind == "ladder" and start >= end:
            raise ValueError("a ladder must lead upwards")
        if kind == "snake" and start <= end:
            raise ValueError("a snake must lead downwards")
        if start in jumps:
            raise ValueError(f"square {start} already starts a ladder or snake")
        jumps[start] = end

    rolls = {1: 0}
    queue = deque([1])
    while queue:
        square = queue.popleft()
        if square == BOARD_SIZE:
            return rolls[square]
        for face in range(1, DIE_FACES + 1):
            landing = square + face
            if landing > BOARD_SIZE:
                break
            landing = jumps.get(landing, landing)
            if landing not in rolls:
                rolls[landing] = rolls[square] + 1
                queue.append(landing)
    return -1