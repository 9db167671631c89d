"""
Breadth-first search on unweighted graphs.

Usage:
    from graphkit.traversal import shortest_paths_from

    paths = shortest_paths_from(g, [0])
    paths.dist[4]       # edge count, or None if unreached
    paths.path_to(4)    # [0, ..., 4], or [] if unreached
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from graphkit.graph import Graph

logger = logging.getLogger(__name__)


@dataclass
class ShortestPaths:
    """
    Result of a multi-source BFS.

    Attributes:
        dist: Edge count from the nearest source, None if unreached
        prev: Predecessor on a shortest path, None for sources and unreached
    """

    dist: list[int | None]
    prev: list[int | None]

    def reached(self, v: int) -> bool:
        return self.dist[v] is not None

    def path_to(self, target: int) -> list[int]:
        """
        Walk prev back from target to its source.

        Returns:
            Vertices from source to target, or [] if target was not reached
        """
        if self.dist[target] is None:
            return []

        path = []
        v: int | None = target
        while v is not None:
            path.append(v)
            v = self.prev[v]
        path.reverse()
        return path


def shortest_paths_from(graph: Graph, sources: int | Iterable[int]) -> ShortestPaths:
    """
    Multi-source BFS along outgoing edges.

    Every source starts at distance 0. The queue is strict FIFO and a vertex
    is enqueued only when first discovered, so ties between equidistant
    sources go to the source listed first.

    Args:
        graph: Graph to search
        sources: A vertex id or an iterable of ids

    Returns:
        ShortestPaths with dist/prev for every vertex
    """
    if isinstance(sources, int):
        sources = [sources]

    n = graph.n_vertices
    dist: list[int | None] = [None] * n
    prev: list[int | None] = [None] * n

    queue: deque[int] = deque()
    for s in sources:
        graph.check_vertex(s)
        if dist[s] is None:
            dist[s] = 0
            queue.append(s)

    while queue:
        v = queue.popleft()
        next_dist = dist[v] + 1
        for u, _ in graph.neighbors(v):
            if dist[u] is None:
                dist[u] = next_dist
                prev[u] = v
                queue.append(u)

    logger.debug(f"BFS reached {sum(d is not None for d in dist)}/{n} vertices")
    return ShortestPaths(dist=dist, prev=prev)


def find_shortest_path(graph: Graph, source: int, target: int) -> list[int]:
    """Fewest-edges path from source to target, or [] if none exists."""
    graph.check_vertex(target)
    return shortest_paths_from(graph, source).path_to(target)


def shortest_distance(graph: Graph, source: int, target: int) -> int | None:
    graph.check_vertex(target)
    return shortest_paths_from(graph, source).dist[target]


def _undirected_neighbors(graph: Graph, v: int) -> Iterable[int]:
    for u, _ in graph.neighbors(v):
        yield u
    if graph.directed:
        for u, _ in graph.predecessors(v):
            yield u


def is_bipartite(graph: Graph) -> bool:
    """
    Check whether vertices can be two-coloured so that no edge is monochrome.

    Edge direction is ignored. A self-loop makes the graph non-bipartite.
    """
    color: list[int | None] = [None] * graph.n_vertices

    for start in range(graph.n_vertices):
        if color[start] is not None:
            continue
        color[start] = 0
        queue = deque([start])
        while queue:
            v = queue.popleft()
            for u in _undirected_neighbors(graph, v):
                if color[u] is None:
                    color[u] = 1 - color[v]
                    queue.append(u)
                elif color[u] == color[v]:
                    logger.debug(f"Odd cycle through edge {v}-{u}")
                    return False
    return True


def is_connected(graph: Graph, ignore: Sequence[bool] | None = None) -> bool:
    """
    Check that one BFS, ignoring direction, reaches every non-ignored vertex.

    Args:
        graph: Graph to check
        ignore: Per-vertex mask of vertices to leave out (e.g. isolated ones)

    Returns:
        False when no vertex is left to check
    """
    n = graph.n_vertices
    if ignore is None:
        ignore = [False] * n

    start = next((v for v in range(n) if not ignore[v]), None)
    if start is None:
        return False

    visited = [False] * n
    visited[start] = True
    queue = deque([start])
    while queue:
        v = queue.popleft()
        for u in _undirected_neighbors(graph, v):
            if not visited[u]:
                visited[u] = True
                queue.append(u)

    return all(visited[v] or ignore[v] for v in range(n))
