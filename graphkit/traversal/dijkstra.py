"""
Dijkstra shortest paths for non-negative integer weights.
"""

from __future__ import annotations

import heapq
import logging

from graphkit.errors import NegativeWeightError
from graphkit.graph import Graph

logger = logging.getLogger(__name__)


def _check_weights(graph: Graph) -> None:
    for edge in graph.edges():
        if edge.weight < 0:
            raise NegativeWeightError(
                f"Edge {edge.source}->{edge.target} has negative weight {edge.weight}"
            )


def _dijkstra(graph: Graph, source: int) -> tuple[list[int | None], list[int | None]]:
    """
    Run Dijkstra from source with a lazy-deletion heap.

    Stale heap entries are not removed on relaxation. A vertex popped after
    it was finalized is skipped, so each vertex relaxes its edges once.
    """
    graph.check_vertex(source)
    _check_weights(graph)

    n = graph.n_vertices
    dist: list[int | None] = [None] * n
    prev: list[int | None] = [None] * n
    finalized = [False] * n

    dist[source] = 0
    heap = [(0, source)]
    while heap:
        d, v = heapq.heappop(heap)
        if finalized[v]:
            continue
        finalized[v] = True

        for u, edge_id in graph.neighbors(v):
            candidate = d + graph.edge_weight(edge_id)
            if dist[u] is None or candidate < dist[u]:
                dist[u] = candidate
                prev[u] = v
                heapq.heappush(heap, (candidate, u))

    logger.debug(f"Dijkstra from {source}: finalized {sum(finalized)}/{n} vertices")
    return dist, prev


def shortest_distances_from(graph: Graph, source: int) -> list[int | None]:
    """
    Minimum path weight from source to every vertex.

    Args:
        graph: Graph with non-negative edge weights
        source: Start vertex

    Returns:
        Distance per vertex, None where no path exists

    Raises:
        NegativeWeightError: If any edge weight is negative
    """
    dist, _ = _dijkstra(graph, source)
    return dist


def shortest_weighted_distance(graph: Graph, source: int, target: int) -> int | None:
    graph.check_vertex(target)
    return shortest_distances_from(graph, source)[target]


def shortest_weighted_path(graph: Graph, source: int, target: int) -> tuple[int | None, list[int]]:
    """
    Cheapest path from source to target.

    Returns:
        (cost, vertices) or (None, []) if target is unreachable
    """
    graph.check_vertex(target)
    dist, prev = _dijkstra(graph, source)
    if dist[target] is None:
        return None, []

    path = []
    v: int | None = target
    while v is not None:
        path.append(v)
        v = prev[v]
    path.reverse()
    return dist[target], path
