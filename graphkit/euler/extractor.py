"""
Euler path and circuit extraction (Hierholzer's algorithm).

The extractor consumes the edges of the graph it walks: on success the
graph is left without edges. Pass consume=False to work on a copy.
Callers must not touch the graph from elsewhere while it runs.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from graphkit.graph import Graph
from graphkit.traversal import is_connected

logger = logging.getLogger(__name__)


def _find_start(graph: Graph, isolated: Sequence[bool] | None, circuit: bool) -> int | None:
    """
    Check connectivity and degree balance; pick where the walk must begin.

    Returns:
        Start vertex, or None if no Euler path (circuit) exists
    """
    if graph.n_edges == 0:
        return None

    out_deg = graph.out_degrees()
    in_deg = graph.in_degrees()
    if isolated is None:
        isolated_mask = (out_deg + in_deg) == 0
    else:
        isolated_mask = np.asarray(isolated, dtype=bool)
        if np.any(isolated_mask & ((out_deg + in_deg) > 0)):
            logger.warning("No Euler path: a vertex marked isolated still has edges")
            return None

    if not is_connected(graph, ignore=isolated_mask.tolist()):
        logger.debug("No Euler path: non-isolated vertices are not connected")
        return None

    candidates = np.flatnonzero((out_deg > 0) & ~isolated_mask)
    if candidates.size == 0:
        return None
    first = int(candidates[0])

    if graph.directed:
        balance = out_deg - in_deg
        if np.any(np.abs(balance) > 1):
            logger.warning("No Euler path: a vertex is off balance by more than one edge")
            return None
        starts = np.flatnonzero(balance == 1)
        ends = np.flatnonzero(balance == -1)
        if starts.size == 0 and ends.size == 0:
            return first
        if starts.size == 1 and ends.size == 1 and not circuit:
            return int(starts[0])
    else:
        odd = np.flatnonzero(out_deg % 2 == 1)
        if odd.size == 0:
            return first
        if odd.size == 2 and not circuit:
            return int(odd[0])

    logger.warning("No Euler path: degree balance conditions do not hold")
    return None


def _walk(graph: Graph, start: int) -> list[int]:
    # Snapshot of edge ids per vertex; consumed edges are skipped by cursor.
    slots = [graph.edge_ids(v) for v in range(graph.n_vertices)]
    cursor = [0] * graph.n_vertices

    path: list[int] = []
    stack = [start]
    while stack:
        v = stack[-1]
        edges = slots[v]
        while cursor[v] < len(edges) and not graph.is_alive(edges[cursor[v]]):
            cursor[v] += 1

        if cursor[v] == len(edges):
            path.append(stack.pop())
            continue

        edge_id = edges[cursor[v]]
        cursor[v] += 1
        graph.remove_edge(edge_id)
        stack.append(graph.edge_target(edge_id))

    path.reverse()
    return path


def _extract(
    graph: Graph, isolated: Sequence[bool] | None, circuit: bool, consume: bool
) -> list[int]:
    start = _find_start(graph, isolated, circuit)
    if start is None:
        return []

    work = graph if consume else graph.copy()
    n_edges = work.n_edges
    path = _walk(work, start)
    if len(path) != n_edges + 1:
        raise RuntimeError(f"Euler walk used {len(path) - 1} of {n_edges} edges")
    logger.debug(f"Euler {'circuit' if circuit else 'path'} over {n_edges} edges from {start}")
    return path


def find_euler_path(
    graph: Graph, isolated: Sequence[bool] | None = None, consume: bool = True
) -> list[int]:
    """
    Walk that uses every edge exactly once.

    Args:
        graph: Graph to walk; its edges are removed unless consume=False
        isolated: Per-vertex mask of vertices excluded from the connectivity
            check. Defaults to the vertices without edges. A masked vertex
            that still has edges means no path exists.
        consume: Remove edges from graph itself rather than from a copy

    Returns:
        n_edges + 1 vertices, or [] if no Euler path exists (the graph is
        untouched in that case)
    """
    return _extract(graph, isolated, circuit=False, consume=consume)


def find_euler_circuit(
    graph: Graph, isolated: Sequence[bool] | None = None, consume: bool = True
) -> list[int]:
    """Closed Euler walk (first vertex == last vertex), or []."""
    return _extract(graph, isolated, circuit=True, consume=consume)


def has_euler_path(graph: Graph, isolated: Sequence[bool] | None = None) -> bool:
    """Check the Euler path preconditions without touching the graph."""
    return _find_start(graph, isolated, circuit=False) is not None
