"""
Topological order, directed cycles and strongly connected components.

Usage:
    from graphkit.condensation import build_condensation

    cond = build_condensation(g)
    cond.components.ids[v]   # SCC of v
    cond.graph               # DAG over SCC ids

All searches follow outgoing edges and run on an explicit stack.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from graphkit.graph import Components, Graph

logger = logging.getLogger(__name__)

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass
class Condensation:
    """
    Graph of strongly connected components.

    Attributes:
        graph: One vertex per component; one edge per original edge between
            different components (duplicates kept)
        components: Component id of every original vertex
    """

    graph: Graph
    components: Components


def _walk(graph: Graph, stop_on_cycle: bool) -> tuple[list[int], list[int] | None]:
    """
    Depth-first search over all vertices recording finish order.

    Args:
        graph: Graph to walk
        stop_on_cycle: Return as soon as an edge into a vertex still on the
            stack is found

    Returns:
        (vertices in post-order, cycle found or None)
    """
    n = graph.n_vertices
    color = [WHITE] * n
    parent: list[int | None] = [None] * n
    order: list[int] = []

    for root in range(n):
        if color[root] != WHITE:
            continue

        color[root] = GRAY
        stack = [(root, iter(graph.neighbors(root)))]
        while stack:
            v, neighbors = stack[-1]
            for u, _ in neighbors:
                if color[u] == WHITE:
                    color[u] = GRAY
                    parent[u] = v
                    stack.append((u, iter(graph.neighbors(u))))
                    break
                if color[u] == GRAY and stop_on_cycle:
                    cycle = [v]
                    w = v
                    while w != u:
                        w = parent[w]
                        cycle.append(w)
                    cycle.reverse()
                    return order, cycle
            else:
                stack.pop()
                color[v] = BLACK
                order.append(v)

    return order, None


def top_sort(graph: Graph) -> list[int]:
    """
    Order vertices so every edge points forward.

    Returns:
        Reversed DFS post-order, or [] if the graph has a cycle
    """
    order, cycle = _walk(graph, stop_on_cycle=True)
    if cycle is not None:
        logger.info(f"No topological order: cycle through {cycle[0]}")
        return []
    order.reverse()
    return order


def has_cycle(graph: Graph) -> bool:
    return _walk(graph, stop_on_cycle=True)[1] is not None


def find_cycle(graph: Graph) -> list[int]:
    """
    Find one directed cycle.

    Returns:
        Cycle vertices in edge order (the last one links back to the first),
        or [] if the graph is acyclic
    """
    _, cycle = _walk(graph, stop_on_cycle=True)
    return cycle or []


def strongly_connected_components(graph: Graph) -> Components:
    """
    Kosaraju's algorithm.

    Finish order comes from a DFS of the graph; the reversed graph is then
    flooded from each unassigned vertex in decreasing finish order, one
    component per flood. On an undirected graph this yields the connected
    components.
    """
    order, _ = _walk(graph, stop_on_cycle=False)
    rev = graph.reversed()

    ids: list[int | None] = [None] * graph.n_vertices
    count = 0
    for v in reversed(order):
        if ids[v] is not None:
            continue
        ids[v] = count
        stack = [v]
        while stack:
            w = stack.pop()
            for u, _ in rev.neighbors(w):
                if ids[u] is None:
                    ids[u] = count
                    stack.append(u)
        count += 1

    logger.debug(f"Found {count} strongly connected components in {graph}")
    return Components(count=count, ids=ids)


def build_condensation(graph: Graph, directed: bool = True) -> Condensation:
    """
    Contract every strongly connected component to a single vertex.

    Args:
        graph: Graph to condense
        directed: Build the condensed graph as directed (a DAG) or undirected

    Returns:
        Condensation with the contracted graph and the component mapping
    """
    components = strongly_connected_components(graph)
    condensed = Graph(components.count, directed=directed, multi_edges=True)
    for edge in graph.edges():
        source = components.ids[edge.source]
        target = components.ids[edge.target]
        if source != target:
            condensed.add_edge(source, target)

    return Condensation(graph=condensed, components=components)
