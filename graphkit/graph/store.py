"""
Adjacency-list graph store over dense integer vertex ids.

Usage:
    from graphkit.graph import Graph

    g = Graph(4, directed=False)
    e = g.add_edge(0, 1)
    g.neighbors(0)        # [(1, e)]
    g.is_multi_edge(0, 1) # False

Every call to add_edge creates half-edges with integer ids. An undirected
edge is the pair (e, e ^ 1); e is even and is the canonical id returned by
add_edge. Removing either half removes both.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from graphkit.config import ALLOW_MULTI_EDGES, VALIDATE_VERTICES
from graphkit.errors import EdgeNotFoundError, VertexOutOfRangeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """
    A single (half-)edge of the store.

    Attributes:
        id: Edge id as returned by Graph.add_edge
        source: Tail vertex
        target: Head vertex
        weight: Integer weight (1 unless given)
    """

    id: int
    source: int
    target: int
    weight: int = 1


class Graph:
    """
    Directed or undirected multigraph with O(1) amortized edge insertion.

    Per-vertex state is kept in parallel lists indexed by vertex id, so
    add_vertex must extend each of them.

    Attributes:
        directed: Whether edges are one-way
        multi_edges: Whether parallel edges are stored separately
    """

    def __init__(
        self,
        n_vertices: int = 0,
        directed: bool = False,
        multi_edges: bool = ALLOW_MULTI_EDGES,
        validate: bool = VALIDATE_VERTICES,
    ) -> None:
        """
        Create a graph with vertices 0..n_vertices-1 and no edges.

        Args:
            n_vertices: Initial vertex count
            directed: Store one half-edge per add_edge instead of two
            multi_edges: Keep parallel edges (otherwise add_edge dedupes)
            validate: Check vertex ids at construction-time operations
        """
        if n_vertices < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n_vertices}")

        self.directed = directed
        self.multi_edges = multi_edges
        self._validate = validate

        # Per-vertex structures
        self._outgoing: list[list[int]] = [[] for _ in range(n_vertices)]
        self._incoming: list[list[int]] = [[] for _ in range(n_vertices)]
        self._out_degree: list[int] = [0] * n_vertices
        self._in_degree: list[int] = [0] * n_vertices
        self._parallel: list[Counter[int]] = [Counter() for _ in range(n_vertices)]

        # Per-half-edge structures
        self._source: list[int] = []
        self._target: list[int] = []
        self._weight: list[int] = []
        self._alive: list[bool] = []

        self._n_edges = 0

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n_vertices={self.n_vertices}, n_edges={self.n_edges}, {kind})"

    # =========================================================================
    # Construction
    # =========================================================================

    @property
    def n_vertices(self) -> int:
        return len(self._outgoing)

    @property
    def n_edges(self) -> int:
        """Number of alive logical edges (an undirected edge counts once)."""
        return self._n_edges

    def add_vertex(self) -> int:
        """Append a vertex and return its id."""
        self._outgoing.append([])
        self._incoming.append([])
        self._out_degree.append(0)
        self._in_degree.append(0)
        self._parallel.append(Counter())
        return len(self._outgoing) - 1

    def add_edge(self, source: int, target: int, weight: int = 1) -> int:
        """
        Insert an edge and return its id.

        For undirected graphs the reverse half-edge (id + 1) is inserted in
        the same call. With multi_edges off, an existing alive edge
        source->target is returned unchanged.
        """
        self.check_vertex(source)
        self.check_vertex(target)

        if not self.multi_edges and self._parallel[source][target] > 0:
            return self.canonical_edge(self._find_edge(source, target))

        edge_id = self._append_half(source, target, weight)
        if not self.directed:
            # an undirected self-loop is one parallel edge v->v, not two
            self._append_half(target, source, weight, count_parallel=source != target)
        self._n_edges += 1
        return edge_id

    def _append_half(
        self, source: int, target: int, weight: int, count_parallel: bool = True
    ) -> int:
        edge_id = len(self._source)
        self._source.append(source)
        self._target.append(target)
        self._weight.append(weight)
        self._alive.append(True)

        self._outgoing[source].append(edge_id)
        self._out_degree[source] += 1
        if count_parallel:
            self._parallel[source][target] += 1
        if self.directed:
            self._incoming[target].append(edge_id)
            self._in_degree[target] += 1
        return edge_id

    def delete_edge(self, source: int, target: int) -> int:
        """
        Remove one alive edge source->target and return its id.

        Raises:
            EdgeNotFoundError: If no such edge is alive
        """
        self.check_vertex(source)
        self.check_vertex(target)
        edge_id = self._find_edge(source, target)
        self.remove_edge(edge_id)
        return edge_id

    def remove_edge(self, edge_id: int) -> None:
        """Remove an edge by id, together with its reverse half when undirected."""
        if not 0 <= edge_id < len(self._alive) or not self._alive[edge_id]:
            raise EdgeNotFoundError(edge_id)

        self._kill_half(edge_id)
        if not self.directed:
            loop = self._source[edge_id] == self._target[edge_id]
            self._kill_half(edge_id ^ 1, count_parallel=not loop)
        self._n_edges -= 1

    def _kill_half(self, edge_id: int, count_parallel: bool = True) -> None:
        source = self._source[edge_id]
        target = self._target[edge_id]
        self._alive[edge_id] = False
        self._out_degree[source] -= 1
        if count_parallel:
            self._parallel[source][target] -= 1
        if self.directed:
            self._in_degree[target] -= 1

    def _find_edge(self, source: int, target: int) -> int:
        if self._parallel[source][target] > 0:
            for edge_id in self._outgoing[source]:
                if self._alive[edge_id] and self._target[edge_id] == target:
                    return edge_id
        raise EdgeNotFoundError((source, target))

    def check_vertex(self, v: int) -> None:
        """Raise VertexOutOfRangeError for an unknown id (when validation is on)."""
        if self._validate and not 0 <= v < len(self._outgoing):
            raise VertexOutOfRangeError(v, len(self._outgoing))

    # =========================================================================
    # Adjacency Accessors
    # =========================================================================

    def neighbors(self, v: int) -> list[tuple[int, int]]:
        """Outgoing (neighbor, edge_id) pairs of v in insertion order."""
        self.check_vertex(v)
        alive = self._alive
        target = self._target
        return [(target[e], e) for e in self._outgoing[v] if alive[e]]

    def predecessors(self, v: int) -> list[tuple[int, int]]:
        """
        Incoming (neighbor, edge_id) pairs of v.

        The edge id is the half-edge pointing at v. Undirected graphs return
        the same vertices as neighbors().
        """
        self.check_vertex(v)
        if not self.directed:
            return self.neighbors(v)
        alive = self._alive
        source = self._source
        return [(source[e], e) for e in self._incoming[v] if alive[e]]

    def edge_ids(self, v: int) -> list[int]:
        """Alive outgoing half-edge ids of v."""
        self.check_vertex(v)
        alive = self._alive
        return [e for e in self._outgoing[v] if alive[e]]

    def degree(self, v: int) -> int:
        """Out-degree. For undirected graphs a self-loop counts twice."""
        self.check_vertex(v)
        return self._out_degree[v]

    def in_degree(self, v: int) -> int:
        self.check_vertex(v)
        if not self.directed:
            return self._out_degree[v]
        return self._in_degree[v]

    def out_degrees(self) -> np.ndarray:
        return np.array(self._out_degree, dtype=np.int64)

    def in_degrees(self) -> np.ndarray:
        if not self.directed:
            return self.out_degrees()
        return np.array(self._in_degree, dtype=np.int64)

    def is_multi_edge(self, source: int, target: int) -> bool:
        """Whether more than one alive edge connects source to target."""
        self.check_vertex(source)
        self.check_vertex(target)
        return self._parallel[source][target] > 1

    def has_edge(self, source: int, target: int) -> bool:
        self.check_vertex(source)
        self.check_vertex(target)
        return self._parallel[source][target] > 0

    # =========================================================================
    # Edge Accessors
    # =========================================================================

    def edge(self, edge_id: int) -> Edge:
        """Get a half-edge by id (alive or not)."""
        if not 0 <= edge_id < len(self._source):
            raise EdgeNotFoundError(edge_id)
        return Edge(
            id=edge_id,
            source=self._source[edge_id],
            target=self._target[edge_id],
            weight=self._weight[edge_id],
        )

    def edge_target(self, edge_id: int) -> int:
        return self._target[edge_id]

    def edge_weight(self, edge_id: int) -> int:
        return self._weight[edge_id]

    def is_alive(self, edge_id: int) -> bool:
        return self._alive[edge_id]

    def canonical_edge(self, edge_id: int) -> int:
        """Id returned by add_edge for the edge this half belongs to."""
        if self.directed:
            return edge_id
        return edge_id & ~1

    def edges(self) -> Iterator[Edge]:
        """Iterate alive logical edges, each undirected edge once."""
        step = 1 if self.directed else 2
        for edge_id in range(0, len(self._source), step):
            if self._alive[edge_id]:
                yield self.edge(edge_id)

    # =========================================================================
    # Derived Graphs
    # =========================================================================

    def copy(self) -> Graph:
        """Copy of the alive edges. Edge ids are renumbered densely."""
        clone = Graph(
            self.n_vertices,
            directed=self.directed,
            multi_edges=self.multi_edges,
            validate=self._validate,
        )
        for edge in self.edges():
            clone.add_edge(edge.source, edge.target, edge.weight)
        return clone

    def reversed(self) -> Graph:
        """Graph with every directed edge flipped. Undirected graphs are copied."""
        if not self.directed:
            return self.copy()
        rev = Graph(
            self.n_vertices,
            directed=True,
            multi_edges=self.multi_edges,
            validate=self._validate,
        )
        for edge in self.edges():
            rev.add_edge(edge.target, edge.source, edge.weight)
        return rev

    def adjacency_matrix(self) -> np.ndarray:
        """n x n matrix of alive parallel-edge counts."""
        n = self.n_vertices
        matrix = np.zeros((n, n), dtype=np.int64)
        for v in range(n):
            for u, count in self._parallel[v].items():
                matrix[v, u] = count
        return matrix


def new_graph(n_vertices: int, directed: bool) -> Graph:
    """Create an empty graph with n_vertices vertices."""
    return Graph(n_vertices, directed=directed)


def insert_chain(graph: Graph, begin: int, end: int, n_links: int) -> list[int]:
    """
    Connect begin to end through n_links fresh intermediate vertices.

    Turns an edge of integer length n_links + 1 into unit edges so BFS
    can be used instead of Dijkstra. Nothing is added when n_links is 0.

    Returns:
        Ids of the new vertices in path order
    """
    if n_links <= 0:
        return []

    links = []
    prev = begin
    for _ in range(n_links):
        link = graph.add_vertex()
        graph.add_edge(prev, link)
        links.append(link)
        prev = link
    graph.add_edge(prev, end)
    logger.debug(f"Inserted chain {begin} -> {end} through {n_links} vertices")
    return links
