"""
Exceptions raised on precondition violations.

Absence of a result (unreachable vertex, no Euler path, cyclic graph for a
topological sort) is never an exception; algorithms return None or an
empty list instead.
"""


class GraphError(Exception):
    """Base class for graphkit errors."""


class VertexOutOfRangeError(GraphError, IndexError):
    """A vertex id outside [0, n_vertices)."""

    def __init__(self, vertex: int, n_vertices: int) -> None:
        super().__init__(f"Vertex {vertex} out of range [0, {n_vertices})")
        self.vertex = vertex
        self.n_vertices = n_vertices


class EdgeNotFoundError(GraphError, KeyError):
    """No alive edge matches the requested endpoints or id."""


class NegativeWeightError(GraphError, ValueError):
    """Dijkstra was asked to run on a graph with a negative edge weight."""
