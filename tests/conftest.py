"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import random
from collections.abc import Callable

import pytest

from graphkit.graph import Graph


def build_graph(n: int, edges: list[tuple], directed: bool = False) -> Graph:
    """Build a graph from (u, v) or (u, v, weight) tuples."""
    g = Graph(n, directed=directed)
    for edge in edges:
        g.add_edge(*edge)
    return g


@pytest.fixture
def path_graph() -> Graph:
    """Undirected path 0-1-2-3-4."""
    return build_graph(5, [(0, 1), (1, 2), (2, 3), (3, 4)])


@pytest.fixture
def square_with_pendant() -> Graph:
    """Undirected square 0-1-2-3-0 plus pendant edge 3-4."""
    return build_graph(5, [(0, 1), (1, 2), (2, 3), (3, 0), (3, 4)])


@pytest.fixture
def triangle_with_tail() -> Graph:
    """Directed 0->1, 1->2, 2->0, 2->3."""
    return build_graph(4, [(0, 1), (1, 2), (2, 0), (2, 3)], directed=True)


@pytest.fixture
def make_random_graph() -> Callable[..., Graph]:
    """Return a factory for small seeded random graphs."""

    def factory(
        seed: int,
        n: int = 7,
        n_edges: int = 10,
        directed: bool = False,
        max_weight: int | None = None,
        self_loops: bool = False,
    ) -> Graph:
        rng = random.Random(seed)
        g = Graph(n, directed=directed)
        for _ in range(n_edges):
            u = rng.randrange(n)
            v = rng.randrange(n)
            if u == v and not self_loops:
                continue
            weight = rng.randint(0, max_weight) if max_weight is not None else 1
            g.add_edge(u, v, weight)
        return g

    return factory


@pytest.fixture
def make_graph() -> Callable[..., Graph]:
    """Return build_graph for tests that need their own edge lists."""
    return build_graph
