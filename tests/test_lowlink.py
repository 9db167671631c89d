"""
Unit tests for the low-link analyzer.

Bridges and articulation points are checked against brute force: remove
the edge (vertex) and count connected components.
"""

import pytest

from graphkit.graph import Graph
from graphkit.lowlink import (
    bridge_augmentation_size,
    compute_low_links,
    find_articulation_points,
    find_bridges,
    two_edge_connected_components,
)


def count_components(g: Graph, skip_vertex: int | None = None, skip_edge: int | None = None) -> int:
    seen = [False] * g.n_vertices
    count = 0
    for start in range(g.n_vertices):
        if seen[start] or start == skip_vertex:
            continue
        count += 1
        seen[start] = True
        stack = [start]
        while stack:
            v = stack.pop()
            for u, e in g.neighbors(v):
                if u == skip_vertex or g.canonical_edge(e) == skip_edge or seen[u]:
                    continue
                seen[u] = True
                stack.append(u)
    return count


def endpoints(edges) -> set[frozenset]:
    return {frozenset((e.source, e.target)) for e in edges}


class TestScenarios:
    """Hand-checked graphs."""

    def test_path_graph(self, path_graph):
        """Every edge of a path is a bridge and every inner vertex is a cut."""
        bridges = find_bridges(path_graph)
        assert endpoints(bridges) == {
            frozenset((0, 1)),
            frozenset((1, 2)),
            frozenset((2, 3)),
            frozenset((3, 4)),
        }
        assert find_articulation_points(path_graph) == {1, 2, 3}

    def test_square_with_pendant(self, square_with_pendant):
        """Only the pendant edge is a bridge; vertex 3 is the only cut."""
        bridges = find_bridges(square_with_pendant)
        assert endpoints(bridges) == {frozenset((3, 4))}
        assert bridges[0].id == 8
        assert find_articulation_points(square_with_pendant) == {3}

    def test_parallel_edges_are_not_bridges(self, make_graph):
        """A doubled edge forms a 2-cycle, so neither copy is a bridge."""
        g = make_graph(3, [(0, 1), (0, 1), (1, 2)])
        assert endpoints(find_bridges(g)) == {frozenset((1, 2))}
        assert find_articulation_points(g) == {1}

    def test_self_loop_does_not_change_low_link(self, make_graph):
        g = make_graph(2, [(0, 1), (1, 1)])
        assert endpoints(find_bridges(g)) == {frozenset((0, 1))}

    def test_root_with_two_children_is_cut(self, make_graph):
        """The DFS root is a cut vertex only with more than one tree child."""
        star = make_graph(3, [(0, 1), (0, 2)])
        assert find_articulation_points(star) == {0}
        triangle = make_graph(3, [(0, 1), (1, 2), (2, 0)])
        assert find_articulation_points(triangle) == set()

    def test_disconnected_graph(self, make_graph):
        g = make_graph(5, [(0, 1), (2, 3), (3, 4)])
        low = compute_low_links(g)
        assert low.roots == [0, 2]
        assert find_articulation_points(g) == {3}
        assert len(find_bridges(g)) == 3

    def test_symmetric_directed_graph(self, make_graph):
        """A directed graph with both directions added behaves as undirected."""
        g = make_graph(3, [(0, 1), (1, 0), (1, 2), (2, 1)], directed=True)
        assert find_articulation_points(g) == {1}
        assert len(find_bridges(g)) == 2

    def test_long_path_does_not_overflow(self):
        """The explicit stack should handle paths far deeper than recursion allows."""
        n = 20_000
        g = Graph(n)
        for v in range(n - 1):
            g.add_edge(v, v + 1)
        assert len(find_bridges(g)) == n - 1
        assert len(find_articulation_points(g)) == n - 2


class TestLowLinkValues:
    """Test the raw time_in / time_up arrays."""

    def test_times_on_square(self, square_with_pendant):
        low = compute_low_links(square_with_pendant)
        assert low.time_in == [0, 1, 2, 3, 4]
        assert low.time_up == [0, 0, 0, 0, 4]
        assert low.parent == [None, 0, 1, 2, 3]
        assert low.preorder == [0, 1, 2, 3, 4]

    def test_low_link_never_exceeds_discovery(self, make_random_graph):
        g = make_random_graph(3, n=10, n_edges=15)
        low = compute_low_links(g)
        for v in range(g.n_vertices):
            assert low.time_up[v] <= low.time_in[v]


class TestBruteForce:
    """Cross-check against removal and component counting."""

    @pytest.mark.parametrize("seed", range(30))
    def test_bridges(self, make_random_graph, seed):
        """Removing a bridge adds a component; removing anything else does not."""
        g = make_random_graph(seed, n=8, n_edges=10)
        base = count_components(g)
        bridge_ids = {e.id for e in find_bridges(g)}
        for edge in g.edges():
            split = count_components(g, skip_edge=edge.id) > base
            assert split == (edge.id in bridge_ids), f"edge {edge}"

    @pytest.mark.parametrize("seed", range(30))
    def test_articulation_points(self, make_random_graph, seed):
        g = make_random_graph(seed, n=8, n_edges=10)
        base = count_components(g)
        cuts = find_articulation_points(g)
        for v in range(g.n_vertices):
            # removing v also removes its own component if v was isolated
            own = 1 if g.degree(v) == 0 else 0
            split = count_components(g, skip_vertex=v) > base - own
            assert split == (v in cuts), f"vertex {v}"


class TestTwoEdgeConnectedComponents:
    """Test the bridge-bounded vertex partition."""

    def test_square_with_pendant(self, square_with_pendant):
        components = two_edge_connected_components(square_with_pendant)
        assert components.count == 2
        assert components.groups() == [[0, 1, 2, 3], [4]]

    def test_path_splits_into_singletons(self, path_graph):
        assert two_edge_connected_components(path_graph).count == 5

    def test_parallel_edge_keeps_component(self, make_graph):
        g = make_graph(3, [(0, 1), (1, 0), (1, 2)])
        components = two_edge_connected_components(g)
        assert components.same(0, 1)
        assert not components.same(1, 2)

    @pytest.mark.parametrize("seed", range(20))
    def test_components_are_bounded_by_bridges(self, make_random_graph, seed):
        """Endpoints of an edge share a component iff the edge is not a bridge."""
        g = make_random_graph(seed, n=8, n_edges=11)
        components = two_edge_connected_components(g)
        bridge_ids = {e.id for e in find_bridges(g)}
        for edge in g.edges():
            if edge.source == edge.target:
                continue
            assert components.same(edge.source, edge.target) == (edge.id not in bridge_ids)


class TestBridgeAugmentation:
    """Test the number of edges needed to remove all bridges."""

    def test_already_bridge_free(self, make_graph):
        assert bridge_augmentation_size(make_graph(3, [(0, 1), (1, 2), (2, 0)])) == 0

    def test_path(self, path_graph):
        """A path has two leaves: one extra edge closes it into a cycle."""
        assert bridge_augmentation_size(path_graph) == 1

    def test_star(self, make_graph):
        g = make_graph(4, [(0, 1), (0, 2), (0, 3)])
        assert bridge_augmentation_size(g) == 2
