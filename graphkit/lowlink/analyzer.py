"""
Low-link DFS: bridges, articulation points and two-edge-connected components.

A single depth-first pass records for every vertex its discovery time
(time_in) and the lowest discovery time reachable from its DFS subtree
through one back-edge (time_up). The DFS runs on an explicit stack, so
path-like graphs of any length are fine.

The graph is read as undirected. A directed graph only gives meaningful
answers when every edge was added in both directions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from graphkit.graph import Components, Edge, Graph

logger = logging.getLogger(__name__)


@dataclass
class LowLinkResult:
    """
    Everything one low-link pass produces.

    Attributes:
        time_in: Discovery time per vertex
        time_up: Low-link value per vertex
        parent: DFS-tree parent, None for roots
        parent_edge: Half-edge id from parent into the vertex, None for roots
        preorder: Vertices in discovery order
        roots: First vertex of each DFS tree
        bridges: Half-edge ids (parent -> child) of tree edges that are bridges
        articulation_points: Cut vertices
    """

    time_in: list[int | None]
    time_up: list[int | None]
    parent: list[int | None]
    parent_edge: list[int | None]
    preorder: list[int] = field(default_factory=list)
    roots: list[int] = field(default_factory=list)
    bridges: list[int] = field(default_factory=list)
    articulation_points: set[int] = field(default_factory=set)


def compute_low_links(graph: Graph) -> LowLinkResult:
    """
    Run the low-link DFS over every component of the graph.

    Exactly one edge back to the DFS parent is skipped; any further parallel
    edge to the parent counts as a back-edge. Children are finalized before
    their time_up is folded into the parent.
    """
    n = graph.n_vertices
    result = LowLinkResult(
        time_in=[None] * n,
        time_up=[None] * n,
        parent=[None] * n,
        parent_edge=[None] * n,
    )
    time_in = result.time_in
    time_up = result.time_up
    parent = result.parent
    parent_edge = result.parent_edge

    skipped_parent = [False] * n
    n_children = [0] * n
    timer = 0

    for root in range(n):
        if time_in[root] is not None:
            continue

        result.roots.append(root)
        result.preorder.append(root)
        time_in[root] = time_up[root] = timer
        timer += 1
        stack = [(root, iter(graph.neighbors(root)))]

        while stack:
            v, neighbors = stack[-1]
            descended = False
            for u, edge_id in neighbors:
                if u == parent[v] and not skipped_parent[v]:
                    skipped_parent[v] = True
                    continue
                if time_in[u] is not None:
                    time_up[v] = min(time_up[v], time_in[u])
                    continue

                parent[u] = v
                parent_edge[u] = edge_id
                time_in[u] = time_up[u] = timer
                timer += 1
                result.preorder.append(u)
                stack.append((u, iter(graph.neighbors(u))))
                descended = True
                break

            if descended:
                continue

            # v is finished: fold it into its parent
            stack.pop()
            p = parent[v]
            if p is None:
                continue
            time_up[p] = min(time_up[p], time_up[v])
            n_children[p] += 1
            # parallel edges give an alternate path, so none of them is a bridge
            if time_up[v] > time_in[p] and not graph.is_multi_edge(p, v):
                result.bridges.append(parent_edge[v])
            if parent[p] is not None and time_up[v] >= time_in[p]:
                result.articulation_points.add(p)

        if n_children[root] > 1:
            result.articulation_points.add(root)

    logger.debug(
        f"Low-link pass: {len(result.roots)} DFS trees, {len(result.bridges)} bridges, "
        f"{len(result.articulation_points)} articulation points"
    )
    return result


def find_bridges(graph: Graph) -> list[Edge]:
    """
    Edges whose removal increases the number of connected components.

    Returns:
        Bridges as canonical edges (the id add_edge returned), sorted by id
    """
    low = compute_low_links(graph)
    ids = sorted(graph.canonical_edge(e) for e in low.bridges)
    return [graph.edge(e) for e in ids]


def find_articulation_points(graph: Graph) -> set[int]:
    """Vertices whose removal increases the number of connected components."""
    return compute_low_links(graph).articulation_points


def two_edge_connected_components(graph: Graph, low: LowLinkResult | None = None) -> Components:
    """
    Split vertices into components that stay connected after removing any one edge.

    Walks the DFS tree in discovery order. A root, or a child reached over a
    bridge, opens a new component; every other vertex inherits its parent's.
    """
    if low is None:
        low = compute_low_links(graph)

    bridge_children = {graph.edge_target(e) for e in low.bridges}
    ids: list[int | None] = [None] * graph.n_vertices
    count = 0
    for v in low.preorder:
        p = low.parent[v]
        if p is None or v in bridge_children:
            ids[v] = count
            count += 1
        else:
            ids[v] = ids[p]

    return Components(count=count, ids=ids)


def bridge_augmentation_size(graph: Graph) -> int:
    """
    Fewest edges to add so that a connected graph has no bridges.

    Contracting every two-edge-connected component gives the bridge tree;
    pairing up its leaves needs (leaves + 1) // 2 new edges.
    """
    low = compute_low_links(graph)
    components = two_edge_connected_components(graph, low)
    if components.count <= 1:
        return 0

    tree_degree = [0] * components.count
    for e in low.bridges:
        edge = graph.edge(e)
        tree_degree[components.ids[edge.source]] += 1
        tree_degree[components.ids[edge.target]] += 1

    leaves = sum(1 for d in tree_degree if d == 1)
    logger.info(f"Bridge tree has {components.count} nodes and {leaves} leaves")
    return (leaves + 1) // 2
