"""
Traversal module.

Provides shortest-path and reachability queries:
- BFS: fewest-edges paths from one or more sources
- Dijkstra: cheapest paths for non-negative weights
- Bipartiteness and connectivity checks
"""

from graphkit.traversal.bfs import (
    ShortestPaths,
    find_shortest_path,
    is_bipartite,
    is_connected,
    shortest_distance,
    shortest_paths_from,
)
from graphkit.traversal.dijkstra import (
    shortest_distances_from,
    shortest_weighted_distance,
    shortest_weighted_path,
)

__all__ = [
    "ShortestPaths",
    "find_shortest_path",
    "is_bipartite",
    "is_connected",
    "shortest_distance",
    "shortest_distances_from",
    "shortest_paths_from",
    "shortest_weighted_distance",
    "shortest_weighted_path",
]
