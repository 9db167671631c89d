"""
Low-link analysis module.

Provides cut structure of undirected graphs from one DFS pass:
- Bridges and articulation points
- Two-edge-connected components
- Bridge-tree augmentation size
"""

from graphkit.lowlink.analyzer import (
    LowLinkResult,
    bridge_augmentation_size,
    compute_low_links,
    find_articulation_points,
    find_bridges,
    two_edge_connected_components,
)

__all__ = [
    "LowLinkResult",
    "bridge_augmentation_size",
    "compute_low_links",
    "find_articulation_points",
    "find_bridges",
    "two_edge_connected_components",
]
