"""
Condensation module.

Provides ordering and component queries on directed graphs:
- top_sort, has_cycle, find_cycle
- strongly_connected_components (Kosaraju)
- build_condensation: the DAG of components
"""

from graphkit.condensation.builder import (
    Condensation,
    build_condensation,
    find_cycle,
    has_cycle,
    strongly_connected_components,
    top_sort,
)

__all__ = [
    "Condensation",
    "build_condensation",
    "find_cycle",
    "has_cycle",
    "strongly_connected_components",
    "top_sort",
]
