"""
Graph store module.

Provides the in-memory adjacency structure all analyzers read:
- Graph: directed/undirected multigraph over dense integer ids
- Edge: half-edge record returned by edge lookups
- Components: vertex partition returned by component algorithms
"""

from graphkit.graph.components import Components
from graphkit.graph.store import Edge, Graph, insert_chain, new_graph

__all__ = [
    "Components",
    "Edge",
    "Graph",
    "insert_chain",
    "new_graph",
]
