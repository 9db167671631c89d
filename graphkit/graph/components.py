"""
Vertex partition result shared by the component algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Components:
    """
    Assignment of every vertex to exactly one component.

    Attributes:
        count: Number of components; ids are in [0, count)
        ids: Component id per vertex
    """

    count: int
    ids: list[int]

    def groups(self) -> list[list[int]]:
        """Vertices of each component, ascending, indexed by component id."""
        groups: list[list[int]] = [[] for _ in range(self.count)]
        for v, component_id in enumerate(self.ids):
            groups[component_id].append(v)
        return groups

    def same(self, u: int, v: int) -> bool:
        return self.ids[u] == self.ids[v]
