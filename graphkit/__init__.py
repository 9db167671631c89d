"""
graphkit - graph analysis toolkit.

A vertex/edge store over dense integer ids plus point algorithms:
BFS and Dijkstra shortest paths, low-link analysis (bridges, articulation
points, two-edge-connected components), strongly connected components with
condensation, and Euler path extraction.
"""

__version__ = "0.1.0"
