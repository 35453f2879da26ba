"""Graph module providing weighted directed and undirected graphs.

This module contains:
- DirectedGraph[V]: an append-only directed graph with weighted arcs
- UndirectedGraph[V]: a wrapper storing each edge as two mirrored arcs
- BreadthFirst / DepthFirst: lazy traversal producers
"""

from ._directed import DirectedGraph
from ._traversal import BreadthFirst, DepthFirst
from ._undirected import UndirectedGraph

__all__ = ["BreadthFirst", "DepthFirst", "DirectedGraph", "UndirectedGraph"]
