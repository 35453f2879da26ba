"""Weighted in-memory graphs with traversal, cycle detection, topological order and longest paths."""

__all__ = [
    "WEIGHT_MAX",
    "WEIGHT_MIN",
    "Arc",
    "ArcGraphError",
    "BreadthFirst",
    "ConfigError",
    "CycleDetection",
    "DepthFirst",
    "DirectedGraph",
    "GraphSettings",
    "InvalidWeightError",
    "UndirectedGraph",
    "Vertex",
    "VertexId",
    "VertexNotFoundError",
    "find_pyproject_toml",
    "format_graph",
    "get_settings",
    "load_settings",
    "render_graph",
]

from ._config import CycleDetection, GraphSettings, find_pyproject_toml, get_settings, load_settings
from ._errors import ArcGraphError, ConfigError, InvalidWeightError, VertexNotFoundError
from ._graph import BreadthFirst, DepthFirst, DirectedGraph, UndirectedGraph
from ._render import format_graph, render_graph
from ._types import WEIGHT_MAX, WEIGHT_MIN, Arc, Vertex, VertexId
