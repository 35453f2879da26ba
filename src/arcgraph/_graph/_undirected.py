"""Undirected graph built from mirrored directed arcs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from arcgraph._errors import VertexNotFoundError
from arcgraph._types import validate_weight

from ._directed import DirectedGraph

if TYPE_CHECKING:
    from collections.abc import Iterator

    from arcgraph._config import GraphSettings
    from arcgraph._types import Arc, VertexId

    from ._traversal import BreadthFirst, DepthFirst

logger = logging.getLogger(__name__)


V = TypeVar("V")


class UndirectedGraph(Generic[V]):
    """A graph whose edges are stored as two directed arcs of equal weight.

    The underlying `DirectedGraph` is never handed out, so the two arcs of an
    edge cannot be separated.
    """

    def __init__(self, settings: GraphSettings | None = None) -> None:
        self._directed: DirectedGraph[V] = DirectedGraph(settings)

    def add_vertex(self, value: V) -> VertexId:
        return self._directed.add_vertex(value)

    def connect_undirected(self, one: VertexId, other: VertexId, weight: int) -> None:
        """Connect two vertices in both directions.

        Both endpoints and the weight are checked before anything is added, so
        either both arcs are added or neither is. Connecting a vertex to
        itself adds two self-loops.

        Raises:
            VertexNotFoundError: If either vertex does not exist.
            InvalidWeightError: If the weight is not a signed 64-bit integer.

        """
        for vertex_id in (one, other):
            if vertex_id not in self._directed:
                raise VertexNotFoundError(vertex_id)
        weight = validate_weight(weight)

        self._directed.connect(one, other, weight)
        self._directed.connect(other, one, weight)
        logger.debug("Connected %s <-> %s (weight %d)", one, other, weight)

    def vertex_value(self, vertex_id: VertexId) -> V | None:
        return self._directed.vertex_value(vertex_id)

    def set_vertex_value(self, vertex_id: VertexId, value: V) -> None:
        self._directed.set_vertex_value(vertex_id, value)

    def degree(self, vertex_id: VertexId) -> int | None:
        """Number of edge ends at a vertex (a self-edge counts twice)."""
        return self._directed.out_degree(vertex_id)

    def outgoing(self, vertex_id: VertexId) -> tuple[Arc, ...] | None:
        """Arcs from a vertex to its neighbours, in insertion order."""
        return self._directed.outgoing(vertex_id)

    def vertex_ids(self) -> Iterator[VertexId]:
        return self._directed.vertex_ids()

    def arcs(self) -> Iterator[tuple[VertexId, Arc]]:
        """Iterate over `(tail, arc)` pairs; every edge appears once per direction."""
        return self._directed.arcs()

    def is_empty(self) -> bool:
        return self._directed.is_empty()

    def breadth_first(self, start: VertexId) -> BreadthFirst[V]:
        return self._directed.breadth_first(start)

    def depth_first(self, start: VertexId) -> DepthFirst[V]:
        return self._directed.depth_first(start)

    def __len__(self) -> int:
        return len(self._directed)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._directed

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self._directed)}, edges={self._directed.arc_count // 2})"
