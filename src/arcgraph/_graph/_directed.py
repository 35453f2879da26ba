"""Append-only directed graph with weighted arcs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Generic, TypeVar

from arcgraph._config import CycleDetection, GraphSettings
from arcgraph._errors import VertexNotFoundError
from arcgraph._types import Arc, Vertex, VertexId, validate_weight

from ._algorithms import has_cycle, has_mutual_arcs, longest_distances, topological_order
from ._traversal import BreadthFirst, DepthFirst

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


V = TypeVar("V")


class DirectedGraph(Generic[V]):
    """A directed graph whose vertices carry payloads and whose arcs carry integer weights.

    Vertices are only ever appended, so every `VertexId` returned by
    `add_vertex` stays valid for the lifetime of the graph. Self-loops and
    parallel arcs are allowed.

    The graph is not synchronised: do not mutate it while a traversal or any
    other reader is in use.

    Example:
        >>> graph = DirectedGraph()
        >>> a = graph.add_vertex("a")
        >>> b = graph.add_vertex("b")
        >>> graph.connect(a, b, 3)
        >>> graph.longest_distance_from(a)
        {VertexId(index=0): 0, VertexId(index=1): 3}

    """

    def __init__(self, settings: GraphSettings | None = None) -> None:
        self._settings = settings if settings is not None else GraphSettings()
        self._vertices: list[Vertex[V]] = []

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    def add_vertex(self, value: V) -> VertexId:
        """Append a vertex with no arcs and return its id."""
        vertex_id = VertexId(len(self._vertices))
        self._vertices.append(Vertex(value=value, id=vertex_id))
        logger.debug("Added %s", vertex_id)
        return vertex_id

    def connect(self, from_id: VertexId, to_id: VertexId, weight: int) -> None:
        """Add an arc from `from_id` to `to_id`.

        Both endpoints and the weight are validated before either arc list is
        touched, so a failed call leaves the graph unchanged.

        Args:
            from_id: Tail of the arc.
            to_id: Head of the arc.
            weight: Signed 64-bit arc weight.

        Raises:
            VertexNotFoundError: If either endpoint does not exist (the tail is checked first).
            InvalidWeightError: If the weight is not a signed 64-bit integer.

        """
        source = self._require(from_id)
        target = self._require(to_id)
        weight = validate_weight(weight)

        source._outgoing.append(Arc(target=to_id, weight=weight))  # noqa: SLF001
        target._incoming.append(Arc(target=from_id, weight=weight))  # noqa: SLF001
        logger.debug("Connected %s -> %s (weight %d)", from_id, to_id, weight)

    def _require(self, vertex_id: VertexId) -> Vertex[V]:
        vertex = self.vertex(vertex_id)
        if vertex is None:
            raise VertexNotFoundError(vertex_id)
        return vertex

    def vertex(self, vertex_id: VertexId) -> Vertex[V] | None:
        """Get the vertex record for an id, or None if the id is out of range."""
        if 0 <= vertex_id.index < len(self._vertices):
            return self._vertices[vertex_id.index]
        return None

    def vertex_value(self, vertex_id: VertexId) -> V | None:
        """Get the payload of a vertex, or None if the id is out of range."""
        vertex = self.vertex(vertex_id)
        return vertex.value if vertex is not None else None

    def set_vertex_value(self, vertex_id: VertexId, value: V) -> None:
        """Replace the payload of a vertex in place.

        Raises:
            VertexNotFoundError: If the id is out of range.

        """
        self._require(vertex_id).value = value

    def out_degree(self, vertex_id: VertexId) -> int | None:
        vertex = self.vertex(vertex_id)
        return vertex.out_degree if vertex is not None else None

    def in_degree(self, vertex_id: VertexId) -> int | None:
        vertex = self.vertex(vertex_id)
        return vertex.in_degree if vertex is not None else None

    def outgoing(self, vertex_id: VertexId) -> tuple[Arc, ...] | None:
        """Arcs leaving a vertex in insertion order, or None if the id is out of range."""
        vertex = self.vertex(vertex_id)
        return vertex.outgoing if vertex is not None else None

    def incoming(self, vertex_id: VertexId) -> tuple[Arc, ...] | None:
        """Arcs entering a vertex in insertion order, or None if the id is out of range.

        Each arc's `target` is the vertex the arc comes from.
        """
        vertex = self.vertex(vertex_id)
        return vertex.incoming if vertex is not None else None

    def vertex_ids(self) -> Iterator[VertexId]:
        """Iterate over vertex ids in insertion order."""
        return (vertex.id for vertex in self._vertices)

    def vertices(self) -> Iterator[Vertex[V]]:
        """Iterate over vertex records in insertion order."""
        return iter(self._vertices)

    def arcs(self) -> Iterator[tuple[VertexId, Arc]]:
        """Iterate over `(tail, arc)` pairs, by tail then arc insertion order."""
        for vertex in self._vertices:
            for arc in vertex.outgoing:
                yield vertex.id, arc

    @property
    def arc_count(self) -> int:
        return sum(vertex.out_degree for vertex in self._vertices)

    def is_empty(self) -> bool:
        return not self._vertices

    def breadth_first(self, start: VertexId) -> BreadthFirst[V]:
        """Traverse breadth-first from `start`. See `BreadthFirst`."""
        return BreadthFirst(self, start)

    def depth_first(self, start: VertexId) -> DepthFirst[V]:
        """Traverse depth-first from `start`. See `DepthFirst`."""
        return DepthFirst(self, start)

    def is_cyclic(self) -> bool:
        """Check whether the graph contains a cycle.

        With `CycleDetection.GENERAL` every cycle in every component is found.
        With `CycleDetection.MUTUAL` only pairs of vertices with arcs straight
        at each other (and self-loops) are found, and only among the vertices
        reachable from the first inserted vertex.

        Returns:
            True if a cycle was found, False otherwise. An empty graph is acyclic.

        """
        if self.is_empty():
            return False

        if self._settings.cycle_detection is CycleDetection.MUTUAL:
            cyclic = has_mutual_arcs(self.depth_first(self._vertices[0].id), self._vertices)
        else:
            cyclic = has_cycle(self._vertices)

        logger.debug("Cycle check (%s): %s", self._settings.cycle_detection, cyclic)
        return cyclic

    def _topological_indices(self) -> list[int] | None:
        if self.is_cyclic():
            return None
        return topological_order(self._vertices)

    def topologically_ordered_iter(self) -> Iterator[Vertex[V]] | None:
        """Iterate over vertices so that every arc points from an earlier to a later vertex.

        The order is computed eagerly; the returned iterator can be consumed once.

        Returns:
            An iterator over the vertices, or None if the graph is cyclic.

        """
        order = self._topological_indices()
        if order is None:
            return None
        logger.debug("Topological order over %d vertices", len(order))
        return (self._vertices[index] for index in order)

    def longest_distance_from(self, source: VertexId) -> dict[VertexId, int] | None:
        """Compute the heaviest path weight from `source` to every vertex it reaches.

        Args:
            source: Vertex the paths start from.

        Returns:
            Mapping from reachable vertex to longest distance (`source` maps
            to 0), or None if the graph is cyclic. Unreachable vertices are
            absent from the mapping.

        Raises:
            VertexNotFoundError: If `source` does not exist.

        """
        self._require(source)
        order = self._topological_indices()
        if order is None:
            return None
        distances = longest_distances(self._vertices, order, source)
        logger.debug("Longest distances from %s reach %d vertices", source, len(distances))
        return distances

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return isinstance(vertex_id, VertexId) and self.vertex(vertex_id) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(vertices={len(self._vertices)}, arcs={self.arc_count})"
