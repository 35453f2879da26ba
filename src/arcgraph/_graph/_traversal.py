"""Breadth-first and depth-first traversal producers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from operator import attrgetter
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

from arcgraph._errors import VertexNotFoundError
from arcgraph._types import Arc, Vertex, VertexId

if TYPE_CHECKING:
    from collections.abc import Iterator

_by_weight = attrgetter("weight")


V = TypeVar("V")


class VertexLookup(Protocol[V]):
    """Anything that resolves a `VertexId` to its vertex."""

    def vertex(self, vertex_id: VertexId) -> Vertex[V] | None: ...


class _Traversal(ABC, Generic[V]):
    """Shared step algorithm of the traversal producers.

    Subclasses only decide which end of the frontier is popped. A vertex may
    sit in the frontier several times; it is emitted the first time it is
    popped and skipped afterwards. Outgoing arcs are pushed in ascending
    weight order, ties kept in insertion order.
    """

    def __init__(self, graph: VertexLookup[V], start: VertexId) -> None:
        if graph.vertex(start) is None:
            raise VertexNotFoundError(start)
        self._graph = graph
        self._visited: set[int] = set()
        self._frontier: deque[Arc] = deque([Arc(target=start, weight=0)])

    @abstractmethod
    def _pop(self) -> Arc:
        """Remove and return the next frontier entry."""

    def __iter__(self) -> Iterator[Vertex[V]]:
        return self

    def __next__(self) -> Vertex[V]:
        while self._frontier:
            arc = self._pop()
            if arc.target.index in self._visited:
                continue
            self._visited.add(arc.target.index)
            vertex = self._graph.vertex(arc.target)
            if vertex is None:
                raise VertexNotFoundError(arc.target)
            self._frontier.extend(sorted(vertex.outgoing, key=_by_weight))
            return vertex
        raise StopIteration


class BreadthFirst(_Traversal[V]):
    """Visit vertices level by level from a start vertex.

    Siblings are visited lightest arc first.

    Example:
        >>> graph = DirectedGraph()
        >>> a, b, c = graph.add_vertex("a"), graph.add_vertex("b"), graph.add_vertex("c")
        >>> graph.connect(a, b, 2)
        >>> graph.connect(a, c, 1)
        >>> [vertex.value for vertex in BreadthFirst(graph, a)]
        ['a', 'c', 'b']

    """

    def _pop(self) -> Arc:
        return self._frontier.popleft()


class DepthFirst(_Traversal[V]):
    """Follow each branch to its end before backtracking.

    Siblings pushed together are visited heaviest arc first.
    """

    def _pop(self) -> Arc:
        return self._frontier.pop()
