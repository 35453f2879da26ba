"""Graph algorithms over the vertex storage of a directed graph.

All depth-first passes keep an explicit stack of `(vertex index, arc iterator)`
frames instead of recursing, so graph depth is bounded by memory rather than
by the interpreter's recursion limit.
"""

from collections.abc import Iterable, Iterator, Sequence
from enum import Enum, auto
from typing import TypeVar

from arcgraph._types import Arc, Vertex, VertexId

V = TypeVar("V")


class _Colour(Enum):
    WHITE = auto()
    GREY = auto()
    BLACK = auto()


def _arc_frame(vertices: Sequence[Vertex[V]], index: int) -> tuple[int, Iterator[Arc]]:
    return index, iter(vertices[index].outgoing)


def has_cycle(vertices: Sequence[Vertex[V]]) -> bool:
    """Check every component for a cycle with a three-colour depth-first search.

    A vertex is grey while it is on the current search path; an arc reaching
    a grey vertex closes a cycle. Self-loops are cycles.

    Args:
        vertices: Vertex storage, indexed by `VertexId.index`.

    Returns:
        True if any cycle exists, False otherwise.

    """
    colour = [_Colour.WHITE] * len(vertices)

    for root in range(len(vertices)):
        if colour[root] is not _Colour.WHITE:
            continue
        colour[root] = _Colour.GREY
        stack = [_arc_frame(vertices, root)]
        while stack:
            index, arcs = stack[-1]
            for arc in arcs:
                child = arc.target.index
                if colour[child] is _Colour.GREY:
                    return True
                if colour[child] is _Colour.WHITE:
                    colour[child] = _Colour.GREY
                    stack.append(_arc_frame(vertices, child))
                    break
            else:
                colour[index] = _Colour.BLACK
                stack.pop()

    return False


def has_mutual_arcs(visited: Iterable[Vertex[V]], vertices: Sequence[Vertex[V]]) -> bool:
    """Check whether any visited vertex and one of its successors point at each other.

    Only cycles of length two (and self-loops) are found, and only among the
    vertices yielded by `visited`.

    Args:
        visited: The vertices to examine, typically a depth-first traversal.
        vertices: Vertex storage, indexed by `VertexId.index`.

    Returns:
        True if a mutual pair of arcs was found.

    """
    for vertex in visited:
        for arc in vertex.outgoing:
            if any(back.target == vertex.id for back in vertices[arc.target.index].outgoing):
                return True
    return False


def postorder(vertices: Sequence[Vertex[V]]) -> list[int]:
    """Number vertices by depth-first finishing time.

    Searches start from every unvisited vertex in insertion order and follow
    arcs in insertion order.

    Returns:
        Vertex indices in the order their subtrees finished.

    """
    visited = [False] * len(vertices)
    finished: list[int] = []

    for root in range(len(vertices)):
        if visited[root]:
            continue
        visited[root] = True
        stack = [_arc_frame(vertices, root)]
        while stack:
            index, arcs = stack[-1]
            for arc in arcs:
                child = arc.target.index
                if not visited[child]:
                    visited[child] = True
                    stack.append(_arc_frame(vertices, child))
                    break
            else:
                finished.append(index)
                stack.pop()

    return finished


def topological_order(vertices: Sequence[Vertex[V]]) -> list[int]:
    """Order vertex indices so that every arc points forward.

    The result is only meaningful for an acyclic graph; callers check for
    cycles first.

    Example:
        Arcs 2 -> 0 and 2 -> 1 over three vertices finish in the order
        [0, 1, 2], so the topological order is [2, 1, 0].

    """
    order = postorder(vertices)
    order.reverse()
    return order


def longest_distances(
    vertices: Sequence[Vertex[V]],
    order: Iterable[int],
    source: VertexId,
) -> dict[VertexId, int]:
    """Relax arcs in topological order to find the heaviest path from `source`.

    Args:
        vertices: Vertex storage, indexed by `VertexId.index`.
        order: Vertex indices in topological order.
        source: Vertex the paths start from.

    Returns:
        Mapping from each vertex reachable from `source` to the largest total
        weight of a path reaching it. Unreachable vertices are absent.

    """
    distances: dict[VertexId, int] = {source: 0}

    for index in order:
        vertex = vertices[index]
        distance = distances.get(vertex.id)
        if distance is None:
            continue
        for arc in vertex.outgoing:
            candidate = distance + arc.weight
            current = distances.get(arc.target)
            if current is None or candidate > current:
                distances[arc.target] = candidate

    return distances
