"""Value types shared by the graph implementations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated, Generic, TypeVar

import annotated_types
from pydantic import StrictInt, TypeAdapter, ValidationError

from ._errors import InvalidWeightError

WEIGHT_MIN = -(2**63)
WEIGHT_MAX = 2**63 - 1

V = TypeVar("V")

Weight = Annotated[StrictInt, annotated_types.Interval(ge=WEIGHT_MIN, le=WEIGHT_MAX)]

_WEIGHT_ADAPTER: TypeAdapter[int] = TypeAdapter(Weight)


def validate_weight(weight: object) -> int:
    """Check that `weight` is a signed 64-bit integer.

    Args:
        weight: The candidate arc weight.

    Returns:
        The weight unchanged.

    Raises:
        InvalidWeightError: If the weight is not a strict int or is out of range.

    """
    try:
        return _WEIGHT_ADAPTER.validate_python(weight)
    except ValidationError as e:
        msg = f"Invalid arc weight {weight!r}: expected an integer in [{WEIGHT_MIN}, {WEIGHT_MAX}]"
        raise InvalidWeightError(msg) from e


@dataclass(frozen=True, slots=True)
class VertexId:
    """Opaque handle locating a vertex in the storage of the graph that created it."""

    index: int

    def __str__(self) -> str:
        return f"VertexId({self.index})"


@dataclass(frozen=True, slots=True)
class Arc:
    """A weighted arc.

    On an outgoing list `target` is the head of the arc; on an incoming list
    it is the tail. Either way it names the far endpoint.
    """

    target: VertexId
    weight: int


@dataclass(eq=False, slots=True)
class Vertex(Generic[V]):
    """A payload value together with its arc lists.

    Records are owned by their graph and handed out as views: do not assign
    to `value` directly (use `DirectedGraph.set_vertex_value`) and do not touch
    the private arc lists. The `outgoing` and `incoming` properties return
    copies.

    Attributes:
        value: Caller-supplied payload, opaque to the graph.
        id: The id of this vertex in its graph.

    """

    value: V
    id: VertexId
    _outgoing: list[Arc] = field(default_factory=list, repr=False)
    _incoming: list[Arc] = field(default_factory=list, repr=False)

    @property
    def outgoing(self) -> tuple[Arc, ...]:
        """Arcs leaving this vertex, in insertion order."""
        return tuple(self._outgoing)

    @property
    def incoming(self) -> tuple[Arc, ...]:
        """Arcs entering this vertex, in insertion order."""
        return tuple(self._incoming)

    @property
    def out_degree(self) -> int:
        return len(self._outgoing)

    @property
    def in_degree(self) -> int:
        return len(self._incoming)
