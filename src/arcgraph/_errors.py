"""Exceptions raised by arcgraph."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._types import VertexId


class ArcGraphError(Exception):
    """Base class for all arcgraph errors."""


class VertexNotFoundError(ArcGraphError, LookupError):
    """A vertex id does not exist in the graph it was used with."""

    def __init__(self, vertex_id: VertexId) -> None:
        self.vertex_id = vertex_id
        msg = f"{vertex_id} does not exist"
        super().__init__(msg)


class InvalidWeightError(ArcGraphError, ValueError):
    """An arc weight is not an integer in the signed 64-bit range."""


class ConfigError(ArcGraphError):
    """Error in arcgraph configuration."""
