"""Human-readable rendering of graphs.

Rendering only uses the read-only query surface shared by `DirectedGraph`
and `UndirectedGraph`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

    from ._types import Arc, VertexId


class GraphView(Protocol):
    """Read-only surface needed to render a graph."""

    def __len__(self) -> int: ...

    def vertex_value(self, vertex_id: VertexId) -> object: ...

    def arcs(self) -> Iterator[tuple[VertexId, Arc]]: ...


def _label(graph: GraphView, vertex_id: VertexId) -> str:
    return f"{vertex_id}:{graph.vertex_value(vertex_id)}"


def format_graph(graph: GraphView) -> str:
    """Format a graph as plain text, one line per arc.

    Example:
        >>> graph = DirectedGraph()
        >>> a, b = graph.add_vertex("a"), graph.add_vertex("b")
        >>> graph.connect(a, b, 4)
        >>> print(format_graph(graph))
        Graph of 2 vertices:
        	 (VertexId(0):a) -(weight: 4)-> (VertexId(1):b)

    """
    lines = [f"Graph of {len(graph)} vertices:"]
    lines.extend(
        f"\t ({_label(graph, tail)}) -(weight: {arc.weight})-> ({_label(graph, arc.target)})"
        for tail, arc in graph.arcs()
    )
    return "\n".join(lines)


def render_graph(graph: GraphView, console: Console) -> None:
    """Render the arcs of a graph as a Rich table.

    Args:
        graph: Graph to render.
        console: Rich Console to output to.

    """
    arcs = list(graph.arcs())
    if not arcs:
        console.print(f"[dim]Graph of {len(graph)} vertices has no arcs[/dim]")
        return

    table = Table(title=f"Graph of {len(graph)} vertices", show_header=True, header_style="bold cyan")
    table.add_column("From", style="bold")
    table.add_column("Weight", justify="right")
    table.add_column("To", style="bold")

    for tail, arc in arcs:
        table.add_row(
            escape(_label(graph, tail)),
            str(arc.weight),
            escape(_label(graph, arc.target)),
        )

    console.print(table)
