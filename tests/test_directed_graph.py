"""Tests for DirectedGraph construction and queries."""

import pytest

from arcgraph import (
    WEIGHT_MAX,
    WEIGHT_MIN,
    Arc,
    DirectedGraph,
    InvalidWeightError,
    VertexId,
    VertexNotFoundError,
)


class TestVertexInsertion:
    """Tests for add_vertex and vertex lookups."""

    def test_new_graph_is_empty(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        assert graph.is_empty()
        assert len(graph) == 0

    def test_add_vertex_makes_graph_non_empty(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        graph.add_vertex("a")
        assert not graph.is_empty()
        assert len(graph) == 1

    def test_ids_are_sequential_and_distinct(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        ids = [graph.add_vertex(name) for name in ("a", "b", "c")]
        assert ids == [VertexId(0), VertexId(1), VertexId(2)]
        assert list(graph.vertex_ids()) == ids

    def test_vertex_value(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        assert graph.vertex_value(a) == "a"
        assert graph.vertex_value(b) == "b"

    def test_vertex_value_out_of_range(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        graph.add_vertex("a")
        assert graph.vertex_value(VertexId(1)) is None
        assert graph.vertex_value(VertexId(-1)) is None

    def test_set_vertex_value(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        graph.set_vertex_value(a, "changed")
        assert graph.vertex_value(a) == "changed"

    def test_set_vertex_value_unknown_id(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        with pytest.raises(VertexNotFoundError, match=r"VertexId\(3\) does not exist"):
            graph.set_vertex_value(VertexId(3), "x")

    def test_payload_is_shared_not_copied(self) -> None:
        graph: DirectedGraph[list[int]] = DirectedGraph()
        payload = [1]
        a = graph.add_vertex(payload)
        assert graph.vertex_value(a) is payload

    def test_contains(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        assert a in graph
        assert VertexId(1) not in graph
        assert "a" not in graph

    def test_vertex_record(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        vertex = graph.vertex(a)
        assert vertex is not None
        assert vertex.id == a
        assert vertex.value == "a"
        assert vertex.outgoing == ()
        assert vertex.incoming == ()
        assert graph.vertex(VertexId(5)) is None


class TestConnect:
    """Tests for connect and the degree queries."""

    def test_connect_records_both_sides(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        graph.connect(a, b, 7)
        assert graph.outgoing(a) == (Arc(target=b, weight=7),)
        assert graph.incoming(b) == (Arc(target=a, weight=7),)
        assert graph.outgoing(b) == ()
        assert graph.incoming(a) == ()

    def test_degrees_count_arcs(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        c = graph.add_vertex("c")
        graph.connect(a, b, 1)
        graph.connect(a, c, 1)
        graph.connect(b, c, 1)
        assert (graph.out_degree(a), graph.in_degree(a)) == (2, 0)
        assert (graph.out_degree(b), graph.in_degree(b)) == (1, 1)
        assert (graph.out_degree(c), graph.in_degree(c)) == (0, 2)
        assert graph.arc_count == 3

    def test_degree_of_unknown_vertex(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        assert graph.out_degree(VertexId(0)) is None
        assert graph.in_degree(VertexId(0)) is None
        assert graph.outgoing(VertexId(0)) is None
        assert graph.incoming(VertexId(0)) is None

    def test_parallel_arcs_are_kept(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        graph.connect(a, b, 1)
        graph.connect(a, b, 1)
        assert graph.out_degree(a) == 2
        assert graph.in_degree(b) == 2

    def test_self_loop(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        graph.connect(a, a, 0)
        assert graph.out_degree(a) == 1
        assert graph.in_degree(a) == 1

    def test_negative_weight(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        graph.connect(a, b, -4)
        assert graph.outgoing(a) == (Arc(target=b, weight=-4),)

    def test_arc_insertion_order_is_preserved(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        c = graph.add_vertex("c")
        graph.connect(a, c, 3)
        graph.connect(a, b, 1)
        assert [arc.target for arc in graph.outgoing(a) or ()] == [c, b]
        assert list(graph.arcs()) == [(a, Arc(target=c, weight=3)), (a, Arc(target=b, weight=1))]

    def test_missing_source_names_it(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        with pytest.raises(VertexNotFoundError) as exc_info:
            graph.connect(VertexId(9), a, 1)
        assert exc_info.value.vertex_id == VertexId(9)
        assert graph.in_degree(a) == 0

    def test_missing_target_leaves_graph_unchanged(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        with pytest.raises(VertexNotFoundError) as exc_info:
            graph.connect(a, VertexId(9), 1)
        assert exc_info.value.vertex_id == VertexId(9)
        assert graph.out_degree(a) == 0

    def test_missing_endpoint_is_a_lookup_error(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        with pytest.raises(LookupError):
            graph.connect(VertexId(0), VertexId(1), 1)


class TestWeights:
    """Tests for arc weight validation."""

    def test_bounds_are_accepted(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        graph.connect(a, a, WEIGHT_MIN)
        graph.connect(a, a, WEIGHT_MAX)
        assert [arc.weight for arc in graph.outgoing(a) or ()] == [WEIGHT_MIN, WEIGHT_MAX]

    @pytest.mark.parametrize("weight", [WEIGHT_MAX + 1, WEIGHT_MIN - 1, 1.5, "3", True, None])
    def test_invalid_weight_is_rejected(self, weight: object) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        with pytest.raises(InvalidWeightError, match="Invalid arc weight"):
            graph.connect(a, b, weight)  # type: ignore[arg-type]
        assert graph.out_degree(a) == 0
        assert graph.in_degree(b) == 0

    def test_invalid_weight_is_a_value_error(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        with pytest.raises(ValueError):
            graph.connect(a, a, 2**64)


class TestRepr:
    def test_repr_counts(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        graph.connect(a, b, 1)
        assert repr(graph) == "DirectedGraph(vertices=2, arcs=1)"

    def test_vertex_id_str(self) -> None:
        assert str(VertexId(4)) == "VertexId(4)"


class TestVertexViews:
    def test_arc_views_are_copies(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        b = graph.add_vertex("b")
        graph.connect(a, b, 1)
        vertex = graph.vertex(a)
        assert vertex is not None
        assert isinstance(vertex.outgoing, tuple)
        graph.connect(a, b, 2)
        assert len(vertex.outgoing) == 2
        assert graph.out_degree(a) == 2

    def test_traversal_yields_current_payload(self) -> None:
        graph: DirectedGraph[str] = DirectedGraph()
        a = graph.add_vertex("a")
        graph.set_vertex_value(a, "renamed")
        assert [vertex.value for vertex in graph.breadth_first(a)] == ["renamed"]
