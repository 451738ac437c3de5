"""
Unit tests for the adjacency-list graph store.
"""

import logging

import pytest

from routegraph.graph import Edge, EdgeType, Graph, Vertex


class TestVertices:
    """Test vertex registration."""

    def test_create_vertex_returns_handle(self, graph):
        """Should wrap the key in a Vertex."""
        vertex = graph.create_vertex("Tokyo")
        assert vertex == Vertex("Tokyo")
        assert str(vertex) == "Tokyo"

    def test_create_vertex_idempotent(self, graph):
        """Creating the same key twice should yield one vertex."""
        first = graph.create_vertex("Tokyo")
        second = graph.create_vertex("Tokyo")
        assert first == second
        assert len(graph) == 1

    def test_create_vertex_keeps_edges(self, graph):
        """Re-creating a vertex should not reset its edges."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        graph.add_edge(EdgeType.DIRECTED, a, b, 1)
        graph.create_vertex("A")
        assert graph.get_edges(a) == [Edge(a, b, 1)]

    def test_integer_keys(self):
        """Keys can be any hashable value."""
        graph: Graph[int] = Graph()
        assert graph.create_vertex(3) == Vertex(3)
        assert graph.get_vertex(3) == Vertex(3)

    def test_get_vertex_unknown(self, graph):
        """Should return None for a key that was never created."""
        assert graph.get_vertex("Nowhere") is None

    def test_vertices_in_creation_order(self, graph):
        """Vertices should be listed in creation order."""
        for key in ["C", "A", "B"]:
            graph.create_vertex(key)
        assert [vertex.key for vertex in graph.vertices] == ["C", "A", "B"]
        assert [vertex.key for vertex in graph] == ["C", "A", "B"]

    def test_contains(self, graph):
        """Membership should reflect created vertices only."""
        a = graph.create_vertex("A")
        assert a in graph
        assert graph.has_vertex(a)
        assert Vertex("B") not in graph


class TestEdges:
    """Test edge insertion and lookup."""

    def test_directed_edge_one_list(self, graph):
        """A directed edge should only appear in the source's list."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        graph.add_edge(EdgeType.DIRECTED, a, b, 4)
        assert graph.get_edges(a) == [Edge(a, b, 4)]
        assert graph.get_edges(b) == []

    def test_undirected_edge_both_lists(self, graph):
        """An undirected edge should be mirrored with the same weight."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        graph.add_edge(EdgeType.UNDIRECTED, a, b, 7)
        assert graph.get_edges(a) == [Edge(a, b, 7)]
        assert graph.get_edges(b) == [Edge(b, a, 7)]

    def test_edge_type_by_name(self, graph):
        """Edge types can be given by name."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        graph.add_edge("undirected", a, b, 2)
        assert graph.get_weight(b, a) == 2

    def test_unknown_edge_type_raises(self, graph):
        """Should raise ValueError for an unknown edge type name."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        with pytest.raises(ValueError, match="Unknown edge type"):
            graph.add_edge("sideways", a, b, 1)

    def test_parallel_edges_kept(self, graph):
        """Adding the same edge twice should store two edges."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        graph.add_edge(EdgeType.DIRECTED, a, b, 1)
        graph.add_edge(EdgeType.DIRECTED, a, b, 1)
        assert graph.get_edges(a) == [Edge(a, b, 1), Edge(a, b, 1)]
        assert graph.edge_count() == 2

    def test_edges_keep_insertion_order(self, graph):
        """Outgoing edges should be listed in insertion order."""
        a, b, c = (graph.create_vertex(key) for key in "ABC")
        graph.add_edge(EdgeType.DIRECTED, a, c, 2)
        graph.add_edge(EdgeType.DIRECTED, a, b, 1)
        assert [edge.destination for edge in graph.get_edges(a)] == [c, b]

    def test_unweighted_edge(self, graph):
        """Weight should default to None."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        graph.add_edge(EdgeType.DIRECTED, a, b)
        assert graph.get_edges(a)[0].weight is None

    def test_edge_reverse(self):
        """Reversing should swap endpoints and keep the weight."""
        edge = Edge(Vertex("A"), Vertex("B"), 3)
        assert edge.reverse == Edge(Vertex("B"), Vertex("A"), 3)
        assert edge.reverse.reverse == edge

    def test_edge_equality_includes_weight(self):
        """Edges with different weights should differ."""
        assert Edge(Vertex("A"), Vertex("B"), 1) != Edge(Vertex("A"), Vertex("B"), 2)
        assert len({Edge(Vertex("A"), Vertex("B"), 1), Edge(Vertex("A"), Vertex("B"), 1)}) == 1


class TestWeights:
    """Test weight lookup."""

    def test_get_weight_first_match(self, graph):
        """Should return the weight of the first matching edge."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        graph.add_edge(EdgeType.DIRECTED, a, b, 5)
        graph.add_edge(EdgeType.DIRECTED, a, b, 2)
        assert graph.get_weight(a, b) == 5

    def test_get_weight_missing(self, graph):
        """Should return None when no edge connects the vertices."""
        a = graph.create_vertex("A")
        b = graph.create_vertex("B")
        assert graph.get_weight(a, b) is None
        assert graph.get_weight(Vertex("X"), b) is None


class TestUnknownVertices:
    """Test lenient handling of vertices that were never created."""

    def test_get_edges_unknown_vertex(self, graph):
        """Should return an empty list rather than raise."""
        assert graph.get_edges(Vertex("Nowhere")) == []

    def test_edge_from_unknown_source_dropped(self, graph, caplog):
        """An edge from an uncreated vertex should be dropped with a warning."""
        ghost = Vertex("Ghost")
        b = graph.create_vertex("B")
        with caplog.at_level(logging.WARNING, logger="routegraph.graph.store"):
            graph.add_edge(EdgeType.DIRECTED, ghost, b, 1)

        assert graph.get_edges(ghost) == []
        assert ghost not in graph
        assert "Ghost" in caplog.text

    def test_edge_to_unknown_destination(self, graph):
        """The forward edge is stored but no vertex is created."""
        a = graph.create_vertex("A")
        ghost = Vertex("Ghost")
        graph.add_edge(EdgeType.UNDIRECTED, a, ghost, 1)

        assert graph.get_edges(a) == [Edge(a, ghost, 1)]
        assert graph.get_edges(ghost) == []
        assert ghost not in graph
        assert len(graph) == 1


class TestDescription:
    """Test stats and textual description."""

    def test_describe(self, graph):
        """Should render one adjacency line per vertex."""
        a, b, c = (graph.create_vertex(key) for key in "ABC")
        graph.add_edge(EdgeType.DIRECTED, a, b, 1)
        graph.add_edge(EdgeType.DIRECTED, a, c, 1)
        assert graph.describe() == "A ---> [ B, C ]\nB ---> [  ]\nC ---> [  ]"
        assert str(graph) == graph.describe()

    def test_stats(self, airline):
        """Stats should count vertices and mirrored edges."""
        network, _ = airline
        stats = network.stats()
        assert stats == {
            "vertices": 8,
            "edges": 24,
            "weighted_edges": 24,
            "isolated_vertices": 0,
        }

    def test_repr(self, graph):
        """Repr should summarise size."""
        graph.create_vertex("A")
        assert repr(graph) == "Graph(vertices=1, edges=0)"
