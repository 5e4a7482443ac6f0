"""Tests for the Graph container."""

import copy

import networkx as nx
import pytest

from trigraph import (
    CompleteGraphLoader,
    CrossGraphError,
    Graph,
    IdentityError,
    InvalidArgumentError,
    NotFoundError,
    Vertex,
)
from trigraph.elements.edge import EdgeDirected


class TestCreateVertex:
    """Vertex creation and id allocation."""

    def test_explicit_ids(self, graph):
        a = graph.create_vertex("a")
        seven = graph.create_vertex(7)
        assert isinstance(a, Vertex)
        assert (a.id, seven.id) == ("a", 7)
        assert a.graph is graph

    def test_auto_ids_follow_largest_int(self, graph):
        graph.create_vertex("x")
        assert graph.create_vertex().id == 0
        graph.create_vertex(10)
        assert graph.create_vertex().id == 11

    def test_duplicate_rejected(self, graph):
        graph.create_vertex(1)
        with pytest.raises(InvalidArgumentError, match="Duplicate vertex id"):
            graph.create_vertex(1)

    def test_return_duplicate(self, graph):
        vertex = graph.create_vertex(1)
        assert graph.create_vertex(1, return_duplicate=True) is vertex
        assert len(graph) == 1

    @pytest.mark.parametrize("vertex_id", [1.5, True, (1,), b"a"])
    def test_invalid_id_type(self, graph, vertex_id):
        with pytest.raises(InvalidArgumentError):
            graph.create_vertex(vertex_id)

    def test_create_vertices(self, graph):
        vertices = graph.create_vertices(3)
        assert [v.id for v in vertices] == [0, 1, 2]
        assert [v.id for v in graph.create_vertices(2)] == [3, 4]

    def test_create_zero_vertices(self, graph):
        assert graph.create_vertices(0) == []

    def test_create_negative_vertices(self, graph):
        with pytest.raises(InvalidArgumentError):
            graph.create_vertices(-1)


class TestLookup:
    """Vertex lookup and snapshots."""

    def test_get_vertex(self, graph):
        vertex = graph.create_vertex("v")
        assert graph.get_vertex("v") is vertex
        assert graph.has_vertex("v")

    def test_get_unknown_vertex(self, graph):
        assert not graph.has_vertex("missing")
        with pytest.raises(NotFoundError):
            graph.get_vertex("missing")

    def test_get_vertices_is_snapshot(self, graph):
        a, b = graph.create_vertices(2)
        snapshot = graph.get_vertices()
        snapshot.clear()
        assert graph.get_vertices() == [a, b]

    def test_get_edges_is_snapshot(self, graph):
        a, b = graph.create_vertices(2)
        edge = a.create_edge(b)
        graph.get_edges().clear()
        assert graph.get_edges() == [edge]

    def test_container_protocol(self, graph):
        a, b = graph.create_vertices(2)
        other = Graph().create_vertex(0)
        assert len(graph) == 2
        assert list(graph) == [a, b]
        assert a in graph
        assert 1 in graph
        assert other not in graph
        assert [] not in graph


class TestRemoveVertex:
    """remove_vertex only drops vertices without edges."""

    def test_remove_isolated(self, graph):
        vertex = graph.create_vertex()
        graph.remove_vertex(vertex)
        assert len(graph) == 0

    def test_remove_with_edges_rejected(self, graph):
        a, b = graph.create_vertices(2)
        a.create_edge(b)
        with pytest.raises(InvalidArgumentError):
            graph.remove_vertex(a)
        assert a in graph

    def test_remove_foreign_vertex(self, graph):
        foreign = Graph().create_vertex(0)
        graph.create_vertex(0)
        with pytest.raises(NotFoundError):
            graph.remove_vertex(foreign)

    def test_id_reusable_after_destroy(self, graph):
        vertex = graph.create_vertex("x")
        vertex.destroy()
        assert graph.create_vertex("x") is not vertex


class TestAddEdge:
    """Edge registration."""

    def test_foreign_endpoint(self, graph):
        a = graph.create_vertex()
        foreign = Graph().create_vertex()
        with pytest.raises(CrossGraphError):
            graph.add_edge(EdgeDirected(a, foreign))
        assert graph.get_edges() == []

    def test_already_registered(self, graph):
        a, b = graph.create_vertices(2)
        edge = a.create_edge_to(b)
        with pytest.raises(InvalidArgumentError):
            graph.add_edge(edge)
        assert graph.get_edges() == [edge]

    def test_remove_unknown_edge(self, graph):
        a, b = graph.create_vertices(2)
        with pytest.raises(NotFoundError):
            graph._remove_edge(EdgeDirected(a, b))

    def test_remove_keeps_creation_order(self, graph):
        a, b, c = graph.create_vertices(3)
        ab = a.create_edge_to(b)
        bc = b.create_edge_to(c)
        ca = c.create_edge(a)
        bc.destroy()
        assert graph.get_edges() == [ab, ca]
        assert b.create_edge_to(c).id == 3
        assert graph.get_edges()[-1].id == 3

    def test_remove_edge_twice(self, graph):
        a, b = graph.create_vertices(2)
        edge = a.create_edge_to(b)
        graph._remove_edge(edge)
        with pytest.raises(NotFoundError):
            graph._remove_edge(edge)

    def test_destroy_all_vertices_of_complete_graph(self):
        graph = CompleteGraphLoader(60).get_graph()
        for vertex in graph.get_vertices():
            vertex.destroy()
        assert len(graph) == 0
        assert graph.get_edges() == []


class TestToNetworkx:
    """Export to a networkx MultiDiGraph."""

    def test_nodes_and_balance(self, graph):
        a = graph.create_vertex("a")
        graph.create_vertex("b")
        a.balance = 3
        G = graph.to_networkx()
        assert isinstance(G, nx.MultiDiGraph)
        assert list(G.nodes) == ["a", "b"]
        assert G.nodes["a"]["balance"] == 3
        assert G.nodes["b"]["balance"] is None

    def test_directed_edge(self, chain):
        a, b, _ = chain
        G = a.graph.to_networkx()
        assert G.number_of_edges() == 2
        data = G.get_edge_data("a", "b", key=0)
        assert data == {"directed": True, "flow": 5}
        assert not G.has_edge("b", "a")

    def test_undirected_edge_both_ways(self, graph):
        a, b = graph.create_vertices(2)
        edge = a.create_edge(b)
        G = graph.to_networkx()
        assert G.has_edge(0, 1, key=edge.id)
        assert G.has_edge(1, 0, key=edge.id)

    def test_undirected_loop_once(self, graph):
        vertex = graph.create_vertex()
        vertex.create_edge(vertex)
        assert graph.to_networkx().number_of_edges() == 1


class TestIdentity:
    def test_copy_forbidden(self, graph):
        with pytest.raises(IdentityError):
            copy.deepcopy(graph)
