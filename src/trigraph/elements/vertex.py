"""Vertex with its adjacency list, degree/flow queries and ordering helpers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from trigraph.algorithms.breadth_first import BreadthFirstSearch
from trigraph.elements.base import IdentityObject
from trigraph.elements.edge import Edge, EdgeDirected, EdgeUndirected
from trigraph.exceptions import NotFoundError, UnsupportedError
from trigraph.ordering import get_all, get_first
from trigraph.validation import validate_numeric, validate_same_graph

if TYPE_CHECKING:
    from trigraph.graph.core import Graph


class Vertex(IdentityObject):
    """Node of a graph, unique by ``id`` within its graph.

    Vertices are created by ``Graph.create_vertex`` and keep a back-reference
    to that graph. The adjacency list holds every incident edge once per
    endpoint role it plays, so a loop appears twice.

    Attributes are exposed read-only except ``balance``, an optional numeric
    annotation used by flow bookkeeping.

    Example:
        >>> graph = Graph()
        >>> a, b = graph.create_vertices(2)
        >>> edge = a.create_edge_to(b)
        >>> a.degree_out, b.degree_in
        (1, 1)
        >>> a.has_edge_to(b), b.has_edge_to(a)
        (True, False)
    """

    get_first = staticmethod(get_first)
    get_all = staticmethod(get_all)

    def __init__(self, vertex_id: int | str, graph: Graph) -> None:
        self._id = vertex_id
        self._graph = graph
        self._edges: list[Edge] = []
        self._balance: int | float | None = None

    @property
    def id(self) -> int | str:
        return self._id

    @property
    def graph(self) -> Graph:
        """Graph this vertex is attached to."""
        return self._graph

    @property
    def balance(self) -> int | float | None:
        """Optional numeric balance, None by default."""
        return self._balance

    @balance.setter
    def balance(self, value: int | float | None) -> None:
        validate_numeric(value, "balance")
        self._balance = value

    def get_flow(self) -> int | float:
        """Net flow into this vertex: sum(inflow) - sum(outflow).

        A positive result means more flow enters than leaves (the vertex acts
        as a sink), a negative one means it acts as a source. Edges without a
        flow contribute 0, and a loop's inflow cancels its outflow.

        Raises:
            UnsupportedError: If any incident edge is undirected
        """
        total: int | float = 0
        for edge in self._edges:
            if not isinstance(edge, EdgeDirected):
                raise UnsupportedError(
                    f"Flow of vertex {self._id!r} is undefined: edge {edge} is undirected"
                )
            if edge.is_loop:
                continue
            flow = edge.flow or 0
            if edge.has_vertex_start(self):
                total -= flow
            else:
                total += flow
        return total

    # === Paths ===

    def has_path_to(self, vertex: Vertex) -> bool:
        """Is vertex reachable from this vertex along edge direction?"""
        return BreadthFirstSearch(self).has_vertex(vertex)

    def has_path_from(self, vertex: Vertex) -> bool:
        """Is this vertex reachable from vertex along edge direction?"""
        return vertex.has_path_to(self)

    def get_vertices_path_to(self) -> set[Vertex]:
        """All vertices this vertex has a path to."""
        return BreadthFirstSearch(self).get_vertices()

    def get_vertices_path_from(self) -> set[Vertex]:
        """All vertices that have a path to this vertex."""
        return BreadthFirstSearch(self, reverse=True).get_vertices()

    # === Edge creation and removal ===

    def create_edge_to(self, vertex: Vertex) -> EdgeDirected:
        """Create a directed edge from this vertex to vertex.

        Raises:
            CrossGraphError: If vertex belongs to another graph
        """
        validate_same_graph(vertex, self._graph)
        edge = EdgeDirected(self, vertex)
        self._attach(edge, vertex)
        return edge

    def create_edge(self, vertex: Vertex) -> EdgeUndirected:
        """Create an undirected edge between this vertex and vertex.

        Raises:
            CrossGraphError: If vertex belongs to another graph
        """
        validate_same_graph(vertex, self._graph)
        edge = EdgeUndirected(self, vertex)
        self._attach(edge, vertex)
        return edge

    def _attach(self, edge: Edge, other: Vertex) -> None:
        # Graph registration validates first so a rejected edge leaves no trace
        self._graph.add_edge(edge)
        self._edges.append(edge)
        other._edges.append(edge)

    def _remove_edge(self, edge: Edge) -> None:
        """Drop one adjacency entry for edge. Only Edge.destroy() calls this.

        Raises:
            NotFoundError: If edge is not in the adjacency list
        """
        for index, candidate in enumerate(self._edges):
            if candidate is edge:
                del self._edges[index]
                return
        raise NotFoundError(f"Edge {edge} is not attached to vertex {self._id!r}")

    # === Adjacency ===

    def has_edge_to(self, vertex: Vertex) -> bool:
        """Is there a direct edge from this vertex to vertex?"""
        return any(edge.is_connection(self, vertex) for edge in self._edges)

    def has_edge_from(self, vertex: Vertex) -> bool:
        """Is there a direct edge from vertex to this vertex?"""
        return vertex.has_edge_to(self)

    def get_edges(self) -> list[Edge]:
        """All incident edges; a loop is listed twice."""
        return list(self._edges)

    def get_edges_out(self) -> list[Edge]:
        """Edges leaving this vertex (every undirected edge included)."""
        return [edge for edge in self._edges if edge.has_vertex_start(self)]

    def get_edges_in(self) -> list[Edge]:
        """Edges entering this vertex (every undirected edge included)."""
        return [edge for edge in self._edges if edge.has_vertex_target(self)]

    def get_edges_to(self, vertex: Vertex) -> list[Edge]:
        """Edges from this vertex to vertex."""
        return [edge for edge in self._edges if edge.is_connection(self, vertex)]

    def get_edges_from(self, vertex: Vertex) -> list[Edge]:
        """Edges from vertex to this vertex."""
        return vertex.get_edges_to(self)

    def get_vertices_edge(self) -> dict[int | str, Vertex]:
        """Adjacent vertices keyed by id, regardless of direction."""
        result: dict[int | str, Vertex] = {}
        for edge in self._edges:
            if edge.has_vertex_start(self):
                vertex = edge.get_vertex_to_from(self)
            else:
                vertex = edge.get_vertex_from_to(self)
            result[vertex.id] = vertex
        return result

    def get_vertices_edge_to(self) -> dict[int | str, Vertex]:
        """Vertices this vertex has an edge to, keyed by id."""
        result: dict[int | str, Vertex] = {}
        for edge in self.get_edges_out():
            vertex = edge.get_vertex_to_from(self)
            result[vertex.id] = vertex
        return result

    def get_vertices_edge_from(self) -> dict[int | str, Vertex]:
        """Vertices that have an edge to this vertex, keyed by id."""
        result: dict[int | str, Vertex] = {}
        for edge in self.get_edges_in():
            vertex = edge.get_vertex_from_to(self)
            result[vertex.id] = vertex
        return result

    # === Degree ===

    @property
    def degree(self) -> int:
        """Number of incident edge ends. Loops count twice."""
        return len(self._edges)

    @property
    def degree_in(self) -> int:
        """Number of edges entering this vertex."""
        return sum(1 for edge in self._edges if edge.has_vertex_target(self))

    @property
    def degree_out(self) -> int:
        """Number of edges leaving this vertex."""
        return sum(1 for edge in self._edges if edge.has_vertex_start(self))

    @property
    def is_isolated(self) -> bool:
        return not self._edges

    @property
    def is_leaf(self) -> bool:
        """True if exactly one edge end is attached (degree 1).

        Direction is not taken into account, so a directed graph's leaves are
        not necessarily sinks.
        """
        return self.degree == 1

    @property
    def is_source(self) -> bool:
        """True if no edge enters this vertex (indegree 0)."""
        return not any(edge.has_vertex_target(self) for edge in self._edges)

    @property
    def is_sink(self) -> bool:
        """True if no edge leaves this vertex (outdegree 0)."""
        return not any(edge.has_vertex_start(self) for edge in self._edges)

    @property
    def has_loop(self) -> bool:
        return any(edge.is_loop for edge in self._edges)

    # === Lifecycle ===

    def destroy(self) -> None:
        """Destroy all incident edges, then remove this vertex from its graph.

        Each distinct edge is destroyed once; a loop disappears from both of
        its adjacency entries in one go. Destroying a vertex twice raises
        NotFoundError from the graph.
        """
        for edge in dict.fromkeys(self._edges):
            edge.destroy()
        self._graph.remove_vertex(self)

    def __str__(self) -> str:
        lines = [f"Edges of vertex {self._id}:"]
        lines.extend(f"\t{edge}" for edge in self._edges)
        return "\n".join(lines) + "\n"

    def __repr__(self) -> str:
        return f"Vertex(id={self._id!r}, degree={len(self._edges)})"
