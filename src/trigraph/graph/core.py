"""Graph container owning vertices and edges."""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING, Any

import networkx as nx

from trigraph.elements.base import IdentityObject
from trigraph.elements.edge import EdgeDirected
from trigraph.elements.vertex import Vertex
from trigraph.exceptions import InvalidArgumentError, NotFoundError
from trigraph.validation import validate_same_graph, validate_vertex_id

if TYPE_CHECKING:
    from collections.abc import Iterator

    from trigraph.elements.edge import Edge

logger = logging.getLogger(__name__)


class Graph(IdentityObject):
    """Mutable graph of vertices and directed/undirected edges.

    The graph is the sole authority for vertex-id uniqueness and hands out
    edge ids. Vertices are created here; edges are created from a vertex
    (``create_edge_to`` / ``create_edge``) and register themselves through
    ``add_edge``.

    Mutations are multi-step and not atomic. A graph must be mutated by a
    single owner at a time.

    Example:
        >>> graph = Graph()
        >>> a = graph.create_vertex("a")
        >>> b = graph.create_vertex("b")
        >>> edge = a.create_edge(b)
        >>> len(graph), len(graph.get_edges())
        (2, 1)
        >>> b.destroy()
        >>> graph.get_edges()
        []
    """

    def __init__(self) -> None:
        self._vertices: dict[int | str, Vertex] = {}
        self._edges: dict[int, Edge] = {}
        self._edge_ids = itertools.count()

    # === Vertices ===

    def create_vertex(
        self,
        vertex_id: int | str | None = None,
        *,
        return_duplicate: bool = False,
    ) -> Vertex:
        """Create a vertex with the given id, or the next free integer id.

        Args:
            vertex_id: Identifier for the new vertex (default: next free int)
            return_duplicate: Return the existing vertex instead of failing
                when vertex_id is taken

        Returns:
            The new (or existing) vertex

        Raises:
            InvalidArgumentError: If vertex_id is taken (and not
                return_duplicate) or is neither int nor str
        """
        if vertex_id is None:
            vertex_id = self._next_vertex_id()
        validate_vertex_id(vertex_id)

        existing = self._vertices.get(vertex_id)
        if existing is not None:
            if return_duplicate:
                return existing
            raise InvalidArgumentError(
                f"Duplicate vertex id: {vertex_id!r}\n\n"
                f"  -> Pass return_duplicate=True to get the existing vertex"
            )

        vertex = Vertex(vertex_id, self)
        self._vertices[vertex_id] = vertex
        logger.debug("Created vertex %r", vertex_id)
        return vertex

    def create_vertices(self, n: int) -> list[Vertex]:
        """Create n vertices with consecutive free integer ids.

        Raises:
            InvalidArgumentError: If n is negative
        """
        if n < 0:
            raise InvalidArgumentError(f"Number of vertices must be >= 0, got {n}")
        first = self._next_vertex_id()
        return [self.create_vertex(first + offset) for offset in range(n)]

    def _next_vertex_id(self) -> int:
        ids = [
            vertex_id
            for vertex_id in self._vertices
            if isinstance(vertex_id, int)
        ]
        return max(ids) + 1 if ids else 0

    def get_vertex(self, vertex_id: int | str) -> Vertex:
        """Look up a vertex by id.

        Raises:
            NotFoundError: If no vertex has this id
        """
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise NotFoundError(f"Vertex {vertex_id!r} does not exist") from None

    def has_vertex(self, vertex_id: int | str) -> bool:
        return vertex_id in self._vertices

    def get_vertices(self) -> list[Vertex]:
        """Snapshot of all vertices in creation order."""
        return list(self._vertices.values())

    def remove_vertex(self, vertex: Vertex) -> None:
        """Drop a vertex whose edges have all been destroyed.

        Clients call ``vertex.destroy()``, which destroys the edges first and
        then lands here.

        Raises:
            NotFoundError: If vertex is not part of this graph
            InvalidArgumentError: If vertex still has edges
        """
        if self._vertices.get(vertex.id) is not vertex:
            raise NotFoundError(f"Vertex {vertex.id!r} is not part of this graph")
        if not vertex.is_isolated:
            raise InvalidArgumentError(
                f"Vertex {vertex.id!r} still has {vertex.degree} edge end(s)\n\n"
                f"  -> Use vertex.destroy() to remove it together with its edges"
            )
        del self._vertices[vertex.id]
        logger.debug("Removed vertex %r", vertex.id)

    # === Edges ===

    def add_edge(self, edge: Edge) -> None:
        """Register a newly created edge and assign its id.

        Raises:
            CrossGraphError: If an endpoint belongs to another graph
            NotFoundError: If an endpoint was already removed from this graph
            InvalidArgumentError: If the edge is already registered
        """
        for vertex in edge.vertices:
            validate_same_graph(vertex, self)
            if self._vertices.get(vertex.id) is not vertex:
                raise NotFoundError(f"Vertex {vertex.id!r} is not part of this graph")
        if edge.id is not None:
            raise InvalidArgumentError(f"Edge {edge} is already registered")
        edge._id = next(self._edge_ids)
        self._edges[edge._id] = edge
        logger.debug("Added edge %r", edge)

    def _remove_edge(self, edge: Edge) -> None:
        """Deregister an edge. Only Edge.destroy() calls this.

        Raises:
            NotFoundError: If edge is not registered
        """
        if self._edges.get(edge.id) is not edge:
            raise NotFoundError(f"Edge {edge} is not part of this graph")
        del self._edges[edge.id]
        logger.debug("Removed edge %r", edge)

    def get_edges(self) -> list[Edge]:
        """Snapshot of all edges in creation order."""
        return list(self._edges.values())

    # === Export ===

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export as a networkx MultiDiGraph keyed by vertex id.

        Directed edges become one arc, undirected edges one arc in each
        direction. Arcs are keyed by edge id and carry ``directed`` and, for
        directed edges, ``flow`` attributes. Nodes carry ``balance``.
        """
        G = nx.MultiDiGraph()
        for vertex_id, vertex in self._vertices.items():
            G.add_node(vertex_id, balance=vertex.balance)
        for edge in self._edges.values():
            a, b = edge.vertices
            if isinstance(edge, EdgeDirected):
                G.add_edge(a.id, b.id, key=edge.id, directed=True, flow=edge.flow)
            else:
                G.add_edge(a.id, b.id, key=edge.id, directed=False)
                if not edge.is_loop:
                    G.add_edge(b.id, a.id, key=edge.id, directed=False)
        return G

    # === Container protocol ===

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.get_vertices())

    def __contains__(self, item: Any) -> bool:
        """Accept a vertex object (matched by identity) or a vertex id."""
        if isinstance(item, Vertex):
            return self._vertices.get(item.id) is item
        try:
            return item in self._vertices
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"Graph(vertices={len(self._vertices)}, edges={len(self._edges)})"
