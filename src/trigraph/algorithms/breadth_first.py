"""Breadth-first reachability from a single vertex."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

import networkx as nx

from trigraph.exceptions import NotFoundError

if TYPE_CHECKING:
    from trigraph.elements.vertex import Vertex


class BreadthFirstSearch:
    """Vertices reachable from (or, reversed, leading to) an origin vertex.

    Directed edges are followed in their direction, undirected edges in
    both. The origin itself is never part of the result, even when a cycle
    leads back to it.

    The search runs on a networkx snapshot of the graph taken on first use;
    later mutations of the graph are not reflected in the same instance.

    Example:
        >>> a, b, c = graph.create_vertices(3)
        >>> _ = a.create_edge_to(b)
        >>> _ = b.create_edge_to(c)
        >>> BreadthFirstSearch(a).has_vertex(c)
        True
        >>> BreadthFirstSearch(a, reverse=True).get_vertices()
        set()
    """

    def __init__(self, vertex: Vertex, reverse: bool = False) -> None:
        self.vertex = vertex
        self.reverse = reverse

    @functools.cached_property
    def _reachable_ids(self) -> set[int | str]:
        graph = self.vertex.graph
        if self.vertex not in graph:
            raise NotFoundError(f"Vertex {self.vertex.id!r} is not part of its graph anymore")
        G = graph.to_networkx()
        if self.reverse:
            return nx.ancestors(G, self.vertex.id)
        return nx.descendants(G, self.vertex.id)

    def get_vertices(self) -> set[Vertex]:
        """All vertices found by the search, excluding the origin."""
        graph = self.vertex.graph
        return {graph.get_vertex(vertex_id) for vertex_id in self._reachable_ids}

    def has_vertex(self, vertex: Vertex) -> bool:
        """Was vertex found by the search?"""
        graph = self.vertex.graph
        return vertex.id in self._reachable_ids and graph.get_vertex(vertex.id) is vertex
