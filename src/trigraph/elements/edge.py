"""Directed and undirected edges between two vertices of one graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from trigraph.elements.base import IdentityObject
from trigraph.exceptions import InvalidArgumentError
from trigraph.validation import validate_numeric

if TYPE_CHECKING:
    from trigraph.elements.vertex import Vertex
    from trigraph.graph.core import Graph


class Edge(IdentityObject, ABC):
    """Abstract connection between two vertices.

    An edge holds back-references to its endpoints but owns neither of them.
    It is created through ``Vertex.create_edge_to`` / ``Vertex.create_edge``
    and removed only through ``destroy()``; the graph assigns its ``id`` when
    the edge is registered.

    Subclasses must implement the role queries:
    - has_vertex_start / has_vertex_target
    - is_connection
    - get_vertex_to_from / get_vertex_from_to
    """

    def __init__(self, a: Vertex, b: Vertex) -> None:
        self._a = a
        self._b = b
        self._id: int | None = None

    @property
    def id(self) -> int | None:
        """Identifier assigned by the graph, None until registered."""
        return self._id

    @property
    def graph(self) -> Graph:
        """Graph both endpoints belong to."""
        return self._a.graph

    @property
    def vertices(self) -> tuple[Vertex, Vertex]:
        """Both endpoints, start first for directed edges."""
        return (self._a, self._b)

    @property
    def is_loop(self) -> bool:
        """True if both endpoints are the same vertex."""
        return self._a is self._b

    @abstractmethod
    def has_vertex_start(self, vertex: Vertex) -> bool:
        """Can this edge be traversed starting at vertex?"""

    @abstractmethod
    def has_vertex_target(self, vertex: Vertex) -> bool:
        """Can this edge be traversed ending at vertex?"""

    @abstractmethod
    def is_connection(self, from_vertex: Vertex, to_vertex: Vertex) -> bool:
        """Does this edge lead from from_vertex to to_vertex?"""

    @abstractmethod
    def get_vertex_to_from(self, start: Vertex) -> Vertex:
        """Vertex reached when leaving start along this edge."""

    @abstractmethod
    def get_vertex_from_to(self, end: Vertex) -> Vertex:
        """Vertex this edge comes from when arriving at end."""

    def destroy(self) -> None:
        """Detach from both endpoints and from the graph.

        This is the only way to delete an edge. A loop is detached twice from
        the same vertex, once per adjacency entry.

        Raises:
            NotFoundError: If an endpoint or the graph lost track of this edge
        """
        self._a._remove_edge(self)
        self._b._remove_edge(self)
        self.graph._remove_edge(self)

    def _not_an_endpoint(self, vertex: Vertex) -> InvalidArgumentError:
        return InvalidArgumentError(f"Vertex {vertex.id!r} is not an endpoint of edge {self}")


class EdgeDirected(Edge):
    """Edge from ``start`` to ``end`` carrying an optional flow."""

    def __init__(self, start: Vertex, end: Vertex) -> None:
        super().__init__(start, end)
        self._flow: int | float | None = None

    @property
    def start(self) -> Vertex:
        return self._a

    @property
    def end(self) -> Vertex:
        return self._b

    @property
    def flow(self) -> int | float | None:
        """Flow carried from start to end, None if never set."""
        return self._flow

    @flow.setter
    def flow(self, value: int | float | None) -> None:
        validate_numeric(value, "flow")
        self._flow = value

    def has_vertex_start(self, vertex: Vertex) -> bool:
        return self._a is vertex

    def has_vertex_target(self, vertex: Vertex) -> bool:
        return self._b is vertex

    def is_connection(self, from_vertex: Vertex, to_vertex: Vertex) -> bool:
        return self._a is from_vertex and self._b is to_vertex

    def get_vertex_to_from(self, start: Vertex) -> Vertex:
        """Return end if start is this edge's start vertex.

        Raises:
            InvalidArgumentError: If start is not the start vertex
        """
        if start is not self._a:
            raise self._not_an_endpoint(start)
        return self._b

    def get_vertex_from_to(self, end: Vertex) -> Vertex:
        """Return start if end is this edge's end vertex.

        Raises:
            InvalidArgumentError: If end is not the end vertex
        """
        if end is not self._b:
            raise self._not_an_endpoint(end)
        return self._a

    def __str__(self) -> str:
        text = f"{self._a.id} -> {self._b.id}"
        if self._flow is not None:
            text += f" (flow {self._flow})"
        return text

    def __repr__(self) -> str:
        return f"EdgeDirected(id={self._id!r}, start={self._a.id!r}, end={self._b.id!r}, flow={self._flow!r})"


class EdgeUndirected(Edge):
    """Symmetric edge; both endpoints act as start and as target."""

    def has_vertex_start(self, vertex: Vertex) -> bool:
        return self._a is vertex or self._b is vertex

    def has_vertex_target(self, vertex: Vertex) -> bool:
        return self._a is vertex or self._b is vertex

    def is_connection(self, from_vertex: Vertex, to_vertex: Vertex) -> bool:
        return (self._a is from_vertex and self._b is to_vertex) or (
            self._b is from_vertex and self._a is to_vertex
        )

    def get_vertex_to_from(self, start: Vertex) -> Vertex:
        return self._other(start)

    def get_vertex_from_to(self, end: Vertex) -> Vertex:
        return self._other(end)

    def _other(self, vertex: Vertex) -> Vertex:
        if vertex is self._a:
            return self._b
        if vertex is self._b:
            return self._a
        raise self._not_an_endpoint(vertex)

    def __str__(self) -> str:
        return f"{self._a.id} -- {self._b.id}"

    def __repr__(self) -> str:
        return f"EdgeUndirected(id={self._id!r}, vertices=({self._a.id!r}, {self._b.id!r}))"
