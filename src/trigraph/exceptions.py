"""Exceptions raised by trigraph.

Every error is a programming error surfaced to the caller that triggered it.
Nothing here is retried or recovered from internally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from trigraph.elements.vertex import Vertex
    from trigraph.graph.core import Graph


class GraphError(Exception):
    """Base class for all trigraph errors."""

    pass


class InvalidArgumentError(GraphError, ValueError):
    """An argument is not acceptable for the requested operation.

    Raised for unknown ordering criteria, duplicate vertex ids, negative
    counts and vertices that are not an endpoint of the queried edge.
    """

    pass


class CrossGraphError(InvalidArgumentError):
    """Vertex belongs to a different graph than the operation requires.

    Raised before any mutation happens, so both adjacency lists and the
    graph's edge list are left untouched.

    Attributes:
        vertex: The foreign vertex
        graph: The graph the operation was confined to
        message: Human-readable error message
    """

    def __init__(
        self,
        vertex: Vertex,
        graph: Graph,
        message: str | None = None,
    ) -> None:
        self.vertex = vertex
        self.graph = graph
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        return (
            f"Vertex {self.vertex.id!r} belongs to a different graph\n\n"
            f"  -> Edges can only connect vertices of the same graph"
        )


class NonNumericValueError(InvalidArgumentError, TypeError):
    """A balance or flow value is neither a number nor None.

    Attributes:
        value: The rejected value
        field: Name of the attribute being assigned
        message: Human-readable error message
    """

    def __init__(self, value: Any, field: str, message: str | None = None) -> None:
        self.value = value
        self.field = field
        self.message = message or (
            f"Invalid {field} {value!r} ({type(value).__name__})\n\n"
            f"  -> Expected int, float or None"
        )
        super().__init__(self.message)


class NotFoundError(GraphError, LookupError):
    """Requested element does not exist.

    Raised for empty vertex collections, unknown vertex ids and edges that
    are missing from an adjacency list or from the graph. The latter signals
    a broken back-reference and should never happen through the public API.
    """

    pass


class UnsupportedError(GraphError):
    """Operation is not defined for the given topology or values.

    Raised when computing flow over undirected edges and when ordering by
    identifiers that cannot be negated or compared with each other.
    """

    pass


class IdentityError(GraphError, TypeError):
    """Vertices, edges and graphs are identity objects and cannot be copied.

    Attributes:
        obj: The object a copy was requested for
    """

    def __init__(self, obj: object) -> None:
        self.obj = obj
        super().__init__(
            f"{type(obj).__name__} objects cannot be copied\n\n"
            f"  -> Containment and comparison rely on object identity"
        )
