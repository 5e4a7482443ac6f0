"""Argument checks shared by vertices, edges and the graph container."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trigraph.exceptions import CrossGraphError, InvalidArgumentError, NonNumericValueError

if TYPE_CHECKING:
    from trigraph.elements.vertex import Vertex
    from trigraph.graph.core import Graph


def validate_vertex_id(vertex_id: Any) -> None:
    """Vertex ids are ints or strings. bool is an int subclass but not an id."""
    if isinstance(vertex_id, bool) or not isinstance(vertex_id, (int, str)):
        raise InvalidArgumentError(
            f"Invalid vertex id: {vertex_id!r} ({type(vertex_id).__name__})\n\n"
            f"  -> Vertex ids must be int or str"
        )


def validate_same_graph(vertex: Vertex, graph: Graph) -> None:
    """Raise CrossGraphError unless vertex is attached to graph."""
    if vertex.graph is not graph:
        raise CrossGraphError(vertex, graph)


def validate_numeric(value: Any, field: str) -> None:
    """Accept None, int or float for optional numeric annotations."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NonNumericValueError(value, field)
