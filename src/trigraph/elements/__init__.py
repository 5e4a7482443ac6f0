"""Vertex and edge types."""

from trigraph.elements.edge import Edge, EdgeDirected, EdgeUndirected
from trigraph.elements.vertex import Vertex

__all__ = ["Edge", "EdgeDirected", "EdgeUndirected", "Vertex"]
