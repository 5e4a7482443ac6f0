"""trigraph - mutable in-memory graph of vertices and directed/undirected edges."""

from trigraph.algorithms import BreadthFirstSearch
from trigraph.elements import Edge, EdgeDirected, EdgeUndirected, Vertex
from trigraph.exceptions import (
    CrossGraphError,
    GraphError,
    IdentityError,
    InvalidArgumentError,
    NonNumericValueError,
    NotFoundError,
    UnsupportedError,
)
from trigraph.graph import Graph
from trigraph.loaders import CompleteGraphLoader, Loader
from trigraph.ordering import Order, configure, get_all, get_first, seed

__all__ = [
    # Graph model
    "Graph",
    "Vertex",
    "Edge",
    "EdgeDirected",
    "EdgeUndirected",
    # Ordering
    "Order",
    "get_first",
    "get_all",
    "seed",
    "configure",
    # Algorithms and loaders
    "BreadthFirstSearch",
    "Loader",
    "CompleteGraphLoader",
    # Errors
    "GraphError",
    "InvalidArgumentError",
    "CrossGraphError",
    "NonNumericValueError",
    "NotFoundError",
    "UnsupportedError",
    "IdentityError",
]
