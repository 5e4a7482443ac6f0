"""Complete graph generator."""

from __future__ import annotations

import logging
import time

from trigraph.exceptions import InvalidArgumentError
from trigraph.graph.core import Graph
from trigraph.loaders.base import Loader

logger = logging.getLogger(__name__)


class CompleteGraphLoader(Loader):
    """Complete graph K(n) with vertices 0..n-1.

    Every pair of distinct vertices is connected by one undirected edge, or
    with ``directed=True`` by two opposite directed edges.

    Args:
        n: Number of vertices
        directed: Connect pairs with directed edges in both directions

    Raises:
        InvalidArgumentError: If n is negative

    Example:
        >>> graph = CompleteGraphLoader(4).get_graph()
        >>> len(graph), len(graph.get_edges())
        (4, 6)
    """

    def __init__(self, n: int, *, directed: bool = False) -> None:
        if n < 0:
            raise InvalidArgumentError(f"Number of vertices must be >= 0, got {n}")
        self.n = n
        self.directed = directed

    def get_graph(self) -> Graph:
        start = time.perf_counter()
        graph = Graph()

        logger.debug("Creating %d vertices", self.n)
        vertices = graph.create_vertices(self.n)

        logger.debug("Creating %s edges", "directed" if self.directed else "undirected")
        for i, vertex in enumerate(vertices):
            for other in vertices[i + 1:]:
                if self.directed:
                    vertex.create_edge_to(other)
                    other.create_edge_to(vertex)
                else:
                    vertex.create_edge(other)

        logger.debug(
            "Built complete graph with %d vertices and %d edges in %.3fs",
            len(graph),
            len(graph.get_edges()),
            time.perf_counter() - start,
        )
        return graph
