"""Graph package - vertex/edge container."""

from trigraph.graph.core import Graph

__all__ = ["Graph"]
