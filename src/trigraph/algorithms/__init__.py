"""Graph algorithms operating on trigraph vertices."""

from trigraph.algorithms.breadth_first import BreadthFirstSearch

__all__ = ["BreadthFirstSearch"]
