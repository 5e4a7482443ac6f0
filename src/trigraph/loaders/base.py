"""Base class for graph loaders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trigraph.graph.core import Graph


class Loader(ABC):
    """Produces a freshly populated Graph.

    Loaders only use the public vertex/edge creation API and keep no
    reference to the graphs they return.
    """

    @abstractmethod
    def get_graph(self) -> Graph:
        """Build and return a new graph."""
