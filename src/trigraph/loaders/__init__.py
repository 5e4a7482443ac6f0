"""Loaders producing populated graphs."""

from trigraph.loaders.base import Loader
from trigraph.loaders.complete import CompleteGraphLoader

__all__ = ["CompleteGraphLoader", "Loader"]
