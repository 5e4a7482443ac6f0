"""Shared fixtures for trigraph tests."""

import random

import pytest

from trigraph import Graph


@pytest.fixture
def graph():
    """Empty graph."""
    return Graph()


@pytest.fixture
def chain(graph):
    """Directed chain a -> b -> c, both edges carrying flow 5."""
    a = graph.create_vertex("a")
    b = graph.create_vertex("b")
    c = graph.create_vertex("c")
    ab = a.create_edge_to(b)
    bc = b.create_edge_to(c)
    ab.flow = 5
    bc.flow = 5
    return a, b, c


@pytest.fixture
def rng():
    """Deterministic generator for random ordering."""
    return random.Random(1234)
