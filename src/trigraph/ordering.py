"""Select or enumerate vertices by an ordering criterion.

``get_first`` returns the single extremal vertex, ``get_all`` an iterator over
all of them. Both accept a Graph, a mapping of vertices or any iterable of
vertices.
"""

from __future__ import annotations

import functools
import random
from collections.abc import Callable, Iterable, Iterator, Mapping
from enum import Enum
from operator import attrgetter
from typing import TYPE_CHECKING, Any, Union

from trigraph._config import TrigraphConfig, load_config
from trigraph.exceptions import InvalidArgumentError, NotFoundError, UnsupportedError

if TYPE_CHECKING:
    from pathlib import Path

    from trigraph.elements.vertex import Vertex
    from trigraph.graph.core import Graph

    VertexSource = Union[Graph, Mapping[Any, Vertex], Iterable[Vertex]]


class Order(Enum):
    """Criterion used to compare vertices.

    Values:
        FIFO: Encounter order, no reordering
        ID: Vertex id
        DEGREE: Number of incident edge ends
        INDEGREE: Number of entering edges
        OUTDEGREE: Number of leaving edges
        RANDOM: Uniform random order, direction is ignored
    """

    FIFO = "fifo"
    ID = "id"
    DEGREE = "degree"
    INDEGREE = "indegree"
    OUTDEGREE = "outdegree"
    RANDOM = "random"


_KEYS: dict[Order, Callable[[Vertex], Any]] = {
    Order.ID: attrgetter("id"),
    Order.DEGREE: attrgetter("degree"),
    Order.INDEGREE: attrgetter("degree_in"),
    Order.OUTDEGREE: attrgetter("degree_out"),
}


@functools.lru_cache(maxsize=1)
def default_rng() -> random.Random:
    """Process-wide generator behind Order.RANDOM when no rng is passed.

    Unseeded until ``seed`` or ``configure`` is called.
    """
    return random.Random()


def seed(value: int | None) -> None:
    """Reseed the process-wide generator; None reseeds from system entropy."""
    default_rng().seed(value)


def configure(path: str | Path) -> TrigraphConfig:
    """Apply [tool.trigraph] settings from the given pyproject.toml.

    Args:
        path: Path to a pyproject.toml file

    Returns:
        The loaded config
    """
    config = load_config(path)
    if config.random_seed is not None:
        seed(config.random_seed)
    return config


def get_first(
    vertices: VertexSource,
    by: Order = Order.FIFO,
    desc: bool = False,
    *,
    rng: random.Random | None = None,
) -> Vertex:
    """Return the first vertex according to the given criterion.

    Ascending returns the smallest vertex, descending the largest. Among
    exact ties the earliest encountered vertex wins.

    Args:
        vertices: Graph, mapping or iterable of vertices to scan
        by: Ordering criterion
        desc: Return the largest instead of the smallest vertex
        rng: Generator for Order.RANDOM (default: default_rng())

    Returns:
        The selected vertex

    Raises:
        InvalidArgumentError: If by is not an Order member
        NotFoundError: If there are no vertices
        UnsupportedError: If vertex ids cannot be compared with each other

    Example:
        >>> graph = Graph()
        >>> for vertex_id in (3, 1, 2):
        ...     _ = graph.create_vertex(vertex_id)
        >>> get_first(graph, Order.ID).id
        1
        >>> get_first(graph, Order.ID, desc=True).id
        3
    """
    _validate_order(by)
    items = _iter_vertices(vertices)

    if by is Order.RANDOM:
        pool = list(items)
        if not pool:
            raise NotFoundError("No vertex found")
        return (rng or default_rng()).choice(pool)

    if by is Order.FIFO:
        if not desc:
            for vertex in items:
                return vertex
            raise NotFoundError("No vertex found")
        last: Vertex | None = None
        for last in items:
            pass
        if last is None:
            raise NotFoundError("No vertex found")
        return last

    key = _KEYS[by]
    best_vertex: Vertex | None = None
    best: Any = None
    for vertex in items:
        now = key(vertex)
        try:
            better = best_vertex is None or (now > best if desc else now < best)
        except TypeError as exc:
            raise UnsupportedError(
                f"Cannot compare {by.name} values {best!r} and {now!r}"
            ) from exc
        if better:
            best_vertex = vertex
            best = now

    if best_vertex is None:
        raise NotFoundError("No vertex found")
    return best_vertex


def get_all(
    vertices: VertexSource,
    by: Order = Order.FIFO,
    desc: bool = False,
    *,
    rng: random.Random | None = None,
) -> Iterator[Vertex]:
    """Return an iterator over all vertices ordered by the given criterion.

    Ascending yields the smallest vertex first, descending the largest.
    Vertices with equal keys keep their encounter order in both directions.

    Args:
        vertices: Graph, mapping or iterable of vertices
        by: Ordering criterion
        desc: Yield the largest vertex first
        rng: Generator for Order.RANDOM (default: default_rng())

    Returns:
        Iterator over the vertices

    Raises:
        InvalidArgumentError: If by is not an Order member
        UnsupportedError: If descending by ID over string ids, or if ids
            cannot be compared with each other

    Note:
        All validation happens at call time; the returned iterator never
        raises.
    """
    _validate_order(by)
    pool = list(_iter_vertices(vertices))

    if by is Order.FIFO:
        return reversed(pool) if desc else iter(pool)

    if by is Order.RANDOM:
        (rng or default_rng()).shuffle(pool)
        return iter(pool)

    key = _KEYS[by]
    keys = [key(vertex) for vertex in pool]
    if desc:
        if by is Order.ID and any(isinstance(k, str) for k in keys):
            raise UnsupportedError("Unable to reverse sorting for string IDs")
        keys = [-k for k in keys]

    try:
        order = sorted(range(len(pool)), key=keys.__getitem__)
    except TypeError as exc:
        raise UnsupportedError(f"Cannot compare {by.name} values of mixed types") from exc
    return (pool[index] for index in order)


def _validate_order(by: Any) -> None:
    if not isinstance(by, Order):
        raise InvalidArgumentError(
            f"Invalid order flag {by!r}\n\n"
            f"  -> Expected one of: {', '.join(f'Order.{o.name}' for o in Order)}"
        )


def _iter_vertices(vertices: VertexSource) -> Iterator[Vertex]:
    """Iterate the vertices of a Graph, a mapping or a plain iterable."""
    from trigraph.graph.core import Graph

    if isinstance(vertices, Graph):
        return iter(vertices.get_vertices())
    if isinstance(vertices, Mapping):
        return iter(vertices.values())
    return iter(vertices)
