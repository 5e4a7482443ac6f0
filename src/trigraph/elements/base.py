"""Base class for objects compared and contained by identity."""

from __future__ import annotations

from typing import Any

from trigraph.exceptions import IdentityError


class IdentityObject:
    """Object whose identity is its value.

    Adjacency lists and the graph's registries find elements with ``is``.
    Both shallow and deep copies raise IdentityError.
    """

    __slots__ = ()

    def __copy__(self) -> Any:
        raise IdentityError(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        raise IdentityError(self)
