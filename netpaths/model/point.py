"""Point contract shared by every component of a net.

A point is any value that exposes a stable, hashable identifier through
``identifier()``. Two points with equal identifiers are the same vertex,
regardless of their other attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Protocol, runtime_checkable


@runtime_checkable
class Point(Protocol):
    """Anything that can be placed in a net.

    ``identifier()`` must return a hashable value: nets index their nodes and
    paths track visited points by identifier. An unhashable identifier makes
    ``Net`` construction raise ``TypeError``.
    """

    def identifier(self) -> Hashable: ...


@dataclass(frozen=True, order=True)
class SimplePoint:
    """Point identified by its name.

    Attributes:
        name: Unique identifier of the point.
    """

    name: Any

    def identifier(self) -> Hashable:
        return self.name

    def __str__(self) -> str:
        return str(self.name)


def point_id(point: Point) -> Hashable:
    """Return the identifier of ``point``."""
    return point.identifier()


def is_point(value: Any) -> bool:
    """Return True if ``value`` satisfies the point contract."""
    return isinstance(value, Point) and callable(getattr(value, "identifier", None))
