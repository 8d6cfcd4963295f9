"""Net vertices: a point plus the points directly reachable from it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Generic,
    Hashable,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from netpaths.errors import NodeBuildError
from netpaths.model.point import Point, point_id

if TYPE_CHECKING:
    from netpaths.model.path import Path

P = TypeVar("P", bound=Point)


@dataclass(frozen=True)
class Node(Generic[P]):
    """One vertex of a net.

    Attributes:
        point: The vertex this node represents.
        connected: Points directly reachable from ``point``, in adjacency order.
            May be empty for an isolated vertex.
    """

    point: P
    connected: Tuple[P, ...] = field(default_factory=tuple)

    @property
    def id(self) -> Hashable:
        return point_id(self.point)

    def is_point(self, point: Point) -> bool:
        """Return True if ``point`` has the same identifier as this node's point."""
        return point_id(point) == self.id

    def connected_ids(self) -> Tuple[Hashable, ...]:
        return tuple(point_id(p) for p in self.connected)

    def connected_points_not_in_path(self, path: Path[P]) -> Optional[Tuple[P, ...]]:
        """Return the neighbors that ``path`` has not visited yet.

        Args:
            path: The partial path built so far.

        Returns:
            The unvisited neighbors in adjacency order, or None when there are
            none (the node is a dead end for this path).
        """
        followable = tuple(p for p in self.connected if not path.contains(p))
        return followable or None


class NodeBuilder(Generic[P]):
    """Accumulates a point and its neighbors, then builds a Node.

    Example:
        >>> node = NodeBuilder().point(a).connected_points([b, c]).build()
    """

    def __init__(self) -> None:
        self._point: Optional[P] = None
        self._connected: List[P] = []

    def point(self, point: P) -> NodeBuilder[P]:
        self._point = point
        return self

    def connected_point(self, point: P) -> NodeBuilder[P]:
        self._connected.append(point)
        return self

    def connected_points(self, points: Iterable[P]) -> NodeBuilder[P]:
        self._connected.extend(points)
        return self

    def build(self) -> Node[P]:
        """Build the node.

        Neighbors sharing an identifier collapse to their first occurrence.

        Raises:
            NodeBuildError: If no point was supplied.
        """
        if self._point is None:
            raise NodeBuildError("A node needs a point")

        seen = set()
        connected: List[P] = []
        for p in self._connected:
            pid = point_id(p)
            if pid in seen:
                continue
            seen.add(pid)
            connected.append(p)

        return Node(self._point, tuple(connected))
