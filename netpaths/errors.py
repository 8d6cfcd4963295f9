"""Exception hierarchy for net construction and path search."""

from __future__ import annotations

from typing import Any


class NetError(Exception):
    """Base class for errors reported by a path query."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class PointNotFoundError(NetError):
    """Raised when a queried point has no node in the net."""

    def __init__(self, point_id: Any) -> None:
        super().__init__(f'The point with id "{point_id}" could not be found')
        self.point_id = point_id


class NoPathFoundError(NetError):
    """Raised when an exhaustive search yields no path to the destination."""

    def __init__(self, origin_id: Any = None, destination_id: Any = None) -> None:
        super().__init__("No path found between points")
        self.origin_id = origin_id
        self.destination_id = destination_id


class PathCannotBeBuiltError(NetError):
    """Raised when the single-point seed path of a query is rejected."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Path cannot be built: {reason}")
        self.reason = reason


class NodeBuildError(ValueError):
    """Raised by NodeBuilder when the node description is incomplete."""


class PathBuildError(ValueError):
    """Raised by PathBuilder when no usable seed point was given."""


class MalformedNetError(RuntimeError):
    """A neighbor listed in the adjacency data has no node of its own.

    Signals malformed net data rather than a query outcome, so it is not a
    NetError.
    """

    def __init__(self, point_id: Any, listed_by: Any = None) -> None:
        message = f'Point "{point_id}" is listed as a neighbor but has no node'
        if listed_by is not None:
            message += f' (listed by "{listed_by}")'
        super().__init__(message)
        self.point_id = point_id
        self.listed_by = listed_by
