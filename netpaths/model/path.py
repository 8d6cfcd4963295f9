"""Persistent, cycle-free sequences of points.

A ``Path`` never changes once built: ``with_point_appended`` returns a new
path, so partial paths can be shared freely between search branches.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Any,
    FrozenSet,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
)

from netpaths.config import NET_CONFIG
from netpaths.errors import PathBuildError
from netpaths.model.point import Point, is_point, point_id

P = TypeVar("P", bound=Point)


@dataclass(frozen=True, eq=False)
class Path(Generic[P]):
    """An ordered walk through a net.

    Paths are compared and hashed by their sequence of identifiers.

    Attributes:
        points: The visited points, origin first.
        separator: Joins identifiers when rendered. None falls back to
            ``NET_CONFIG.path_separator``.
    """

    points: Tuple[P, ...]
    separator: Optional[str] = field(default=None, repr=False)
    _ids: FrozenSet[Hashable] = field(init=False, repr=False, default=frozenset())

    def __post_init__(self) -> None:
        object.__setattr__(self, "_ids", frozenset(point_id(p) for p in self.points))

    def with_point_appended(self, point: P) -> Path[P]:
        """Return a new path made of this one followed by ``point``.

        Whether ``point`` is already on the path is not checked here.
        """
        return Path(self.points + (point,), self.separator)

    def with_separator(self, separator: Optional[str]) -> Path[P]:
        """Return the same points rendered with ``separator``."""
        return Path(self.points, separator)

    def contains(self, point: Point) -> bool:
        return point_id(point) in self._ids

    def ends_with(self, point: Point) -> bool:
        return bool(self.points) and point_id(self.points[-1]) == point_id(point)

    @property
    def start(self) -> P:
        return self.points[0]

    @property
    def end(self) -> P:
        return self.points[-1]

    def ids(self) -> Tuple[Hashable, ...]:
        """Return the identifiers of the path's points, in order."""
        return tuple(point_id(p) for p in self.points)

    def render(self, separator: Optional[str] = None) -> str:
        """Join the point identifiers, e.g. ``"A-B-C"``.

        Args:
            separator: Defaults to the path's own separator, then to
                ``NET_CONFIG.path_separator``.
        """
        if separator is None:
            separator = self.separator
        if separator is None:
            separator = NET_CONFIG.path_separator
        return separator.join(str(pid) for pid in self.ids())

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[P]:
        return iter(self.points)

    def __getitem__(self, idx: int) -> P:
        return self.points[idx]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.ids() == other.ids()

    def __hash__(self) -> int:
        return hash(self.ids())


class PathBuilder(Generic[P]):
    """Seeds a path with exactly one point.

    Example:
        >>> path = PathBuilder().point(origin).build()
    """

    def __init__(self) -> None:
        self._point: Optional[P] = None

    def point(self, point: P) -> PathBuilder[P]:
        self._point = point
        return self

    def build(self) -> Path[P]:
        """Build the single-point path.

        Raises:
            PathBuildError: If no seed point was given, or the seed does not
                expose an identifier.
        """
        if self._point is None:
            raise PathBuildError("A path needs a starting point")
        if not is_point(self._point):
            raise PathBuildError(
                f"{type(self._point).__name__} does not provide identifier()"
            )
        return Path((self._point,))


def format_paths(
    paths: Iterable[Path[Any]],
    separator: Optional[str] = None,
    path_separator: Optional[str] = None,
) -> str:
    """Render paths, sort the renderings and join them.

    Args:
        paths: Paths to render.
        separator: Joins rendered paths. Defaults to ``NET_CONFIG.paths_separator``.
        path_separator: Joins identifiers inside a path. Defaults to each
            path's own separator.

    Returns:
        For example ``"A-B-C + A-D-C"``.
    """
    if separator is None:
        separator = NET_CONFIG.paths_separator
    return separator.join(sorted(p.render(path_separator) for p in paths))
