"""Net: a read-only collection of nodes searchable for every simple path.

The search is an exhaustive depth-first enumeration driven by an explicit
stack, so path length is not limited by the interpreter recursion limit.
Each branch extends its own immutable ``Path``, and only into neighbors that
path has not visited, so no result repeats a point and the stack never holds
more frames than the net has points.
"""

from __future__ import annotations

from typing import (
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from netpaths.config import NET_CONFIG, NetConfig
from netpaths.errors import (
    MalformedNetError,
    NoPathFoundError,
    PathBuildError,
    PathCannotBeBuiltError,
    PointNotFoundError,
)
from netpaths.logging import get_logger
from netpaths.model.node import Node, NodeBuilder
from netpaths.model.path import Path, PathBuilder, format_paths
from netpaths.model.point import Point, SimplePoint, point_id

LOGGER = get_logger(__name__)

P = TypeVar("P", bound=Point)

_EXHAUSTED = object()


class Net(Generic[P]):
    """An undirected graph given as one Node per point.

    Adjacency lists are followed exactly as given; symmetry ("A lists B"
    implies "B lists A") is trusted, not enforced. Use ``validate`` to report
    dangling or one-way adjacency.

    Attributes:
        nodes: The nodes in insertion order.
        config: Search and rendering settings.
    """

    def __init__(
        self, nodes: Iterable[Node[P]], config: Optional[NetConfig] = None
    ) -> None:
        """Build the net.

        Args:
            nodes: One node per distinct point.
            config: Defaults to the global ``NET_CONFIG``.

        Raises:
            ValueError: If two nodes share an identifier.
        """
        self.nodes: Tuple[Node[P], ...] = tuple(nodes)
        self.config = config if config is not None else NET_CONFIG
        self._index: Dict[Hashable, Node[P]] = {}
        for node in self.nodes:
            if node.id in self._index:
                raise ValueError(f"Point '{node.id}' already has a node in the net.")
            self._index[node.id] = node

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable]],
        points: Iterable[Hashable] = (),
        config: Optional[NetConfig] = None,
    ) -> Net[SimplePoint]:
        """Build a symmetric net of SimplePoints from undirected edges.

        Args:
            edges: Pairs of identifiers; each pair connects both ways.
            points: Extra identifiers, e.g. isolated points.
            config: Optional configuration for the net.

        Returns:
            A net with one node per identifier, in first-seen order.
        """
        adjacency: Dict[Hashable, List[Hashable]] = {}
        for name in points:
            adjacency.setdefault(name, [])
        for a, b in edges:
            adjacency.setdefault(a, []).append(b)
            adjacency.setdefault(b, []).append(a)

        nodes = [
            NodeBuilder()
            .point(SimplePoint(name))
            .connected_points(SimplePoint(n) for n in neighbors)
            .build()
            for name, neighbors in adjacency.items()
        ]
        return cls(nodes, config=config)

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.has_point(point)

    def __iter__(self) -> Iterator[Node[P]]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        return f"Net(points={[str(node.id) for node in self.nodes]})"

    def has_point(self, point: Point) -> bool:
        return point_id(point) in self._index

    def points(self) -> List[P]:
        return [node.point for node in self.nodes]

    def node_of(self, point: Point) -> Node[P]:
        """Return the node for ``point``.

        Raises:
            PointNotFoundError: If the net has no node for ``point``.
        """
        node = self._index.get(point_id(point))
        if node is None:
            raise PointNotFoundError(point_id(point))
        return node

    def find_paths(self, origin: P, destination: Point) -> List[Path[P]]:
        """Return every simple path from ``origin`` to ``destination``.

        Results are ordered by the adjacency order of the nodes walked.

        Args:
            origin: Starting point; must have a node in the net.
            destination: Target point.

        Returns:
            A non-empty list of paths.

        Raises:
            PointNotFoundError: If origin (or, when
                ``config.validate_destination`` is set, destination) has no node.
            PathCannotBeBuiltError: If the seed path cannot be built.
            NoPathFoundError: If the search completes without reaching
                ``destination``.
            MalformedNetError: If a listed neighbor has no node.
        """
        origin_node, seed = self._prepare(origin, destination)
        paths = list(self._walk(origin_node, destination, seed))
        if not paths:
            LOGGER.debug(
                "No path from '%s' to '%s'", point_id(origin), point_id(destination)
            )
            raise NoPathFoundError(point_id(origin), point_id(destination))

        LOGGER.debug(
            "Found %d path(s) from '%s' to '%s'",
            len(paths),
            point_id(origin),
            point_id(destination),
        )
        return paths

    def iter_paths(self, origin: P, destination: Point) -> Iterator[Path[P]]:
        """Yield the paths of ``find_paths`` one at a time.

        Origin and destination are checked before the iterator is returned.
        When no path exists the iterator is simply empty.
        """
        origin_node, seed = self._prepare(origin, destination)
        return self._walk(origin_node, destination, seed)

    def validate(self) -> List[str]:
        """Describe adjacency problems without raising.

        Returns:
            One message per neighbor with no node of its own, and per one-way
            adjacency entry. Empty for a well-formed net.
        """
        problems: List[str] = []
        for node in self.nodes:
            for neighbor in node.connected:
                nid = point_id(neighbor)
                other = self._index.get(nid)
                if other is None:
                    problems.append(
                        f"Point '{node.id}' lists '{nid}', which has no node"
                    )
                elif node.id not in other.connected_ids():
                    problems.append(
                        f"Point '{node.id}' lists '{nid}', but '{nid}' does not list '{node.id}'"
                    )
        return problems

    def _prepare(self, origin: P, destination: Point) -> Tuple[Node[P], Path[P]]:
        origin_node = self.node_of(origin)
        if self.config.validate_destination:
            self.node_of(destination)

        try:
            seed = PathBuilder().point(origin).build()
        except PathBuildError as exc:
            raise PathCannotBeBuiltError(str(exc)) from exc
        seed = seed.with_separator(self.config.path_separator)

        LOGGER.debug(
            "Searching paths from '%s' to '%s'",
            point_id(origin),
            point_id(destination),
        )
        return origin_node, seed

    def format_paths(self, paths: Iterable[Path[P]]) -> str:
        """Render ``paths`` with this net's separators, sorted and joined."""
        return format_paths(
            paths,
            separator=self.config.paths_separator,
            path_separator=self.config.path_separator,
        )

    def _walk(
        self, origin_node: Node[P], destination: Point, seed: Path[P]
    ) -> Iterator[Path[P]]:
        # Depth-first over an explicit stack of (partial path, unvisited
        # neighbors) frames; every frame owns its own immutable path.
        stack: List[Tuple[Path[P], Iterator[P]]] = [
            (seed, iter(origin_node.connected_points_not_in_path(seed) or ()))
        ]
        while stack:
            previous, candidates = stack[-1]
            point = next(candidates, _EXHAUSTED)
            if point is _EXHAUSTED:
                stack.pop()
                continue

            next_node = self._node_from_adjacency(point, previous.end)
            trying = previous.with_point_appended(point)
            if trying.ends_with(destination):
                yield trying
            else:
                followable = next_node.connected_points_not_in_path(trying)
                if followable is not None:
                    stack.append((trying, iter(followable)))

    def _node_from_adjacency(self, point: Point, listed_by: Point) -> Node[P]:
        node = self._index.get(point_id(point))
        if node is None:
            raise MalformedNetError(point_id(point), point_id(listed_by))
        return node
