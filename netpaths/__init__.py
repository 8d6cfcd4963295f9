"""netpaths: enumerate every simple path between two points of a net.

A net is an undirected graph given as one Node per point, each listing the
points directly reachable from it. Points are any objects exposing a
hashable ``identifier()``.

Primary API:
    Net.find_paths() - Every simple path between two points
    Net, Node, NodeBuilder, Path, PathBuilder - Graph model
    SimplePoint - Ready-made point identified by a name
    load_net_yaml(), load_net_file() - Build a net from YAML
    from_networkx(), to_networkx() - Convert to and from NetworkX

Example:
    from netpaths import Net, SimplePoint, format_paths

    net = Net.from_edges([("A", "B"), ("A", "D"), ("B", "C"), ("C", "D")])
    paths = net.find_paths(SimplePoint("A"), SimplePoint("C"))
    format_paths(paths)  # "A-B-C + A-D-C"
"""

from __future__ import annotations

from netpaths import cli, logging
from netpaths._version import __version__
from netpaths.config import NET_CONFIG, NetConfig
from netpaths.dsl.loader import load_net_file, load_net_yaml
from netpaths.errors import (
    MalformedNetError,
    NetError,
    NodeBuildError,
    NoPathFoundError,
    PathBuildError,
    PathCannotBeBuiltError,
    PointNotFoundError,
)
from netpaths.lib.nx import from_networkx, to_networkx
from netpaths.model.net import Net
from netpaths.model.node import Node, NodeBuilder
from netpaths.model.path import Path, PathBuilder, format_paths
from netpaths.model.point import Point, SimplePoint

__all__ = [
    # Version
    "__version__",
    # Model
    "Point",
    "SimplePoint",
    "Node",
    "NodeBuilder",
    "Path",
    "PathBuilder",
    "Net",
    "format_paths",
    # Configuration
    "NetConfig",
    "NET_CONFIG",
    # Errors
    "NetError",
    "PointNotFoundError",
    "NoPathFoundError",
    "PathCannotBeBuiltError",
    "NodeBuildError",
    "PathBuildError",
    "MalformedNetError",
    # Loaders
    "load_net_yaml",
    "load_net_file",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
