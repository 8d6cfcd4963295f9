"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from netpaths.lib.nx import from_networkx, to_networkx
    >>> from netpaths.model.point import SimplePoint
    >>>
    >>> G = nx.Graph()
    >>> G.add_edge("A", "B")
    >>> G.add_edge("B", "C")
    >>>
    >>> net = from_networkx(G)
    >>> [str(p) for p in net.find_paths(SimplePoint("A"), SimplePoint("C"))]
    ['A-B-C']
    >>>
    >>> G_out = to_networkx(net)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

from netpaths.config import NetConfig
from netpaths.model.net import Net
from netpaths.model.node import NodeBuilder
from netpaths.model.point import SimplePoint

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]
else:
    NxGraph = Any


def from_networkx(G: NxGraph, config: Optional[NetConfig] = None) -> Net[SimplePoint]:
    """Convert a NetworkX graph to a net of SimplePoints.

    Undirected graphs connect each edge both ways. Directed graphs follow
    successors only, producing one-way adjacency where the graph has it.
    Parallel edges of multigraphs collapse into one adjacency entry. Nodes and
    neighbors are ordered by ``str`` of their names for deterministic results.

    Args:
        G: NetworkX graph (Graph, DiGraph, MultiGraph or MultiDiGraph).
        config: Optional configuration for the resulting net.

    Returns:
        A net with one node per graph node. Node names become point identifiers
        unchanged.

    Raises:
        TypeError: If G is not a NetworkX graph.
    """
    import networkx as nx

    if not isinstance(G, (nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (Graph, DiGraph, MultiGraph, MultiDiGraph), "
            f"got {type(G).__name__}"
        )

    neighbors_of = G.successors if G.is_directed() else G.neighbors
    nodes = [
        NodeBuilder()
        .point(SimplePoint(name))
        .connected_points(
            SimplePoint(n) for n in sorted(set(neighbors_of(name)), key=str)
        )
        .build()
        for name in sorted(G.nodes(), key=str)
    ]
    return Net(nodes, config=config)


def to_networkx(net: Net[Any], directed: Optional[bool] = None) -> NxGraph:
    """Convert a net back to a NetworkX graph keyed by point identifiers.

    Args:
        net: The net to convert.
        directed: Build a DiGraph when True, a Graph when False. When None, a
            DiGraph is built only if some adjacency entry is one-way.

    Returns:
        The graph. Each node carries its point in the ``point`` attribute.
    """
    import networkx as nx

    if directed is None:
        directed = bool(net.validate())

    G = nx.DiGraph() if directed else nx.Graph()
    for node in net.nodes:
        G.add_node(node.id, point=node.point)
    for node in net.nodes:
        for neighbor_id in node.connected_ids():
            G.add_edge(node.id, neighbor_id)
    return G
