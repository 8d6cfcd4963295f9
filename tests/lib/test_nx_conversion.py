"""Tests for netpaths.lib.nx NetworkX conversion utilities."""

import networkx as nx
import pytest

from netpaths.lib.nx import from_networkx, to_networkx
from netpaths.model.net import Net
from netpaths.model.path import format_paths
from netpaths.model.point import SimplePoint


class TestFromNetworkx:
    def test_undirected_graph_is_symmetric(self):
        G = nx.Graph([("A", "B"), ("B", "C")])
        net = from_networkx(G)
        assert net.node_of(SimplePoint("B")).connected_ids() == ("A", "C")
        assert net.validate() == []

    def test_nodes_sorted_by_name(self):
        G = nx.Graph()
        G.add_nodes_from(["C", "A", "B"])
        assert [str(p) for p in from_networkx(G).points()] == ["A", "B", "C"]

    def test_isolated_nodes_kept(self):
        G = nx.Graph([("A", "B")])
        G.add_node("Z")
        assert from_networkx(G).node_of(SimplePoint("Z")).connected == ()

    def test_multigraph_parallel_edges_collapse(self):
        G = nx.MultiGraph([("A", "B"), ("A", "B")])
        net = from_networkx(G)
        assert net.node_of(SimplePoint("A")).connected_ids() == ("B",)
        assert len(net.find_paths(SimplePoint("A"), SimplePoint("B"))) == 1

    def test_directed_graph_keeps_direction(self):
        net = from_networkx(nx.DiGraph([("A", "B")]))
        assert net.node_of(SimplePoint("A")).connected_ids() == ("B",)
        assert net.node_of(SimplePoint("B")).connected == ()

    def test_integer_names_kept(self):
        net = from_networkx(nx.path_graph(3))
        assert format_paths(net.find_paths(SimplePoint(0), SimplePoint(2))) == "0-1-2"

    def test_empty_graph(self):
        assert len(from_networkx(nx.Graph())) == 0

    def test_rejects_non_graph(self):
        with pytest.raises(TypeError, match="Expected NetworkX graph"):
            from_networkx({"A": ["B"]})


class TestToNetworkx:
    def test_symmetric_net_gives_graph(self):
        net = Net.from_edges([("A", "B"), ("B", "C")])
        G = to_networkx(net)
        assert not G.is_directed()
        assert set(map(frozenset, G.edges())) == {
            frozenset({"A", "B"}),
            frozenset({"B", "C"}),
        }
        assert G.nodes["A"]["point"] == SimplePoint("A")

    def test_one_way_net_gives_digraph(self, make_net):
        G = to_networkx(make_net({"A": ["B"], "B": []}))
        assert G.is_directed()
        assert list(G.edges()) == [("A", "B")]

    def test_explicit_direction(self):
        net = Net.from_edges([("A", "B")])
        G = to_networkx(net, directed=True)
        assert G.is_directed()
        assert set(G.edges()) == {("A", "B"), ("B", "A")}

    def test_round_trip_preserves_paths(self, diamond_net):
        again = from_networkx(to_networkx(diamond_net))
        assert format_paths(
            again.find_paths(SimplePoint("A"), SimplePoint("C"))
        ) == format_paths(diamond_net.find_paths(SimplePoint("A"), SimplePoint("C")))
