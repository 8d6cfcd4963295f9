"""Shared fixtures: small nets built the way callers assemble them."""

from __future__ import annotations

from typing import Dict, Iterable, List

import pytest

from netpaths.logging import reset_logging
from netpaths.model.net import Net
from netpaths.model.node import Node, NodeBuilder
from netpaths.model.point import SimplePoint


def node(point: SimplePoint, connected: Iterable[SimplePoint] = ()) -> Node:
    return NodeBuilder().point(point).connected_points(connected).build()


def net_from_adjacency(adjacency: Dict[str, List[str]]) -> Net[SimplePoint]:
    """Build a net whose adjacency lists are exactly those given."""
    return Net(
        [
            node(SimplePoint(name), [SimplePoint(n) for n in neighbors])
            for name, neighbors in adjacency.items()
        ]
    )


@pytest.fixture
def points() -> Dict[str, SimplePoint]:
    return {name: SimplePoint(name) for name in "ABCDE"}


@pytest.fixture
def a_b_net() -> Net[SimplePoint]:
    """A - B"""
    return net_from_adjacency({"A": ["B"], "B": ["A"]})


@pytest.fixture
def a_b_c_net() -> Net[SimplePoint]:
    """A - B - C"""
    return net_from_adjacency({"A": ["B"], "B": ["A", "C"], "C": ["B"]})


@pytest.fixture
def square_net() -> Net[SimplePoint]:
    """A - B - C
     \\     /
       D
    """
    return net_from_adjacency(
        {"A": ["B", "D"], "B": ["A", "C"], "C": ["B", "D"], "D": ["A", "C"]}
    )


@pytest.fixture
def diamond_net() -> Net[SimplePoint]:
    """A - B - C
     \\  |  /
       D
    """
    return net_from_adjacency(
        {
            "A": ["B", "D"],
            "B": ["A", "C", "D"],
            "C": ["B", "D"],
            "D": ["A", "C", "B"],
        }
    )


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Restore default logging so level changes do not leak between tests."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def make_net():
    """Factory for nets given as ``{name: [neighbor names]}``."""
    return net_from_adjacency
