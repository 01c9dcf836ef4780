"""Shared fixtures for graph tests."""
from __future__ import annotations

import pytest

from adjgraph.graph.base import GraphBase
from adjgraph.graph.directed import DirectedGraph
from adjgraph.graph.undirected import UndirectedGraph


@pytest.fixture(params=[DirectedGraph, UndirectedGraph], ids=["directed", "undirected"])
def graph_cls(request: pytest.FixtureRequest) -> type[GraphBase]:
    return request.param


@pytest.fixture
def empty_graph(graph_cls: type[GraphBase]) -> GraphBase:
    return graph_cls()


@pytest.fixture
def directed() -> DirectedGraph:
    return DirectedGraph()


@pytest.fixture
def undirected() -> UndirectedGraph:
    return UndirectedGraph()


@pytest.fixture
def diamond(graph_cls: type[GraphBase]) -> GraphBase:
    """
    1 -> 2 -> 4
    1 -> 3 -> 4      plus isolated node 5
    """
    g = graph_cls()
    g.add_nodes([1, 2, 3, 4, 5])
    g.add_edges([(1, 2, 0.5), (1, 3, 1.5), (2, 4), (3, 4)])
    return g


@pytest.fixture
def wheel() -> UndirectedGraph:
    """Hub 0 joined to rim 1..5, rim joined as a cycle, plus isolated 9."""
    g = UndirectedGraph()
    g.add_nodes([0, 1, 2, 3, 4, 5, 9])
    for i in range(1, 6):
        g.add_edge(0, i)
        g.add_edge(i, i % 5 + 1)
    return g
