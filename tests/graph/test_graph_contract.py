"""Behaviour shared by both graph variants (run once per variant)."""
from __future__ import annotations

import random

import pytest

from adjgraph.domain.entities import Edge, Node
from adjgraph.graph.base import GraphBase
from adjgraph.graph.errors import EdgeNotFoundError, NodeNotFoundError, Rejection


class TestNodeCrud:
    def test_empty_graph(self, empty_graph: GraphBase) -> None:
        assert empty_graph.node_count == 0
        assert empty_graph.edge_count == 0
        assert empty_graph.get_all_nodes() == set()
        assert empty_graph.get_all_edges() == set()
        assert len(empty_graph) == 0

    def test_add_node(self, empty_graph: GraphBase) -> None:
        assert empty_graph.add_node(7)
        assert 7 in empty_graph.get_all_nodes()
        assert 7 in empty_graph
        assert empty_graph.get_node(7) == Node(7, 1.0)

    def test_add_node_twice_fails(self, empty_graph: GraphBase) -> None:
        assert empty_graph.add_node(7)
        assert not empty_graph.add_node(7)
        assert empty_graph.last_rejection is Rejection.ALREADY_EXISTS
        assert empty_graph.node_count == 1

    def test_add_node_with_weight(self, empty_graph: GraphBase) -> None:
        empty_graph.add_node(1, 4.5)
        assert empty_graph.get_node(1).weight == 4.5

    def test_readd_does_not_change_weight(self, empty_graph: GraphBase) -> None:
        empty_graph.add_node(1, 4.5)
        empty_graph.add_node(1, 9.0)
        assert empty_graph.get_node(1).weight == 4.5

    def test_add_nodes_ignores_duplicates(self, empty_graph: GraphBase) -> None:
        assert empty_graph.add_nodes([1, 2, 2, 3, 1])
        assert empty_graph.get_all_nodes() == {1, 2, 3}

    def test_remove_node(self, diamond: GraphBase) -> None:
        assert diamond.remove_node(2)
        assert 2 not in diamond.get_all_nodes()
        assert not diamond.has_edge(1, 2)
        assert not diamond.has_edge(2, 4)
        assert all(2 not in pair for pair in diamond.get_all_edges())
        assert diamond.edge_count == 2

    def test_remove_missing_node_fails(self, empty_graph: GraphBase) -> None:
        assert not empty_graph.remove_node(42)
        assert empty_graph.last_rejection is Rejection.NODE_NOT_FOUND

    def test_remove_nodes_always_true(self, diamond: GraphBase) -> None:
        assert diamond.remove_nodes([1, 99, 4])
        assert diamond.get_all_nodes() == {2, 3, 5}
        assert diamond.edge_count == 0

    def test_get_node_missing_raises(self, empty_graph: GraphBase) -> None:
        with pytest.raises(NodeNotFoundError, match="not found"):
            empty_graph.get_node(3)

    def test_node_not_found_is_keyerror(self, empty_graph: GraphBase) -> None:
        with pytest.raises(KeyError):
            empty_graph.get_node(3)


class TestEdgeCrud:
    def test_add_edge(self, diamond: GraphBase) -> None:
        assert diamond.has_edge(1, 2)
        assert diamond.get_edge(1, 2).weight == 0.5
        assert diamond.get_edge(2, 4).weight == 1.0

    def test_self_loop_fails_and_leaves_graph_unchanged(self, diamond: GraphBase) -> None:
        before = diamond.get_all_edges()
        assert not diamond.add_edge(3, 3)
        assert diamond.last_rejection is Rejection.SELF_LOOP
        assert diamond.get_all_edges() == before

    def test_missing_endpoint_fails(self, diamond: GraphBase) -> None:
        assert not diamond.add_edge(1, 99)
        assert diamond.last_rejection is Rejection.NODE_NOT_FOUND
        assert not diamond.add_edge(99, 1)
        assert 99 not in diamond

    def test_readd_overwrites_weight(self, diamond: GraphBase) -> None:
        count = diamond.edge_count
        assert diamond.add_edge(1, 2, 7.0)
        assert diamond.get_edge(1, 2).weight == 7.0
        assert diamond.edge_count == count

    def test_success_clears_rejection(self, diamond: GraphBase) -> None:
        diamond.add_edge(1, 1)
        assert diamond.last_rejection is not None
        diamond.add_edge(1, 5)
        assert diamond.last_rejection is None

    def test_remove_edge(self, diamond: GraphBase) -> None:
        assert diamond.remove_edge(1, 2)
        assert not diamond.has_edge(1, 2)
        assert diamond.edge_count == 3

    def test_remove_never_added_edge_fails(self, diamond: GraphBase) -> None:
        count = diamond.edge_count
        assert not diamond.remove_edge(1, 5)
        assert diamond.last_rejection is Rejection.EDGE_NOT_FOUND
        assert diamond.edge_count == count

    def test_remove_edge_missing_endpoint_fails(self, diamond: GraphBase) -> None:
        assert not diamond.remove_edge(1, 99)
        assert diamond.last_rejection is Rejection.NODE_NOT_FOUND

    def test_add_edges_mixed_pairs_and_triples(self, empty_graph: GraphBase) -> None:
        empty_graph.add_nodes([1, 2, 3])
        assert empty_graph.add_edges([(1, 2), (2, 3, 2.5), (3, 3), (1, 9)])
        assert empty_graph.edge_count == 2
        assert empty_graph.get_edge(1, 2).weight == 1.0
        assert empty_graph.get_edge(2, 3).weight == 2.5

    def test_remove_edges_always_true(self, diamond: GraphBase) -> None:
        assert diamond.remove_edges([(1, 2), (1, 5), (42, 43)])
        assert diamond.edge_count == 3

    def test_get_edge_missing_raises(self, diamond: GraphBase) -> None:
        with pytest.raises(EdgeNotFoundError) as exc_info:
            diamond.get_edge(1, 5)
        assert (exc_info.value.src, exc_info.value.dst) == (1, 5)

    def test_get_edge_returns_record(self, diamond: GraphBase) -> None:
        assert diamond.get_edge(1, 3) == Edge(1, 3, 1.5)


class TestQueries:
    def test_near_nodes_outgoing(self, diamond: GraphBase) -> None:
        assert diamond.get_near_nodes(1) == {2, 3}

    def test_near_nodes_isolated_and_unknown(self, diamond: GraphBase) -> None:
        assert diamond.get_near_nodes(5) == set()
        assert diamond.get_near_nodes(404) == set()
        assert diamond.get_near_edges(404) == set()
        # queries must not create rows for unknown ids
        assert 404 not in diamond

    def test_near_edges(self, diamond: GraphBase) -> None:
        assert {(1, 2), (1, 3)} <= diamond.get_near_edges(1)

    def test_all_edges(self, diamond: GraphBase) -> None:
        assert diamond.get_all_edges() == {(1, 2), (1, 3), (2, 4), (3, 4)}

    def test_repr(self, diamond: GraphBase) -> None:
        r = repr(diamond)
        assert r.startswith(type(diamond).__name__)
        assert "nodes=5" in r
        assert "edges=4" in r


class TestInvariants:
    def test_edge_count_matches_all_edges_under_random_ops(
        self, empty_graph: GraphBase
    ) -> None:
        rng = random.Random(42)
        for _ in range(500):
            op = rng.random()
            a, b = rng.randrange(12), rng.randrange(12)
            if op < 0.25:
                empty_graph.add_node(a)
            elif op < 0.6:
                empty_graph.add_edge(a, b, rng.random())
            elif op < 0.85:
                empty_graph.remove_edge(a, b)
            else:
                empty_graph.remove_node(a)
            assert empty_graph.edge_count == len(empty_graph.get_all_edges())
            nodes = empty_graph.get_all_nodes()
            for src, dst in empty_graph.get_all_edges():
                assert src in nodes and dst in nodes
                assert src != dst

    def test_removed_node_disappears_from_every_neighbour(
        self, diamond: GraphBase
    ) -> None:
        diamond.remove_node(4)
        for node_id in diamond.get_all_nodes():
            assert 4 not in diamond.get_near_nodes(node_id)
            assert all(4 not in pair for pair in diamond.get_near_edges(node_id))
