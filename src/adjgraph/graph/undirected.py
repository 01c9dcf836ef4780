"""Undirected graph: canonical forward table plus a reverse shadow.

An edge {a, b} is stored once in the forward table, in canonical
direction src = min(a, b), dst = max(a, b).  The reverse table holds
the mirror record keyed the other way round:

    _adj[a][b] = Edge(a, b, w)     (a < b)
    _rev[b][a] = Edge(b, a, w)

so "who is connected to b from below" is a row lookup instead of a
scan of every forward row.  The two tables are only ever written
together, through _link and _unlink.
"""
from __future__ import annotations

import logging

from adjgraph.domain.entities import Edge
from adjgraph.domain.types import DEFAULT_WEIGHT, EdgeKey, NodeId, Weight
from adjgraph.graph.base import GraphBase
from adjgraph.graph.errors import Rejection
from adjgraph.graph.table import SortedTable

log = logging.getLogger(__name__)


class UndirectedGraph(GraphBase):
    """Undirected, weighted graph over integer node ids.

    INVARIANT: (a, b) in _adj  <=>  (b, a) in _rev, and a < b.
    """

    __slots__ = ("_rev",)

    def __init__(self) -> None:
        super().__init__()
        self._rev: SortedTable[SortedTable[Edge]] = SortedTable()

    def _canonical(self, src: NodeId, dst: NodeId) -> EdgeKey:
        return (src, dst) if src < dst else (dst, src)

    # ---- dual-table writes -----------------------------------------------

    def _link(self, src: NodeId, dst: NodeId, weight: Weight) -> None:
        edge = Edge(src, dst, weight)
        self._adj[src][dst] = edge
        self._rev[dst][src] = edge.reversed()

    def _unlink(self, src: NodeId, dst: NodeId) -> None:
        del self._adj[src][dst]
        del self._rev[dst][src]

    # ---- primitives ------------------------------------------------------

    def add_node(self, node_id: NodeId, weight: Weight = DEFAULT_WEIGHT) -> bool:
        if node_id in self._nodes:
            return self._reject(Rejection.ALREADY_EXISTS, "add_node", node_id)
        self._insert_node(node_id, weight)
        self._rev[node_id] = SortedTable()
        return self._accept()

    def remove_node(self, node_id: NodeId) -> bool:
        if node_id not in self._nodes:
            return self._reject(Rejection.NODE_NOT_FOUND, "remove_node", node_id)
        # every neighbour sits in exactly one of the two rows
        neighbours = self._adj[node_id].keys() + self._rev[node_id].keys()
        for other in neighbours:
            self.remove_edge(node_id, other)
        if neighbours:
            log.debug("remove_node(%d) dropped %d edges", node_id, len(neighbours))
        del self._adj[node_id]
        del self._rev[node_id]
        del self._nodes[node_id]
        return self._accept()

    def add_edge(self, src: NodeId, dst: NodeId, weight: Weight = DEFAULT_WEIGHT) -> bool:
        if src == dst:
            return self._reject(Rejection.SELF_LOOP, "add_edge", src, dst)
        if src not in self._nodes or dst not in self._nodes:
            return self._reject(Rejection.NODE_NOT_FOUND, "add_edge", src, dst)
        self._link(*self._canonical(src, dst), weight)
        return self._accept()

    def remove_edge(self, src: NodeId, dst: NodeId) -> bool:
        if src not in self._nodes or dst not in self._nodes:
            return self._reject(Rejection.NODE_NOT_FOUND, "remove_edge", src, dst)
        low, high = self._canonical(src, dst)
        if high not in self._adj[low]:
            return self._reject(Rejection.EDGE_NOT_FOUND, "remove_edge", src, dst)
        self._unlink(low, high)
        return self._accept()

    def copy(self) -> UndirectedGraph:
        clone = UndirectedGraph()
        for node in self._nodes.values():
            clone._insert_node(node.id, node.weight)
            clone._rev[node.id] = SortedTable()
        for row in self._adj.values():
            for edge in row.values():
                clone._link(edge.src, edge.dst, edge.weight)
        return clone

    # ---- queries merging both directions ---------------------------------

    def get_near_nodes(self, node_id: NodeId) -> set[NodeId]:
        nodes = super().get_near_nodes(node_id)
        row = self._rev.get(node_id)
        if row is not None:
            nodes.update(edge.dst for edge in row.values())
        return nodes

    def get_near_edges(self, node_id: NodeId) -> set[EdgeKey]:
        edges = super().get_near_edges(node_id)
        row = self._rev.get(node_id)
        if row is not None:
            edges.update(edge.key for edge in row.values())
        return edges
