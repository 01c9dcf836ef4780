"""Directed graph: one forward adjacency table, no canonicalization.

Every outgoing edge is keyed by its source, so the base-class near
queries are already complete.  Finding who points *at* a node needs a
scan of every row; remove_node pays that cost once per removal.
"""
from __future__ import annotations

import logging

from adjgraph.domain.entities import Edge
from adjgraph.domain.types import DEFAULT_WEIGHT, NodeId, Weight
from adjgraph.graph.base import GraphBase
from adjgraph.graph.errors import Rejection

log = logging.getLogger(__name__)


class DirectedGraph(GraphBase):
    """Directed, weighted graph over integer node ids."""

    __slots__ = ()

    def add_node(self, node_id: NodeId, weight: Weight = DEFAULT_WEIGHT) -> bool:
        if node_id in self._nodes:
            return self._reject(Rejection.ALREADY_EXISTS, "add_node", node_id)
        self._insert_node(node_id, weight)
        return self._accept()

    def remove_node(self, node_id: NodeId) -> bool:
        if node_id not in self._nodes:
            return self._reject(Rejection.NODE_NOT_FOUND, "remove_node", node_id)
        # incoming edges first, while both endpoints still exist
        sources = [src for src, row in self._adj.items() if node_id in row]
        for src in sources:
            self.remove_edge(src, node_id)
        if sources:
            log.debug("remove_node(%d) dropped %d incoming edges", node_id, len(sources))
        del self._adj[node_id]  # outgoing edges go with the row
        del self._nodes[node_id]
        return self._accept()

    def add_edge(self, src: NodeId, dst: NodeId, weight: Weight = DEFAULT_WEIGHT) -> bool:
        if src == dst:
            return self._reject(Rejection.SELF_LOOP, "add_edge", src, dst)
        if src not in self._nodes or dst not in self._nodes:
            return self._reject(Rejection.NODE_NOT_FOUND, "add_edge", src, dst)
        self._adj[src][dst] = Edge(src, dst, weight)
        return self._accept()

    def remove_edge(self, src: NodeId, dst: NodeId) -> bool:
        if src not in self._nodes or dst not in self._nodes:
            return self._reject(Rejection.NODE_NOT_FOUND, "remove_edge", src, dst)
        row = self._adj[src]
        if dst not in row:
            return self._reject(Rejection.EDGE_NOT_FOUND, "remove_edge", src, dst)
        del row[dst]
        return self._accept()

    def copy(self) -> DirectedGraph:
        clone = DirectedGraph()
        for node in self._nodes.values():
            clone._insert_node(node.id, node.weight)
        for src, row in self._adj.items():
            target = clone._adj[src]
            for dst, edge in row.items():
                target[dst] = Edge(edge.src, edge.dst, edge.weight)
        return clone
