"""Restartable views over a graph.

A view holds only the graph (and, for near views, a node id).  Every
iter() call builds a fresh cursor, so a view can be iterated any number
of times and each pass reflects the graph as it is at that moment.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from adjgraph.domain.types import NodeId
from adjgraph.graph.iterators import (
    EdgeIterator,
    NearEdgeIterator,
    NearNodeIterator,
    NodeIterator,
)

if TYPE_CHECKING:
    from adjgraph.graph.base import GraphBase


class NodeView:
    __slots__ = ("_graph",)

    def __init__(self, graph: GraphBase) -> None:
        self._graph = graph

    def __iter__(self) -> NodeIterator:
        return NodeIterator(self._graph)

    def __len__(self) -> int:
        return self._graph.node_count


class EdgeView:
    __slots__ = ("_graph",)

    def __init__(self, graph: GraphBase) -> None:
        self._graph = graph

    def __iter__(self) -> EdgeIterator:
        return EdgeIterator(self._graph)

    def __len__(self) -> int:
        return self._graph.edge_count


class _NearView:
    __slots__ = ("_graph", "_node_id")

    def __init__(self, graph: GraphBase, node_id: NodeId) -> None:
        self._graph = graph
        self._node_id = node_id

    def __len__(self) -> int:
        """Size of the node's forward row (0 for an unknown id)."""
        row = self._graph._adj.get(self._node_id)
        return 0 if row is None else len(row)


class NearNodeView(_NearView):
    __slots__ = ()

    def __iter__(self) -> NearNodeIterator:
        return NearNodeIterator(self._graph, self._node_id)


class NearEdgeView(_NearView):
    __slots__ = ()

    def __iter__(self) -> NearEdgeIterator:
        return NearEdgeIterator(self._graph, self._node_id)
