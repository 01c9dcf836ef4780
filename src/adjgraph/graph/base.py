"""Abstract graph contract shared by the directed and undirected variants.

Storage is a two-level table, both levels ordered by node id:

    _nodes:  SortedTable[Node]                   id -> Node
    _adj:    SortedTable[SortedTable[Edge]]      id -> (neighbor -> Edge)

Every node has an adjacency row, possibly empty, so _nodes and _adj
always share the same key set.  Variants implement the four primitive
mutations plus copy(); everything else (bulk forms, counting, set
queries, subgraphs, views) is written once here against the tables.

Mutations never raise for bad input.  They return False and record the
reason in ``last_rejection``.  Each successful mutation bumps
``_version`` so live iterators can detect that the tables moved under
them.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from adjgraph.domain.entities import Edge, Node
from adjgraph.domain.types import DEFAULT_WEIGHT, EdgeKey, NodeId, Weight
from adjgraph.graph.errors import EdgeNotFoundError, NodeNotFoundError, Rejection
from adjgraph.graph.table import SortedTable
from adjgraph.graph.views import EdgeView, NearEdgeView, NearNodeView, NodeView

log = logging.getLogger(__name__)


class GraphBase(ABC):
    """Node table plus forward adjacency table, with generic defaults."""

    __slots__ = ("_nodes", "_adj", "_version", "last_rejection")

    def __init__(self) -> None:
        self._nodes: SortedTable[Node] = SortedTable()
        self._adj: SortedTable[SortedTable[Edge]] = SortedTable()
        self._version: int = 0
        self.last_rejection: Rejection | None = None

    # ---- primitives (per variant) ----------------------------------------

    @abstractmethod
    def add_node(self, node_id: NodeId, weight: Weight = DEFAULT_WEIGHT) -> bool:
        """Insert a node.  False if the id is already present."""
        ...

    @abstractmethod
    def remove_node(self, node_id: NodeId) -> bool:
        """Remove a node and every edge touching it.  False if absent."""
        ...

    @abstractmethod
    def add_edge(self, src: NodeId, dst: NodeId, weight: Weight = DEFAULT_WEIGHT) -> bool:
        """Insert or overwrite an edge.  False on self-loop or missing endpoint."""
        ...

    @abstractmethod
    def remove_edge(self, src: NodeId, dst: NodeId) -> bool:
        """Remove an edge.  False on missing endpoint or missing edge."""
        ...

    @abstractmethod
    def copy(self) -> GraphBase:
        """Independent deep copy of the same variant."""
        ...

    def _canonical(self, src: NodeId, dst: NodeId) -> EdgeKey:
        """Stored direction of an edge.  Identity for directed graphs."""
        return (src, dst)

    # ---- bookkeeping -----------------------------------------------------

    def _accept(self) -> bool:
        self._version += 1
        self.last_rejection = None
        return True

    def _reject(self, reason: Rejection, op: str, *args: NodeId) -> bool:
        self.last_rejection = reason
        log.debug(
            "%s(%s) rejected: %s", op, ", ".join(map(str, args)), reason.value,
        )
        return False

    def _insert_node(self, node_id: NodeId, weight: Weight) -> None:
        self._nodes[node_id] = Node(node_id, weight)
        self._adj[node_id] = SortedTable()

    # ---- bulk forms ------------------------------------------------------

    def add_nodes(self, node_ids: Iterable[NodeId]) -> bool:
        """Add each id, ignoring individual failures.  Always True."""
        for node_id in node_ids:
            self.add_node(node_id)
        return True

    def remove_nodes(self, node_ids: Iterable[NodeId]) -> bool:
        """Remove each id, ignoring individual failures.  Always True."""
        for node_id in node_ids:
            self.remove_node(node_id)
        return True

    def add_edges(
        self,
        edges: Iterable[tuple[NodeId, NodeId] | tuple[NodeId, NodeId, Weight]],
    ) -> bool:
        """Add (src, dst) pairs and/or (src, dst, weight) triples.

        Pairs get the default weight.  Individual failures are ignored;
        the return value is always True.
        """
        for edge in edges:
            self.add_edge(*edge)
        return True

    def remove_edges(self, edges: Iterable[tuple[NodeId, NodeId]]) -> bool:
        """Remove each (src, dst) pair, ignoring individual failures."""
        for src, dst in edges:
            self.remove_edge(src, dst)
        return True

    # ---- counting --------------------------------------------------------

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Edges in the forward table; undirected edges count once."""
        return sum(len(row) for row in self._adj.values())

    # ---- point lookups ---------------------------------------------------

    def has_node(self, node_id: NodeId) -> bool:
        return node_id in self._nodes

    def has_edge(self, src: NodeId, dst: NodeId) -> bool:
        src, dst = self._canonical(src, dst)
        row = self._adj.get(src)
        return row is not None and dst in row

    def get_node(self, node_id: NodeId) -> Node:
        """Return the Node record.  Raises NodeNotFoundError if absent."""
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NodeNotFoundError(node_id) from None

    def get_edge(self, src: NodeId, dst: NodeId) -> Edge:
        """Return the stored Edge record (canonical direction for undirected).

        Raises EdgeNotFoundError if the edge does not exist.
        """
        key_src, key_dst = self._canonical(src, dst)
        try:
            return self._adj[key_src][key_dst]
        except KeyError:
            raise EdgeNotFoundError(src, dst) from None

    # ---- set queries -----------------------------------------------------

    def get_all_nodes(self) -> set[NodeId]:
        return set(self._nodes)

    def get_near_nodes(self, node_id: NodeId) -> set[NodeId]:
        """Ids one outgoing hop from *node_id*.

        An unknown id yields an empty set, same as an isolated node;
        use has_node() to tell them apart.
        """
        row = self._adj.get(node_id)
        if row is None:
            return set()
        return {edge.dst for edge in row.values()}

    def get_all_edges(self) -> set[EdgeKey]:
        return {edge.key for row in self._adj.values() for edge in row.values()}

    def get_near_edges(self, node_id: NodeId) -> set[EdgeKey]:
        """Outgoing (node_id, neighbor) pairs.  Empty for an unknown id."""
        row = self._adj.get(node_id)
        if row is None:
            return set()
        return {(node_id, edge.dst) for edge in row.values()}

    # ---- subgraph --------------------------------------------------------

    def get_subgraph(self, node_ids: Iterable[NodeId]) -> GraphBase:
        """New graph with only *node_ids* and the edges between them.

        Works on a copy: the copy is pruned, this graph is untouched.
        Ids not present in this graph are ignored.
        """
        keep = set(node_ids)
        sub = self.copy()
        for node_id in sub._nodes.keys():
            if node_id not in keep:
                sub.remove_node(node_id)
        log.debug(
            "subgraph of %r kept %d/%d nodes",
            self, sub.node_count, self.node_count,
        )
        return sub

    # ---- views -----------------------------------------------------------

    def nodes(self) -> NodeView:
        return NodeView(self)

    def edges(self) -> EdgeView:
        return EdgeView(self)

    def near_nodes(self, node_id: NodeId) -> NearNodeView:
        return NearNodeView(self, node_id)

    def near_edges(self, node_id: NodeId) -> NearEdgeView:
        return NearEdgeView(self, node_id)

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return self.node_count

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.node_count}, edges={self.edge_count})"
