"""Cursors over a graph's live adjacency tables.

Each iterator is a small explicit state machine holding integer
positions into SortedTable key order, never a copied list:

    NodeIterator       pos              over _nodes
    EdgeIterator       (row, col)       over _adj rows, then each row
    NearNodeIterator   pos              over one forward row
    NearEdgeIterator   pos              over one forward row

Near iterators only walk the forward row, so for an undirected graph
they see the canonical edges leaving a node (neighbours with a larger
id), not the mirrored ones.  Use get_near_nodes/get_near_edges for
both directions.

Every cursor snapshots the graph's mutation counter when created.  If
the graph is mutated afterwards, the next step or read of at_end /
position raises ConcurrentModificationError instead of looking at a
table that has moved.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from adjgraph.domain.entities import Edge, Node
from adjgraph.domain.types import NodeId
from adjgraph.graph.errors import ConcurrentModificationError
from adjgraph.graph.table import SortedTable

if TYPE_CHECKING:
    from adjgraph.graph.base import GraphBase

_EMPTY_ROW: SortedTable[Edge] = SortedTable()


class _Cursor:
    __slots__ = ("_graph", "_version")

    def __init__(self, graph: GraphBase) -> None:
        self._graph = graph
        self._version = graph._version

    def _check(self) -> None:
        if self._graph._version != self._version:
            raise ConcurrentModificationError(
                f"{self._graph!r} was mutated during iteration"
            )

    def __iter__(self) -> Iterator:
        return self


class NodeIterator(_Cursor):
    """Walks the node table in ascending id order.  Terminal: pos == len."""

    __slots__ = ("_pos",)

    def __init__(self, graph: GraphBase) -> None:
        super().__init__(graph)
        self._pos = 0

    @property
    def at_end(self) -> bool:
        self._check()
        return self._pos >= len(self._graph._nodes)

    def __next__(self) -> Node:
        if self.at_end:
            raise StopIteration
        node = self._graph._nodes.value_at(self._pos)
        self._pos += 1
        return node


class EdgeIterator(_Cursor):
    """Two nested cursors: outer over forward rows, inner over one row.

    The cursor always rests on a real edge or on the terminal state.
    Rows may be empty (isolated nodes, or undirected nodes whose
    neighbours all have smaller ids), so after every inner step _settle
    advances the outer cursor past exhausted and empty rows.
    Termination looks only at the outer cursor.
    """

    __slots__ = ("_row", "_col")

    def __init__(self, graph: GraphBase) -> None:
        super().__init__(graph)
        self._row = 0
        self._col = 0
        self._settle()

    def _settle(self) -> None:
        rows = self._graph._adj
        while self._row < len(rows) and self._col >= len(rows.value_at(self._row)):
            self._row += 1
            self._col = 0

    @property
    def at_end(self) -> bool:
        self._check()
        return self._row >= len(self._graph._adj)

    @property
    def position(self) -> tuple[NodeId, NodeId] | None:
        """(src, dst) the cursor rests on, or None once exhausted."""
        if self.at_end:
            return None
        row = self._graph._adj.value_at(self._row)
        return self._graph._adj.key_at(self._row), row.key_at(self._col)

    def __next__(self) -> Edge:
        if self.at_end:
            raise StopIteration
        edge = self._graph._adj.value_at(self._row).value_at(self._col)
        self._col += 1
        self._settle()
        return edge


class _RowCursor(_Cursor):
    """Single cursor over one node's forward row."""

    __slots__ = ("_node_id", "_pos")

    def __init__(self, graph: GraphBase, node_id: NodeId) -> None:
        super().__init__(graph)
        self._node_id = node_id
        self._pos = 0

    @property
    def _row(self) -> SortedTable[Edge]:
        row = self._graph._adj.get(self._node_id)
        return _EMPTY_ROW if row is None else row

    @property
    def at_end(self) -> bool:
        self._check()
        return self._pos >= len(self._row)

    def _step(self) -> Edge:
        if self.at_end:
            raise StopIteration
        edge = self._row.value_at(self._pos)
        self._pos += 1
        return edge


class NearNodeIterator(_RowCursor):
    """Yields the neighbour Node at the far end of each forward edge."""

    __slots__ = ()

    def __next__(self) -> Node:
        edge = self._step()
        return self._graph._nodes[edge.dst]


class NearEdgeIterator(_RowCursor):
    """Yields each forward Edge leaving the node."""

    __slots__ = ()

    def __next__(self) -> Edge:
        return self._step()
