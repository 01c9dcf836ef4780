"""Graph containers, cursors and views."""

from adjgraph.graph.base import GraphBase
from adjgraph.graph.directed import DirectedGraph
from adjgraph.graph.errors import (
    ConcurrentModificationError,
    EdgeNotFoundError,
    GraphError,
    NodeNotFoundError,
    Rejection,
)
from adjgraph.graph.iterators import (
    EdgeIterator,
    NearEdgeIterator,
    NearNodeIterator,
    NodeIterator,
)
from adjgraph.graph.table import SortedTable
from adjgraph.graph.undirected import UndirectedGraph
from adjgraph.graph.views import EdgeView, NearEdgeView, NearNodeView, NodeView

__all__ = [
    "ConcurrentModificationError",
    "DirectedGraph",
    "EdgeIterator",
    "EdgeNotFoundError",
    "EdgeView",
    "GraphBase",
    "GraphError",
    "NearEdgeIterator",
    "NearEdgeView",
    "NearNodeIterator",
    "NearNodeView",
    "NodeIterator",
    "NodeNotFoundError",
    "NodeView",
    "Rejection",
    "SortedTable",
    "UndirectedGraph",
]
