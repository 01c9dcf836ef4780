"""adjgraph: in-memory directed and undirected graph containers.

    from adjgraph import UndirectedGraph
    g = UndirectedGraph()
    g.add_nodes([1, 2, 3])
    g.add_edge(1, 2, 2.0)
    g.get_near_nodes(2)   # {1}
"""

from adjgraph.domain import DEFAULT_WEIGHT, Edge, EdgeKey, Node, NodeId, Weight
from adjgraph.graph import (
    ConcurrentModificationError,
    DirectedGraph,
    EdgeNotFoundError,
    GraphBase,
    GraphError,
    NodeNotFoundError,
    Rejection,
    UndirectedGraph,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_WEIGHT",
    "ConcurrentModificationError",
    "DirectedGraph",
    "Edge",
    "EdgeKey",
    "EdgeNotFoundError",
    "GraphBase",
    "GraphError",
    "Node",
    "NodeId",
    "NodeNotFoundError",
    "Rejection",
    "UndirectedGraph",
    "Weight",
]
