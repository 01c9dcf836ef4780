"""Domain model for adjgraph.

Re-exports all public types for convenient access:
    from adjgraph.domain import Node, Edge, NodeId
"""
from adjgraph.domain.entities import Edge, Node
from adjgraph.domain.types import DEFAULT_WEIGHT, EdgeKey, NodeId, Weight

__all__ = [
    "DEFAULT_WEIGHT",
    "Edge",
    "EdgeKey",
    "Node",
    "NodeId",
    "Weight",
]
