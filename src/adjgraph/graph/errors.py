"""Failure reasons and exceptions for graph operations.

Mutations report failure by returning False; the reason is recorded as
a Rejection on the graph (``last_rejection``) and logged at DEBUG.
Exceptions are only raised by strict lookups and by invalidated
iterators.
"""
from __future__ import annotations

from enum import Enum


class Rejection(Enum):
    """Why a singular mutation returned False."""
    ALREADY_EXISTS = "node already exists"
    NODE_NOT_FOUND = "node not found"
    SELF_LOOP = "self-loop not allowed"
    EDGE_NOT_FOUND = "edge not found"


class GraphError(Exception):
    """Base class for adjgraph exceptions."""


class NodeNotFoundError(GraphError, KeyError):
    """Raised by get_node when the id is not in the graph."""

    def __init__(self, node_id: int) -> None:
        super().__init__(f"Node {node_id!r} not found")
        self.node_id = node_id


class EdgeNotFoundError(GraphError, KeyError):
    """Raised by get_edge when the edge is not in the graph."""

    def __init__(self, src: int, dst: int) -> None:
        super().__init__(f"Edge {src!r} -> {dst!r} not found")
        self.src = src
        self.dst = dst


class ConcurrentModificationError(GraphError, RuntimeError):
    """Raised when a graph is mutated while one of its iterators is live."""
