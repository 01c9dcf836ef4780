"""Node and Edge value records.

Both are plain slotted dataclasses.  A graph owns every record it
stores; callers get references back from lookups and iterators, so
treat them as read-only.  Re-adding an edge replaces the record rather
than mutating it in place.
"""
from __future__ import annotations

from dataclasses import dataclass

from adjgraph.domain.types import DEFAULT_WEIGHT, EdgeKey, NodeId, Weight


@dataclass(slots=True)
class Node:
    """A vertex.  Identity is ``id``; ``weight`` is stored, never interpreted."""
    id: NodeId
    weight: Weight = DEFAULT_WEIGHT


@dataclass(slots=True)
class Edge:
    """A weighted edge src -> dst.

    For undirected graphs the forward table holds the canonical
    direction (src < dst) and the reverse table holds the mirror.
    """
    src: NodeId
    dst: NodeId
    weight: Weight = DEFAULT_WEIGHT

    @property
    def key(self) -> EdgeKey:
        return (self.src, self.dst)

    def reversed(self) -> Edge:
        """Mirror record with the endpoints swapped and the same weight."""
        return Edge(self.dst, self.src, self.weight)
