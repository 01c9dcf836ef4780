"""Walk-through of the container API on a small undirected graph.

Usage: python -m adjgraph.demo

Exercises CRUD and the four traversal views only; no graph algorithm
is run.
"""
from __future__ import annotations

import logging

from adjgraph.graph.undirected import UndirectedGraph

log = logging.getLogger(__name__)

# Each undirected edge is listed from both ends; the duplicates collapse
# to one canonical edge apiece.
SAMPLE_NODES = [1, 2, 3, 4, 5, 6, 7]
SAMPLE_EDGES = [
    (1, 2), (1, 6), (1, 7),
    (2, 1), (2, 3), (2, 6),
    (3, 2), (3, 6), (3, 5), (3, 4),
    (4, 3), (4, 5),
    (5, 3), (5, 4), (5, 6),
    (6, 1), (6, 2), (6, 3), (6, 5), (6, 7),
    (7, 1), (7, 5), (7, 6),
]


def build_sample_graph() -> UndirectedGraph:
    g = UndirectedGraph()
    g.add_nodes(SAMPLE_NODES)
    g.add_edges(SAMPLE_EDGES)
    return g


def _fmt(ids) -> str:
    return "{" + ", ".join(str(i) for i in sorted(ids)) + "}"


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    g = build_sample_graph()
    log.info("built %r", g)

    print("nodes:")
    for node in g.nodes():
        print(f"  {node.id}")
    print("edges:")
    for edge in g.edges():
        print(f"  {edge.src},{edge.dst}")

    print(f"all nodes:     {_fmt(g.get_all_nodes())}")
    print(f"near node 3:   {_fmt(g.get_near_nodes(3))}")
    print(f"all edges:     {sorted(g.get_all_edges())}")
    print(f"near edges 3:  {sorted(g.get_near_edges(3))}")

    g.remove_node(3)
    log.info("after remove_node(3): %r", g)
    g.remove_edges([(1, 2), (6, 1)])
    log.info("after remove_edges: %r", g)
    print(f"remaining edges: {sorted(g.get_all_edges())}")


if __name__ == "__main__":
    main()
