"""
Graph algorithms package for dsgraph.

This package provides:
- Graph data model (Graph, Node, Edge) for directed weighted multigraphs
- Traversal (bfs, dfs) and Kahn's topological ordering (topology)
- Minimum spanning trees (kruskal_mst, prim_mst)
- Single-source shortest paths (dijkstra)
- All-pairs shortest paths (floyd_warshall)

No algorithm mutates the graph or keeps state between calls. Neighbors are
visited in edge insertion order.
"""

from .allpairs import INFINITY, floyd_warshall, floyd_warshall_matrix
from .core import Edge, Graph, Node, edge_weight_comparator
from .mst import kruskal_mst, prim_mst
from .shortest import dijkstra
from .traversal import bfs, dfs, topology
from .utils import distances_by_key, node_index_map, total_weight

__all__ = [
    "Graph",
    "Node",
    "Edge",
    "edge_weight_comparator",
    "bfs",
    "dfs",
    "topology",
    "kruskal_mst",
    "prim_mst",
    "dijkstra",
    "floyd_warshall",
    "floyd_warshall_matrix",
    "INFINITY",
    "node_index_map",
    "distances_by_key",
    "total_weight",
]

# Example usage:
# from dsgraph.graphs import Graph, dijkstra, distances_by_key
#
# g = Graph()
# a, b, c = g.add_node("A"), g.add_node("B"), g.add_node("C")
# g.add_edge(a, b, 1)
# g.add_edge(b, c, 2)
# distances_by_key(dijkstra(a))  # {'A': 0, 'B': 1, 'C': 3}
