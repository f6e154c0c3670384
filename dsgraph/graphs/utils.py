"""
Utility functions for graph algorithms.

Provides node indexing for matrix-based algorithms and helpers for reading
algorithm results by key.
"""

from typing import Dict, Hashable, Iterable, List, Mapping, Tuple

from .core import Edge, Graph, Node


def node_index_map(graph: Graph) -> Tuple[Dict[Node, int], List[Node]]:
    """
    Assign matrix indices 0..n-1 to the nodes of ``graph``.

    Indices follow the graph's node-mapping order (key insertion order).

    Returns:
        Tuple of (node -> index dict, index -> node list).

    Example:
        >>> g = Graph.from_edges([("b", "a", 1)])
        >>> _, idx_to_node = node_index_map(g)
        >>> [node.value for node in idx_to_node]
        ['b', 'a']
    """
    idx_to_node = list(graph.get_nodes().values())
    node_to_idx = {node: idx for idx, node in enumerate(idx_to_node)}
    return node_to_idx, idx_to_node


def distances_by_key(distances: Mapping[Node, object]) -> Dict[Hashable, object]:
    """
    Re-key a node-keyed result by node value.

    Works for the flat mapping returned by
    :func:`~dsgraph.graphs.shortest.dijkstra` and the nested mapping returned
    by :func:`~dsgraph.graphs.allpairs.floyd_warshall`.

    Example:
        >>> from dsgraph.graphs import dijkstra
        >>> g = Graph.from_edges([("A", "B", 6), ("C", "A", 1)])
        >>> distances_by_key(dijkstra(g.get_node("A")))
        {'A': 0, 'B': 6}
    """
    return {
        node.value: distances_by_key(d) if isinstance(d, Mapping) else d
        for node, d in distances.items()
    }


def total_weight(edges: Iterable[Edge]) -> int:
    """Sum of edge weights, e.g. the cost of a spanning tree."""
    return sum(edge.weight for edge in edges)
