"""
All-pairs shortest paths: Floyd-Warshall.

Distances live in a dense numpy matrix, ``int64`` unless the weights are
large enough to overflow it. Missing paths hold the ``INFINITY`` sentinel
(the largest int64) and are never used as a relaxation leg.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 25.2 (Floyd-Warshall).
"""

from typing import Dict, List, Tuple

import numpy as np

from ..logging import get_logger
from .core import Graph, Node
from .utils import node_index_map

logger = get_logger(__name__)

INFINITY = int(np.iinfo(np.int64).max)


def _matrix_dtype(edges, n: int):
    # Any stored distance is a walk of at most n edges and a relaxation adds
    # two of them, so 2 * n * max|w| bounds every intermediate value.
    max_abs = max((abs(edge.weight) for edge in edges), default=0)
    if 2 * max(n, 1) * max_abs < INFINITY:
        return np.int64
    return object


def floyd_warshall_matrix(graph: Graph) -> Tuple[np.ndarray, List[Node]]:
    """
    Floyd-Warshall distance matrix.

    Initialization sets the diagonal to 0, then writes each edge weight into
    its cell in edge insertion order, so for parallel edges the last one
    added wins (and a self-loop overwrites the diagonal). Edges whose
    endpoints are no longer stored in the graph (replaced by a later
    ``add_node``) are ignored. Round ``k`` replaces ``dist[i, j]`` with
    ``dist[i, k] + dist[k, j]`` when that is smaller and neither leg is
    ``INFINITY``.

    The matrix is ``int64`` whenever no sum of two path lengths can reach
    ``INFINITY``. Graphs with weights large enough to overflow get an
    ``object`` matrix of Python ints instead, so distances stay exact and
    agree with :func:`~dsgraph.graphs.shortest.dijkstra`.

    Negative edge weights are supported; negative cycles are not detected
    and leave the affected entries undefined.

    Args:
        graph: Graph to analyse.

    Returns:
        Tuple of (``n x n`` distance matrix, index -> node list).

    Complexity: O(V^3) time, O(V^2) memory.
    """
    node_to_idx, idx_to_node = node_index_map(graph)
    n = len(idx_to_node)

    edges = [
        edge
        for edge in graph.get_edges()
        if edge.from_node in node_to_idx and edge.to_node in node_to_idx
    ]
    dtype = _matrix_dtype(edges, n)
    if dtype is object:
        logger.debug("floyd-warshall weights exceed int64 headroom; using exact ints")

    dist = np.full((n, n), INFINITY, dtype=dtype)
    np.fill_diagonal(dist, 0)
    for edge in edges:
        dist[node_to_idx[edge.from_node], node_to_idx[edge.to_node]] = edge.weight

    through_k = np.empty((n, n), dtype=dtype)
    for k in range(n):
        to_k = dist[:, k : k + 1]
        from_k = dist[k : k + 1, :]
        usable = (to_k != INFINITY) & (from_k != INFINITY)
        through_k.fill(INFINITY)
        np.add(to_k, from_k, out=through_k, where=usable)
        np.minimum(dist, through_k, out=dist)

    logger.debug("floyd-warshall relaxed %d x %d matrix", n, n)
    return dist, idx_to_node


def floyd_warshall(graph: Graph) -> Dict[Node, Dict[Node, int]]:
    """
    Floyd-Warshall algorithm for all-pairs shortest paths.

    Args:
        graph: Graph to analyse.

    Returns:
        Nested mapping ``result[u][v]`` -> shortest distance from ``u`` to
        ``v``, with ``INFINITY`` for unreachable pairs.

    Example:
        >>> from dsgraph.graphs.utils import distances_by_key
        >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2)])
        >>> dist = distances_by_key(floyd_warshall(g))
        >>> dist["A"]["C"], dist["C"]["A"] == INFINITY
        (3, True)
    """
    dist, idx_to_node = floyd_warshall_matrix(graph)
    rows = dist.tolist()
    return {
        u: {v: rows[i][j] for j, v in enumerate(idx_to_node)}
        for i, u in enumerate(idx_to_node)
    }
