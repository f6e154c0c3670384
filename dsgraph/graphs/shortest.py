"""
Single-source shortest paths: Dijkstra.

The next node to settle is chosen by a linear scan over the tentative
distances, O(V) per step, which keeps the algorithm free of any auxiliary
priority structure.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Dict, Optional, Set

from ..diagnostics import is_debug_enabled
from ..logging import get_logger
from .core import Node

logger = get_logger(__name__)


def _closest_unsettled(distance: Dict[Node, int], settled: Set[Node]) -> Optional[Node]:
    closest = None
    closest_distance = None
    for node, d in distance.items():
        if node in settled:
            continue
        if closest_distance is None or d < closest_distance:
            closest = node
            closest_distance = d
    return closest


def dijkstra(source: Optional[Node]) -> Dict[Node, int]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Starts from ``{source: 0}``. Each step settles the unsettled node with the
    smallest tentative distance and relaxes all of its outgoing edges; a
    settled node is never revisited.

    Nodes that cannot be reached are absent from the result rather than
    mapped to a sentinel. Edge weights must be non-negative: negative weights
    are not rejected and give wrong distances. With debug mode enabled a
    single warning is logged per run when the first negative edge is relaxed.

    Args:
        source: Start node. ``None`` yields an empty mapping.

    Returns:
        Mapping node -> shortest distance from ``source``.

    Complexity: O(V^2 + E) over the reachable subgraph.

    Example:
        >>> from dsgraph.graphs import Graph
        >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 5)])
        >>> {n.value: d for n, d in dijkstra(g.get_node("A")).items()}
        {'A': 0, 'B': 1, 'C': 3}
    """
    if source is None:
        return {}

    distance: Dict[Node, int] = {source: 0}
    settled: Set[Node] = set()
    warned = False

    current = _closest_unsettled(distance, settled)
    while current is not None:
        base = distance[current]
        for edge in current.edges:
            if not warned and edge.weight < 0 and is_debug_enabled():
                logger.warning(
                    "dijkstra relaxing negative edge %r; distances will be wrong", edge
                )
                warned = True
            candidate = base + edge.weight
            target = edge.to_node
            if target not in distance or candidate < distance[target]:
                distance[target] = candidate
        settled.add(current)
        current = _closest_unsettled(distance, settled)

    logger.debug("dijkstra settled %d nodes from %r", len(settled), source.value)
    return distance
