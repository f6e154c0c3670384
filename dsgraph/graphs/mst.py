"""
Minimum spanning tree algorithms: Kruskal and Prim.

Both take the edge ordering as an explicit comparator and draw edges from a
:class:`~dsgraph.structures.PriorityHeap` sized to the graph's edge count.
Kruskal additionally tracks connectivity with a
:class:`~dsgraph.structures.DisjointSet`. Neither mutates the graph.

Equal-weight ties are resolved by heap pop order. That order is consistent
for a given graph and comparator but is not a documented total order, so
different, equally minimal trees may be returned for graphs with ties.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Kruskal and Prim).
"""

from typing import Optional, Set

from ..logging import get_logger
from ..structures import Comparator, DisjointSet, PriorityHeap
from .core import Edge, Graph, Node, edge_weight_comparator

logger = get_logger(__name__)


def kruskal_mst(graph: Graph, comparator: Comparator = edge_weight_comparator) -> Set[Edge]:
    """
    Kruskal's algorithm.

    Every edge goes into a heap ordered by ``comparator``. Edges are popped
    smallest first and kept only when their endpoints are not yet connected,
    after which the endpoints are united. Connectivity ignores direction:
    ``A -> B`` and ``B -> A`` join the same pair, so at most one of them is
    kept. On a disconnected graph the result is a spanning forest.

    Args:
        graph: Graph to span.
        comparator: Edge ordering; defaults to ascending weight.

    Returns:
        Set of accepted edges.

    Complexity: O(E log E).

    Example:
        >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
        >>> sorted(e.weight for e in kruskal_mst(g))
        [1, 2]
    """
    groups = DisjointSet(graph.get_nodes().keys())

    edges = graph.get_edges()
    heap: PriorityHeap[Edge] = PriorityHeap(len(edges), comparator)
    for edge in edges:
        heap.push(edge)

    result: Set[Edge] = set()
    while not heap.is_empty():
        edge = heap.pop()
        u = edge.from_node.value
        v = edge.to_node.value
        if not groups.find(u, v):
            result.add(edge)
            groups.union(u, v)

    logger.debug("kruskal accepted %d of %d edges", len(result), len(edges))
    return result


def prim_mst(
    graph: Graph,
    comparator: Comparator = edge_weight_comparator,
    start: Optional[Node] = None,
) -> Set[Edge]:
    """
    Prim's algorithm.

    Starting from ``start`` (by default the first node of the graph's node
    mapping, i.e. the first key added), the outgoing edges of every newly
    reached node are pushed onto a heap ordered by ``comparator``. The
    smallest edge is popped; if its target is new, the edge is kept and the
    target's outgoing edges are pushed in turn. Runs until the heap is empty.

    Only the component reachable from the start is covered; other components
    are not restarted. Only *outgoing* edges are followed, so for a true
    undirected spanning tree the graph must hold both directions of every
    connection (see :meth:`Graph.from_edges` with ``undirected=True``); a
    one-directional edge set can give an incomplete tree.

    Args:
        graph: Graph to span.
        comparator: Edge ordering; defaults to ascending weight.
        start: Node to grow the tree from.

    Returns:
        Set of accepted edges.

    Raises:
        ValueError: If ``start`` is not a node of ``graph``.

    Complexity: O(E log E).

    Example:
        >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 3)], undirected=True)
        >>> sorted(e.weight for e in prim_mst(g))
        [1, 2]
    """
    nodes = graph.get_nodes()
    if not nodes:
        return set()

    if start is None:
        start = next(iter(nodes.values()))
    elif nodes.get(start.value) is not start:
        raise ValueError(f"Start node {start.value!r} not in graph")

    heap: PriorityHeap[Edge] = PriorityHeap(graph.edge_count, comparator)
    visited: Set[Node] = {start}
    queued: Set[Edge] = set()
    result: Set[Edge] = set()

    def flood(node: Node) -> None:
        for edge in node.edges:
            if edge not in queued:
                queued.add(edge)
                heap.push(edge)

    flood(start)
    while not heap.is_empty():
        edge = heap.pop()
        target = edge.to_node
        if target not in visited:
            visited.add(target)
            result.add(edge)
            flood(target)

    logger.debug(
        "prim reached %d of %d nodes from %r", len(visited), len(nodes), start.value
    )
    return result
