"""Invariant and precondition checks for graphs and heaps.

The algorithms never raise on cycles, partial coverage or negative weights;
these helpers let callers detect those conditions before or after a run.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Hashable, Optional, Sequence, Set, Tuple

if TYPE_CHECKING:
    from ..graphs.core import Graph, Node
    from ..structures.heap import PriorityHeap


def degree_totals(graph: Graph) -> Tuple[int, int, int]:
    """
    Return ``(sum of in-degrees, sum of out-degrees, edge count)``.

    For a consistent graph all three values are equal.
    """
    total_in = 0
    total_out = 0
    for node in graph.get_nodes().values():
        total_in += node.in_degree
        total_out += node.out_degree
    return total_in, total_out, graph.edge_count


def assert_degree_invariant(graph: Graph) -> None:
    """
    Assert that in-degree and out-degree sums both equal the edge count.

    Raises
    ------
    ValueError
        If either degree sum disagrees with the number of edges.
    """
    total_in, total_out, edges = degree_totals(graph)
    if total_in != edges or total_out != edges:
        raise ValueError(
            f"Degree invariant violated: sum(in)={total_in}, "
            f"sum(out)={total_out}, edges={edges}"
        )


def is_heap_ordered(heap: PriorityHeap) -> bool:
    """Return True if no child in ``heap`` compares less than its parent."""
    items = heap.as_list()
    for index in range(1, len(items)):
        if heap.comparator(items[index], items[(index - 1) // 2]) < 0:
            return False
    return True


def assert_heap_ordered(heap: PriorityHeap) -> None:
    """
    Assert that ``heap`` satisfies the heap property.

    Raises
    ------
    ValueError
        If some child orders before its parent.
    """
    if not is_heap_ordered(heap):
        raise ValueError("Heap order violated")


def is_topological_order(graph: Graph, order: Sequence[Node]) -> bool:
    """
    Return True if ``order`` lists every node of ``graph`` exactly once and
    every edge points forward in it.

    A result of :func:`~dsgraph.graphs.traversal.topology` on a cyclic graph
    is shorter than the node count and therefore fails this check.
    """
    position = {}
    for index, node in enumerate(order):
        if node in position:
            return False
        position[node] = index

    if len(position) != graph.node_count:
        return False

    for edge in graph.get_edges():
        src = position.get(edge.from_node)
        dst = position.get(edge.to_node)
        if src is None or dst is None or src >= dst:
            return False
    return True


def has_negative_weights(graph: Graph) -> bool:
    """Return True if any edge of ``graph`` carries a negative weight."""
    return any(edge.weight < 0 for edge in graph.get_edges())


def reachable_values(start: Optional[Node]) -> Set[Hashable]:
    """
    Return the values of every node reachable from ``start``, itself included.

    Follows ``nexts`` breadth-first and is independent of visit order, so it
    serves as the reference set for :func:`~dsgraph.graphs.traversal.bfs`
    and :func:`~dsgraph.graphs.traversal.dfs`. ``None`` yields an empty set.
    """
    if start is None:
        return set()

    seen = {start}
    frontier = deque([start])
    while frontier:
        node = frontier.popleft()
        for nxt in node.nexts:
            if nxt not in seen:
                seen.add(nxt)
                frontier.append(nxt)
    return {node.value for node in seen}
