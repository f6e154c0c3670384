"""
Graph traversal: BFS, DFS and Kahn's topological ordering.

Neighbors are visited in adjacency-list order, i.e. the order in which the
edges were added, so results are reproducible for a given construction
sequence.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 22.3 (DFS) and 22.4 (topological sort).
    - Kahn, A. B. "Topological sorting of large networks", CACM 5(11), 1962.
"""

from collections import deque
from typing import Dict, Hashable, List, Optional, Set, Tuple

from ..logging import get_logger
from .core import Graph, Node

logger = get_logger(__name__)


def bfs(start: Optional[Node]) -> List[Hashable]:
    """
    Breadth-first traversal from ``start``.

    A node is recorded when it is dequeued; neighbors are enqueued the first
    time they are seen, so each reachable node appears exactly once.

    Args:
        start: Node to start from. ``None`` yields an empty list.

    Returns:
        Node values in discovery order.

    Complexity: O(V + E) over the reachable subgraph.

    Example:
        >>> g = Graph.from_edges([("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])
        >>> bfs(g.get_node("A"))
        ['A', 'B', 'C', 'D']
    """
    if start is None:
        return []

    order: List[Hashable] = []
    seen: Set[Node] = {start}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        order.append(current.value)
        for nxt in current.nexts:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)

    return order


def dfs(start: Optional[Node]) -> List[Hashable]:
    """
    Depth-first traversal from ``start`` in pre-order.

    Uses an explicit stack of ``(node, neighbor cursor)`` frames instead of
    recursion, so deep graphs do not exhaust the interpreter stack. Each frame
    resumes scanning its adjacency list where it left off; a frame with no
    unvisited neighbor left is finished and popped, returning control to its
    parent. The output matches recursive pre-order DFS.

    Args:
        start: Node to start from. ``None`` yields an empty list.

    Returns:
        Node values in pre-order.

    Complexity: O(V + E) over the reachable subgraph.

    Example:
        >>> g = Graph.from_edges([("A", "B", 1), ("A", "C", 1), ("B", "D", 1)])
        >>> dfs(g.get_node("A"))
        ['A', 'B', 'D', 'C']
    """
    if start is None:
        return []

    order: List[Hashable] = [start.value]
    seen: Set[Node] = {start}
    stack: List[Tuple[Node, int]] = [(start, 0)]

    while stack:
        current, cursor = stack.pop()
        nexts = current.nexts
        while cursor < len(nexts) and nexts[cursor] in seen:
            cursor += 1
        if cursor == len(nexts):
            continue

        nxt = nexts[cursor]
        stack.append((current, cursor + 1))
        stack.append((nxt, 0))
        seen.add(nxt)
        order.append(nxt.value)

    return order


def topology(graph: Graph) -> List[Node]:
    """
    Topological order of ``graph`` by Kahn's algorithm.

    Nodes whose remaining in-degree is zero are queued in node-mapping order;
    dequeuing a node decrements the in-degree of each of its neighbors (once
    per parallel edge).

    For a DAG the result holds every node and each edge ``u -> v`` has ``u``
    before ``v``. If the graph has a cycle, the nodes on or behind it never
    reach in-degree zero and the result is shorter than the node count. No
    error is raised; compare lengths (or use
    :func:`~dsgraph.diagnostics.is_topological_order`) to detect this.

    Neighbors that are no longer stored in the graph (replaced by a later
    ``add_node``) are skipped.

    Returns:
        List of nodes in topological order.

    Complexity: O(V + E).

    Example:
        >>> g = Graph.from_edges([("shirt", "tie", 1), ("tie", "jacket", 1)])
        >>> [node.value for node in topology(g)]
        ['shirt', 'tie', 'jacket']
    """
    remaining: Dict[Node, int] = {}
    zero_in = deque()
    for node in graph.get_nodes().values():
        remaining[node] = node.in_degree
        if node.in_degree == 0:
            zero_in.append(node)

    result: List[Node] = []
    while zero_in:
        current = zero_in.popleft()
        result.append(current)
        for nxt in current.nexts:
            if nxt not in remaining:
                continue
            remaining[nxt] -= 1
            if remaining[nxt] == 0:
                zero_in.append(nxt)

    if len(result) < graph.node_count:
        logger.debug(
            "topology ordered %d of %d nodes; the graph contains a cycle",
            len(result),
            graph.node_count,
        )
    return result
