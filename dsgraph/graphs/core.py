"""
Core graph data structures.

Graph is a mutable directed multigraph over hashable keys. It exclusively
owns its Node and Edge instances; algorithms only read them. Nodes and edges
compare and hash by identity, so two edges with the same endpoints and weight
are distinct and both persist.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Generic, Hashable, Iterable, List, Mapping, Tuple, TypeVar

from ..diagnostics import assert_degree_invariant, is_debug_enabled

T = TypeVar("T", bound=Hashable)


@dataclass(eq=False)
class Node(Generic[T]):
    """
    A graph vertex.

    Attributes:
        value: Key identifying the node inside its graph.
        in_degree: Number of edges pointing at this node.
        out_degree: Number of edges leaving this node.
        nexts: Directly adjacent nodes, in edge insertion order (one entry
            per outgoing edge, so parallel edges repeat a neighbor).
        edges: Outgoing edges, in insertion order.
    """

    value: T
    in_degree: int = 0
    out_degree: int = 0
    nexts: List["Node[T]"] = field(default_factory=list, repr=False)
    edges: List["Edge[T]"] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Edge(Generic[T]):
    """
    A directed, integer-weighted edge.

    Attributes:
        weight: Edge weight.
        from_node: Source node.
        to_node: Target node.
    """

    weight: int
    from_node: Node[T]
    to_node: Node[T]

    def __repr__(self) -> str:
        return f"Edge({self.from_node.value!r} -> {self.to_node.value!r}, weight={self.weight})"


def edge_weight_comparator(a: Edge, b: Edge) -> int:
    """Order edges by weight; equal weights tie."""
    return a.weight - b.weight


class Graph(Generic[T]):
    """
    Directed weighted multigraph with adjacency lists.

    The only mutation paths are :meth:`add_node` and :meth:`add_edge`; there
    is no removal. Mutation is not synchronized: callers that share a graph
    across threads must serialize writes against reads themselves.

    Complexity:
        - add_node: O(1)
        - add_edge: O(1) amortized
        - get_nodes, get_edges: O(1) view / O(E) copy

    Example:
        >>> g = Graph()
        >>> a = g.add_node("A")
        >>> b = g.add_node("B")
        >>> g.add_edge(a, b, 6)
        Edge('A' -> 'B', weight=6)
        >>> a.out_degree, b.in_degree
        (1, 1)
    """

    def __init__(self) -> None:
        self._nodes: Dict[T, Node[T]] = {}
        self._edges: List[Edge[T]] = []

    @classmethod
    def from_edges(
        cls, edges: Iterable[Tuple[T, T, int]], undirected: bool = False
    ) -> "Graph[T]":
        """
        Build a graph from ``(from_key, to_key, weight)`` triples.

        Nodes are created the first time their key appears. With
        ``undirected=True`` every triple is also added in the reverse
        direction, which is the shape :func:`~dsgraph.graphs.mst.prim_mst`
        needs to produce a true undirected spanning tree.

        Example:
            >>> g = Graph.from_edges([("A", "B", 1), ("B", "C", 2)], undirected=True)
            >>> g.edge_count
            4
        """
        graph = cls()
        for u, v, weight in edges:
            from_node = graph._nodes.get(u)
            if from_node is None:
                from_node = graph.add_node(u)
            to_node = graph._nodes.get(v)
            if to_node is None:
                to_node = graph.add_node(v)
            graph.add_edge(from_node, to_node, weight)
            if undirected:
                graph.add_edge(to_node, from_node, weight)
        return graph

    def add_node(self, value: T) -> Node[T]:
        """
        Create a node for ``value`` and return its handle.

        Adding an existing key replaces the stored node with a fresh one; the
        previous node and its edges are not merged into it.
        """
        node: Node[T] = Node(value)
        self._nodes[value] = node
        return node

    def add_edge(self, from_node: Node[T], to_node: Node[T], weight: int) -> Edge[T]:
        """
        Add a directed edge and update degrees and adjacency.

        Handles are not checked for membership in this graph; passing nodes
        from another graph, or nodes replaced by a later :meth:`add_node`,
        leaves the graph in an unspecified state.
        """
        edge: Edge[T] = Edge(weight, from_node, to_node)
        from_node.out_degree += 1
        to_node.in_degree += 1
        from_node.nexts.append(to_node)
        from_node.edges.append(edge)
        self._edges.append(edge)

        if is_debug_enabled():
            assert_degree_invariant(self)
        return edge

    def get_nodes(self) -> Mapping[T, Node[T]]:
        """Return a read-only view of the key -> node mapping."""
        return MappingProxyType(self._nodes)

    def get_edges(self) -> Tuple[Edge[T], ...]:
        """Return all edges, in insertion order."""
        return tuple(self._edges)

    def get_node(self, value: T) -> Node[T]:
        """
        Return the node stored under ``value``.

        Raises:
            KeyError: If no node has that key.
        """
        if value not in self._nodes:
            raise KeyError(f"Node {value!r} not in graph")
        return self._nodes[value]

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, value: object) -> bool:
        return value in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count}, edges={self.edge_count})"
