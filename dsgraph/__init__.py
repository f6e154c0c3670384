"""dsgraph - an in-memory graph algorithms library."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_degree_invariant,
    assert_heap_ordered,
    debug_context,
    degree_totals,
    has_negative_weights,
    is_debug_enabled,
    is_heap_ordered,
    is_topological_order,
    reachable_values,
    set_debug_enabled,
)

# Graph model and algorithms
from .graphs import (
    INFINITY,
    Edge,
    Graph,
    Node,
    bfs,
    dfs,
    dijkstra,
    distances_by_key,
    edge_weight_comparator,
    floyd_warshall,
    floyd_warshall_matrix,
    kruskal_mst,
    node_index_map,
    prim_mst,
    topology,
    total_weight,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Auxiliary structures
from .structures import (
    Comparator,
    DisjointSet,
    HeapFullError,
    PriorityHeap,
    heap_sort,
    number_comparator,
    reverse_comparator,
)

__all__ = [
    "__version__",
    # Graph model
    "Graph",
    "Node",
    "Edge",
    "edge_weight_comparator",
    # Traversal
    "bfs",
    "dfs",
    "topology",
    # Spanning trees
    "kruskal_mst",
    "prim_mst",
    # Shortest paths
    "dijkstra",
    "floyd_warshall",
    "floyd_warshall_matrix",
    "INFINITY",
    # Graph helpers
    "node_index_map",
    "distances_by_key",
    "total_weight",
    # Structures
    "Comparator",
    "number_comparator",
    "reverse_comparator",
    "DisjointSet",
    "PriorityHeap",
    "HeapFullError",
    "heap_sort",
    # Diagnostics
    "degree_totals",
    "assert_degree_invariant",
    "is_heap_ordered",
    "assert_heap_ordered",
    "is_topological_order",
    "has_negative_weights",
    "reachable_values",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
