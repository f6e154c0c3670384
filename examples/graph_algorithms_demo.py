"""
Example: Graph algorithms with dsgraph

Builds a small directed road network and runs every algorithm in the
package on it: traversal, topological ordering, shortest paths and minimum
spanning trees.
"""

from dsgraph import (
    INFINITY,
    DisjointSet,
    Graph,
    bfs,
    dfs,
    dijkstra,
    distances_by_key,
    edge_weight_comparator,
    floyd_warshall,
    kruskal_mst,
    prim_mst,
    topology,
    total_weight,
)


def build_network() -> Graph:
    g = Graph()
    a, b, c, d, e = (g.add_node(key) for key in "ABCDE")
    g.add_edge(a, b, 6)
    g.add_edge(a, c, 1)
    g.add_edge(b, c, 3)
    g.add_edge(b, d, 7)
    g.add_edge(c, d, 4)
    g.add_edge(c, e, 9)
    g.add_edge(d, e, 2)
    return g


def example_traversal(g: Graph) -> None:
    print("=" * 60)
    print("Example 1: Traversal")
    print("=" * 60)
    start = g.get_node("A")
    print(f"BFS from A: {bfs(start)}")
    print(f"DFS from A: {dfs(start)}")
    order = topology(g)
    print(f"Topological order: {[node.value for node in order]}")
    print(f"Is a DAG: {len(order) == g.node_count}")
    print()


def example_shortest_paths(g: Graph) -> None:
    print("=" * 60)
    print("Example 2: Shortest paths")
    print("=" * 60)
    print(f"Dijkstra from A: {distances_by_key(dijkstra(g.get_node('A')))}")

    all_pairs = distances_by_key(floyd_warshall(g))
    for source, row in all_pairs.items():
        cells = ["inf" if d == INFINITY else str(d) for d in row.values()]
        print(f"  {source}: {' '.join(f'{c:>4}' for c in cells)}")
    print()


def example_spanning_trees() -> None:
    print("=" * 60)
    print("Example 3: Minimum spanning trees")
    print("=" * 60)
    cables = [("A", "B", 6), ("A", "C", 1), ("B", "C", 3), ("B", "D", 7),
              ("C", "D", 4), ("C", "E", 9), ("D", "E", 2)]
    g = Graph.from_edges(cables, undirected=True)

    kruskal = kruskal_mst(g, edge_weight_comparator)
    prim = prim_mst(g, edge_weight_comparator)
    print(f"Kruskal: {sorted(kruskal, key=lambda e: e.weight)} total={total_weight(kruskal)}")
    print(f"Prim:    {sorted(prim, key=lambda e: e.weight)} total={total_weight(prim)}")
    print()


def example_disjoint_set() -> None:
    print("=" * 60)
    print("Example 4: Disjoint set")
    print("=" * 60)
    groups = DisjointSet(range(1, 11))
    groups.union(1, 3)
    groups.union(7, 9)
    groups.union(8, 3)
    print(f"1~8: {groups.find(1, 8)}  1~9: {groups.find(1, 9)}  groups: {groups.group_count}")
    print()


if __name__ == "__main__":
    network = build_network()
    example_traversal(network)
    example_shortest_paths(network)
    example_spanning_trees()
    example_disjoint_set()
    print("All examples completed.")
