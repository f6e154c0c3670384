"""Tests for the graph data model."""

import pytest

from dsgraph.diagnostics import debug_context, degree_totals
from dsgraph.graphs import Edge, Graph, Node, edge_weight_comparator, topology


class TestGraph:
    """Tests for Graph, Node and Edge."""

    def test_empty_graph(self):
        """A new graph has no nodes or edges."""
        g = Graph()
        assert g.node_count == 0
        assert g.edge_count == 0
        assert len(g.get_nodes()) == 0
        assert g.get_edges() == ()

    def test_add_node_returns_handle(self):
        """add_node returns a fresh node keyed by its value."""
        g = Graph()
        a = g.add_node("A")
        assert isinstance(a, Node)
        assert a.value == "A"
        assert a.in_degree == 0 and a.out_degree == 0
        assert g.get_nodes()["A"] is a
        assert g.get_node("A") is a
        assert "A" in g
        assert len(g) == 1

    def test_add_node_replaces(self):
        """Re-adding a key replaces the node without merging."""
        g = Graph()
        first = g.add_node("A")
        b = g.add_node("B")
        g.add_edge(first, b, 1)

        second = g.add_node("A")
        assert second is not first
        assert g.get_node("A") is second
        assert second.out_degree == 0
        assert second.edges == []
        assert g.node_count == 2

    def test_topology_after_replacing_edge_target(self):
        """Edges into a replaced node do not break topological ordering."""
        g = Graph()
        a = g.add_node("A")
        old_b = g.add_node("B")
        g.add_edge(a, old_b, 1)

        new_b = g.add_node("B")
        order = topology(g)
        assert order == [a, new_b]
        assert old_b not in order

    def test_add_edge_updates_degrees_and_adjacency(self):
        """add_edge maintains degrees, nexts and edge lists."""
        g = Graph()
        a, b, c = g.add_node("A"), g.add_node("B"), g.add_node("C")
        ab = g.add_edge(a, b, 6)
        ac = g.add_edge(a, c, 1)

        assert a.out_degree == 2
        assert b.in_degree == 1 and c.in_degree == 1
        assert a.nexts == [b, c]
        assert a.edges == [ab, ac]
        assert b.edges == []
        assert ab.from_node is a and ab.to_node is b and ab.weight == 6
        assert g.get_edges() == (ab, ac)

    def test_parallel_edges_are_distinct(self):
        """Edges with identical endpoints and weight both persist."""
        g = Graph()
        a, b = g.add_node(1), g.add_node(2)
        e1 = g.add_edge(a, b, 4)
        e2 = g.add_edge(a, b, 4)

        assert e1 is not e2
        assert e1 != e2
        assert len({e1, e2}) == 2
        assert g.edge_count == 2
        assert a.nexts == [b, b]
        assert b.in_degree == 2

    def test_degree_sums_equal_edge_count(self, random_graph):
        """Sum of in-degrees and out-degrees both equal the edge count."""
        g = random_graph(n_nodes=12, density=0.4)
        total_in, total_out, edges = degree_totals(g)
        assert total_in == total_out == edges == g.edge_count

    def test_self_loop(self):
        """A self-loop counts once as in and once as out."""
        g = Graph()
        a = g.add_node("A")
        g.add_edge(a, a, 3)
        assert a.in_degree == 1 and a.out_degree == 1
        assert a.nexts == [a]

    def test_get_nodes_is_read_only(self):
        """The node mapping cannot be mutated through the view."""
        g = Graph()
        g.add_node("A")
        nodes = g.get_nodes()
        with pytest.raises(TypeError):
            nodes["B"] = Node("B")

    def test_get_node_missing(self):
        """get_node raises KeyError for unknown keys."""
        g = Graph()
        with pytest.raises(KeyError):
            g.get_node("missing")

    def test_generic_keys(self):
        """Any hashable works as a key."""
        g = Graph()
        p = g.add_node((0, 1))
        q = g.add_node(frozenset({"x"}))
        g.add_edge(p, q, 2)
        assert g.get_node((0, 1)).nexts == [q]

    def test_repr(self):
        """Edges and graphs have readable reprs."""
        g = Graph.from_edges([("A", "B", 5)])
        assert repr(g.get_edges()[0]) == "Edge('A' -> 'B', weight=5)"
        assert repr(g) == "Graph(nodes=2, edges=1)"
        assert "A" in repr(g.get_node("A"))


class TestFromEdges:
    """Tests for Graph.from_edges."""

    def test_directed(self):
        """Nodes are created on first sight, in order."""
        g = Graph.from_edges([("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])
        assert list(g.get_nodes()) == ["A", "B", "C"]
        assert g.edge_count == 3
        assert g.get_node("A").out_degree == 2

    def test_undirected_adds_both_directions(self):
        """undirected=True mirrors every edge."""
        g = Graph.from_edges([("A", "B", 1)], undirected=True)
        assert g.edge_count == 2
        assert g.get_node("A").nexts == [g.get_node("B")]
        assert g.get_node("B").nexts == [g.get_node("A")]

    def test_empty(self):
        """No triples give an empty graph."""
        assert Graph.from_edges([]).node_count == 0


class TestEdgeWeightComparator:
    """Tests for edge_weight_comparator."""

    def test_orders_by_weight(self):
        """Lighter edges compare less."""
        a, b = Node("a"), Node("b")
        light = Edge(1, a, b)
        heavy = Edge(5, a, b)
        assert edge_weight_comparator(light, heavy) < 0
        assert edge_weight_comparator(heavy, light) > 0
        assert edge_weight_comparator(light, Edge(1, b, a)) == 0


class TestDebugMode:
    """Graph checks performed in debug mode."""

    def test_add_edge_checks_invariant(self):
        """A consistent graph passes the debug check."""
        g = Graph()
        a, b = g.add_node("A"), g.add_node("B")
        with debug_context(True):
            g.add_edge(a, b, 1)
            g.add_edge(b, a, 1)
        assert g.edge_count == 2

    def test_add_edge_detects_corruption(self):
        """Tampered degrees are reported in debug mode."""
        g = Graph()
        a, b = g.add_node("A"), g.add_node("B")
        a.out_degree = 5
        with debug_context(True):
            with pytest.raises(ValueError, match="Degree invariant"):
                g.add_edge(a, b, 1)
