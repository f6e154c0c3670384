"""Tests for diagnostics and debug mode."""

import pytest

from dsgraph.diagnostics import (
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
from dsgraph.diagnostics.debug_mode import _flag_from_env
from dsgraph.graphs import Graph, topology
from dsgraph.structures import PriorityHeap, number_comparator


def test_debug_mode_toggle_and_context() -> None:
    """Debug mode can be toggled globally and restored by the context."""
    original = is_debug_enabled()

    try:
        set_debug_enabled(False)
        assert not is_debug_enabled()

        with debug_context(True):
            assert is_debug_enabled()

        assert not is_debug_enabled()

        set_debug_enabled(True)
        with debug_context(False):
            assert not is_debug_enabled()
        assert is_debug_enabled()
    finally:
        set_debug_enabled(original)


def test_debug_context_restores_on_error() -> None:
    """The previous state is restored when the block raises."""
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1", True),
        ("true", True),
        ("YES", True),
        (" on ", True),
        ("0", False),
        ("off", False),
        ("", False),
        (None, False),
    ],
)
def test_env_flag_parsing(raw, expected) -> None:
    """DSGRAPH_DEBUG accepts the usual truthy spellings in any case."""
    assert _flag_from_env(raw) is expected


def test_degree_totals(sample_graph) -> None:
    """Degree sums equal the edge count."""
    assert degree_totals(sample_graph) == (7, 7, 7)
    assert_degree_invariant(sample_graph)


def test_assert_degree_invariant_detects_mismatch() -> None:
    """Tampered degrees raise ValueError."""
    g = Graph.from_edges([("A", "B", 1)])
    g.get_node("B").in_degree = 0
    with pytest.raises(ValueError, match="Degree invariant"):
        assert_degree_invariant(g)


def test_heap_order_checks() -> None:
    """is_heap_ordered inspects the occupied slots only."""
    heap = PriorityHeap(4, number_comparator)
    for value in (3, 1, 2):
        heap.push(value)
    assert is_heap_ordered(heap)
    assert_heap_ordered(heap)

    heap._items[0], heap._items[1] = heap._items[1], heap._items[0]
    assert not is_heap_ordered(heap)
    with pytest.raises(ValueError):
        assert_heap_ordered(heap)


def test_is_topological_order() -> None:
    """Valid orders pass; reversed, partial and duplicated ones fail."""
    g = Graph.from_edges([("A", "B", 1), ("B", "C", 1)])
    order = topology(g)
    assert is_topological_order(g, order)
    assert not is_topological_order(g, list(reversed(order)))
    assert not is_topological_order(g, order[:2])
    assert not is_topological_order(g, order + [order[0]])


def test_has_negative_weights() -> None:
    """Negative weights are detected."""
    assert not has_negative_weights(Graph.from_edges([("A", "B", 0)]))
    assert has_negative_weights(Graph.from_edges([("A", "B", 2), ("B", "C", -1)]))


def test_reachable_values() -> None:
    """Reachability follows edge direction and includes the start."""
    g = Graph.from_edges([("A", "B", 1), ("B", "C", 1), ("C", "A", 1), ("D", "A", 1)])
    g.add_node("E")
    assert reachable_values(g.get_node("A")) == {"A", "B", "C"}
    assert reachable_values(g.get_node("D")) == {"A", "B", "C", "D"}
    assert reachable_values(g.get_node("E")) == {"E"}
    assert reachable_values(None) == set()
