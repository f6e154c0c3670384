"""Diagnostics and debugging utilities for dsgraph."""

from .core import (
    assert_degree_invariant,
    assert_heap_ordered,
    degree_totals,
    has_negative_weights,
    is_heap_ordered,
    is_topological_order,
    reachable_values,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
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
]
