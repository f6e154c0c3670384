"""
Global switch for dsgraph's runtime self-checks.

Debug mode is off by default and costs nothing when off. When on:

- ``Graph.add_edge`` re-checks that the in-degree and out-degree sums both
  equal the edge count, raising ``ValueError`` on a mismatch;
- ``PriorityHeap.push``/``pop`` re-check the heap order, raising
  ``ValueError`` when a comparator is inconsistent;
- ``dijkstra`` logs one warning per run once it relaxes a negative edge.

The initial state comes from the ``DSGRAPH_DEBUG`` environment variable,
read once at import. ``1``, ``true``, ``yes`` and ``on`` (any case) enable
it; anything else, or an unset variable, leaves it off.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator, Optional

DEBUG_ENV_VAR = "DSGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(value: Optional[str]) -> bool:
    return value is not None and value.strip().lower() in _TRUTHY


_state = {"enabled": _flag_from_env(os.environ.get(DEBUG_ENV_VAR))}


def is_debug_enabled() -> bool:
    """Return True while dsgraph's self-checks are active."""
    return _state["enabled"]


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn dsgraph's self-checks on or off for the whole process.

    Parameters
    ----------
    enabled:
        New state; any truthy value enables the checks.
    """
    _state["enabled"] = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set debug mode for the duration of a ``with`` block.

    The previous state is restored on exit, including when the block raises,
    so contexts nest.

    Example
    -------
    >>> from dsgraph.graphs import Graph
    >>> g = Graph()
    >>> a, b = g.add_node("A"), g.add_node("B")
    >>> with debug_context(True):
    ...     edge = g.add_edge(a, b, 3)
    >>> g.edge_count
    1
    """
    previous = _state["enabled"]
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        _state["enabled"] = previous
