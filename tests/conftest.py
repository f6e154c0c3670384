"""Pytest configuration and shared fixtures for dsgraph tests.

This module provides:
- A deterministic numpy RNG fixture
- Graph fixtures shared across the graph test modules
- A random graph factory for cross-checking algorithms
"""

import os
from typing import Callable, Dict, Generator, Tuple

import numpy as np
import pytest

from dsgraph.diagnostics import set_debug_enabled
from dsgraph.graphs import Graph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode_off() -> Generator[None, None, None]:
    """Run every test with debug mode off unless the test enables it."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def sample_graph() -> Graph:
    """Five-node directed graph used by the shortest-path scenarios.

    A->B(6), A->C(1), B->C(3), B->D(7), C->D(4), C->E(9), D->E(2)
    """
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


@pytest.fixture
def random_graph(rng: np.random.Generator) -> Callable[..., Graph]:
    """Factory building random graphs with non-negative integer weights.

    Args (of the returned callable):
        n_nodes: Number of nodes, keyed 0..n_nodes-1.
        density: Probability that an ordered pair (u, v), u != v, gets an edge.
        undirected: Add every edge in both directions with the same weight.
        max_weight: Weights are drawn from [0, max_weight).
        connected: Chain 0-1-...-(n-1) first so the graph is connected.
    """

    def build(
        n_nodes: int = 8,
        density: float = 0.3,
        undirected: bool = False,
        max_weight: int = 50,
        connected: bool = False,
    ) -> Graph:
        weights: Dict[Tuple[int, int], int] = {}
        if connected:
            for u in range(n_nodes - 1):
                weights[(u, u + 1)] = int(rng.integers(0, max_weight))
        for u in range(n_nodes):
            for v in range(n_nodes):
                if u == v or (undirected and v < u) or (u, v) in weights:
                    continue
                if rng.random() < density:
                    weights[(u, v)] = int(rng.integers(0, max_weight))

        g = Graph()
        for key in range(n_nodes):
            g.add_node(key)
        nodes = g.get_nodes()
        for (u, v), w in weights.items():
            g.add_edge(nodes[u], nodes[v], w)
            if undirected:
                g.add_edge(nodes[v], nodes[u], w)
        return g

    return build
