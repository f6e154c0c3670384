"""
Auxiliary data structures used by the graph algorithms.

- Comparator helpers (number_comparator, reverse_comparator)
- DisjointSet: union-find with path compression and union by size
- PriorityHeap: bounded, comparator-driven min-heap, plus heap_sort
"""

from .comparator import Comparator, number_comparator, reverse_comparator
from .heap import HeapFullError, PriorityHeap, heap_sort
from .union_find import DisjointSet

__all__ = [
    "Comparator",
    "number_comparator",
    "reverse_comparator",
    "DisjointSet",
    "PriorityHeap",
    "HeapFullError",
    "heap_sort",
]
