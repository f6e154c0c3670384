"""
Bounded array-backed priority heap driven by a caller-supplied comparator.

The heap has no intrinsic notion of order: the element that compares least
under ``comparator`` sits on top. Capacity is fixed at construction and a
push beyond it fails with :class:`HeapFullError`.
"""

from typing import Generic, List, MutableSequence, Optional, TypeVar

from ..diagnostics import assert_heap_ordered, is_debug_enabled
from .comparator import Comparator, reverse_comparator

T = TypeVar("T")


class HeapFullError(OverflowError):
    """Raised when pushing onto a heap that already holds ``limit`` items."""


def _sift_up(items: MutableSequence, index: int, comparator: Comparator) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if comparator(items[index], items[parent]) >= 0:
            break
        items[index], items[parent] = items[parent], items[index]
        index = parent


def _sift_down(items: MutableSequence, index: int, size: int, comparator: Comparator) -> None:
    left = index * 2 + 1
    while left < size:
        right = left + 1
        smallest = right if right < size and comparator(items[right], items[left]) < 0 else left
        if comparator(items[smallest], items[index]) >= 0:
            break
        items[smallest], items[index] = items[index], items[smallest]
        index = smallest
        left = index * 2 + 1


class PriorityHeap(Generic[T]):
    """
    Min-heap with respect to ``comparator`` and a fixed capacity.

    The backing list is allocated once with ``limit`` slots; ``size`` counts
    the slots in use.

    Complexity:
        - push: O(log n)
        - pop: O(log n)
        - peek, is_empty, is_full: O(1)

    Example:
        >>> from dsgraph.structures import number_comparator
        >>> heap = PriorityHeap(3, number_comparator)
        >>> for value in (5, 1, 3):
        ...     heap.push(value)
        >>> heap.pop()
        1
        >>> heap.push(7)
        >>> heap.push(9)
        Traceback (most recent call last):
        ...
        dsgraph.structures.heap.HeapFullError: heap is full (limit=3)
    """

    def __init__(self, limit: int, comparator: Comparator):
        if limit < 0:
            raise ValueError(f"Heap limit must be non-negative, got {limit}")
        self.comparator = comparator
        self._limit = limit
        self._items: List[Optional[T]] = [None] * limit
        self._size = 0

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._limit

    def push(self, value: T) -> None:
        """
        Insert ``value`` keeping heap order.

        Raises:
            HeapFullError: If the heap already holds ``limit`` items.
        """
        if self._size == self._limit:
            raise HeapFullError(f"heap is full (limit={self._limit})")

        self._items[self._size] = value
        _sift_up(self._items, self._size, self.comparator)
        self._size += 1

        if is_debug_enabled():
            assert_heap_ordered(self)

    def pop(self) -> T:
        """
        Remove and return the top element.

        Raises:
            IndexError: If the heap is empty.
        """
        if self._size == 0:
            raise IndexError("pop from empty heap")

        top = self._items[0]
        self._size -= 1
        self._items[0] = self._items[self._size]
        self._items[self._size] = None
        _sift_down(self._items, 0, self._size, self.comparator)

        if is_debug_enabled():
            assert_heap_ordered(self)
        return top

    def peek(self) -> T:
        """
        Return the top element without removing it.

        Raises:
            IndexError: If the heap is empty.
        """
        if self._size == 0:
            raise IndexError("peek from empty heap")
        return self._items[0]

    def as_list(self) -> List[T]:
        """Return a copy of the occupied slots in array (heap) order."""
        return list(self._items[: self._size])


def heap_sort(items: MutableSequence[T], comparator: Comparator) -> None:
    """
    Sort ``items`` in place in ascending ``comparator`` order.

    Builds a max-ordered heap bottom-up in O(n), then repeatedly swaps the top
    behind the shrinking heap boundary. Not stable.

    Example:
        >>> from dsgraph.structures import number_comparator
        >>> values = [5, 2, 9, 1]
        >>> heap_sort(values, number_comparator)
        >>> values
        [1, 2, 5, 9]
    """
    n = len(items)
    if n < 2:
        return

    max_first = reverse_comparator(comparator)
    for index in range(n // 2 - 1, -1, -1):
        _sift_down(items, index, n, max_first)

    for end in range(n - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end, max_first)
