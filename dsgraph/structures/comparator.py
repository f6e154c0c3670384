"""
Comparator helpers.

A comparator is a plain callable ``cmp(a, b) -> int`` returning a negative
number when ``a`` orders before ``b``, zero when they tie and a positive
number otherwise. Every ordered structure in dsgraph takes its comparator as
an explicit argument.
"""

from typing import Callable, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def number_comparator(a, b) -> int:
    """
    Three-way comparison of two numbers.

    Example:
        >>> number_comparator(1, 2)
        -1
        >>> number_comparator(2.5, 2.5)
        0
    """
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def reverse_comparator(comparator: Comparator) -> Comparator:
    """
    Return a comparator with the opposite ordering of ``comparator``.

    Turning a min-ordered :class:`~dsgraph.structures.heap.PriorityHeap`
    into a max-ordered one only takes ``reverse_comparator(cmp)``.
    """

    def reversed_cmp(a, b) -> int:
        return comparator(b, a)

    return reversed_cmp
