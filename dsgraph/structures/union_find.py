"""
Disjoint-set (union-find) over a fixed universe of elements.

find_root flattens every chain it walks (path compression) and union attaches
the smaller group under the larger one (union by size), giving near-constant
amortized cost per operation.
"""

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

Element = TypeVar("Element", bound=Hashable)


class DisjointSet(Generic[Element]):
    """
    Union-find with path compression and union by size.

    The universe is fixed at construction; asking about an element that was
    not supplied raises ``KeyError``.

    Attributes:
        parent: Maps every element to its parent; an element is a root iff it
            maps to itself.
        size: Group size, kept only for roots.

    Example:
        >>> ds = DisjointSet(range(1, 11))
        >>> ds.union(1, 3)
        >>> ds.union(8, 3)
        >>> ds.find(1, 8)
        True
        >>> ds.find(2, 8)
        False
    """

    def __init__(self, values: Iterable[Element]):
        self.parent: Dict[Element, Element] = {}
        self.size: Dict[Element, int] = {}

        for value in values:
            self.parent[value] = value
            self.size[value] = 1

    def __contains__(self, value: object) -> bool:
        return value in self.parent

    def __len__(self) -> int:
        return len(self.parent)

    def find_root(self, value: Element) -> Element:
        """
        Return the representative of the group containing ``value``.

        Every element visited on the way up is re-pointed directly at the
        root before returning.

        Raises:
            KeyError: If ``value`` is not part of the universe.
        """
        path: List[Element] = []
        current = value
        while self.parent[current] != current:
            path.append(current)
            current = self.parent[current]

        for visited in path:
            self.parent[visited] = current
        return current

    def find(self, a: Element, b: Element) -> bool:
        """Return True if ``a`` and ``b`` belong to the same group."""
        return self.find_root(a) == self.find_root(b)

    def union(self, a: Element, b: Element) -> None:
        """
        Merge the groups containing ``a`` and ``b``.

        The root of the larger group absorbs the smaller one; on a tie the
        root of ``a`` wins. The absorbed root loses its size entry.
        """
        root_a = self.find_root(a)
        root_b = self.find_root(b)
        if root_a == root_b:
            return

        size_a = self.size[root_a]
        size_b = self.size[root_b]
        if size_a >= size_b:
            self.parent[root_b] = root_a
            self.size[root_a] = size_a + size_b
            del self.size[root_b]
        else:
            self.parent[root_a] = root_b
            self.size[root_b] = size_a + size_b
            del self.size[root_a]

    def size_of(self, value: Element) -> int:
        """Return the number of elements in the group containing ``value``."""
        return self.size[self.find_root(value)]

    @property
    def group_count(self) -> int:
        """Number of disjoint groups."""
        return len(self.size)

    def groups(self) -> Dict[Element, List[Element]]:
        """
        Return every group keyed by its representative.

        Members are listed in the order the universe was supplied.
        """
        result: Dict[Element, List[Element]] = {}
        for value in self.parent:
            result.setdefault(self.find_root(value), []).append(value)
        return result
