"""
Disjoint-set (union-find) over hashable items.

Used to represent sets of interchangeable controllers: controllers that
are considered substitutes for one another for authority purposes.
See https://en.wikipedia.org/wiki/Disjoint-set_data_structure
"""

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

from .identifiers import Controller

T = TypeVar("T", bound=Hashable)


class DisjointSet(Generic[T]):
    """
    Union-find with path compression and union by rank.

    Items keep their insertion order, so roots() and groups() are
    reproducible for the same sequence of add/union calls.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._parent: Dict[T, T] = {}
        self._rank: Dict[T, int] = {}
        for item in items:
            self.add(item)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, item: object) -> bool:
        return item in self._parent

    def has(self, item: T) -> bool:
        """Is the item in any of the sets?"""
        return item in self._parent

    def add(self, item: T) -> None:
        """Add the item as a singleton set. No-op if already present."""
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0

    def find(self, item: T) -> T:
        """
        Root of the set containing the item.

        An item that was never added is its own root; it is not inserted.
        """
        if item not in self._parent:
            return item

        root = item
        while self._parent[root] != root:
            root = self._parent[root]

        # path compression
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]

        return root

    def union(self, a: T, b: T) -> T:
        """
        Merge the sets containing a and b, adding either if missing.

        Returns the root of the merged set.
        """
        self.add(a)
        self.add(b)
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return root_a

        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return root_a

    merge = union

    def connected(self, a: T, b: T) -> bool:
        return self.find(a) == self.find(b)

    def roots(self) -> List[T]:
        return [item for item in self._parent if self.find(item) == item]

    def groups(self) -> List[List[T]]:
        """All sets, ordered by the first-added member of each set."""
        grouped: Dict[T, List[T]] = {}
        for item in self._parent:
            grouped.setdefault(self.find(item), []).append(item)
        return list(grouped.values())


InterchangeableControllers = DisjointSet[Controller]
