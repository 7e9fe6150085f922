"""Disjoint sets, with the ball-removal and flower-grouping problems built on them."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))


class DisjointSet:
    """Union-find over arbitrary hashable items, with component sizes."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}

    def __contains__(self, item: Hashable) -> bool:
        return item in self._parent

    def __len__(self) -> int:
        return len(self._parent)

    def add(self, item: Hashable) -> None:
        """Add ``item`` as its own component; nothing happens if it is present."""
        if item not in self._parent:
            self._parent[item] = item
            self._size[item] = 1

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of ``item``'s component."""
        if item not in self._parent:
            raise KeyError(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while item != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> Hashable:
        """Join the components of ``a`` and ``b``; return the new representative."""
        a, b = self.find(a), self.find(b)
        if a == b:
            return a
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size.pop(b)
        return a

    def size(self, item: Hashable) -> int:
        """Number of items in ``item``'s component."""
        return self._size[self.find(item)]


def largest_component_sizes(n: int, cells: Sequence[tuple[int, int]]) -> list[int]:
    """Remove the cells of an ``n`` x ``n`` board in the given order.

    Cells are 1-based ``(row, col)`` pairs. Entry ``i`` of the result is the
    size of the largest 4-connected group left after the first ``i + 1``
    removals.
    """
    for row, col in cells:
        if not (1 <= row <= n and 1 <= col <= n):
            raise ValueError(f"cell {(row, col)} is off the board")
    board = DisjointSet()
    largest = 0
    sizes: list[int] = []
    for cell in reversed(cells):
        sizes.append(largest)
        board.add(cell)
        largest = max(largest, 1)
        row, col = cell
        for dr, dc in _STEPS:
            neighbour = (row + dr, col + dc)
            if neighbour in board:
                largest = max(largest, board.size(board.union(neighbour, cell)))
    sizes.reverse()
    return sizes


def group_children(preferences: Sequence[Sequence[int]]) -> list[list[int]]:
    """Group children that are linked through shared flower preferences.

    Children are numbered from 1. Groups come in order of their lowest
    member, and list their members in increasing order.
    """
    flowers = DisjointSet()
    for child, liked in enumerate(preferences, start=1):
        if not liked:
            raise ValueError(f"child {child} has no flowers")
        first, *rest = liked
        flowers.add(first)
        for flower in rest:
            flowers.add(flower)
            flowers.union(first, flower)
    groups: dict[Hashable, list[int]] = {}
    for child, liked in enumerate(preferences, start=1):
        groups.setdefault(flowers.find(liked[0]), []).append(child)
    return list(groups.values())