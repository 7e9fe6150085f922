"""Query problems: best ancestor pairs, running medians, nested chains,
triangle counting and pair sums over ranges."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable, Sequence
from math import isqrt


class _AncestorIndex:
    """Binary-lifting tables for lowest common ancestor queries."""

    def __init__(self, root: int, children: dict[int, list[int]]) -> None:
        self.depth: dict[int, int] = {root: 0}
        parent: dict[int, int] = {root: root}
        stack = [root]
        while stack:
            node = stack.pop()
            for child in children[node]:
                if child in self.depth:
                    raise ValueError("the edges do not form a tree")
                self.depth[child] = self.depth[node] + 1
                parent[child] = node
                stack.append(child)
        levels = max(1, max(self.depth.values()).bit_length())
        self._up = [parent]
        for _ in range(1, levels):
            previous = self._up[-1]
            self._up.append({node: previous[previous[node]] for node in previous})

    def lowest_common_ancestor(self, a: int, b: int) -> int:
        for node in (a, b):
            if node not in self.depth:
                raise ValueError(f"node {node} is not in the tree")
        if self.depth[a] < self.depth[b]:
            a, b = b, a
        gap = self.depth[a] - self.depth[b]
        for level, table in enumerate(self._up):
            if gap >> level & 1:
                a = table[a]
        if a == b:
            return a
        for table in reversed(self._up):
            if table[a] != table[b]:
                a, b = table[a], table[b]
        return self._up[0][a]


def best_pair_by_ancestor(
    points: Sequence[int],
    edges: Iterable[tuple[int, int]],
    pairs: Iterable[tuple[int, int]],
) -> tuple[int, int | None, int | None]:
    """Pick the pair whose lowest common ancestor scores the most points.

    Nodes are numbered from 1; ``points[i]`` belongs to node ``i + 1`` and
    each edge is ``(parent, child)``. Ties prefer the lexicographically
    smaller pair. Returns ``(score, first, second)``; the pair is ``None``
    when no pair reached the starting score of 0.
    """
    n = len(points)
    children: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    has_parent: set[int] = set()
    for parent, child in edges:
        if not (1 <= parent <= n and 1 <= child <= n):
            raise ValueError(f"edge {(parent, child)} names an unknown node")
        children[parent].append(child)
        has_parent.add(child)
    root = next((node for node in range(1, n + 1) if node not in has_parent), None)
    if root is None:
        raise ValueError("the tree has no root")
    index = _AncestorIndex(root, children)

    best = 0
    chosen: tuple[int, int] | None = None
    for a, b in pairs:
        score = points[index.lowest_common_ancestor(a, b) - 1]
        if score > best:
            best, chosen = score, (a, b)
        elif score == best and (chosen is None or (a, b) < chosen):
            chosen = (a, b)
    if chosen is None:
        return best, None, None
    return best, chosen[0], chosen[1]


def running_medians(permutation: Sequence[int]) -> list[int]:
    """After each insertion, the ``ceil(i / 2)``-th smallest value so far."""
    if sorted(permutation) != list(range(1, len(permutation) + 1)):
        raise ValueError("expected a permutation of 1..n")
    lower: list[int] = []  # negated: the smaller half, largest on top
    upper: list[int] = []
    medians: list[int] = []
    for count, value in enumerate(permutation, start=1):
        if lower and value <= -lower[0]:
            heapq.heappush(lower, -value)
        else:
            heapq.heappush(upper, value)
        wanted = (count + 1) // 2
        while len(lower) > wanted:
            heapq.heappush(upper, -heapq.heappop(lower))
        while len(lower) < wanted:
            heapq.heappush(lower, -heapq.heappop(upper))
        medians.append(-lower[0])
    return medians


class _PrefixMax:
    """Fenwick tree answering maxima over prefixes."""

    def __init__(self, size: int) -> None:
        self._tree = [0] * (size + 1)

    def update(self, position: int, value: int) -> None:
        while position < len(self._tree):
            self._tree[position] = max(self._tree[position], value)
            position += position & -position

    def query(self, position: int) -> int:
        best = 0
        while position > 0:
            best = max(best, self._tree[position])
            position -= position & -position
        return best


def longest_nested_chain(intervals: Iterable[tuple[int, int]]) -> int:
    """Longest chain of pairs strictly increasing in both coordinates."""
    items = sorted(intervals)
    ranks = {
        right: rank
        for rank, right in enumerate(sorted({right for _, right in items}), start=1)
    }
    tree = _PrefixMax(len(ranks))
    best = 0
    pending: list[tuple[int, int]] = []
    current_left: int | None = None
    for left, right in items:
        if left != current_left:
            for rank, length in pending:
                tree.update(rank, length)
            pending = []
            current_left = left
        length = tree.query(ranks[right] - 1) + 1
        pending.append((ranks[right], length))
        best = max(best, length)
    return best


def count_triangles(lengths: Iterable[int]) -> int:
    """Number of triples of sticks that form a non-degenerate triangle."""
    sticks = sorted(lengths)
    total = 0
    for top in range(2, len(sticks)):
        low, high = 0, top - 1
        while low < high:
            if sticks[low] + sticks[high] > sticks[top]:
                total += high - low
                high -= 1
            else:
                low += 1
    return total


def count_pair_sums(
    values: Sequence[int], target: int, queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each 1-based inclusive range, count index pairs ``i < j`` inside it
    with ``values[i] + values[j] == target``."""
    n = len(values)
    ranges = list(queries)
    for low, high in ranges:
        if not 1 <= low <= high <= n:
            raise ValueError(f"range {(low, high)} is outside 1..{n}")
    if not ranges:
        return []
    block = max(1, isqrt(n))
    order = sorted(
        range(len(ranges)), key=lambda i: (ranges[i][0] // block, ranges[i][1])
    )
    seen: Counter[int] = Counter()
    pairs = 0
    left, right = 1, 0
    answers = [0] * len(ranges)
    for query in order:
        low, high = ranges[query]
        while left > low:
            left -= 1
            value = values[left - 1]
            pairs += seen[target - value]
            seen[value] += 1
        while right < high:
            right += 1
            value = values[right - 1]
            pairs += seen[target - value]
            seen[value] += 1
        while left < low:
            value = values[left - 1]
            seen[value] -= 1
            pairs -= seen[target - value]
            left += 1
        while right > high:
            value = values[right - 1]
            seen[value] -= 1
            pairs -= seen[target - value]
            right -= 1
        answers[query] = pairs
    return answers