"""Array problems: range counting, majority, windows, segments and partitions."""

from __future__ import annotations

import heapq
from bisect import bisect_left, bisect_right
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def count_distinct_in_ranges(
    values: Iterable[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """For each ``(low, high)`` count the distinct values lying in ``[low, high]``."""
    present = sorted(set(values))
    return [bisect_right(present, high) - bisect_left(present, low) for low, high in queries]


def majority_element(values: Sequence[int]) -> tuple[int, int] | None:
    """Return the voting candidate and how many times it occurs.

    The candidate is the true majority element whenever one exists.
    Returns None for an empty sequence.
    """
    if not values:
        return None
    candidate, balance = -1, 0
    for value in values:
        balance = balance + 1 if value == candidate else balance - 1
        if balance <= 0:
            candidate, balance = value, 1
    return candidate, sum(1 for value in values if value == candidate)


def shortest_window(values: Sequence[int], k: int) -> int:
    """Length of the shortest contiguous block whose removal leaves every
    value at most ``k`` times; 0 if nothing needs removing."""
    if k < 1:
        raise ValueError("k must be positive")
    outside = Counter(values)
    pending = sum(1 for count in outside.values() if count > k)
    if pending == 0:
        return 0
    best = len(values) + 1
    left = 0
    for right, value in enumerate(values):
        outside[value] -= 1
        if outside[value] == k:
            pending -= 1
        while left < right and outside[values[left]] < k:
            outside[values[left]] += 1
            left += 1
        if pending == 0:
            best = min(best, right - left + 1)
    return best


def extract_minimum_segments(values: Sequence[int]) -> list[tuple[int, int, int]]:
    """Repeatedly remove the minimum-sum contiguous segment.

    Each step yields ``(sum, first, last)`` with 1-based original positions
    of the segment's ends; ties prefer the shorter, then the earlier segment.
    """
    remaining = list(enumerate(values, start=1))
    steps: list[tuple[int, int, int]] = []
    while remaining:
        best_sum: int | None = None
        best_left = best_right = 0
        running: int | None = None
        start = 0
        for index, (_, value) in enumerate(remaining):
            if running is None or running >= 0:
                running, start = value, index
            else:
                running += value
            if best_sum is None or running < best_sum:
                best_sum, best_left, best_right = running, start, index
            elif running == best_sum and best_right - best_left > index - start:
                best_left, best_right = start, index
        assert best_sum is not None
        steps.append((best_sum, remaining[best_left][0], remaining[best_right][0]))
        remaining = remaining[:best_left] + remaining[best_right + 1 :]
    return steps


def minmax_sums(values: Sequence[int]) -> list[int]:
    """Running totals of pairing largest with smallest, then dropping the
    smallest differences one by one."""
    ordered = sorted(values)
    left, right = 0, len(ordered) - 1
    heap: list[int] = []
    total = 0
    sums: list[int] = []
    for _ in ordered:
        if left <= right:
            gap = ordered[right] - ordered[left]
            if left != right:
                heapq.heappush(heap, gap)
            total += gap
            left += 1
            right -= 1
        else:
            total -= heapq.heappop(heap)
        sums.append(total)
    return sums


def min_partition_max_sum(values: Sequence[int], k: int) -> int:
    """Split ``values`` into ``k`` non-empty contiguous parts minimising the
    sum of the parts' maxima."""
    n = len(values)
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and the number of values")
    v = [0, *values]
    previous = list(accumulate(values, max, initial=0))
    for parts in range(2, k + 1):
        current = [0] * (n + 1)
        stack: list[tuple[int, int]] = []
        for i in range(parts, n + 1):
            best = previous[i - 1]
            while stack and v[i] >= v[stack[-1][0]]:
                best = min(best, stack.pop()[1])
            current[i] = best + v[i]
            if stack:
                current[i] = min(current[i], current[stack[-1][0]])
            stack.append((i, best))
        previous = current
    return previous[n]


def book_chapters(order: Sequence[int]) -> tuple[int, int, int]:
    """Read pages 1..n in order, restarting the scan when the next page lies
    earlier in ``order``.

    Returns the number of passes, the pass that read the most pages and how
    many pages it read.
    """
    n = len(order)
    if n == 0 or sorted(order) != list(range(1, n + 1)):
        raise ValueError("order must be a permutation of 1..n")
    position = {page: index for index, page in enumerate(order, start=1)}
    passes, run = 1, 1
    longest, longest_pass = 1, 1
    for page in range(2, n + 1):
        if position[page] < position[page - 1]:
            passes += 1
            run = 0
        run += 1
        if longest < run:
            longest, longest_pass = run, passes
    return passes, longest_pass, longest


def _median_distance(coordinates: list[int]) -> int:
    if not coordinates:
        return 0
    coordinates.sort()
    median = coordinates[(len(coordinates) - 1) // 2]
    return sum(abs(c - median) for c in coordinates)


def min_gathering_distance(points: Iterable[tuple[int, int]]) -> int:
    """Smallest total Manhattan distance from all points to one meeting point."""
    pts = list(points)
    return _median_distance([x for x, _ in pts]) + _median_distance([y for _, y in pts])