"""Dynamic programming problems: antivirus cuts, tilings, common
subsequences, coprime subsets and number triangles."""

from __future__ import annotations

import math
from collections.abc import Collection, Hashable, Iterable, Sequence
from itertools import accumulate, pairwise

POLY_DIVISORS = (2, 3, 7, 11, 19, 23, 37)


def _gap_cost(prefix: list[int], left: int, right: int, count: int) -> int:
    """Cheapest way to take ``count`` cells next to either end of the gap."""
    if count == 0:
        return 0
    return min(
        prefix[left + head] - prefix[left]
        + prefix[right - 1] - prefix[right - 1 - (count - head)]
        for head in range(count + 1)
    )


def antivirus_min_cost(values: Sequence[int], k: int) -> int:
    """Cheapest total of ``k`` cells covering every zero in ``values``.

    Raises ValueError when there is no zero, ``k`` is out of range, or no
    choice is possible.
    """
    n = len(values)
    zeros = [index for index, value in enumerate(values, start=1) if value == 0]
    if not zeros:
        raise ValueError("values must contain at least one zero")
    if not 1 <= k <= n:
        raise ValueError("k must be between 1 and the number of values")
    prefix = list(accumulate(values, initial=0))

    previous = zeros[0]
    row = [math.inf] * (k + 1)
    for taken in range(1, min(previous, k) + 1):
        row[taken] = prefix[previous] - prefix[previous - taken]
    for ordinal, zero in enumerate(zeros[1:], start=1):
        following = [math.inf] * (k + 1)
        for size in range(ordinal + 1, k - len(zeros) + ordinal + 2):
            for before in range(max(1, size - zero + previous), size):
                cost = row[before] + _gap_cost(prefix, previous, zero, size - before - 1)
                following[size] = min(following[size], cost)
        row, previous = following, zero

    last = zeros[-1]
    best = row[k]
    for size in range(len(zeros), k + 1):
        if last + k - size > n:
            continue
        best = min(best, row[size] + prefix[last + k - size] - prefix[last])
    if best == math.inf:
        raise ValueError("no valid choice of cells")
    return int(best)


def _mirror(conf: int) -> int:
    result = 0
    previous = 0
    while conf:
        if conf % 4 == 0 and previous == 0:
            result += 1
        previous = conf % 2
        result *= 2
        conf //= 2
    return result


def _fits(bits: list[int], line: int, cols: int, blocked: set[tuple[int, int]]) -> bool:
    if any(b - a < 2 for a, b in zip([-2, *bits], bits)):
        return False
    if bits[-1] == cols - 1:
        return False
    return not any(
        (row, col) in blocked
        for tile in bits
        for row in (line - 1, line)
        for col in (tile, tile + 1)
    )


def max_tiles(rows: int, cols: int, blocked: Iterable[tuple[int, int]]) -> int:
    """Most 2x2 tiles that fit on a ``rows`` x ``cols`` floor.

    ``blocked`` holds 1-based ``(row, col)`` cells that tiles may not cover.
    """
    if rows < 1 or cols < 1:
        raise ValueError("the floor must have at least one row and column")
    taken: set[tuple[int, int]] = set()
    for row, col in blocked:
        if not (1 <= row <= rows and 1 <= col <= cols):
            raise ValueError(f"cell {(row, col)} is off the floor")
        taken.add((row - 1, col - 1))
    full = 1 << cols
    mirrors = [_mirror(conf) for conf in range(full)]
    previous = [0] * full
    previous_mirrored = [0] * full
    for line in range(1, rows):
        current = [0] * full
        current[0] = max(previous)
        for conf in range(1, full):
            bits = [bit for bit in range(cols) if conf >> bit & 1]
            best = max(current[conf ^ (1 << bit)] for bit in bits)
            if _fits(bits, line, cols, taken):
                best = max(best, previous_mirrored[conf] + len(bits))
            current[conf] = best
        previous_mirrored = [current[m] if m < full else 0 for m in mirrors]
        previous = current
    return max(previous)


def common_subsequence_length(permutations: Sequence[Sequence[Hashable]]) -> int:
    """Length of the longest common subsequence of several permutations."""
    if not permutations:
        raise ValueError("at least one permutation is needed")
    first, *others = permutations
    elements = set(first)
    if len(elements) != len(first):
        raise ValueError("the first sequence repeats an element")
    positions = []
    for other in others:
        if len(other) != len(first) or set(other) != elements:
            raise ValueError("all sequences must be permutations of the same elements")
        positions.append({element: index for index, element in enumerate(other)})
    best: list[int] = []
    for index, element in enumerate(first):
        length = 1
        for earlier, earlier_length in zip(first[:index], best):
            if all(place[earlier] <= place[element] for place in positions):
                length = max(length, earlier_length + 1)
        best.append(length)
    return max(best, default=0)


def max_poly_subset(values: Iterable[int]) -> int:
    """Largest subset where no two values share one of ``POLY_DIVISORS``."""
    masks = 1 << len(POLY_DIVISORS)
    best = [0] * masks
    total = 0
    for value in values:
        conf = sum(
            1 << bit for bit, divisor in enumerate(POLY_DIVISORS) if value % divisor == 0
        )
        if conf == 0:
            total += 1
            best[0] = total
            continue
        best[conf] = max(
            best[conf],
            max(best[other] + 1 for other in range(masks) if not other & conf),
        )
        total = max(total, best[conf])
    return total


def _stack_rows(bottom: Collection[int]) -> list[list[int]]:
    rows = [list(bottom)]
    while len(rows[0]) > 1:
        rows.insert(0, [a + b for a, b in pairwise(rows[0])])
    return rows


def triangle_from_top(n: int, total: int) -> list[list[int]] | None:
    """Build a number triangle of ``n`` rows whose entries sum to ``total``.

    The bottom row holds positive numbers and every other entry is the sum
    of the two below it. Rows are returned top first; None if impossible.
    """
    if n < 1:
        raise ValueError("n must be positive")
    weights = [
        sum(map(sum, _stack_rows([int(i == j) for j in range(n)]))) for i in range(n)
    ]
    spare = total - sum(weights)
    if spare < 0:
        return None
    reachable = [False] * (spare + 1)
    reachable[0] = True
    last_used = [0] * (spare + 1)
    for index in range((n + 1) // 2):
        weight = weights[index]
        for amount in range(weight, spare + 1):
            if reachable[amount - weight]:
                reachable[amount] = True
                last_used[amount] = index
    if not reachable[spare]:
        return None
    extra = [0] * n
    while spare:
        index = last_used[spare]
        extra[index] += 1
        spare -= weights[index]
    return _stack_rows([amount + 1 for amount in extra])