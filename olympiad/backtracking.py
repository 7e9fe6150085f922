"""Construction and search problems: balanced matrices, set partitions, queens."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice

SHOWN_SOLUTIONS = 3


def balanced_matrix(n: int, m: int, x: int, y: int) -> list[list[int]] | None:
    """An ``n`` x ``m`` 0/1 matrix with ``x`` ones per row and ``y`` per column.

    Returns None when ``n * x != m * y``.
    """
    if n < 0 or m < 1 or x < 0:
        raise ValueError("invalid matrix dimensions")
    if n * x != m * y:
        return None
    matrix = []
    start = 0
    for _ in range(n):
        row = [0] * m
        for offset in range(x):
            row[(start + offset) % m] = 1
        matrix.append(row)
        start = (start + x) % m
    return matrix


def set_partitions(n: int) -> Iterator[list[list[int]]]:
    """Yield every partition of ``{1..n}`` into blocks.

    Each element first joins the existing blocks in order, then opens a new one.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    blocks: list[list[int]] = []

    def place(element: int) -> Iterator[list[list[int]]]:
        if element > n:
            yield [list(block) for block in blocks]
            return
        for block in blocks[:]:
            block.append(element)
            yield from place(element + 1)
            block.pop()
        blocks.append([element])
        yield from place(element + 1)
        blocks.pop()

    yield from place(1)


def _placements(n: int) -> Iterator[tuple[int, ...]]:
    """Queen placements in lexicographic order, as 1-based columns per row."""
    columns: list[int] = []
    used: set[int] = set()
    falling: set[int] = set()
    rising: set[int] = set()

    def search(row: int) -> Iterator[tuple[int, ...]]:
        if row == n:
            yield tuple(columns)
            return
        for column in range(1, n + 1):
            if column in used or column - row in falling or column + row in rising:
                continue
            columns.append(column)
            used.add(column)
            falling.add(column - row)
            rising.add(column + row)
            yield from search(row + 1)
            columns.pop()
            used.discard(column)
            falling.discard(column - row)
            rising.discard(column + row)

    yield from search(0)


def _count_from(full: int, cols: int, left: int, right: int) -> int:
    if cols == full:
        return 1
    total = 0
    free = full & ~(cols | left | right)
    while free:
        bit = free & -free
        free ^= bit
        total += _count_from(full, cols | bit, ((left | bit) << 1) & full, (right | bit) >> 1)
    return total


def n_queens(n: int) -> tuple[list[tuple[int, ...]], int]:
    """Solve the ``n`` queens puzzle.

    Returns the first ``SHOWN_SOLUTIONS`` placements in lexicographic order
    and the total number of placements.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return [], 0
    full = (1 << n) - 1

    def count_first(bit: int) -> int:
        return _count_from(full, bit, (bit << 1) & full, bit >> 1)

    total = 2 * sum(count_first(1 << column) for column in range(n // 2))
    if n % 2:
        total += count_first(1 << (n // 2))
    return list(islice(_placements(n), SHOWN_SOLUTIONS)), total


def count_queen_dead_ends(n: int) -> int:
    """Number of partial placements in the queens search with no way forward."""
    if n < 0:
        raise ValueError("n must not be negative")
    full = (1 << n) - 1

    def search(cols: int, left: int, right: int) -> int:
        if cols == full:
            return 0
        free = full & ~(cols | left | right)
        if not free:
            return 1
        total = 0
        while free:
            bit = free & -free
            free ^= bit
            total += search(cols | bit, ((left | bit) << 1) & full, (right | bit) >> 1)
        return total

    return search(0, 0, 0)