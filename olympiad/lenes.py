"""The lazy walker problem: cheapest routes down one or two grid columns."""

from __future__ import annotations

import heapq
from collections.abc import Iterator, Sequence
from itertools import chain


def _columns(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("the grid must have at least one row and one column")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    if width < 2:
        raise ValueError("the grid must have at least two columns")
    return [sorted(column) for column in zip(*rows)]


def _check_k(k: int, height: int, name: str) -> None:
    if not 0 <= k <= height:
        raise ValueError(f"{name} must be between 0 and the number of rows")


def _neighbour_cost(columns: list[list[int]], index: int, k: int) -> int:
    """Sum of the ``k`` cheapest cells in the columns beside ``index``."""
    beside = (columns[c] for c in (index - 1, index + 1) if 0 <= c < len(columns))
    return sum(heapq.nsmallest(k, chain.from_iterable(beside)))


def _side_cost(columns: list[list[int]], index: int, k: int) -> int:
    if 0 <= index < len(columns):
        return sum(columns[index][:k])
    return 0


def _shared_cost(
    columns: list[list[int]], limits: Sequence[tuple[int, int]], needed: int
) -> int | None:
    """Cheapest ``needed`` cells, taking at most ``cap`` from each listed column."""
    pool = [
        value
        for index, cap in limits
        if 0 <= index < len(columns)
        for value in columns[index][:cap]
    ]
    if len(pool) < needed:
        return None
    return sum(heapq.nsmallest(needed, pool))


def _two_route_costs(
    columns: list[list[int]], totals: list[int], k1: int, k2: int
) -> Iterator[int]:
    width = len(columns)
    height = len(columns[0])
    near1 = [_neighbour_cost(columns, i, k1) for i in range(width)]
    near2 = [_neighbour_cost(columns, i, k2) for i in range(width)]
    last = width - 1
    for i in range(width):
        for j in range(width):
            base = totals[i] + totals[j]
            if abs(i - j) >= 3:
                yield base + near1[i] + near2[j]
            elif j == i + 2:
                shared = _shared_cost(
                    columns, ((i - 1, k1), (i + 1, height), (j + 1, k2)), k1 + k2
                )
                if shared is not None:
                    yield base + shared
            elif i == j + 2:
                shared = _shared_cost(
                    columns, ((j - 1, k2), (j + 1, height), (i + 1, k1)), k1 + k2
                )
                if shared is not None:
                    yield base + shared
            elif j == i + 1:
                if (i == 0 and k1 > 0) or (j == last and k2 > 0):
                    continue
                yield base + _side_cost(columns, i - 1, k1) + _side_cost(columns, j + 1, k2)
            elif i == j + 1:
                if (i == last and k1 > 0) or (j == 0 and k2 > 0):
                    continue
                yield base + _side_cost(columns, i + 1, k1) + _side_cost(columns, j - 1, k2)


def lazy_route_cost(
    variant: int, grid: Sequence[Sequence[int]], k1: int, k2: int
) -> int:
    """Smallest effort for the lazy walker on ``grid`` (given row by row).

    Variant 1 walks one whole column and also pays ``k1`` cells from the
    columns beside it. Variant 2 walks two distinct columns, paying ``k1``
    and ``k2`` neighbouring cells for them. Raises ValueError when the input
    is malformed or no placement is possible.
    """
    if variant not in (1, 2):
        raise ValueError("variant must be 1 or 2")
    columns = _columns(grid)
    height = len(columns[0])
    totals = [sum(column) for column in columns]
    _check_k(k1, height, "k1")
    if variant == 1:
        return min(
            total + _neighbour_cost(columns, index, k1)
            for index, total in enumerate(totals)
        )
    _check_k(k2, height, "k2")
    best = min(_two_route_costs(columns, totals, k1, k2), default=None)
    if best is None:
        raise ValueError("no placement of the two routes is possible")
    return best