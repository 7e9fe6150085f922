"""Geometry problems: polygon area and the lowest of many lines over time."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from itertools import pairwise
from typing import NamedTuple


def polygon_area(points: Sequence[tuple[int, int]]) -> float:
    """Area of a simple polygon given by its vertices in order."""
    if not points:
        return 0.0
    twice = sum(
        x1 * y2 - x2 * y1
        for (x1, y1), (x2, y2) in zip(points, [*points[1:], points[0]])
    )
    return abs(twice * 0.5)


class _Line(NamedTuple):
    slope: int
    intercept: int
    index: int


def _overtake_time(earlier: _Line, later: _Line) -> int:
    """First integer time at which ``later`` is strictly below ``earlier``."""
    return (later.intercept - earlier.intercept) // (earlier.slope - later.slope) + 1


def minimal_line_indices(
    lines: Iterable[tuple[int, int]], times: Iterable[int]
) -> list[int]:
    """For each time ``t >= 0``, the 1-based index of a line ``a * t + b``
    of smallest value; on ties the line that was lowest earlier wins."""
    ordered = sorted(
        (_Line(a, b, index) for index, (a, b) in enumerate(lines, start=1)),
        key=lambda line: (line.intercept, line.slope, line.index),
    )
    if not ordered:
        raise ValueError("at least one line is needed")

    useful: list[_Line] = []
    last_intercept = -math.inf
    last_slope = math.inf
    for line in ordered:
        if line.intercept > last_intercept and line.slope < last_slope:
            useful.append(line)
            last_intercept, last_slope = line.intercept, line.slope

    hull: list[_Line] = []
    for line in useful:
        while len(hull) >= 2 and _overtake_time(hull[-1], line) <= _overtake_time(
            hull[-2], hull[-1]
        ):
            hull.pop()
        hull.append(line)

    starts = [0, *(_overtake_time(a, b) for a, b in pairwise(hull))]
    answers = []
    for time in times:
        if time < 0:
            raise ValueError("times must not be negative")
        answers.append(hull[bisect_right(starts, time) - 1].index)
    return answers