"""Counting problems: inversions, separated signs and zero runs in digit strings."""

from __future__ import annotations

from itertools import groupby, product


def count_permutations_with_inversions(n: int, k: int) -> int:
    """Number of permutations of ``n`` elements with exactly ``k`` inversions."""
    if n < 0:
        raise ValueError("n must not be negative")
    row = [1]
    for size in range(2, n + 1):
        row = [
            sum(row[max(0, inversions - size + 1) : inversions + 1])
            for inversions in range(len(row) + size - 1)
        ]
    if not 0 <= k < len(row):
        return 0
    return row[k]


def count_sign_sequences(x: int, y: int) -> int:
    """Number of rows of ``x`` pluses and ``y`` minuses with no two minuses adjacent."""
    if x < 0 or y < 0:
        raise ValueError("counts must not be negative")
    if y == 0:
        return 0
    if y == 1:
        return x + 1
    total = 0
    older = [0] * (y + 1)
    previous = [0] * (y + 1)
    for n in range(1, x + y + 1):
        current = [0] * (y + 1)
        current[1] = 1 + previous[1]
        for column in range(2, min(n, y) + 1):
            current[column] = previous[column] + older[column - 1]
        if n >= y:
            total += older[y - 1]
        older, previous = previous, current
    return total


def _count_bounded_runs(length: int, base: int, limit: int) -> int:
    """Strings of ``length`` base-``base`` digits, no leading zero, zero runs <= ``limit``."""
    if limit < 0:
        return 0
    # runs[r]: strings whose trailing block of zeros has length r
    runs = [base - 1] + [0] * limit
    for _ in range(length - 1):
        runs = [sum(runs) * (base - 1)] + runs[:-1]
    return sum(runs)


def _validate(length: int, base: int) -> None:
    if length < 1:
        raise ValueError("length must be positive")
    if base < 1:
        raise ValueError("base must be positive")


def count_digit_strings(length: int, base: int, p: int, q: int) -> tuple[int, int]:
    """Count numbers of ``length`` digits in ``base`` by their longest run of zeros.

    Returns how many have no run longer than ``p`` and how many have a run
    of at least ``q``.
    """
    _validate(length, base)
    total = (base - 1) * base ** (length - 1)
    at_most_p = _count_bounded_runs(length, base, p)
    at_least_q = total - _count_bounded_runs(length, base, q - 1)
    return at_most_p, at_least_q


def _longest_zero_run(digits: tuple[int, ...]) -> int:
    return max((len(list(block)) for digit, block in groupby(digits) if digit == 0), default=0)


def brute_force_digit_strings(length: int, base: int, p: int, q: int) -> tuple[int, int]:
    """Same counts as :func:`count_digit_strings`, by listing every number."""
    _validate(length, base)
    at_most_p = at_least_q = 0
    for first in range(1, base):
        for rest in product(range(base), repeat=length - 1):
            longest = _longest_zero_run((first, *rest))
            if longest <= p:
                at_most_p += 1
            if longest >= q:
                at_least_q += 1
    return at_most_p, at_least_q