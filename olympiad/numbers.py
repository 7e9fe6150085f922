"""Number problems: closed-form sums, Euclid steps, divisor chains, decimals."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Iterable, Sequence

UNREACHABLE = 10**9
CHAIN_MODULUS = 10_000


def square_sum_excess(n: int, p: int) -> int:
    """``(1^2 + ... + n^2) - (1 + ... + n)`` modulo ``p``."""
    squares = n * (n + 1) * (2 * n + 1) // 6
    plain = n * (n + 1) // 2
    return (squares - plain) % p


def _euclid_steps(a: int, b: int) -> int:
    total = 0
    while True:
        if a > b:
            a, b = b, a
        if a == 1:
            return total + b - a
        if b == 1:
            return total
        if a == 0:
            return total + UNREACHABLE
        total += b // a
        b %= a


def min_transformations(n: int) -> int:
    """Fewest subtraction steps to reach ``(1, 1)`` from some pair ``(i, n)``.

    Returns ``UNREACHABLE`` when there is no ``i`` in ``1..n-1``.
    """
    return min((_euclid_steps(i, n) for i in range(1, n)), default=UNREACHABLE)


def _divisors(n: int) -> list[int]:
    small = [i for i in range(1, math.isqrt(n) + 1) if n % i == 0]
    return sorted(set(small) | {n // d for d in small})


def count_divisor_chains(n: int, k: int) -> int:
    """Number of ``k``-tuples whose least common multiple is ``n``, mod 10000."""
    if n < 1:
        raise ValueError("n must be positive")
    divisors = _divisors(n)
    depth: defaultdict[int, int] = defaultdict(int)
    exact: defaultdict[int, int] = defaultdict(int)
    below: defaultdict[int, int] = defaultdict(int)
    depth[n] = len(divisors)
    exact[1] = 1
    below[1] = 1
    depth[1] = 1
    for index, x in enumerate(divisors[1:], start=1):
        for y in reversed(divisors[:index]):
            if x % y:
                continue
            depth[x] = depth[y] + 1
            quotient = x // y
            rest = below[y] + exact[quotient] if y % quotient else below[y]
            rest %= CHAIN_MODULUS
            exact[x] = (pow(depth[x], k, CHAIN_MODULUS) - rest) % CHAIN_MODULUS
            below[x] = (exact[x] + rest) % CHAIN_MODULUS
    return exact[n]


def _power_of(value: int, base: int) -> int:
    count = 0
    while value % base == 0:
        count += 1
        value //= base
    return count


def decimal_expansion(a: int, b: int) -> str:
    """Write the proper fraction ``a / b`` as ``0.<digits>(<period>)``."""
    if not 0 < a < b:
        raise ValueError("expected 0 < a < b")
    lead = max(_power_of(b, 2) - _power_of(a, 2), _power_of(b, 5) - _power_of(a, 5), 0)
    digits = []
    for _ in range(lead):
        digits.append(str(a * 10 // b))
        a = a * 10 % b
    text = "0." + "".join(digits)
    if a == 0:
        return text
    start = a
    period = []
    while True:
        period.append(str(a * 10 // b))
        a = a * 10 % b
        if a == start:
            break
    return f"{text}({''.join(period)})"


def _is_prime(value: int) -> bool:
    if value < 2:
        return False
    return all(value % d for d in range(2, math.isqrt(value) + 1))


def count_three_divisor_numbers(values: Iterable[int]) -> int:
    """Count values with exactly three divisors, i.e. squares of primes."""
    total = 0
    for value in values:
        if value <= 0:
            continue
        root = math.isqrt(value)
        if root * root == value and _is_prime(root):
            total += 1
    return total


def _parse_reading(reading: str, scale: int) -> int:
    whole, _, fraction = reading.strip().partition(".")
    return int(whole) * scale + int(fraction or 0)


def rounded_averages_consistent(decimals: int, readings: Sequence[str]) -> bool:
    """Check whether successive rounded running averages could all be genuine.

    Each reading is a decimal string with ``decimals`` digits after the point.
    """
    scale = 10**decimals
    values = [_parse_reading(reading, scale) for reading in readings]
    for position, (previous, current) in enumerate(zip(values, values[1:]), start=2):
        if (previous + 1) * (position - 1) + 5 * scale <= current * position:
            return False
        if previous * (position - 1) + scale >= current * position + 1:
            return False
    return True