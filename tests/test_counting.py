import math
from itertools import combinations, permutations

import pytest

from olympiad.counting import (
    brute_force_digit_strings,
    count_digit_strings,
    count_permutations_with_inversions,
    count_sign_sequences,
)


def _inversions(perm):
    return sum(1 for a, b in combinations(perm, 2) if a > b)


@pytest.mark.parametrize("n", range(1, 7))
def test_inversions_match_enumeration(n):
    counts = [_inversions(p) for p in permutations(range(n))]
    top = n * (n - 1) // 2
    for k in range(top + 1):
        assert count_permutations_with_inversions(n, k) == counts.count(k)


def test_inversions_small_row():
    assert [count_permutations_with_inversions(3, k) for k in range(4)] == [1, 2, 2, 1]


@pytest.mark.parametrize("n", [5, 9, 12])
def test_inversions_sum_to_factorial_and_symmetric(n):
    top = n * (n - 1) // 2
    row = [count_permutations_with_inversions(n, k) for k in range(top + 1)]
    assert sum(row) == math.factorial(n)
    assert row == row[::-1]


def test_inversions_out_of_range_is_zero():
    assert count_permutations_with_inversions(4, 7) == 0
    assert count_permutations_with_inversions(4, -1) == 0


def test_inversions_large_values_are_exact():
    n = 45
    top = n * (n - 1) // 2
    assert count_permutations_with_inversions(n, top) == 1
    assert count_permutations_with_inversions(n, 1) == n - 1


def test_inversions_negative_n_rejected():
    with pytest.raises(ValueError):
        count_permutations_with_inversions(-1, 0)


@pytest.mark.parametrize("x", range(0, 9))
def test_sign_sequences_single_minus(x):
    assert count_sign_sequences(x, 1) == x + 1


@pytest.mark.parametrize("x", range(0, 9))
@pytest.mark.parametrize("y", range(2, 7))
def test_sign_sequences_match_binomial(x, y):
    assert count_sign_sequences(x, y) == math.comb(x + 1, y)


def test_sign_sequences_nondecreasing_in_x():
    values = [count_sign_sequences(x, 4) for x in range(12)]
    assert values == sorted(values)


def test_sign_sequences_negative_rejected():
    with pytest.raises(ValueError):
        count_sign_sequences(-1, 2)


@pytest.mark.parametrize("length", range(1, 6))
@pytest.mark.parametrize("base", [2, 3, 4])
def test_digit_strings_match_brute_force(length, base):
    for p in range(length + 1):
        for q in range(length + 2):
            assert count_digit_strings(length, base, p, q) == brute_force_digit_strings(
                length, base, p, q
            )


def test_digit_strings_complementary():
    length, base, p = 7, 5, 2
    at_most, at_least = count_digit_strings(length, base, p, p + 1)
    assert at_most + at_least == (base - 1) * base ** (length - 1)


def test_digit_strings_large_length_runs():
    at_most, at_least = count_digit_strings(20, 10, 19, 0)
    assert at_most == 9 * 10**19
    assert at_least == 9 * 10**19


def test_digit_strings_invalid_length():
    with pytest.raises(ValueError):
        count_digit_strings(0, 10, 1, 1)
    with pytest.raises(ValueError):
        brute_force_digit_strings(0, 10, 1, 1)