import itertools

import pytest

from olympiad.queries import (
    best_pair_by_ancestor,
    count_pair_sums,
    count_triangles,
    longest_nested_chain,
    running_medians,
)


def test_best_pair_uses_lowest_common_ancestor_score():
    points = [5, 3, 4]
    edges = [(1, 2), (1, 3)]
    assert best_pair_by_ancestor(points, edges, [(2, 3)]) == (5, 2, 3)
    assert best_pair_by_ancestor(points, edges, [(2, 2)]) == (3, 2, 2)


def test_best_pair_prefers_higher_score():
    points = [1, 9, 4]
    edges = [(1, 2), (1, 3)]
    assert best_pair_by_ancestor(points, edges, [(2, 3), (2, 2), (3, 3)]) == (9, 2, 2)


def test_best_pair_breaks_ties_lexicographically():
    points = [7, 7, 7, 7]
    edges = [(1, 2), (2, 3), (2, 4)]
    result = best_pair_by_ancestor(points, edges, [(4, 3), (3, 4), (3, 2)])
    assert result == (7, 3, 2)


def test_best_pair_deep_chain():
    n = 20
    points = list(range(1, n + 1))
    edges = [(i, i + 1) for i in range(1, n)]
    assert best_pair_by_ancestor(points, edges, [(20, 15), (17, 18)]) == (17, 17, 18)


def test_best_pair_without_pairs():
    assert best_pair_by_ancestor([1, 2], [(1, 2)], []) == (0, None, None)


def test_best_pair_rejects_cycle_without_root():
    with pytest.raises(ValueError):
        best_pair_by_ancestor([1, 2], [(1, 2), (2, 1)], [(1, 2)])


def test_best_pair_rejects_unknown_node():
    with pytest.raises(ValueError):
        best_pair_by_ancestor([1, 2], [(1, 5)], [(1, 2)])


def test_running_medians_small():
    assert running_medians([3, 1, 2]) == [3, 1, 2]


def test_running_medians_each_value_is_from_prefix():
    permutation = [5, 2, 7, 1, 3, 6, 4]
    medians = running_medians(permutation)
    assert len(medians) == len(permutation)
    for count, median in enumerate(medians, start=1):
        assert median in permutation[:count]


def test_running_medians_final_is_lower_middle():
    permutation = [4, 6, 1, 5, 3, 2]
    assert running_medians(permutation)[-1] == 3


def test_running_medians_rejects_non_permutation():
    with pytest.raises(ValueError):
        running_medians([1, 1, 2])


def test_nested_chain_strict_increase():
    assert longest_nested_chain([(1, 1), (2, 2), (3, 3)]) == 3


def test_nested_chain_same_left_does_not_chain():
    assert longest_nested_chain([(1, 3), (1, 2)]) == 1


def test_nested_chain_empty():
    assert longest_nested_chain([]) == 0


def test_nested_chain_order_independent():
    intervals = [(3, 1), (1, 2), (2, 5), (4, 6), (2, 3), (5, 4)]
    expected = longest_nested_chain(intervals)
    assert longest_nested_chain(reversed(intervals)) == expected
    assert 1 <= expected <= len(intervals)


def test_count_triangles_basic():
    assert count_triangles([2, 3, 4]) == 1
    assert count_triangles([1, 2, 3]) == 0


def test_count_triangles_equal_sticks():
    assert count_triangles([3, 3, 3, 3]) == len(list(itertools.combinations(range(4), 3)))


def test_count_triangles_order_independent():
    sticks = [7, 2, 9, 4, 4, 10, 3]
    assert count_triangles(sticks) == count_triangles(sorted(sticks, reverse=True))


def test_count_pair_sums_basic():
    values = [1, 2, 3, 4]
    assert count_pair_sums(values, 5, [(1, 4), (2, 3), (1, 1)]) == [2, 1, 0]


def test_count_pair_sums_equal_halves():
    assert count_pair_sums([2, 2, 2], 4, [(1, 3), (1, 2)]) == [3, 1]


def test_count_pair_sums_query_order_irrelevant():
    values = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3]
    queries = [(1, 10), (3, 7), (2, 2), (5, 10), (1, 4)]
    forward = count_pair_sums(values, 6, queries)
    backward = count_pair_sums(values, 6, list(reversed(queries)))
    assert forward == list(reversed(backward))


def test_count_pair_sums_no_queries():
    assert count_pair_sums([1, 2], 3, []) == []


def test_count_pair_sums_rejects_bad_range():
    with pytest.raises(ValueError):
        count_pair_sums([1, 2], 3, [(2, 3)])