import random
from itertools import product

import pytest

from olympiad.unionfind import DisjointSet, group_children, largest_component_sizes


def _largest_by_search(n, present):
    seen = set()
    best = 0
    for start in present:
        if start in seen:
            continue
        seen.add(start)
        stack = [start]
        size = 0
        while stack:
            row, col = stack.pop()
            size += 1
            for dr, dc in ((0, 1), (1, 0), (0, -1), (-1, 0)):
                nxt = (row + dr, col + dc)
                if nxt in present and nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        best = max(best, size)
    return best


def test_new_items_are_their_own_roots():
    ds = DisjointSet()
    ds.add("a")
    ds.add("b")
    assert ds.find("a") == "a"
    assert ds.size("b") == 1
    assert len(ds) == 2


def test_union_merges_and_counts():
    ds = DisjointSet()
    for item in range(5):
        ds.add(item)
    ds.union(0, 1)
    ds.union(2, 3)
    root = ds.union(1, 3)
    assert ds.find(0) == ds.find(2) == root
    assert ds.size(3) == 4
    assert ds.size(4) == 1


def test_union_same_component_is_stable():
    ds = DisjointSet()
    ds.add(1)
    ds.add(2)
    first = ds.union(1, 2)
    assert ds.union(2, 1) == first
    assert ds.size(1) == 2


def test_add_twice_keeps_component():
    ds = DisjointSet()
    ds.add(1)
    ds.add(2)
    ds.union(1, 2)
    ds.add(1)
    assert ds.size(2) == 2


def test_find_unknown_raises():
    with pytest.raises(KeyError):
        DisjointSet().find("missing")


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_largest_components_match_search(n):
    cells = list(product(range(1, n + 1), repeat=2))
    random.Random(n).shuffle(cells)
    result = largest_component_sizes(n, cells)
    assert len(result) == n * n
    for index in range(len(cells)):
        remaining = set(cells[index + 1 :])
        assert result[index] == _largest_by_search(n, remaining)


def test_largest_components_nonincreasing_and_end_empty():
    n = 4
    cells = list(product(range(1, n + 1), repeat=2))
    random.Random(7).shuffle(cells)
    result = largest_component_sizes(n, cells)
    assert result == sorted(result, reverse=True)
    assert result[-1] == 0
    assert result[0] == _largest_by_search(n, set(cells[1:]))


def test_largest_components_rejects_off_board():
    with pytest.raises(ValueError):
        largest_component_sizes(2, [(3, 1)])


def test_group_children_example():
    assert group_children([[1, 2], [3, 4], [2, 3], [5, 6]]) == [[1, 2, 3], [4]]


def test_group_children_partition():
    prefs = [[1, 2], [7, 8], [2, 9], [10, 8], [11, 12]]
    groups = group_children(prefs)
    members = sorted(child for group in groups for child in group)
    assert members == list(range(1, len(prefs) + 1))
    assert [group[0] for group in groups] == sorted(group[0] for group in groups)
    assert all(group == sorted(group) for group in groups)


def test_group_children_empty_preferences_rejected():
    with pytest.raises(ValueError):
        group_children([[1], []])