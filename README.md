# olympiad

A library of solutions to programming-olympiad problems: string matching,
array queries, number theory, combinatorial counting, union-find, range
queries, dynamic programming, geometry and backtracking. Every solver is a
plain function that takes Python values and returns Python values. Bad input
is reported with `ValueError` (or `KeyError` for unknown union-find items).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `olympiad.strings`
  - `count_occurrences(text, words)`: overlapping occurrences of each word
    (words longer than 20 characters, and the empty word, count zero).
  - `same_letter_profile(a, b)`: whether two lowercase words have the same
    sorted letter frequencies.
  - `count_palindromes(s)`: number of palindromic substrings by position.
  - `find_occurrences(pattern, text, limit=1000)`: total match count and the
    zero-based start positions of the first `limit` matches.
- `olympiad.arrays`
  - `count_distinct_in_ranges(values, queries)`: distinct values inside each
    `(low, high)` value range.
  - `majority_element(values)`: voting candidate and its count, or `None`
    for an empty sequence.
  - `shortest_window(values, k)`: shortest block whose removal leaves every
    value at most `k` times.
  - `extract_minimum_segments(values)`: repeatedly removes the minimum-sum
    segment, returning `(sum, first, last)` with 1-based positions.
  - `minmax_sums(values)`: running totals of the largest/smallest pairing.
  - `min_partition_max_sum(values, k)`: least sum of maxima over `k`
    contiguous parts.
  - `book_chapters(order)`: passes, busiest pass and its page count.
  - `min_gathering_distance(points)`: least total Manhattan distance to one
    meeting point.
- `olympiad.numbers`
  - `square_sum_excess(n, p)`, `min_transformations(n)`,
    `count_divisor_chains(n, k)` (modulo 10000), `decimal_expansion(a, b)`,
    `count_three_divisor_numbers(values)`,
    `rounded_averages_consistent(decimals, readings)`.
- `olympiad.counting`
  - `count_permutations_with_inversions(n, k)`,
    `count_sign_sequences(x, y)`, `count_digit_strings(length, base, p, q)`
    and `brute_force_digit_strings(length, base, p, q)`, which lists every
    number to get the same two counts.
- `olympiad.unionfind`
  - `DisjointSet` with `add`, `find`, `union`, `size`, `in` and `len`.
  - `largest_component_sizes(n, cells)`: largest 4-connected group on an
    `n` x `n` board after each removal.
  - `group_children(preferences)`: groups of children linked through shared
    flowers.
- `olympiad.queries`
  - `best_pair_by_ancestor(points, edges, pairs)`, `running_medians(permutation)`,
    `longest_nested_chain(intervals)`, `count_triangles(lengths)`,
    `count_pair_sums(values, target, queries)`.
- `olympiad.dp`
  - `antivirus_min_cost(values, k)`, `max_tiles(rows, cols, blocked)`,
    `common_subsequence_length(permutations)`, `max_poly_subset(values)`,
    `triangle_from_top(n, total)`.
- `olympiad.lenes`
  - `lazy_route_cost(variant, grid, k1, k2)`: cheapest route for one column
    (variant 1) or two columns (variant 2).
- `olympiad.geometry`
  - `polygon_area(points)`, `minimal_line_indices(lines, times)`.
- `olympiad.backtracking`
  - `balanced_matrix(n, m, x, y)`, `set_partitions(n)` (a generator),
    `n_queens(n)` (first three placements and the total),
    `count_queen_dead_ends(n)`.

## Example

```python
from olympiad.numbers import decimal_expansion
from olympiad.strings import count_palindromes, find_occurrences
from olympiad.unionfind import DisjointSet

count_palindromes("aaa")          # 6
find_occurrences("ab", "abab")    # (2, [0, 2])
decimal_expansion(1, 6)           # "0.1(6)"

ds = DisjointSet()
ds.add(1)
ds.add(2)
ds.union(1, 2)
ds.find(1) == ds.find(2)          # True
ds.size(1)                        # 2
```

## What it does not do

The package has no command-line program and does not read or write input
or output files; callers pass the problem data in as Python values and get
the answers back as return values.