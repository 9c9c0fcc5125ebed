import itertools

import pytest

from contestlib.fenwick import FenwickTree, FenwickTree2D

VALUES = [1, 3, 5, 7, 9, 11]


def test_source_example():
    ft = FenwickTree.from_values(VALUES)
    assert ft.prefix_sum(2) == 9
    assert ft.range_sum(1, 3) == 15
    ft.update(1, 7)
    assert ft.range_sum(1, 3) == 22


def test_prefix_sums_match_accumulate():
    ft = FenwickTree.from_values(VALUES)
    expected = list(itertools.accumulate(VALUES))
    assert [ft.prefix_sum(i) for i in range(len(VALUES))] == expected
    assert ft.prefix_sum(-1) == 0


def test_range_sum_matches_slices():
    ft = FenwickTree.from_values(VALUES)
    for left in range(len(VALUES)):
        for right in range(left, len(VALUES)):
            assert ft.range_sum(left, right) == sum(VALUES[left : right + 1])


def test_empty_tree_built_by_updates_matches_from_values():
    a = FenwickTree(len(VALUES))
    for i, v in enumerate(VALUES):
        a.update(i, v)
    b = FenwickTree.from_values(VALUES)
    assert a.tree == b.tree


def test_lower_bound_invariant():
    ft = FenwickTree.from_values(VALUES)
    for k in range(0, sum(VALUES) + 3):
        count = ft.lower_bound(k)
        assert ft.prefix_sum(count - 1) <= k
        if count < len(VALUES):
            assert ft.prefix_sum(count) > k


def test_lower_bound_empty():
    assert FenwickTree(0).lower_bound(10) == 0


def test_update_out_of_range():
    ft = FenwickTree(3)
    with pytest.raises(IndexError):
        ft.update(3, 1)
    with pytest.raises(IndexError):
        ft.update(-1, 1)
    with pytest.raises(IndexError):
        ft.prefix_sum(3)


def test_2d_range_sums_match_brute_force():
    grid = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    ft = FenwickTree2D(3, 4)
    for x, row in enumerate(grid):
        for y, v in enumerate(row):
            ft.update(x, y, v)
    for x1, x2 in itertools.combinations_with_replacement(range(3), 2):
        for y1, y2 in itertools.combinations_with_replacement(range(4), 2):
            expected = sum(grid[x][y] for x in range(x1, x2 + 1) for y in range(y1, y2 + 1))
            assert ft.range_sum(x1, y1, x2, y2) == expected


def test_2d_update_accumulates():
    ft = FenwickTree2D(2, 2)
    ft.update(1, 1, 4)
    ft.update(1, 1, -4)
    assert ft.prefix_sum(1, 1) == 0
    with pytest.raises(IndexError):
        ft.update(2, 0, 1)