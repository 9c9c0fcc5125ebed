import math
import operator
import random
from functools import reduce

import pytest

from contestlib.advanced_segment_trees import (
    GCDSegmentTree,
    MaxSegmentTree,
    RangeAssignmentTree,
    SegmentTree2D,
    XORSegmentTree,
)

EXAMPLE = [1, 3, 5, 7, 9, 11]


def _ranges(n):
    return [(left, right) for left in range(n) for right in range(left, n)]


def test_max_tree_example_all_ranges():
    tree = MaxSegmentTree(EXAMPLE)
    for left, right in _ranges(len(EXAMPLE)):
        assert tree.query(left, right) == max(EXAMPLE[left : right + 1])


@pytest.mark.parametrize("seed", [1, 2])
def test_max_tree_random_updates(seed):
    rng = random.Random(seed)
    values = [rng.randint(-100, 100) for _ in range(20)]
    tree = MaxSegmentTree(values)
    for _ in range(150):
        if rng.random() < 0.4:
            idx = rng.randrange(len(values))
            values[idx] = rng.randint(-100, 100)
            tree.update(idx, values[idx])
        else:
            left = rng.randrange(len(values))
            right = rng.randrange(left, len(values))
            assert tree.query(left, right) == max(values[left : right + 1])


def test_gcd_tree_example_all_ranges():
    tree = GCDSegmentTree(EXAMPLE)
    for left, right in _ranges(len(EXAMPLE)):
        assert tree.query(left, right) == reduce(math.gcd, EXAMPLE[left : right + 1])


@pytest.mark.parametrize("seed", [3, 4])
def test_gcd_tree_random_updates(seed):
    rng = random.Random(seed)
    values = [rng.choice([6, 12, 18, 24, 9, 15, 30, 7]) for _ in range(16)]
    tree = GCDSegmentTree(values)
    for _ in range(150):
        if rng.random() < 0.4:
            idx = rng.randrange(len(values))
            values[idx] = rng.choice([6, 12, 18, 24, 9, 15, 30, 7])
            tree.update(idx, values[idx])
        else:
            left = rng.randrange(len(values))
            right = rng.randrange(left, len(values))
            assert tree.query(left, right) == reduce(math.gcd, values[left : right + 1])


def test_point_trees_reject_empty_and_bad_index():
    with pytest.raises(ValueError):
        MaxSegmentTree([])
    with pytest.raises(ValueError):
        GCDSegmentTree([])
    tree = MaxSegmentTree(EXAMPLE)
    with pytest.raises(IndexError):
        tree.update(6, 1)
    with pytest.raises(IndexError):
        tree.query(3, 2)


def _rect_sum(matrix, x1, y1, x2, y2):
    return sum(sum(row[y1 : y2 + 1]) for row in matrix[x1 : x2 + 1])


def test_2d_tree_example_all_rectangles():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    tree = SegmentTree2D(matrix)
    for x1, x2 in _ranges(3):
        for y1, y2 in _ranges(3):
            assert tree.query(x1, y1, x2, y2) == _rect_sum(matrix, x1, y1, x2, y2)


@pytest.mark.parametrize("seed", [5, 6])
def test_2d_tree_random_updates(seed):
    rng = random.Random(seed)
    rows, cols = rng.randint(1, 6), rng.randint(1, 6)
    matrix = [[rng.randint(-9, 9) for _ in range(cols)] for _ in range(rows)]
    tree = SegmentTree2D(matrix)
    for _ in range(100):
        if rng.random() < 0.4:
            x, y = rng.randrange(rows), rng.randrange(cols)
            matrix[x][y] = rng.randint(-9, 9)
            tree.update(x, y, matrix[x][y])
        else:
            x1 = rng.randrange(rows)
            x2 = rng.randrange(x1, rows)
            y1 = rng.randrange(cols)
            y2 = rng.randrange(y1, cols)
            assert tree.query(x1, y1, x2, y2) == _rect_sum(matrix, x1, y1, x2, y2)


def test_2d_tree_does_not_alias_input():
    matrix = [[1, 2], [3, 4]]
    tree = SegmentTree2D(matrix)
    tree.update(0, 0, 100)
    assert matrix[0][0] == 1
    assert tree.query(0, 0, 1, 1) == 100 + 2 + 3 + 4


def test_2d_tree_rejects_bad_input():
    with pytest.raises(ValueError):
        SegmentTree2D([])
    with pytest.raises(ValueError):
        SegmentTree2D([[1, 2], [3]])
    tree = SegmentTree2D([[1, 2], [3, 4]])
    with pytest.raises(IndexError):
        tree.query(0, 0, 2, 1)
    with pytest.raises(IndexError):
        tree.update(0, 2, 5)


@pytest.mark.parametrize("seed", [7, 8, 9])
def test_range_assignment_matches_list(seed):
    rng = random.Random(seed)
    values = [rng.randint(-20, 20) for _ in range(rng.randint(1, 25))]
    tree = RangeAssignmentTree(values)
    for _ in range(200):
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        if rng.random() < 0.5:
            value = rng.randint(-20, 20)
            values[left : right + 1] = [value] * (right - left + 1)
            tree.update_range(left, right, value)
        else:
            assert tree.query_range(left, right) == sum(values[left : right + 1])


def test_range_assignment_to_zero():
    tree = RangeAssignmentTree(EXAMPLE)
    tree.update_range(0, 5, 0)
    assert tree.query_range(0, 5) == 0


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_xor_tree_matches_list(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 255) for _ in range(rng.randint(1, 25))]
    tree = XORSegmentTree(values)
    for _ in range(200):
        left = rng.randrange(len(values))
        right = rng.randrange(left, len(values))
        if rng.random() < 0.5:
            value = rng.randint(0, 255)
            for i in range(left, right + 1):
                values[i] ^= value
            tree.update_range(left, right, value)
        else:
            assert tree.query_range(left, right) == reduce(
                operator.xor, values[left : right + 1]
            )


def test_xor_tree_update_twice_restores():
    tree = XORSegmentTree(EXAMPLE)
    before = [tree.query_range(l, r) for l, r in _ranges(len(EXAMPLE))]
    tree.update_range(1, 4, 13)
    tree.update_range(1, 4, 13)
    after = [tree.query_range(l, r) for l, r in _ranges(len(EXAMPLE))]
    assert after == before


def test_lazy_trees_reject_bad_ranges():
    with pytest.raises(IndexError):
        RangeAssignmentTree(EXAMPLE).update_range(2, 6, 1)
    with pytest.raises(IndexError):
        XORSegmentTree(EXAMPLE).query_range(-1, 0)
    with pytest.raises(ValueError):
        XORSegmentTree([])