import random

import pytest

from contestlib.btree import BTree


def test_example_search():
    tree = BTree(3)
    for key in [10, 20, 5, 6, 12]:
        tree.insert(key)
    assert tree.search(6)
    assert not tree.search(7)
    assert tree.inorder() == [5, 6, 10, 12, 20]


@pytest.mark.parametrize("t", [2, 3, 5])
def test_many_keys_stay_sorted(t):
    rng = random.Random(t)
    keys = rng.sample(range(1000), 300)
    tree = BTree(t)
    for key in keys:
        tree.insert(key)
    assert tree.inorder() == sorted(keys)
    assert all(tree.search(key) for key in keys)
    assert not any(tree.search(key) for key in range(1000, 1010))


def test_duplicates_are_kept():
    tree = BTree(2)
    for key in [4, 4, 1, 4, 9, 1]:
        tree.insert(key)
    assert tree.inorder() == [1, 1, 4, 4, 4, 9]


def test_empty_tree():
    tree = BTree()
    assert tree.inorder() == []
    assert not tree.search(1)


def test_invalid_degree():
    with pytest.raises(ValueError):
        BTree(1)