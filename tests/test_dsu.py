import pytest

from contestlib.dsu import DisjointSet


def test_source_example():
    dsu = DisjointSet(5)
    dsu.unite(0, 1)
    dsu.unite(2, 3)
    assert dsu.connected(0, 1)
    assert not dsu.connected(0, 2)
    assert dsu.size_of(0) == 2
    assert dsu.components() == 3


def test_initial_state():
    dsu = DisjointSet(4)
    assert dsu.components() == 4
    assert [dsu.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert all(dsu.size_of(i) == 1 for i in range(4))


def test_unite_same_set_returns_false():
    dsu = DisjointSet(3)
    assert dsu.unite(0, 1) is True
    assert dsu.unite(1, 0) is False
    assert dsu.components() == 2


def test_chain_union_connects_everything():
    n = 10
    dsu = DisjointSet(n)
    for i in range(n - 1):
        dsu.unite(i, i + 1)
    assert dsu.components() == 1
    assert dsu.size_of(n - 1) == n
    root = dsu.find(0)
    assert all(dsu.find(i) == root for i in range(n))


def test_sizes_sum_to_total():
    dsu = DisjointSet(8)
    for x, y in [(0, 1), (2, 3), (1, 3), (5, 6)]:
        dsu.unite(x, y)
    roots = {dsu.find(i) for i in range(8)}
    assert len(roots) == dsu.components()
    assert sum(dsu.size_of(r) for r in roots) == 8


def test_out_of_range_raises():
    dsu = DisjointSet(3)
    with pytest.raises(IndexError):
        dsu.find(3)
    with pytest.raises(IndexError):
        dsu.unite(-1, 0)