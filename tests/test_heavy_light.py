import pytest

from contestlib.heavy_light import HeavyLightDecomposition

EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]


def _example():
    hld = HeavyLightDecomposition(6)
    for u, v in EDGES:
        hld.add_edge(u, v)
    hld.build()
    return hld


def test_source_example_single_value():
    hld = _example()
    hld.update(3, 10)
    assert hld.query(3, 5) == 10


def test_path_sum_with_distinct_values():
    hld = _example()
    for v in range(6):
        hld.update(v, 2**v)
    # path 3 - 1 - 0 - 2 - 5
    assert hld.query(3, 5) == 2**3 + 2**1 + 2**0 + 2**2 + 2**5
    assert hld.query(3, 4) == 2**3 + 2**1 + 2**4


def test_query_is_symmetric():
    hld = _example()
    for v in range(6):
        hld.update(v, v + 1)
    for u in range(6):
        for v in range(6):
            assert hld.query(u, v) == hld.query(v, u)


def test_single_vertex_path():
    hld = _example()
    hld.update(4, 7)
    assert hld.query(4, 4) == 7


def test_update_overwrites():
    hld = _example()
    hld.update(5, 3)
    hld.update(5, 9)
    assert hld.query(0, 5) == 9


def test_values_survive_rebuild():
    hld = _example()
    hld.update(5, 6)
    hld.build()
    assert hld.query(5, 5) == 6


def test_long_chain():
    n = 3000
    hld = HeavyLightDecomposition(n)
    for v in range(1, n):
        hld.add_edge(v - 1, v)
    hld.build()
    for v in range(n):
        hld.update(v, v)
    assert hld.query(0, n - 1) == sum(range(n))
    assert hld.query(n - 1, 10) == sum(range(10, n))


def test_query_before_build_raises():
    hld = HeavyLightDecomposition(3)
    hld.add_edge(0, 1)
    hld.add_edge(1, 2)
    with pytest.raises(RuntimeError):
        hld.query(0, 2)


def test_cycle_is_rejected():
    hld = HeavyLightDecomposition(3)
    hld.add_edge(0, 1)
    hld.add_edge(1, 2)
    hld.add_edge(2, 0)
    with pytest.raises(ValueError):
        hld.build()


def test_disconnected_is_rejected():
    hld = HeavyLightDecomposition(4)
    hld.add_edge(0, 1)
    hld.add_edge(2, 3)
    with pytest.raises(ValueError):
        hld.build()


def test_bad_vertex_raises():
    hld = _example()
    with pytest.raises(IndexError):
        hld.update(6, 1)
    with pytest.raises(IndexError):
        hld.add_edge(-1, 0)