import random

import pytest

from grapho_mst.core import Edge, IndexedMinHeap


def _check_positions(pq):
    for slot, item in enumerate(pq._heap):
        assert item.index == slot
        assert pq._position[item.vertex] == slot


def test_pops_in_distance_order():
    pq = IndexedMinHeap(5)
    for vertex, distance in [(0, 4.0), (1, 1.5), (2, 3.0), (3, 0.5), (4, 2.0)]:
        pq.push(vertex, Edge(0, vertex), distance)
    _check_positions(pq)

    order = [pq.pop().vertex for _ in range(5)]
    assert order == [3, 1, 4, 2, 0]
    assert len(pq) == 0
    assert not pq


def test_update_decrease_and_increase():
    pq = IndexedMinHeap(4)
    for vertex in range(4):
        pq.push(vertex, Edge(0, vertex), 10.0 + vertex)

    pq.update(3, Edge(1, 3), 1.0)
    _check_positions(pq)
    assert pq.peek().vertex == 3
    assert pq.peek().edge == Edge(1, 3)

    pq.update(3, Edge(2, 3), 100.0)
    _check_positions(pq)
    assert pq.peek().vertex == 0
    assert [pq.pop().vertex for _ in range(4)] == [0, 1, 2, 3]


def test_equal_distances_pop_lowest_vertex_first():
    pq = IndexedMinHeap(4)
    for vertex in (3, 1, 2, 0):
        pq.push(vertex, Edge(vertex, vertex), 7.0)
    assert [pq.pop().vertex for _ in range(4)] == [0, 1, 2, 3]


def test_membership_and_lookup():
    pq = IndexedMinHeap(3)
    item = pq.push(2, Edge(0, 2), 1.0)
    assert 2 in pq
    assert 1 not in pq
    assert pq.get(2) is item
    assert pq.get(1) is None

    popped = pq.pop()
    assert popped is item
    assert popped.index == -1
    assert 2 not in pq


def test_push_or_update():
    pq = IndexedMinHeap(3)
    pq.push_or_update(1, Edge(0, 1), 5.0)
    pq.push_or_update(1, Edge(2, 1), 2.0)
    assert len(pq) == 1
    assert pq.peek().distance == 2.0
    assert pq.peek().edge == Edge(1, 2)


def test_errors():
    pq = IndexedMinHeap(2)
    with pytest.raises(IndexError):
        pq.pop()
    with pytest.raises(IndexError):
        pq.peek()
    with pytest.raises(KeyError):
        pq.update(0, Edge(0, 1), 1.0)
    pq.push(0, Edge(0, 0), 1.0)
    with pytest.raises(KeyError):
        pq.push(0, Edge(0, 0), 2.0)


def test_clear_resets_positions():
    pq = IndexedMinHeap(3)
    items = [pq.push(v, Edge(0, v), float(v)) for v in range(3)]
    pq.clear()
    assert len(pq) == 0
    assert all(item.index == -1 for item in items)
    assert all(v not in pq for v in range(3))


def test_random_operations_keep_heap_consistent():
    rng = random.Random(42)
    n = 50
    pq = IndexedMinHeap(n)
    best = {}
    for _ in range(300):
        vertex = rng.randrange(n)
        distance = rng.uniform(0, 100)
        pq.push_or_update(vertex, Edge(0, vertex), distance)
        best[vertex] = distance
        _check_positions(pq)

    popped = []
    while pq:
        item = pq.pop()
        popped.append((item.distance, item.vertex))
        _check_positions(pq)

    assert popped == sorted((d, v) for v, d in best.items())
