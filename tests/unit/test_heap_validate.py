from __future__ import annotations

import pytest

from hobson_trains.heap.binomial import BinomialHeap, HeapNode, union
from hobson_trains.heap.validate import validate_heap


def _heap(*keys: int) -> BinomialHeap:
    heap = BinomialHeap.empty()
    for payload, key in enumerate(keys):
        heap = union(heap, BinomialHeap(HeapNode(key=key, payload=payload)), take_ownership=True)
    return heap


def test_validate_accepts_well_formed_heap() -> None:
    validate_heap(_heap(4, 1, 3, 3, 0, 2, 7))
    validate_heap(BinomialHeap.empty())


def test_validate_rejects_heap_order_violation() -> None:
    heap = _heap(5, 1)
    heap.head.child.key = 9
    with pytest.raises(ValueError, match="Heap order"):
        validate_heap(heap)


def test_validate_rejects_repeated_root_degree() -> None:
    first = HeapNode(key=1, payload=0)
    second = HeapNode(key=2, payload=1)
    first.sibling = second
    with pytest.raises(ValueError, match="ascending"):
        validate_heap(BinomialHeap(first))


def test_validate_rejects_wrong_degree() -> None:
    heap = _heap(5, 1)
    heap.head.degree = 2
    with pytest.raises(ValueError):
        validate_heap(heap)


def test_validate_rejects_stale_backref() -> None:
    heap = _heap(1, 2, 3)
    heap.head.prev = heap.head.sibling
    with pytest.raises(ValueError, match="back-reference"):
        validate_heap(heap)


def test_validate_rejects_stale_size() -> None:
    heap = _heap(3, 1, 2)
    heap.size = 5
    with pytest.raises(ValueError, match="size"):
        validate_heap(heap)
