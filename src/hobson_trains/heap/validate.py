"""
Structural checks for binomial heaps.
"""

from __future__ import annotations

from typing import Optional

from hobson_trains.heap.binomial import BinomialHeap, HeapNode


def validate_heap(heap: BinomialHeap) -> None:
    """
    Raise ``ValueError`` unless ``heap`` is a well-formed binomial max-heap:
    - root degrees strictly ascending
    - root back-references point at the previous root
    - every tree of degree d holds children of degrees d-1..0 (hence 2^d nodes)
    - no child key exceeds its parent's key
    - the recorded size matches the node count
    """
    _ensure_root_degrees_ascending(heap.head)
    _ensure_root_backrefs(heap.head)
    for root in heap.roots():
        _ensure_binomial_tree(root)
    counted = sum(1 << root.degree for root in heap.roots())
    if counted != heap.size:
        raise ValueError(f"Heap records size {heap.size} but holds {counted} nodes.")


def _ensure_root_degrees_ascending(head: Optional[HeapNode]) -> None:
    node = head
    while node is not None and node.sibling is not None:
        if node.sibling.degree <= node.degree:
            raise ValueError(
                f"Root list degrees not strictly ascending: "
                f"{node.degree} followed by {node.sibling.degree}."
            )
        node = node.sibling


def _ensure_root_backrefs(head: Optional[HeapNode]) -> None:
    previous = None
    node = head
    while node is not None:
        if node.prev is not previous:
            raise ValueError(f"Root with key {node.key} has a stale back-reference.")
        previous = node
        node = node.sibling


def _ensure_binomial_tree(root: HeapNode) -> None:
    size = 0
    stack = [root]
    while stack:
        node = stack.pop()
        size += 1
        expected = node.degree - 1
        child = node.child
        while child is not None:
            if child.degree != expected:
                raise ValueError(
                    f"Node with key {node.key} has a child of degree {child.degree}, "
                    f"expected {expected}."
                )
            if child.key > node.key:
                raise ValueError(
                    f"Heap order violated: child key {child.key} above parent key {node.key}."
                )
            if child.prev is not None:
                raise ValueError("Non-root node carries a root back-reference.")
            stack.append(child)
            expected -= 1
            child = child.sibling
        if expected != -1:
            raise ValueError(
                f"Node with key {node.key} claims degree {node.degree} "
                f"but has {node.degree - 1 - expected} children."
            )
    if size != 2 ** root.degree:
        raise ValueError(
            f"Tree of degree {root.degree} holds {size} nodes, expected {2 ** root.degree}."
        )
