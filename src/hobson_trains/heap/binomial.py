"""
Binomial max-heap specialised for bounded reachability counting.

Every entry carries a hop distance (``key``) and the station it started from
(``payload``). Heaps are combined with :func:`union`, which copies its inputs
unless ownership is handed over, so a finished heap can feed any number of
later unions without being disturbed.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Tuple

import numpy as np


@dataclass(eq=False)
class HeapNode:
    """Node of a binomial tree. Roots are chained through ``sibling``."""

    key: int
    payload: Any = None
    degree: int = 0
    child: Optional["HeapNode"] = field(default=None, repr=False)
    sibling: Optional["HeapNode"] = field(default=None, repr=False)
    # Previous root in the root list; unset on non-root nodes.
    prev: Optional["HeapNode"] = field(default=None, repr=False)

    def copy(self) -> "HeapNode":
        """
        Deep copy of this node, its subtree and every sibling after it.

        Root back-references are not copied; the owning heap relinks them.
        """
        root = self._detached()
        stack = [(self, root)]
        while stack:
            src, dst = stack.pop()
            if src.child is not None:
                dst.child = src.child._detached()
                stack.append((src.child, dst.child))
            if src.sibling is not None:
                dst.sibling = src.sibling._detached()
                stack.append((src.sibling, dst.sibling))
        return root

    def _detached(self) -> "HeapNode":
        return HeapNode(key=self.key, payload=self.payload, degree=self.degree)


def _walk(head: Optional[HeapNode]) -> Iterator[HeapNode]:
    stack = [head] if head is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.sibling is not None:
            stack.append(node.sibling)
        if node.child is not None:
            stack.append(node.child)


def _relink_roots(head: Optional[HeapNode]) -> None:
    previous = None
    node = head
    while node is not None:
        node.prev = previous
        previous = node
        node = node.sibling


def binomial_link(child: HeapNode, parent: HeapNode) -> None:
    """
    Hang ``child`` under ``parent``. Both must be roots of equal degree.

    The child goes to the front of the child list, so child lists run from
    the highest degree down to zero.
    """
    child.prev = None
    child.sibling = parent.child
    parent.child = child
    parent.degree += 1


def merge_root_lists(
    first: Optional[HeapNode], second: Optional[HeapNode]
) -> Optional[HeapNode]:
    """
    Merge two root lists by ascending degree without collapsing.

    Both lists are consumed. On equal degrees the root from ``second`` is
    taken first.
    """
    if first is None:
        return second
    if second is None:
        return first

    if first.degree < second.degree:
        head, first = first, first.sibling
    else:
        head, second = second, second.sibling

    tail = head
    while first is not None and second is not None:
        if first.degree < second.degree:
            tail.sibling, first = first, first.sibling
        else:
            tail.sibling, second = second, second.sibling
        tail = tail.sibling
    tail.sibling = first if first is not None else second
    return head


def _collapse(head: HeapNode) -> HeapNode:
    prev_x: Optional[HeapNode] = None
    x = head
    next_x = x.sibling

    while next_x is not None:
        if x.degree != next_x.degree or (
            next_x.sibling is not None and next_x.sibling.degree == x.degree
        ):
            prev_x = x
            x = next_x
        elif x.key >= next_x.key:
            x.sibling = next_x.sibling
            binomial_link(next_x, x)
        else:
            if prev_x is None:
                head = next_x
            else:
                prev_x.sibling = next_x
            binomial_link(x, next_x)
            x = next_x
        next_x = x.sibling

    return head


def _union_heads(
    first: Optional[HeapNode], second: Optional[HeapNode]
) -> Optional[HeapNode]:
    head = merge_root_lists(first, second)
    if head is not None:
        head = _collapse(head)
    _relink_roots(head)
    return head


def union(
    first: "BinomialHeap",
    second: "BinomialHeap",
    *,
    take_ownership: bool = False,
) -> "BinomialHeap":
    """
    Union of two heaps. The meld itself is O(log n); copying the inputs
    costs their size.

    Args:
        first: One input heap.
        second: The other input heap.
        take_ownership: If ``True`` the trees of both inputs are reused and
            the input handles are emptied. Otherwise both inputs are copied
            and left untouched.
    """
    size = first.size + second.size
    if take_ownership:
        if first is second:
            raise ValueError("Cannot take ownership of the same heap twice.")
        a, b = first.head, second.head
        first.head, first.size = None, 0
        second.head, second.size = None, 0
    else:
        a = first.head.copy() if first.head is not None else None
        b = second.head.copy() if second.head is not None else None
    return BinomialHeap(_union_heads(a, b), size=size)


class BinomialHeap:
    """
    Handle on the head of a root list, ordered by ascending degree.

    ``head is None`` is the empty heap. Operations that return a new heap
    never share nodes with their inputs; :meth:`selective_extract_below` and
    :meth:`prune` work in place and should only be called on a heap the
    caller owns.

    ``size`` is the node count, kept up to date by every heap operation so
    that ``len()`` is O(1). When a raw root list is wrapped without a size,
    the nodes are counted once.
    """

    def __init__(
        self, head: Optional[HeapNode] = None, size: Optional[int] = None
    ) -> None:
        self.head = head
        self.size = sum(1 for _ in _walk(head)) if size is None else size
        _relink_roots(head)

    @classmethod
    def singleton(cls, payload: Any) -> "BinomialHeap":
        """A one-entry heap: ``payload`` at distance zero."""
        return cls(HeapNode(key=0, payload=payload), size=1)

    @classmethod
    def empty(cls) -> "BinomialHeap":
        return cls(size=0)

    def copy(self) -> "BinomialHeap":
        return BinomialHeap(
            self.head.copy() if self.head is not None else None, size=self.size
        )

    def is_empty(self) -> bool:
        return self.head is None

    def __bool__(self) -> bool:
        return self.head is not None

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"BinomialHeap(size={len(self)}, degrees={self.degrees()})"

    def roots(self) -> Iterator[HeapNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.sibling

    def iter_nodes(self) -> Iterator[HeapNode]:
        """Every node of every tree, in no particular order."""
        return _walk(self.head)

    def degrees(self) -> List[int]:
        return [root.degree for root in self.roots()]

    def items(self) -> List[Tuple[int, Any]]:
        return [(node.key, node.payload) for node in _walk(self.head)]

    def find_max(self) -> Optional[HeapNode]:
        """Root with the largest key; the first one wins on ties."""
        best = self.head
        for root in self.roots():
            if root.key > best.key:
                best = root
        return best

    def selective_extract_below(self, k: int) -> Optional[int]:
        """
        Remove the maximum entry if its key exceeds ``k``.

        Returns the removed key, or ``None`` when the heap is empty or every
        key is already within ``k``. At most one node is removed per call.
        """
        best = self.find_max()
        if best is None or best.key <= k:
            return None

        if best.prev is None:
            self.head = best.sibling
        else:
            best.prev.sibling = best.sibling

        orphans: Optional[HeapNode] = None
        child = best.child
        while child is not None:
            following = child.sibling
            child.sibling = orphans
            orphans = child
            child = following

        self.head = _union_heads(self.head, orphans)
        self.size -= 1
        best.child = best.sibling = best.prev = None
        return best.key

    def prune(self, k: int) -> List[int]:
        """Drop every entry with a key above ``k``; returns the removed keys."""
        removed: List[int] = []
        key = self.selective_extract_below(k)
        while key is not None:
            removed.append(key)
            key = self.selective_extract_below(k)
        return removed

    def increment_keys(self) -> "BinomialHeap":
        """Copy of this heap with every key one larger."""
        shifted = self.copy()
        for node in _walk(shifted.head):
            node.key += 1
        return shifted

    def count_distinct_payloads(
        self,
        total_count: int,
        index: Callable[[Any], int] = operator.index,
    ) -> int:
        """
        Number of distinct payloads in the heap.

        Args:
            total_count: Size of the payload universe; ``index(payload)`` must
                fall in ``[0, total_count)``.
            index: Maps a payload to its slot in the seen table.
        """
        slots = np.fromiter(
            (index(node.payload) for node in _walk(self.head)), dtype=np.intp
        )
        if slots.size and (slots.min() < 0 or slots.max() >= total_count):
            raise IndexError(
                f"Payload index out of range for a universe of {total_count}."
            )
        seen = np.zeros(total_count, dtype=bool)
        seen[slots] = True
        return int(np.count_nonzero(seen))

    def describe(self) -> str:
        """Nested text rendering: ``c( ... )`` for children, ``s[ ... ]`` for siblings."""
        if self.head is None:
            return "EMPTY"
        return _describe(self.head)


def _describe(node: HeapNode) -> str:
    text = f"{node.key} :"
    if node.child is not None:
        text += f" c( {_describe(node.child)} ) "
    if node.sibling is not None:
        text += f" s[ {_describe(node.sibling)} ] "
    return text
