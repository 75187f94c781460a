"""
Mergeable priority structure used to carry reachability sets.

- `BinomialHeap` and `HeapNode` (see `binomial.py`)
- `union`, the copy-safe meld of two heaps
- `validate_heap`, structural invariant checks
"""

from .binomial import BinomialHeap, HeapNode, binomial_link, merge_root_lists, union
from .validate import validate_heap

__all__ = [
    "BinomialHeap",
    "HeapNode",
    "binomial_link",
    "merge_root_lists",
    "union",
    "validate_heap",
]
