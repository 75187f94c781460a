"""
Classification and heap propagation over a functional graph.

The passes run in order:
- `classify` marks stations as tree or ring stations.
- `tree_propagate` folds heaps from leaves up to tree roots.
- `ring_propagate` folds heaps once around each ring.
- `reach_counts` reads the deduplicated count off every heap.
"""

from .classify import classify
from .combine import absorb
from .ring import lap, ring_predecessor, ring_propagate
from .solver import HobsonSolver, reach_counts, solve
from .tree import tree_feeders, tree_propagate, tree_roots

__all__ = [
    "classify",
    "absorb",
    "lap",
    "ring_predecessor",
    "ring_propagate",
    "HobsonSolver",
    "reach_counts",
    "solve",
    "tree_feeders",
    "tree_propagate",
    "tree_roots",
]
