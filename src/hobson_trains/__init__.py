"""
hobson-trains

Bounded backward reachability counts over functional graphs, carried by
mergeable binomial heaps.
"""

from .graph.network import Network
from .graph.station import Station
from .heap.binomial import BinomialHeap
from .propagation.solver import HobsonSolver, solve

__all__ = [
    "Network",
    "Station",
    "BinomialHeap",
    "HobsonSolver",
    "solve",
]
