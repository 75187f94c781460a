"""
Propagate reachability heaps from leaves towards tree roots.
"""

from __future__ import annotations

from typing import List, Optional

from hobson_trains.graph.network import Network
from hobson_trains.graph.station import Station
from hobson_trains.propagation.combine import absorb
from hobson_trains.runtime.profiling import Profiler
from hobson_trains.utils.logging import logger


def tree_roots(network: Network) -> List[Station]:
    """
    Stations whose tree ancestry is propagated as one unit: stations with no
    outgoing edge, and every station that is not itself a tree station.
    """
    return [s for s in network if s.outgoing is None or not s.is_tree]


def tree_feeders(station: Station) -> List[Station]:
    return [s for s in station.incoming if s.is_tree]


def tree_propagate(network: Network, *, profiler: Optional[Profiler] = None) -> None:
    """
    Fold every tree station's heap into its target, one hop further away.

    Each root's ancestry is walked in post-order with an explicit stack, so a
    station absorbs its feeders only after their heaps are final. Long
    chains therefore cost no Python recursion.
    """
    if not network.is_classified():
        raise ValueError("Network must be classified before propagating.")

    roots = tree_roots(network)
    for root in roots:
        _propagate_ancestry(root, network.horizon, profiler)
    logger.debug("Tree propagation finished from %d roots.", len(roots))


def _propagate_ancestry(
    root: Station, horizon: int, profiler: Optional[Profiler]
) -> None:
    stack = [(root, False)]
    while stack:
        station, expanded = stack.pop()
        feeders = tree_feeders(station)
        if not expanded:
            stack.append((station, True))
            stack.extend((feeder, False) for feeder in feeders)
            continue
        for feeder in feeders:
            station.heap = absorb(station.heap, feeder.heap, horizon, profiler)
