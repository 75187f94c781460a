"""
Propagate reachability heaps around rings.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional

from hobson_trains.graph.network import Network
from hobson_trains.graph.station import Station
from hobson_trains.heap.binomial import BinomialHeap
from hobson_trains.propagation.combine import absorb
from hobson_trains.runtime.profiling import Profiler
from hobson_trains.utils.logging import logger


def ring_predecessor(station: Station) -> Station:
    """The ring station whose outgoing edge points at ``station``."""
    for feeder in station.incoming:
        if feeder.is_ring:
            return feeder
    raise ValueError(f"Ring station {station.station_id} has no ring predecessor.")


def lap(
    start: Station,
    horizon: int,
    predecessor: Callable[[Station], Station] = ring_predecessor,
) -> List[Station]:
    """
    Ring stations met walking backward from ``start``, ``start`` first.

    The walk ends before returning to ``start`` or once the next station
    would lie more than ``horizon`` hops away.

    ``predecessor`` defaults to scanning incoming lists; pass a lookup when
    walking many laps.
    """
    stations = [start]
    current = predecessor(start)
    while current is not start and len(stations) <= horizon:
        stations.append(current)
        current = predecessor(current)
    return stations


def ring_propagate(network: Network, *, profiler: Optional[Profiler] = None) -> None:
    """
    Give every ring station the contributions of the other ring stations.

    Ring stations must already hold their tree contributions. Each lap is
    folded from its far end back to its start using those tree-propagated
    heaps, and only the start station receives the result.
    """
    if not network.is_classified():
        raise ValueError("Network must be classified before propagating.")

    ring_stations = network.ring_stations()
    base: Dict[int, BinomialHeap] = {s.index: s.heap for s in ring_stations}
    results: Dict[int, BinomialHeap] = {}
    previous: Dict[int, Station] = {s.outgoing.index: s for s in ring_stations}

    for start in ring_stations:
        stations = lap(start, network.horizon, lambda s: previous[s.index])
        results[start.index] = _fold_lap(stations, base, network.horizon, profiler)

    for station in ring_stations:
        station.heap = results[station.index]
    logger.debug("Ring propagation finished for %d stations.", len(ring_stations))


def _fold_lap(
    stations: List[Station],
    base: Dict[int, BinomialHeap],
    horizon: int,
    profiler: Optional[Profiler],
) -> BinomialHeap:
    accumulated = base[stations[-1].index].copy()
    for station in reversed(stations[:-1]):
        accumulated = absorb(base[station.index].copy(), accumulated, horizon, profiler)
    return accumulated
