"""
Builders from plain target lists and edge lists into a `Network`.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .network import Network
from .station import Station


def from_targets(targets: Sequence[Optional[int]], horizon: int) -> Network:
    """
    Build a network where station ``i + 1`` links to ``targets[i]``.

    Args:
        targets: 1-based target ids; ``None`` means the station has no
            outgoing edge.
        horizon: Maximum hop distance that still counts as reachable.
    """
    stations = [Station(station_id=i + 1) for i in range(len(targets))]
    network = Network(stations=stations, horizon=horizon)

    for station, target in zip(stations, targets):
        if target is None:
            continue
        target = int(target)
        if not 1 <= target <= len(stations):
            raise ValueError(
                f"Station {station.station_id} targets {target}, "
                f"outside 1..{len(stations)}."
            )
        station.link(stations[target - 1])

    return network


def from_edges(
    num_stations: int, edges: Iterable[Tuple[int, int]], horizon: int
) -> Network:
    """
    Build a network from ``(source, target)`` pairs of 1-based ids.

    Stations that never appear as a source have no outgoing edge.
    """
    targets: List[Optional[int]] = [None] * num_stations
    for source, target in edges:
        if not 1 <= source <= num_stations:
            raise ValueError(f"Edge source {source} outside 1..{num_stations}.")
        if targets[source - 1] is not None:
            raise ValueError(f"Station {source} already has an outgoing edge.")
        targets[source - 1] = target
    return from_targets(targets, horizon)


def random_functional_graph(
    num_stations: int,
    rng: np.random.Generator,
    *,
    terminal_fraction: float = 0.0,
) -> List[Optional[int]]:
    """
    Draw a random target list: every station picks a uniform target, and a
    ``terminal_fraction`` share of stations is left without an outgoing edge.
    """
    if not 0.0 <= terminal_fraction <= 1.0:
        raise ValueError("terminal_fraction must lie in [0, 1].")

    if num_stations == 0:
        return []
    drawn = rng.integers(1, num_stations + 1, size=num_stations)
    terminal = rng.random(num_stations) < terminal_fraction
    return [None if stop else int(t) for t, stop in zip(drawn, terminal)]
