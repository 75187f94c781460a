from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from hobson_trains.graph.network import Network
from hobson_trains.graph.station import Station
from hobson_trains.propagation.classify import classify
from hobson_trains.propagation.tree import tree_feeders


@dataclass(frozen=True)
class NetworkReport:
    stations: int
    horizon: int
    tree_stations: int
    ring_stations: int
    ring_sizes: List[int]
    max_tree_height: int
    notes: List[str]


def _tree_heights(order: List[Station]) -> Dict[int, int]:
    heights: Dict[int, int] = {}
    for station in order:
        heights[station.index] = 1 + max(
            (heights[f.index] for f in tree_feeders(station)), default=0
        )
    return heights


def analyze_network(network: Network) -> NetworkReport:
    """
    Classify ``network`` and summarise its shape: how many stations sit on
    rings, how large the rings are and how tall the trees feeding them grow.
    Heaps are left untouched.
    """
    order = classify(network)
    rings = network.rings()
    heights = _tree_heights(order)
    max_height = max(heights.values(), default=0)

    notes: List[str] = []
    if not rings:
        notes.append("No rings; every station belongs to a tree.")
    elif len(rings) > 1:
        notes.append(f"{len(rings)} independent rings.")
    if max_height > len(network) ** 0.5:
        notes.append(f"Tree height {max_height} indicates long chains.")

    return NetworkReport(
        stations=len(network),
        horizon=network.horizon,
        tree_stations=len(order),
        ring_stations=len(network) - len(order),
        ring_sizes=[len(ring) for ring in rings],
        max_tree_height=max_height,
        notes=notes,
    )
