from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List

from hobson_trains.graph.station import Classification, Station
from hobson_trains.heap.binomial import BinomialHeap


@dataclass
class Network:
    """
    A functional graph of stations together with the reach horizon.

    This is the context every classification and propagation pass runs
    against; ``stations[i]`` has id ``i + 1``.
    """

    stations: List[Station] = field(default_factory=list)
    horizon: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.horizon < 0:
            raise ValueError(f"Horizon must be non-negative, got {self.horizon}.")

    def __len__(self) -> int:
        return len(self.stations)

    def __iter__(self) -> Iterator[Station]:
        return iter(self.stations)

    def station(self, station_id: int) -> Station:
        if not 1 <= station_id <= len(self.stations):
            raise KeyError(f"Unknown station id {station_id}.")
        return self.stations[station_id - 1]

    def validate(self) -> None:
        """
        Validate structural soundness:
        - station ids match their positions
        - edges stay inside the network
        - incoming lists mirror outgoing edges
        """
        members = {id(station) for station in self.stations}
        # Feeders listed in some incoming list; each one points at that list's owner.
        listed: set[int] = set()
        for position, station in enumerate(self.stations):
            if station.index != position:
                raise ValueError(
                    f"Station {station.station_id} stored at position {position}."
                )
            for feeder in station.incoming:
                if feeder.outgoing is not station:
                    raise ValueError(
                        f"Station {feeder.station_id} is listed as incoming to "
                        f"{station.station_id} but points elsewhere."
                    )
                listed.add(id(feeder))

        for station in self.stations:
            target = station.outgoing
            if target is None:
                continue
            if id(target) not in members:
                raise ValueError(
                    f"Station {station.station_id} links outside the network."
                )
            if id(station) not in listed:
                raise ValueError(
                    f"Station {target.station_id} does not list "
                    f"{station.station_id} as incoming."
                )

    def is_classified(self) -> bool:
        return all(
            s.classification is not Classification.UNCLASSIFIED for s in self.stations
        )

    def tree_stations(self) -> List[Station]:
        return [s for s in self.stations if s.is_tree]

    def ring_stations(self) -> List[Station]:
        return [s for s in self.stations if s.is_ring]

    def rings(self) -> List[List[Station]]:
        """
        Each cycle as a list of stations in edge order, starting from its
        lowest id. Only meaningful once the network has been classified.
        """
        seen: set[int] = set()
        cycles: List[List[Station]] = []
        for station in self.ring_stations():
            if station.index in seen:
                continue
            cycle: List[Station] = []
            current = station
            while current.index not in seen:
                seen.add(current.index)
                cycle.append(current)
                current = current.outgoing
            cycles.append(cycle)
        return cycles

    def reset_heaps(self) -> None:
        """Discard propagated heaps and reseed every station with itself."""
        for station in self.stations:
            station.heap = BinomialHeap.singleton(station)
