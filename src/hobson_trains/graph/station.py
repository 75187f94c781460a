from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hobson_trains.heap.binomial import BinomialHeap


class Classification(Enum):
    UNCLASSIFIED = "unclassified"
    TREE = "tree"
    RING = "ring"


@dataclass(eq=False)
class Station:
    """
    Node of a functional graph: one optional outgoing edge, any number of
    incoming ones, and the heap of stations known to reach it.
    """

    station_id: int
    outgoing: Optional["Station"] = field(default=None, repr=False)
    incoming: List["Station"] = field(default_factory=list, repr=False)
    classification: Classification = Classification.UNCLASSIFIED
    heap: BinomialHeap = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.station_id < 1:
            raise ValueError(f"Station ids start at 1, got {self.station_id}.")
        self.heap = BinomialHeap.singleton(self)

    @property
    def index(self) -> int:
        """Zero-based position of the station in its network."""
        return self.station_id - 1

    def __index__(self) -> int:
        return self.index

    @property
    def is_tree(self) -> bool:
        return self.classification is Classification.TREE

    @property
    def is_ring(self) -> bool:
        return self.classification is Classification.RING

    def link(self, target: "Station") -> None:
        """Point this station's outgoing edge at ``target``."""
        self.outgoing = target
        target.incoming.append(self)
