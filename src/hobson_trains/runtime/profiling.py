"""
Counters and phase timings for the propagation passes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from hobson_trains.heap.binomial import BinomialHeap


@dataclass
class ProfileStats:
    unions: int = 0
    pruned_entries: int = 0
    peak_heap_size: int = 0
    events: Dict[str, float] = field(default_factory=dict)

    @property
    def pruned_per_union(self) -> float:
        return self.pruned_entries / self.unions if self.unions else 0.0


class Profiler:
    """
    Collects statistics while a network is solved.

    Heap sizes are read from the heap's tracked ``size``, so recording never
    walks a heap.
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    def record_absorb(self, heap: BinomialHeap, pruned: int) -> None:
        """Count one union that left ``heap`` behind after ``pruned`` removals."""
        self.stats.unions += 1
        self.stats.pruned_entries += pruned
        if heap.size > self.stats.peak_heap_size:
            self.stats.peak_heap_size = heap.size

    def record_event(self, name: str, duration_ms: float) -> None:
        self.stats.events[name] = self.stats.events.get(name, 0.0) + duration_ms

    def snapshot(self) -> ProfileStats:
        return self.stats
