"""
The single combination step shared by tree and ring propagation.
"""

from __future__ import annotations

from typing import Optional

from hobson_trains.heap.binomial import BinomialHeap, union
from hobson_trains.heap.validate import validate_heap
from hobson_trains.runtime.profiling import Profiler
from hobson_trains.utils.config import config


def absorb(
    heap: BinomialHeap,
    feeder: BinomialHeap,
    horizon: int,
    profiler: Optional[Profiler] = None,
) -> BinomialHeap:
    """
    Union ``heap`` with ``feeder`` shifted one hop further away, then drop
    every entry beyond ``horizon``.

    ``heap`` is consumed; ``feeder`` is only read.
    """
    shifted = feeder.increment_keys()
    merged = union(heap, shifted, take_ownership=True)
    removed = merged.prune(horizon)

    if profiler is not None:
        profiler.record_absorb(merged, len(removed))
    if config.validate_heaps:
        validate_heap(merged)
    return merged
