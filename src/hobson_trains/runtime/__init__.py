"""
Runtime support for the propagation passes.

Currently this is only profiling: union counts, pruned entries, peak heap
size and per-phase timings.
"""

from .profiling import Profiler, ProfileStats

__all__ = [
    "Profiler",
    "ProfileStats",
]
