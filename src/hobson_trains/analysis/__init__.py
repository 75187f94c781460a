"""
Network analysis helpers.

- A brute-force oracle to check the heap-based solver against.
- A shape report: ring count and sizes, tree heights.
"""

from .reference import reference_counts
from .report import NetworkReport, analyze_network

__all__ = [
    "reference_counts",
    "NetworkReport",
    "analyze_network",
]
