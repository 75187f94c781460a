"""
Functional-graph representation used by the propagation passes.

- `Station` and `Classification` (see `station.py`)
- `Network`, the context holding stations and the horizon
- Builders from target lists, edge lists and random draws.
"""

from .station import Classification, Station
from .network import Network
from . import builders

__all__ = [
    "Classification",
    "Station",
    "Network",
    "builders",
]
