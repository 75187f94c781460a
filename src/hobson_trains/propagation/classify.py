"""
Split stations into tree stations and ring stations.
"""

from __future__ import annotations

from collections import deque
from typing import List

from hobson_trains.graph.network import Network
from hobson_trains.graph.station import Classification, Station
from hobson_trains.utils.logging import logger


def classify(network: Network) -> List[Station]:
    """
    Kahn-style sweep over incoming edges.

    Stations without incoming edges seed the queue. A dequeued station is a
    tree station; once every station feeding a target is a tree station the
    target is queued too. A cycle blocks the sweep, so the stations it
    never reaches are exactly the ring stations.

    Returns:
        Tree stations in the order they were classified (feeders first).
    """
    for station in network:
        station.classification = Classification.UNCLASSIFIED

    pending = [len(station.incoming) for station in network]
    ready = deque(station for station in network if not station.incoming)
    order: List[Station] = []

    while ready:
        current = ready.popleft()
        current.classification = Classification.TREE
        order.append(current)
        target = current.outgoing
        if target is None:
            continue
        pending[target.index] -= 1
        if pending[target.index] == 0:
            ready.append(target)

    for station in network:
        if station.classification is Classification.UNCLASSIFIED:
            station.classification = Classification.RING

    logger.debug(
        "Classified %d tree and %d ring stations.",
        len(order),
        len(network) - len(order),
    )
    return order
