from __future__ import annotations

from hobson_trains.graph.builders import from_targets
from hobson_trains.graph.station import Classification
from hobson_trains.propagation.classify import classify


def _kinds(network) -> str:
    return "".join("T" if s.is_tree else "R" for s in network)


def test_classify_example_network() -> None:
    network = from_targets([2, 3, 3, 3], horizon=1)
    order = classify(network)

    assert _kinds(network) == "TTRT"
    assert [s.station_id for s in order] == [1, 4, 2]


def test_pure_ring_has_no_tree_stations() -> None:
    network = from_targets([2, 3, 1], horizon=1)
    assert classify(network) == []
    assert _kinds(network) == "RRR"


def test_terminal_station_is_a_tree_root() -> None:
    network = from_targets([2, None, 2], horizon=1)
    classify(network)
    assert _kinds(network) == "TTT"


def test_independent_rings() -> None:
    network = from_targets([2, 1, 4, 3, 3, 5], horizon=1)
    classify(network)
    assert _kinds(network) == "RRRRTT"
    assert sorted(len(ring) for ring in network.rings()) == [2, 2]


def test_reclassification_resets_previous_state() -> None:
    network = from_targets([1, 1], horizon=0)
    for station in network:
        station.classification = Classification.TREE
    classify(network)
    assert _kinds(network) == "RT"
