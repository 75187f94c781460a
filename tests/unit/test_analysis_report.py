from __future__ import annotations

from hobson_trains.analysis.reference import reference_counts
from hobson_trains.analysis.report import NetworkReport, analyze_network
from hobson_trains.graph.builders import from_targets


def test_reference_counts_example() -> None:
    assert reference_counts([2, 3, 3, 3], 1) == [1, 2, 3, 1]
    assert reference_counts([2, None, 2], 1) == [1, 3, 1]
    assert reference_counts([2, 3, 1], 0) == [1, 1, 1]


def test_analyze_network_summarises_shape() -> None:
    # ring 1 -> 2 -> 3 -> 1 fed by the chain 6 -> 5 -> 4 -> 1, plus self-loop 7
    network = from_targets([2, 3, 1, 1, 4, 5, 7], horizon=2)
    report = analyze_network(network)

    assert isinstance(report, NetworkReport)
    assert report.stations == 7
    assert report.horizon == 2
    assert report.tree_stations == 3
    assert report.ring_stations == 4
    assert sorted(report.ring_sizes) == [1, 3]
    assert report.max_tree_height == 3
    assert any("independent rings" in note for note in report.notes)
    assert all(len(s.heap) == 1 for s in network)


def test_analyze_network_without_rings() -> None:
    report = analyze_network(from_targets([2, None], horizon=1))
    assert report.ring_sizes == []
    assert report.max_tree_height == 2
    assert any("No rings" in note for note in report.notes)
