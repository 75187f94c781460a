from __future__ import annotations

import json

from benchmarks.utils import (
    BenchmarkResult,
    export_json,
    format_summary_table,
    run_single_trial,
    summarize,
)


def test_summarize_and_format_table() -> None:
    results = [
        BenchmarkResult("random", "heap", 0, stations=100, horizon=3, wall_time_s=0.5),
        BenchmarkResult(
            "random", "heap", 1, stations=100, horizon=3, wall_time_s=0.7, peak_cpu_bytes=2_000_000
        ),
        BenchmarkResult("random", "reference", 0, stations=100, horizon=3, wall_time_s=0.9),
    ]

    summary = summarize(results)
    table = format_summary_table(summary)

    assert [row["mode"] for row in summary] == ["heap", "reference"]
    assert summary[0]["wall_time_max_s"] == 0.7
    assert summary[1]["peak_cpu_mean_mb"] is None
    assert "mode" in table
    assert format_summary_table([]) == "No results recorded."


def test_run_single_trial_returns_counts(tmp_path) -> None:
    result, counts = run_single_trial(
        "demo", "heap", 0, stations=2, horizon=1, solve_fn=lambda: [2, 1]
    )
    assert counts == [2, 1]
    assert result.wall_time_s >= 0.0

    destination = tmp_path / "out" / "results.json"
    export_json([result], destination)
    assert json.loads(destination.read_text())[0]["mode"] == "heap"
