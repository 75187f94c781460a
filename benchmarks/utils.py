from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from statistics import mean
from time import perf_counter
from typing import Callable, Dict, List, Optional, Sequence

try:  # optional CPU memory tracking
    import psutil  # type: ignore

    _PSUTIL_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - optional dependency
    psutil = None  # type: ignore
    _PSUTIL_AVAILABLE = False


@dataclass
class BenchmarkResult:
    """
    Structured summary for a single benchmark trial.
    """

    benchmark: str
    mode: str
    trial: int
    stations: int
    horizon: int
    wall_time_s: float
    peak_cpu_bytes: Optional[int] = None
    extra_metrics: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return asdict(self)


def run_single_trial(
    benchmark_name: str,
    mode: str,
    trial: int,
    *,
    stations: int,
    horizon: int,
    solve_fn: Callable[[], List[int]],
    extra_metrics: Optional[Dict[str, float]] = None,
) -> tuple[BenchmarkResult, List[int]]:
    """
    Run ``solve_fn`` once and record wall time and resident memory.

    Args:
        benchmark_name: Label for the benchmark family (e.g. "random").
        mode: Solver under test ("heap", "reference", ...).
        trial: Integer trial index.
        stations: Network size, for reporting.
        horizon: Reach horizon, for reporting.
        solve_fn: Callable returning the per-station counts.
        extra_metrics: Optional dictionary of custom metrics to attach.
    """
    proc = psutil.Process() if _PSUTIL_AVAILABLE else None
    rss_before = proc.memory_info().rss if proc else None

    start = perf_counter()
    counts = solve_fn()
    wall = perf_counter() - start

    peak_cpu = None
    if proc and rss_before is not None:
        peak_cpu = max(rss_before, proc.memory_info().rss)

    result = BenchmarkResult(
        benchmark=benchmark_name,
        mode=mode,
        trial=trial,
        stations=stations,
        horizon=horizon,
        wall_time_s=wall,
        peak_cpu_bytes=int(peak_cpu) if peak_cpu is not None else None,
        extra_metrics=extra_metrics or {},
    )
    return result, counts


def summarize(results: Sequence[BenchmarkResult]) -> List[dict]:
    """
    Aggregate benchmark results by mode and return summaries suitable for printing.
    """
    summaries: List[dict] = []
    by_mode: dict[str, List[BenchmarkResult]] = {}
    for res in results:
        by_mode.setdefault(res.mode, []).append(res)

    for mode, group in sorted(by_mode.items(), key=lambda kv: kv[0]):
        summaries.append(
            {
                "mode": mode,
                "trials": len(group),
                "stations": group[0].stations,
                "wall_time_mean_s": mean(r.wall_time_s for r in group),
                "wall_time_max_s": max(r.wall_time_s for r in group),
                "peak_cpu_mean_mb": (
                    mean(r.peak_cpu_bytes for r in group if r.peak_cpu_bytes is not None) / 1e6
                )
                if any(r.peak_cpu_bytes is not None for r in group)
                else None,
            }
        )
    return summaries


def export_json(results: Sequence[BenchmarkResult], destination: Path) -> None:
    """
    Write raw benchmark results to JSON for later analysis.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    payload = [res.to_dict() for res in results]
    destination.write_text(json.dumps(payload, indent=2))


def _format_value(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{value:.4f}"


def format_summary_table(summary: Sequence[dict]) -> str:
    """
    Format aggregated summaries into a readable table.
    """
    if not summary:
        return "No results recorded."

    headers = [
        "mode",
        "trials",
        "stations",
        "wall_time_mean_s",
        "wall_time_max_s",
        "peak_cpu_mean_mb",
    ]

    col_widths: dict[str, int] = {}
    for header in headers:
        max_len = len(header)
        for row in summary:
            value = row[header]
            cell = (
                _format_value(value)
                if isinstance(value, (float, type(None)))
                else str(value)
            )
            max_len = max(max_len, len(cell))
        col_widths[header] = max_len

    def format_cell(h: str, value: object) -> str:
        if isinstance(value, (float, type(None))):
            return _format_value(value).ljust(col_widths[h])
        return str(value).ljust(col_widths[h])

    lines = [
        " | ".join(h.ljust(col_widths[h]) for h in headers),
        "-+-".join("-" * col_widths[h] for h in headers),
    ]
    for row in summary:
        lines.append(" | ".join(format_cell(h, row[h]) for h in headers))
    return "\n".join(lines)
