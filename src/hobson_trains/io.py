"""
Reading problems and writing answers in the plain whitespace format:

    n k
    t_1
    ...
    t_n

where ``t_i`` is the 1-based target of station ``i``. Answers are one count
per line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, TextIO

import numpy as np


@dataclass(frozen=True)
class Problem:
    horizon: int
    targets: List[int]

    @property
    def size(self) -> int:
        return len(self.targets)


def parse_problem(text: str) -> Problem:
    """
    Parse and validate a problem. Raises ``ValueError`` on malformed input.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Expected `n k` at the start of the input.")
    try:
        values = np.array(tokens, dtype=np.int64)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"Input must contain only 64-bit integers: {exc}") from exc

    n, horizon = int(values[0]), int(values[1])
    if n < 0:
        raise ValueError(f"Station count must be non-negative, got {n}.")
    if horizon < 0:
        raise ValueError(f"Horizon must be non-negative, got {horizon}.")

    targets = values[2:]
    if targets.size != n:
        raise ValueError(f"Expected {n} targets, found {targets.size}.")

    bad = np.flatnonzero((targets < 1) | (targets > n))
    if bad.size:
        first = int(bad[0])
        raise ValueError(
            f"Station {first + 1} targets {int(targets[first])}, outside 1..{n}."
        )

    return Problem(horizon=horizon, targets=targets.tolist())


def read_problem(stream: TextIO) -> Problem:
    return parse_problem(stream.read())


def format_counts(counts: Sequence[int]) -> str:
    return "".join(f"{count}\n" for count in counts)


def write_counts(stream: TextIO, counts: Sequence[int]) -> None:
    stream.write(format_counts(counts))
