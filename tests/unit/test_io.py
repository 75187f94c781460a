from __future__ import annotations

import io

import pytest

from hobson_trains.io import Problem, format_counts, parse_problem, read_problem, write_counts


def test_parse_problem_example() -> None:
    problem = parse_problem("4 1\n2\n3\n3\n3\n")
    assert problem == Problem(horizon=1, targets=[2, 3, 3, 3])
    assert problem.size == 4


def test_parse_problem_accepts_any_whitespace() -> None:
    assert parse_problem("3 2 2 3 1").targets == [2, 3, 1]
    assert parse_problem("0 5\n") == Problem(horizon=5, targets=[])


@pytest.mark.parametrize(
    "text",
    [
        "",
        "4",
        "2 1\n2\n",
        "2 1\n2\n1\n1\n",
        "2 1\n2\nx\n",
        "2 1\n2\n99999999999999999999\n",
        "2 1\n2\n3\n",
        "2 1\n0\n1\n",
        "2 -1\n2\n1\n",
        "-2 1\n",
    ],
)
def test_parse_problem_rejects_malformed_input(text: str) -> None:
    with pytest.raises(ValueError):
        parse_problem(text)


def test_read_and_write_streams() -> None:
    problem = read_problem(io.StringIO("2 0\n2\n1\n"))
    assert problem.targets == [2, 1]

    out = io.StringIO()
    write_counts(out, [1, 2, 3])
    assert out.getvalue() == "1\n2\n3\n"
    assert format_counts([]) == ""
