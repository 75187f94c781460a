from __future__ import annotations

import io
import logging

from hobson_trains.cli import EXIT_BAD_INPUT, main

EXAMPLE = "4 1\n2\n3\n3\n3\n"


def test_cli_reads_file_and_writes_file(tmp_path) -> None:
    source = tmp_path / "network.txt"
    source.write_text(EXAMPLE)
    destination = tmp_path / "counts.txt"

    assert main([str(source), "-o", str(destination)]) == 0
    assert destination.read_text() == "1\n2\n3\n1\n"


def test_cli_reads_stdin_and_writes_stdout(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("5 2\n2\n3\n1\n1\n4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "5\n4\n3\n2\n1\n"


def test_cli_rejects_malformed_input(tmp_path, caplog) -> None:
    source = tmp_path / "bad.txt"
    source.write_text("3 1\n2\n9\n1\n")

    with caplog.at_level(logging.ERROR, logger="hobson_trains"):
        assert main([str(source)]) == EXIT_BAD_INPUT
    assert "Malformed input" in caplog.text


def test_cli_rejects_oversized_integer(tmp_path, caplog) -> None:
    source = tmp_path / "huge.txt"
    source.write_text("2 99999999999999999999\n2\n1\n")

    with caplog.at_level(logging.ERROR, logger="hobson_trains"):
        assert main([str(source)]) == EXIT_BAD_INPUT
    assert "Malformed input" in caplog.text


def test_cli_reports_missing_input_file(tmp_path, caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="hobson_trains"):
        assert main([str(tmp_path / "absent.txt")]) == EXIT_BAD_INPUT
    assert "Cannot read input" in caplog.text


def test_cli_check_and_stats(tmp_path, caplog, capsys) -> None:
    source = tmp_path / "network.txt"
    source.write_text(EXAMPLE)

    with caplog.at_level(logging.INFO, logger="hobson_trains"):
        assert main([str(source), "--check", "--stats", "--validate-heaps"]) == 0
    assert "match the brute-force reference" in caplog.text
    assert "unions=" in caplog.text
    assert capsys.readouterr().out == "1\n2\n3\n1\n"
