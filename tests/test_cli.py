import json
import logging
from pathlib import Path

import pytest

from netpaths import cli

SAMPLE_DATA = Path(__file__).resolve().parent / "sample_data"


def test_cli_paths_prints_sorted_paths(capsys) -> None:
    cli.main(["paths", str(SAMPLE_DATA / "diamond.yaml"), "A", "C"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["A-B-C", "A-B-D-C", "A-D-B-C", "A-D-C"]


def test_cli_paths_custom_separator(capsys) -> None:
    cli.main(["paths", str(SAMPLE_DATA / "diamond.yaml"), "A", "B", "-s", ">"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["A>B", "A>D>B", "A>D>C>B"]


def test_cli_paths_json(capsys) -> None:
    cli.main(["paths", str(SAMPLE_DATA / "diamond.yaml"), "A", "C", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert data["origin"] == "A"
    assert data["destination"] == "C"
    assert data["paths"] == [
        ["A", "B", "C"],
        ["A", "B", "D", "C"],
        ["A", "D", "B", "C"],
        ["A", "D", "C"],
    ]


def test_cli_paths_logs_count(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="netpaths"):
        cli.main(["paths", str(SAMPLE_DATA / "diamond.yaml"), "A", "C"])
    assert "4 paths from 'A' to 'C'" in caplog.text


@pytest.mark.parametrize(
    "origin, destination, message",
    [
        ("A", "E", "No path found between points"),
        ("Q", "A", 'The point with id "Q" could not be found'),
        ("A", "Q", 'The point with id "Q" could not be found'),
    ],
)
def test_cli_paths_query_errors_exit_1(origin, destination, message, caplog) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["paths", str(SAMPLE_DATA / "diamond.yaml"), origin, destination])
    assert exc_info.value.code == 1
    assert message in caplog.text


def test_cli_missing_file_exits_1(tmp_path: Path, caplog) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["paths", str(tmp_path / "missing.yaml"), "A", "B"])
    assert exc_info.value.code == 1
    assert "Net file not found" in caplog.text


def test_cli_invalid_file_exits_1(tmp_path: Path, caplog) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("edges: []\n")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(bad)])
    assert exc_info.value.code == 1
    assert "Unrecognized top-level key" in caplog.text


def test_cli_inspect_table(capsys) -> None:
    cli.main(["inspect", str(SAMPLE_DATA / "diamond.yaml")])
    out = capsys.readouterr().out
    assert "5 points" in out
    assert "Point" in out and "Neighbors" in out
    assert "A, C, D" in out
    assert "No adjacency problems found" in out


def test_cli_inspect_reports_one_way_links(capsys, caplog) -> None:
    cli.main(["inspect", str(SAMPLE_DATA / "one_way.yaml")])
    assert "'C' lists 'A', but 'A' does not list 'C'" in caplog.text
    assert "No adjacency problems found" not in capsys.readouterr().out


def test_cli_verbose_enables_debug(capsys) -> None:
    cli.main(["-v", "paths", str(SAMPLE_DATA / "diamond.yaml"), "A", "B"])
    assert logging.getLogger("netpaths").level == logging.DEBUG


def test_cli_quiet_sets_warning(capsys) -> None:
    cli.main(["--quiet", "paths", str(SAMPLE_DATA / "diamond.yaml"), "A", "B"])
    assert logging.getLogger("netpaths").level == logging.WARNING


def test_cli_no_args_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: netpaths" in capsys.readouterr().out


def test_format_table() -> None:
    table = cli._format_table(["A", "B"], [["1", "22"]], min_width=3)
    assert table.splitlines() == ["   A   | B  ", "   ----+----", "   1   | 22 "]
    assert cli._format_table(["A"], []) == ""

