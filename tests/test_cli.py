# tests/test_cli.py

from __future__ import annotations

from typer.testing import CliRunner

from meshmerge.cli import app
from meshmerge.cli.utils import USAGE
from meshmerge.utils import mock_file_path

runner = CliRunner()

NODE_A = str(mock_file_path("region_1.exnode"))
NODE_B = str(mock_file_path("region_2.exnode"))
ELEM_A = str(mock_file_path("region_1.exelem"))
ELEM_B = str(mock_file_path("region_2.exelem"))


def test_merge_requires_a_record_kind() -> None:
    result = runner.invoke(app, ["merge", NODE_A])
    assert result.exit_code == 1
    assert "Usage" in result.output


def test_merge_rejects_both_kinds() -> None:
    result = runner.invoke(app, ["merge", "-e", "-n", NODE_A])
    assert result.exit_code == 1


def test_merge_nodes_to_stdout() -> None:
    result = runner.invoke(app, ["merge", "-n", NODE_B, NODE_A])
    assert result.exit_code == 0, result.output
    assert "Node: 1\n    2.000000\n" in result.output
    assert result.output.index("Node: 1") < result.output.index("Node: 4")


def test_merge_scenario_two_nodes_sorted(tmp_path) -> None:
    src = tmp_path / "in.exnode"
    src.write_text("Node: 3\n 1.0\nNode: 1\n 2.0\n", encoding="utf-8")
    out = tmp_path / "out.exnode"

    result = runner.invoke(app, ["merge", "-n", str(src), "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_text(encoding="utf-8") == (
        "Node: 1\n    2.000000\nNode: 3\n    1.000000\n"
    )


def test_merge_glob_and_header_echo(tmp_path) -> None:
    out = tmp_path / "merged.exelem"
    pattern = str(mock_file_path("region_*.exelem"))

    result = runner.invoke(app, ["merge", "-e", pattern, "-r", "-q", "-o", str(out)])

    assert result.exit_code == 0, result.output
    text = out.read_text(encoding="utf-8")
    assert text.startswith(" Group name: region_2\n")
    assert text.count(" Element:") == 4


def test_merge_missing_input_fails(tmp_path) -> None:
    out = tmp_path / "out.exnode"
    missing = str(tmp_path / "missing.exnode")

    result = runner.invoke(app, ["merge", "-n", NODE_A, missing, "-o", str(out)])

    assert result.exit_code == 1
    assert "Error opening file" in result.output
    assert not out.exists()


def test_usage_line_is_printed_unwrapped() -> None:
    result = runner.invoke(app, ["merge", NODE_A])
    assert result.exit_code == 1
    assert USAGE in result.output


def test_long_missing_path_is_reported_on_one_line(tmp_path) -> None:
    deep = tmp_path.joinpath(*(["a_rather_long_directory_name"] * 4))
    missing = str(deep / "missing_input_with_a_long_name.exnode")

    result = runner.invoke(app, ["merge", "-n", missing])

    assert result.exit_code == 1
    assert f"Error opening file {missing}" in result.output


def test_merge_unwritable_output_fails(tmp_path) -> None:
    out = tmp_path / "no_dir" / "out.exnode"
    result = runner.invoke(app, ["merge", "-n", NODE_A, "-o", str(out)])
    assert result.exit_code == 1
    assert "Error opening output file" in result.output


def test_compare_equivalent_files(tmp_path) -> None:
    merged = tmp_path / "merged.exnode"
    runner.invoke(app, ["merge", "-n", NODE_A, "-o", str(merged)])

    result = runner.invoke(app, ["compare", "-n", NODE_A, str(merged)])

    assert result.exit_code == 0, result.output
    assert "Equivalent" in result.output


def test_compare_different_files() -> None:
    result = runner.invoke(app, ["compare", "-n", NODE_A, NODE_B])
    assert result.exit_code == 1
    assert "Different" in result.output


def test_stats_reports_counts() -> None:
    result = runner.invoke(app, ["stats", "-e", ELEM_A, ELEM_B])
    assert result.exit_code == 0, result.output
    assert "Records" in result.output
    assert "Chunk width" in result.output
