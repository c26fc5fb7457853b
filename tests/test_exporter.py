# tests/test_exporter.py

from __future__ import annotations

import pytest

from meshmerge.config import MergeSettings
from meshmerge.core.exceptions import OutputFileError
from meshmerge.exporter import chunk_width_from_header, export_records, serialize_records
from meshmerge.loader import LineReader, parse_elements, parse_nodes
from meshmerge.merger import MergeResult
from meshmerge.models import Element, Node, RecordKind, records_equivalent

SETTINGS = MergeSettings()


def test_chunk_width_from_header() -> None:
    assert chunk_width_from_header(" #Nodes=4\n") == 4
    assert chunk_width_from_header(" Shape. Dimension=2\n") == 1
    assert chunk_width_from_header("#Nodes=0\n") == 1
    assert chunk_width_from_header("") == 1


def test_node_layout() -> None:
    nodes = [Node(id=1, values=(2.0,)), Node(id=3, values=(1.0, -0.5))]
    text = serialize_records(RecordKind.NODE, "", nodes, SETTINGS)
    assert text == "Node: 1\n    2.000000\nNode: 3\n    1.000000\n    -0.500000\n"


def test_header_echo_comes_first() -> None:
    settings = MergeSettings(add_header=True)
    text = serialize_records(RecordKind.NODE, " Group name: a\n", [Node(id=1)], settings)
    assert text == " Group name: a\n\nNode: 1\n"


def test_decimals_setting_controls_fixed_point() -> None:
    settings = MergeSettings(decimals=2)
    text = serialize_records(RecordKind.NODE, "", [Node(id=1, values=(1.23456,))], settings)
    assert text == "Node: 1\n    1.23\n"


def test_element_layout_width_one() -> None:
    element = Element(id=(5, 0), values=(1.0, 2.0), nodes=(3, 4), scale=(0.5, 0.25))
    text = serialize_records(RecordKind.ELEMENT, "", [element], SETTINGS)
    assert text.splitlines() == [
        " Element:         5 0",
        " Values:",
        "   1.000000",
        "   2.000000",
        "",
        " Nodes:",
        "     3 4",
        " Scale factors:",
        "    0.500000 0.250000",
    ]


def test_element_values_chunked_and_scale_subsampled_by_node_count() -> None:
    element = Element(
        id=(1,),
        values=tuple(float(v) for v in range(1, 9)),
        nodes=(1, 2, 3, 4),
        scale=(1.0, 1.0, 1.0, 1.0, 2.0, 2.0, 2.0, 2.0),
    )
    text = serialize_records(RecordKind.ELEMENT, " #Nodes=4\n", [element], SETTINGS)
    lines = text.splitlines()

    assert lines[2] == "   1.000000 2.000000 3.000000 4.000000"
    assert lines[3] == "   5.000000 6.000000 7.000000 8.000000"
    # Only scale[0] and scale[4] are written
    assert lines[-1] == "    1.000000 2.000000"


def test_last_values_row_may_be_short() -> None:
    element = Element(id=(1,), values=(1.0, 2.0, 3.0))
    lines = serialize_records(RecordKind.ELEMENT, "#Nodes=2", [element], SETTINGS).splitlines()
    assert lines[2:4] == ["   1.000000 2.000000", "   3.000000"]


def test_small_values_print_as_zero() -> None:
    reader = LineReader.from_text("Node: 1\n 0.00000003\n")
    nodes = parse_nodes(reader)
    text = serialize_records(RecordKind.NODE, "", nodes, SETTINGS)
    assert text == "Node: 1\n    0.000000\n"


def test_node_output_reparses_to_equivalent_records() -> None:
    nodes = [Node(id=1, values=(0.1234567, -2.0)), Node(id=2, values=(3.5,))]
    text = serialize_records(RecordKind.NODE, "", nodes, SETTINGS)
    again = parse_nodes(LineReader.from_text(text))
    assert records_equivalent(nodes, again, 1e-6)


def test_element_output_reparses_except_scale() -> None:
    element = Element(
        id=(2, 1),
        values=(0.5, 1.5, 2.5, 3.5),
        nodes=(1, 2, 3, 4),
        scale=(1.0, 1.0, 1.0, 1.0),
    )
    text = serialize_records(RecordKind.ELEMENT, "#Nodes=4", [element], SETTINGS)
    (again,) = parse_elements(LineReader.from_text(text))

    assert again.id == element.id
    assert again.nodes == element.nodes
    assert again.values == pytest.approx(element.values)
    # Scale factors come back subsampled
    assert again.scale == (1.0,)


def test_export_records_writes_file(tmp_path) -> None:
    result = MergeResult(kind=RecordKind.NODE, header="", records=[Node(id=1, values=(1.0,))])
    out = tmp_path / "merged.exnode"
    export_records(result, out, SETTINGS)
    assert out.read_text(encoding="utf-8") == "Node: 1\n    1.000000\n"


def test_export_records_defaults_to_stdout(capsys) -> None:
    result = MergeResult(kind=RecordKind.NODE, header="", records=[Node(id=7)])
    export_records(result, None, SETTINGS)
    assert capsys.readouterr().out == "Node: 7\n"


def test_export_records_unopenable_output_raises(tmp_path) -> None:
    result = MergeResult(kind=RecordKind.NODE, records=[Node(id=1)])
    target = tmp_path / "missing_dir" / "out.exnode"
    with pytest.raises(OutputFileError) as excinfo:
        export_records(result, target, SETTINGS)
    assert excinfo.value.path == str(target)
    assert not target.exists()
