# tests/test_line_reader.py

from __future__ import annotations

import io

from meshmerge.loader import LineReader, read_header


def test_readline_strips_terminators() -> None:
    reader = LineReader(io.StringIO("a\r\nb\n"))
    assert reader.readline() == "a"
    assert reader.readline() == "b"
    assert reader.readline() is None


def test_unread_returns_line_on_next_read() -> None:
    reader = LineReader.from_text("one\ntwo\nthree")
    first = reader.readline()
    second = reader.readline()
    reader.unread(second)

    assert first == "one"
    assert reader.readline() == "two"
    assert reader.readline() == "three"


def test_unread_during_iteration_is_seen_by_same_loop() -> None:
    reader = LineReader.from_text("x\ny\nz")
    seen = []
    replayed = False
    for line in reader:
        seen.append(line)
        if line == "y" and not replayed:
            replayed = True
            reader.unread(line)
    assert seen == ["x", "y", "y", "z"]


def test_read_header_stops_before_stopper_line() -> None:
    text = " Group name: a\n\n #Nodes=4\n  Element: 1\n Values:\n"
    reader = LineReader.from_text(text)

    header = read_header(reader, "Element")

    assert header == " Group name: a\n #Nodes=4\n"
    # The stopper line is handed back untouched
    assert reader.readline() == "  Element: 1"


def test_read_header_without_stopper_consumes_everything() -> None:
    reader = LineReader.from_text("title\nmore text\n")
    assert read_header(reader, "Node") == "title\nmore text\n"
    assert reader.readline() is None


def test_read_header_empty_when_file_starts_with_record() -> None:
    reader = LineReader.from_text("Node: 1\n 1.0\n")
    assert read_header(reader, "Node") == ""
    assert reader.readline() == "Node: 1"
