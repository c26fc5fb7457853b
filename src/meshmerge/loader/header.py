# src/meshmerge/loader/header.py

from __future__ import annotations

from .line_reader import LineReader
from .tokenizer import trim_leading


def read_header(reader: LineReader, stopper: str) -> str:
    """
    Collect the free-text header that precedes the first record.

    Blank lines are skipped. The first line whose left-trimmed text starts
    with ``stopper`` ends the header and is pushed back onto ``reader`` so
    the record parser sees it next. Every other line is kept as written
    (minus its terminator) and followed by a newline.

    Returns:
        The header text; everything read so far if EOF comes first.
    """
    parts = []

    for line in reader:
        stripped = trim_leading(line)
        if not stripped:
            continue
        if stripped.startswith(stopper):
            reader.unread(line)
            break
        parts.append(line)
        parts.append("\n")

    return "".join(parts)
