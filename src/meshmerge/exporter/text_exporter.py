"""
text_exporter.py
Renders merged records back into the mesh text layout.

Node layout::

    Node: 3
        1.000000

Element layout::

     Element:         5 0 0
     Values:
       1.000000 2.000000 3.000000 4.000000

     Nodes:
         1 2 3 4
     Scale factors:
        1.000000

Values are written in rows of ``chunk width`` numbers, where the width is
the ``#Nodes=<N>`` count declared in the header (1 when absent). Scale
factors are written with the same stride: only ``scale[0], scale[N], ...``
appear in the output, so that field does not survive a round trip.
"""

from __future__ import annotations

import re
from typing import Iterator, Sequence

from meshmerge.config import MergeSettings
from meshmerge.models import Element, Node, Record, RecordKind

_NODE_COUNT = re.compile(r"#Nodes=\s*([+-]?\d+)")


def chunk_width_from_header(header: str) -> int:
    """Values per output row, from the header's ``#Nodes=<N>`` token."""
    match = _NODE_COUNT.search(header or "")
    if match is None:
        return 1
    width = int(match.group(1))
    return width if width > 0 else 1


def _fmt(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def render_header(header: str) -> Iterator[str]:
    yield f"{header}\n"


def render_nodes(nodes: Sequence[Node], settings: MergeSettings) -> Iterator[str]:
    for node in nodes:
        yield f"Node: {node.id}\n"
        for value in node.values:
            yield f"    {_fmt(value, settings.decimals)}\n"


def render_element(element: Element, width: int, decimals: int) -> Iterator[str]:
    yield " Element:        " + "".join(f" {i}" for i in element.id) + "\n"

    yield " Values:\n"
    values = element.values
    for start in range(0, len(values), width):
        row = values[start:start + width]
        yield "  " + "".join(f" {_fmt(v, decimals)}" for v in row) + "\n"
    yield "\n"

    yield " Nodes:\n"
    yield "    " + "".join(f" {n}" for n in element.nodes) + "\n"

    # One scale factor per chunk, not the full array
    yield " Scale factors:\n"
    yield "   " + "".join(f" {_fmt(s, decimals)}" for s in element.scale[::width]) + "\n"


def render_elements(
    elements: Sequence[Element], header: str, settings: MergeSettings
) -> Iterator[str]:
    width = chunk_width_from_header(header)
    for element in elements:
        yield from render_element(element, width, settings.decimals)


def render_records(
    kind: RecordKind,
    header: str,
    records: Sequence[Record],
    settings: MergeSettings,
) -> Iterator[str]:
    """
    Yield the complete output text chunk by chunk.

    The header is echoed first when ``settings.add_header`` is set.
    """
    if settings.add_header:
        yield from render_header(header)

    if kind is RecordKind.NODE:
        yield from render_nodes(records, settings)  # type: ignore[arg-type]
    else:
        yield from render_elements(records, header, settings)  # type: ignore[arg-type]


def serialize_records(
    kind: RecordKind,
    header: str,
    records: Sequence[Record],
    settings: MergeSettings,
) -> str:
    return "".join(render_records(kind, header, records, settings))
