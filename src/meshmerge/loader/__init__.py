# src/meshmerge/loader/__init__.py

"""
Public interface for the mesh file loader stack.

Intended usage from other parts of the project and tests:

    from meshmerge.loader import (
        LineReader,
        read_header,
        parse_nodes,
        parse_elements,
        split_tokens,
        expand_inputs,
    )
"""

from __future__ import annotations
from .tokenizer import (
    parse_float_prefix,
    parse_int_prefix,
    snap_zero,
    split_tokens,
    trim,
)
from .line_reader import LineReader
from .header import read_header
from .node_parser import NodeState, NodeStep, node_transition, parse_nodes
from .element_parser import ElementState, ElementStep, element_transition, parse_elements
from .file_locator import expand_inputs


__all__ = [
    "ElementState",
    "ElementStep",
    "LineReader",
    "NodeState",
    "NodeStep",
    "element_transition",
    "expand_inputs",
    "node_transition",
    "parse_elements",
    "parse_float_prefix",
    "parse_int_prefix",
    "parse_nodes",
    "read_header",
    "snap_zero",
    "split_tokens",
    "trim",
]
