"""
Exporter package.

Re-exports the text export entry points used by the pipeline and the CLI.
"""

from __future__ import annotations

from .exporter import export_records, write_records
from .text_exporter import chunk_width_from_header, render_records, serialize_records

__all__ = [
    "chunk_width_from_header",
    "export_records",
    "render_records",
    "serialize_records",
    "write_records",
]
