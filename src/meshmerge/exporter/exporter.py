"""
exporter.py
High-level export entry point.

    export_records(result, output_path, settings)

writes a MergeResult to a file, or to standard output when no path is
given. Rendering lives in text_exporter.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from meshmerge.config import MergeSettings
from meshmerge.core.exceptions import OutputFileError
from meshmerge.logging import get_logger
from meshmerge.merger import MergeResult

from .text_exporter import render_records

log = get_logger(__name__)


def write_records(result: MergeResult, stream: TextIO, settings: MergeSettings) -> None:
    for chunk in render_records(result.kind, result.header, result.records, settings):
        stream.write(chunk)


def export_records(
    result: MergeResult,
    output_path: Optional[Union[str, Path]] = None,
    settings: Optional[MergeSettings] = None,
) -> None:
    """
    Write merged records to ``output_path`` (stdout when None or empty).

    Raises:
        OutputFileError: if the output file cannot be opened. Nothing is
            written in that case.
    """
    settings = settings if settings is not None else MergeSettings()

    if not output_path:
        log.info(f"Writing {len(result.records)} record(s) to stdout")
        write_records(result, sys.stdout, settings)
        sys.stdout.flush()
        return

    output_path = Path(output_path)
    try:
        handle = output_path.open("w", encoding="utf-8")
    except OSError as exc:
        log.debug(f"Cannot open output file {output_path}: {exc}")
        raise OutputFileError(output_path, str(exc)) from exc

    with handle:
        write_records(result, handle, settings)

    log.info(
        "Export complete: %s (%d record(s), %d bytes)",
        output_path,
        len(result.records),
        output_path.stat().st_size,
    )
