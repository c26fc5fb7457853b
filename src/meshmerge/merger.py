"""
merger.py
Merge engine: reads every input file of one record kind into a single
sorted record list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Union

from meshmerge.config import MergeSettings
from meshmerge.core.exceptions import InputFileError
from meshmerge.logging import get_logger
from meshmerge.loader.element_parser import parse_elements
from meshmerge.loader.header import read_header
from meshmerge.loader.line_reader import LineReader
from meshmerge.loader.node_parser import parse_nodes
from meshmerge.models import Record, RecordKind
from meshmerge.sorter import sort_records

log = get_logger(__name__)


@dataclass
class MergeResult:
    """
    Outcome of a merge run.

    Attributes:
        kind: Record kind that was read.
        header: Header text of the last processed file.
        records: All records from all files, sorted.
        files: Files that were read, in processing order.
    """
    kind: RecordKind
    header: str = ""
    records: List[Record] = field(default_factory=list)
    files: List[str] = field(default_factory=list)


class MeshMerger:
    """
    High-level merger:
      - opens each input in turn
      - reads its header (only the last one is kept)
      - appends its records to one shared list
      - sorts the list once all inputs are read
    """

    def __init__(self, kind: RecordKind, settings: Optional[MergeSettings] = None):
        self.kind = kind
        self.settings = settings if settings is not None else MergeSettings()

        self.header: str = ""
        self.records: List[Record] = []
        self.files: List[str] = []

    # ---------------------------------------------------------
    # Single source
    # ---------------------------------------------------------
    def load_reader(self, reader: LineReader) -> int:
        """Consume one already-open source. Returns the number of new records."""
        before = len(self.records)
        self.header = read_header(reader, self.kind.stopper)

        if self.kind is RecordKind.NODE:
            parse_nodes(reader, self.settings.precision, into=self.records)  # type: ignore[arg-type]
        else:
            parse_elements(reader, self.settings.precision, into=self.records)  # type: ignore[arg-type]

        return len(self.records) - before

    def load_file(self, path: Union[str, Path]) -> int:
        """Read one input file. Raises InputFileError if it cannot be opened."""
        try:
            handle = open(path, "r", encoding="utf-8", errors="replace")
        except OSError as exc:
            log.debug(f"Cannot open input file {path}: {exc}")
            raise InputFileError(path, str(exc)) from exc

        with handle:
            added = self.load_reader(LineReader(handle))

        self.files.append(str(path))
        log.info(f"Read {added} {self.kind.value} record(s) from {path}")
        return added

    # ---------------------------------------------------------
    # Full run
    # ---------------------------------------------------------
    def run(self, paths: Iterable[Union[str, Path]]) -> MergeResult:
        """Read all inputs in order, then sort. Returns the merged result."""
        for path in paths:
            self.load_file(path)

        return self.finish()

    def finish(self) -> MergeResult:
        records = sort_records(self.kind, self.records)
        log.info(
            f"Merged {len(records)} {self.kind.value} record(s) from {len(self.files)} file(s)"
        )
        return MergeResult(
            kind=self.kind,
            header=self.header,
            records=records,
            files=list(self.files),
        )
