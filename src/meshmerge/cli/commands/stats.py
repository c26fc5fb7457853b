from __future__ import annotations

from collections import Counter
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from meshmerge.cli.utils import build_settings, enable_verbose, fail, kind_or_exit, load_records
from meshmerge.core.exceptions import MergeError
from meshmerge.exporter import chunk_width_from_header
from meshmerge.models import RecordKind
from meshmerge.sorter import element_sort_key, node_sort_key

console = Console()


def stats_command(
    inputs: Optional[List[str]] = typer.Argument(None, help="Input files or glob patterns"),
    elements: bool = typer.Option(False, "--elements", "-e", help="Inputs are element files"),
    nodes: bool = typer.Option(False, "--nodes", "-n", help="Inputs are node files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable rich logging"),
):
    """
    Show summary statistics for a set of node or element files.
    """
    kind = kind_or_exit(elements, nodes)
    enable_verbose(verbose)

    try:
        result = load_records(kind, list(inputs or []), build_settings(), verbose=verbose)
    except MergeError as exc:
        fail(exc)

    key = node_sort_key if kind is RecordKind.NODE else element_sort_key
    counts = Counter(key(rec) for rec in result.records)  # type: ignore[arg-type]
    duplicates = sum(1 for n in counts.values() if n > 1)

    table = Table(title=f"Mesh {kind.value.title()} Statistics")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Files", str(len(result.files)))
    table.add_row("Records", str(len(result.records)))
    table.add_row("Distinct keys", str(len(counts)))
    table.add_row("Duplicated keys", str(duplicates))
    if kind is RecordKind.ELEMENT:
        table.add_row("Chunk width", str(chunk_width_from_header(result.header)))

    console.print(table)
