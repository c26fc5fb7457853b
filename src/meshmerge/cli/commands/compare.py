from __future__ import annotations

from typing import Optional, Sequence

import typer
from rich.console import Console

from meshmerge.cli.utils import build_settings, enable_verbose, fail, kind_or_exit, load_records
from meshmerge.core.exceptions import MergeError
from meshmerge.models import Node, Record, records_equivalent

console = Console()


def _key(record: Record):
    if isinstance(record, Node):
        return record.id
    return list(record.id)


def first_difference(left: Sequence[Record], right: Sequence[Record], precision: float) -> int:
    """Index of the first pair that differs (the shorter length if one list is a prefix)."""
    for index, (a, b) in enumerate(zip(left, right)):
        if not records_equivalent([a], [b], precision):
            return index
    return min(len(left), len(right))


def compare_command(
    left: str = typer.Argument(..., help="Reference file or glob pattern"),
    right: str = typer.Argument(..., help="File or glob pattern to compare against it"),
    elements: bool = typer.Option(False, "--elements", "-e", help="Inputs are element files"),
    nodes: bool = typer.Option(False, "--nodes", "-n", help="Inputs are node files"),
    precision: Optional[float] = typer.Option(
        None,
        "--precision",
        help="Tolerance for float comparison (default from config, 1e-7)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable rich logging"),
):
    """
    Check whether two sets of files hold equivalent records.

    Both sides are merged and sorted, then compared record by record:
    integers exactly, floats within the precision. Exits 1 on difference.
    """
    kind = kind_or_exit(elements, nodes)
    enable_verbose(verbose)
    settings = build_settings(precision=precision)

    try:
        lhs = load_records(kind, [left], settings, verbose=verbose)
        rhs = load_records(kind, [right], settings, verbose=verbose)
    except MergeError as exc:
        fail(exc)

    if records_equivalent(lhs.records, rhs.records, settings.precision):
        console.print(f"[green]Equivalent[/green]: {len(lhs.records)} {kind.value} record(s)")
        return

    index = first_difference(lhs.records, rhs.records, settings.precision)
    if index < min(len(lhs.records), len(rhs.records)):
        detail = f"first difference at {kind.value} {_key(lhs.records[index])}"
    else:
        detail = f"record counts differ ({len(lhs.records)} vs {len(rhs.records)})"

    console.print(f"[red]Different[/red]: {detail}")
    raise typer.Exit(code=1)
