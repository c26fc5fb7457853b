
from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Iterable, List, NoReturn, Optional

import typer
from rich.console import Console

from meshmerge.config import MergeSettings, get_config
from meshmerge.core.exceptions import MergeError, UsageError
from meshmerge.logging import set_console_level
from meshmerge.loader.file_locator import expand_inputs
from meshmerge.merger import MergeResult, MeshMerger
from meshmerge.models import RecordKind

console = Console()
err_console = Console(stderr=True)

USAGE = (
    "Usage: meshmerge merge -e|-n <list_of_element_or_node_files> "
    "[-o output] [-r (to add header to the output)] [-q (for quiet operations)]"
)


def resolve_kind(elements: bool, nodes: bool) -> RecordKind:
    """Exactly one of the two kind flags must be given."""
    if elements == nodes:
        raise UsageError("Select exactly one of --elements/-e or --nodes/-n")
    return RecordKind.ELEMENT if elements else RecordKind.NODE


def kind_or_exit(elements: bool, nodes: bool) -> RecordKind:
    try:
        return resolve_kind(elements, nodes)
    except UsageError as exc:
        err_console.print(str(exc), markup=False, soft_wrap=True)
        err_console.print(USAGE, markup=False, soft_wrap=True)
        raise typer.Exit(code=1)


def build_settings(
    *,
    add_header: Optional[bool] = None,
    quiet: Optional[bool] = None,
    precision: Optional[float] = None,
) -> MergeSettings:
    """Configured settings with command-line overrides applied."""
    settings = get_config().merge_settings()
    overrides = {}
    if add_header:
        overrides["add_header"] = True
    if quiet:
        overrides["quiet"] = True
    if precision is not None:
        overrides["precision"] = precision
    return replace(settings, **overrides) if overrides else settings


def enable_verbose(verbose: bool) -> None:
    if verbose:
        set_console_level(logging.DEBUG)


def load_records(
    kind: RecordKind,
    inputs: Iterable[str],
    settings: MergeSettings,
    *,
    verbose: bool = False,
) -> MergeResult:
    """Expand and merge the inputs without writing anything."""
    t0 = time.perf_counter()

    paths: List[str] = expand_inputs(inputs)
    result = MeshMerger(kind, settings).run(paths)

    elapsed = time.perf_counter() - t0
    if verbose:
        console.log(f"Loaded {len(result.records)} record(s) in {elapsed:.2f}s")

    return result


def fail(exc: MergeError) -> NoReturn:
    """Print a diagnostic for a fatal error and exit non-zero."""
    err_console.print(str(exc), markup=False, soft_wrap=True)
    raise typer.Exit(code=1)
