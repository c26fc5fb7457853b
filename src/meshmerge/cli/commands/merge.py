from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from meshmerge.cli.utils import build_settings, enable_verbose, fail, kind_or_exit
from meshmerge.core.context import MergeContext
from meshmerge.core.exceptions import MergeError
from meshmerge.core.pipeline import Pipeline
from meshmerge.logging import get_logger

console = Console(stderr=True)
log = get_logger("cli.merge")


def merge_command(
    inputs: Optional[List[str]] = typer.Argument(
        None,
        help="Input files; names with * or ? are expanded as glob patterns",
    ),
    elements: bool = typer.Option(
        False,
        "--elements",
        "-e",
        help="Inputs are element files",
    ),
    nodes: bool = typer.Option(
        False,
        "--nodes",
        "-n",
        help="Inputs are node files",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write output to file instead of stdout",
    ),
    header: bool = typer.Option(
        False,
        "--header",
        "-r",
        help="Echo the header of the last input at the top of the output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Accepted for compatibility; has no effect",
    ),
    precision: Optional[float] = typer.Option(
        None,
        "--precision",
        help="Zero-snap tolerance (default from config, 1e-7)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Merge node or element files into one sorted file (stdout by default).
    """
    kind = kind_or_exit(elements, nodes)
    enable_verbose(verbose)

    settings = build_settings(add_header=header, quiet=quiet, precision=precision)

    ctx = MergeContext(
        settings=settings,
        logger=log,
        kind=kind,
        inputs=list(inputs or []),
        output_path=str(output) if output else None,
    )

    try:
        Pipeline(ctx).run()
    except MergeError as exc:
        fail(exc)

    if verbose:
        console.log(
            f"Merged {ctx.stats.get('records', 0)} record(s) "
            f"from {ctx.stats.get('files', 0)} file(s)"
        )
