"""
CLI command modules for meshmerge.

Each command module defines a single Typer-compatible command function.
"""

from meshmerge.cli.commands.compare import compare_command
from meshmerge.cli.commands.merge import merge_command
from meshmerge.cli.commands.stats import stats_command

__all__ = [
    "compare_command",
    "merge_command",
    "stats_command",
]
