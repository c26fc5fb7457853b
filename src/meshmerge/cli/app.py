
from __future__ import annotations

import typer

from meshmerge.cli.commands.compare import compare_command
from meshmerge.cli.commands.merge import merge_command
from meshmerge.cli.commands.stats import stats_command

app = typer.Typer(
    name="meshmerge",
    help="Merge, compare and inspect mesh node/element files",
    add_completion=False,
)

app.command("merge")(merge_command)
app.command("compare")(compare_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
