"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from linediff.cli.commands import diff_cmd, stats_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-oriented text diff")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


app.command(name="diff")(diff_cmd)
app.command(name="stats")(stats_cmd)
