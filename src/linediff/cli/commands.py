"""CLI command implementations"""

from typing import Annotated, Optional

import typer

from linediff.config import Settings, load_config
from linediff.core.pipeline import diff_files
from linediff.core.render import render_json, render_text
from linediff.core.utils.summary import diff_summary


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def diff_cmd(
    old: Annotated[str, typer.Argument(help="Original file")],
    new: Annotated[str, typer.Argument(help="Changed file")],
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Combined line count above which lines are not aligned")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="text or json")] = None,
    line_numbers: Annotated[Optional[bool], typer.Option("--line-numbers/--no-line-numbers", help="Show line numbers in text output")] = None,
    ):
    """Print the line diff of OLD -> NEW."""
    settings = _settings(overrides={"max_lines": max_lines, "output_format": fmt, "line_numbers": line_numbers})
    try:
        lines = diff_files(old, new, max_lines=settings.max_lines, encoding=settings.encoding)
    except RuntimeError as e:
        _fail(str(e))

    if settings.output_format == "json":
        typer.echo(render_json(lines))
    elif lines:
        typer.echo(render_text(lines, line_numbers=settings.line_numbers))


def stats_cmd(
    old: Annotated[str, typer.Argument(help="Original file")],
    new: Annotated[str, typer.Argument(help="Changed file")],
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Combined line count above which lines are not aligned")] = None,
    ):
    """Print added/removed/unchanged line counts for OLD -> NEW."""
    settings = _settings(overrides={"max_lines": max_lines})
    try:
        lines = diff_files(old, new, max_lines=settings.max_lines, encoding=settings.encoding)
    except RuntimeError as e:
        _fail(str(e))

    counts = diff_summary(lines)
    typer.echo(f"{counts['added']} added, {counts['removed']} removed, {counts['unchanged']} unchanged")
