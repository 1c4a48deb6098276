"""CLI output and error rendering helpers.

This module centralizes user-facing presentation for command diagnostics and
the result summary shown after a split.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import PipelineStageError
from .models.datatypes import SplitResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, PipelineStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def split_status(copy_requested: bool, copied: bool) -> str:
    """Return the status line for a finished split."""

    if not copy_requested:
        return "Done"
    return "Copied to clipboard" if copied else "Could not copy automatically"


def echo_split_summary(result: SplitResult, status: str) -> None:
    """Print result count and status on stderr so stdout stays pipeable."""

    typer.echo(f"Count: {result.count}", err=True)
    if result.duplicate_count:
        typer.echo(f"Duplicates removed: {result.duplicate_count}", err=True)
    typer.secho(status, fg=typer.colors.GREEN, err=True)
