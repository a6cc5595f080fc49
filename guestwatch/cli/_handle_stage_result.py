"""Decorator to handle StageResult for CLI display."""

import functools
import json
import sys
from collections.abc import Callable
from datetime import datetime
from typing import TypeVar

import click
import typer
import yaml
from rich.console import Console

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Walk up the Click context tree to find the display format set by main_callback."""
    ctx = click.get_current_context(silent=True)
    while ctx is not None:
        obj = ctx.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        ctx = ctx.parent
    return "yaml"


def _handle_stage_result(func: F) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    This wrapper handles the 4-stage pattern for CLI:
    1. Announce (print to stderr)
    2. Progress (print to stderr)
    3. Result (print to stderr)
    4. Output (print to stdout as JSON or YAML)

    Exits with code 1 when the command reports failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        display_format = _extract_display_format()
        console = Console(file=sys.stderr)

        result = func(*args, **kwargs)
        console.print(f"[bold]{result.announce}[/bold]")

        for progress, message in result.progress_callback(result):
            timestamp = datetime.now().strftime("%H:%M:%S")
            console.print(f"[dim]{timestamp}[/dim] Progress: {message} ({progress:.1%})")

        if result.success:
            console.print(f"[green]{result.result}[/green]")
        else:
            console.print(f"[red]{result.result}[/red]")

        if display_format == "json":
            typer.echo(json.dumps(result.output, indent=2, default=str))
        else:
            typer.echo(yaml.safe_dump(result.output, sort_keys=False, default_flow_style=False).rstrip())

        if not result.success:
            raise typer.Exit(1)

    return wrapper  # type: ignore[return-value]
