"""Watcher Typer app that registers all watcher commands."""

from pathlib import Path

import typer

from guestwatch.api.watcher.cmd_roots import cmd_roots
from guestwatch.api.watcher.cmd_run import cmd_run
from guestwatch.api.watcher.cmd_touch import cmd_touch
from guestwatch.cli._handle_stage_result import _handle_stage_result


def watcher() -> typer.Typer:
    """Create the watcher sub-app."""
    app = typer.Typer(
        name="watcher",
        help="Host filesystem watcher",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def watcher_callback(ctx: typer.Context) -> None:
        """Watcher operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="run")
    def run_command() -> None:
        """Run the watcher in the foreground until interrupted (Ctrl+C)."""
        _handle_stage_result(cmd_run)()

    @app.command(name="roots")
    def roots_command() -> None:
        """List the host directories that would be watched."""
        _handle_stage_result(cmd_roots)()

    @app.command(name="touch")
    def touch_command(
        path: Path = typer.Argument(..., help="Host path to touch inside the guest"),
    ) -> None:
        """Touch a single path inside the guest."""
        _handle_stage_result(cmd_touch)(path)

    return app
