"""Config Typer app."""

import typer

from guestwatch.api.config.cmd_set import cmd_set
from guestwatch.api.config.cmd_show import cmd_show
from guestwatch.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create the config sub-app."""
    app = typer.Typer(
        name="config",
        help="Configuration",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def config_callback(ctx: typer.Context) -> None:
        """Configuration operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_command(
        section: str = typer.Argument("", help="Section to show (guest, watcher, log); empty shows all"),
    ) -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)(section)

    @app.command(name="set")
    def set_command(
        key: str = typer.Argument(..., help="Dot-path key, e.g. guest.instance"),
        value: str = typer.Argument("", help="New value (parsed as JSON when possible)"),
        delete: bool = typer.Option(False, "--delete", help="Reset the key to its default"),
    ) -> None:
        """Set a configuration value."""
        _handle_stage_result(cmd_set)(key, value, delete)

    return app
