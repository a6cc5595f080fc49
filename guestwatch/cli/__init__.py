"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from guestwatch.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from guestwatch import __version__

        print(f"gwatch {__version__}")
        return 0

    app = _create_app()
    try:
        # standalone_mode=False: click returns the exit code of typer.Exit instead of exiting
        rv = app(argv, standalone_mode=False)
    except click.exceptions.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except click.exceptions.Abort:
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1

    return rv if isinstance(rv, int) else 0
