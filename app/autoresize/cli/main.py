"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from autoresize import __version__
from autoresize.cli.commands import init, roots, run, scan

# Create main Typer app
app = typer.Typer(
    name="autoresize",
    help="Batch resize images below watched directories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"autoresize version {__version__}")
        raise typer.Exit()


def configure_logging(*, verbose: bool, quiet: bool) -> None:
    """Set the root log level for this process.

    Unattended runs report through the log at INFO level. --verbose adds
    debug messages, --quiet keeps only warnings and errors.
    """
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO
    logging.getLogger().setLevel(level)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
) -> None:
    """autoresize - batch resize images below watched directories.

    Expands wildcard directory specs, walks each directory tree once and
    hands every recognized image to the resizer.
    """
    configure_logging(verbose=verbose, quiet=quiet)
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


# Register commands
app.add_typer(run.app, name="run")
app.add_typer(roots.app, name="roots")
app.add_typer(scan.app, name="scan")
app.add_typer(init.app, name="init")


if __name__ == "__main__":
    app()
