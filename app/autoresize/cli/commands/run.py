"""Run command implementation.

Runs one batch resize over the watched directories.
"""

from pathlib import Path
from typing import Annotated

import typer

from autoresize.cli.types import load_task_config
from autoresize.configs.loader import ConfigurationMissingError
from autoresize.core.batch import RunOutcome, run_task
from autoresize.resizer.loader import ResizerLoadError, load_resizer
from autoresize.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    name="run",
    help="Run a batch resize over the watched directories.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def run(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to the configuration file."),
    ] = None,
    interactive: Annotated[
        bool | None,
        typer.Option(
            "--interactive/--unattended",
            help="Show notifications on the console, or log them. Defaults to the config.",
        ),
    ] = None,
    resizer_ref: Annotated[
        str | None,
        typer.Option(
            "--resizer",
            "-r",
            help="Resizer as 'module:attribute', or 'report' for a dry run.",
        ),
    ] = None,
    directories: Annotated[
        list[str] | None,
        typer.Option("--dir", "-d", help="Watched directory spec (repeatable)."),
    ] = None,
    excludes: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-x", help="Excluded directory spec (repeatable)."),
    ] = None,
) -> None:
    """Resize every recognized image below the watched directories.

    Wildcard specs such as 'media/*/photos/' are expanded, nested
    directories are walked only once, and hidden files, recycler
    directories and excluded directories are skipped.

    Examples:
        autoresize run                        # Run with ~/.config/autoresize/config.toml
        autoresize run --interactive          # Show notifications on the console
        autoresize run -d fileadmin/ -x fileadmin/_temp_/
    """
    config = load_task_config(config_path, directories, excludes)
    use_console = config.task.interactive if interactive is None else interactive

    try:
        resizer = load_resizer(resizer_ref or config.task.resizer)
    except ResizerLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    try:
        outcome = run_task(config, resizer, interactive=use_console, console=console)
    except ConfigurationMissingError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    quiet = bool(ctx.obj and ctx.obj.get("quiet"))
    _show_outcome(outcome, quiet=quiet)

    if not outcome.success:
        raise typer.Exit(code=1)


def _show_outcome(outcome: RunOutcome, *, quiet: bool) -> None:
    """Print the summary of a run."""
    for root in outcome.failed_roots:
        print_warning(f"Could not walk directory: {root}")

    if quiet:
        return

    console.print()
    console.print(
        f"[dim]Walked {len(outcome.roots)} director(ies), "
        f"skipped {len(outcome.skipped_roots)} nested, "
        f"dispatched {outcome.dispatched} file(s)[/dim]"
    )
    if outcome.file_errors:
        print_warning(f"{outcome.file_errors} file(s) could not be processed")
    if outcome.success:
        print_success("Batch resize completed.")
