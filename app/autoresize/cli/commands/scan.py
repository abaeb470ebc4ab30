"""Scan command implementation.

Lists the candidate files a batch run would hand to the resizer,
without dispatching them.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from autoresize.cli.types import OutputFormat, load_task_config
from autoresize.core.batch import BatchCoordinator
from autoresize.notify.notifier import LogNotifier
from autoresize.resizer.loader import ResizerLoadError, load_resizer
from autoresize.traversal.models import FileCandidate
from autoresize.traversal.walker import TraversalError
from autoresize.utils.formatting import (
    console,
    create_table,
    print_error,
    print_success,
    print_warning,
)

app = typer.Typer(
    name="scan",
    help="List candidate files without resizing them.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def scan(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to the configuration file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=1, help="Limit number of results."),
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
    """List every file a batch run would hand to the resizer."""
    config = load_task_config(config_path, directories, excludes)
    try:
        resizer = load_resizer(config.task.resizer)
    except ResizerLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    resizer.initialize_rulesets(config.rulesets.as_configuration())

    coordinator = BatchCoordinator(resizer, config.task.site_root, LogNotifier())
    plan = coordinator.plan_roots(config.task.directories)
    walker = coordinator.build_walker(config.task.exclude_directories)

    candidates: list[FileCandidate] = []
    failed = False
    for root in plan.roots:
        try:
            candidates.extend(walker.candidates(root))
        except TraversalError as e:
            print_warning(str(e))
            failed = True

    display = candidates[:limit] if limit else candidates

    if output_format == OutputFormat.JSON:
        _print_json(display)
    elif not candidates:
        print_success("No candidate files found.")
    else:
        _print_table(display)
        console.print(f"\n[dim]Found {len(candidates)} candidate file(s)[/dim]")
        if limit and len(display) < len(candidates):
            console.print(
                f"[dim](showing {len(display)} of {len(candidates)}, limited to {limit})[/dim]"
            )

    if failed:
        raise typer.Exit(code=1)


def _print_table(candidates: list[FileCandidate]) -> None:
    """Display candidates as a Rich table."""
    table = create_table("Candidate Files", "Path", "Type")
    for candidate in candidates:
        table.add_row(str(candidate.path), candidate.extension)
    console.print(table)


def _print_json(candidates: list[FileCandidate]) -> None:
    """Display candidates as JSON."""
    data = [
        {
            "path": str(c.path),
            "directory": str(c.directory),
            "name": c.name,
            "extension": c.extension,
        }
        for c in candidates
    ]
    console.print_json(json.dumps(data))
