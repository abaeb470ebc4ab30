"""Roots command implementation.

Shows which directories a batch run would walk, without visiting any
file.
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from autoresize.cli.types import OutputFormat, load_task_config
from autoresize.core.batch import BatchCoordinator, RootPlan
from autoresize.notify.notifier import LogNotifier
from autoresize.resizer.loader import ResizerLoadError, load_resizer
from autoresize.traversal.segments import relative_spec
from autoresize.utils.formatting import console, create_table, print_error, print_info

app = typer.Typer(
    name="roots",
    help="Show the directories a batch run would walk.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def roots(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to the configuration file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
    directories: Annotated[
        list[str] | None,
        typer.Option("--dir", "-d", help="Watched directory spec (repeatable)."),
    ] = None,
) -> None:
    """Expand wildcard specs and list the roots left after deduplication."""
    config = load_task_config(config_path, directories)
    try:
        resizer = load_resizer(config.task.resizer)
    except ResizerLoadError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
    resizer.initialize_rulesets(config.rulesets.as_configuration())

    coordinator = BatchCoordinator(resizer, config.task.site_root, LogNotifier())
    plan = coordinator.plan_roots(config.task.directories)

    if output_format == OutputFormat.JSON:
        _print_json(plan)
        return

    if not plan.roots and not plan.skipped:
        print_info("No directories match the watched specs.")
        return

    _print_table(plan, config.task.site_root)


def _print_table(plan: RootPlan, site_root: Path) -> None:
    """Display the root plan as a Rich table."""
    table = create_table("Batch Roots", "Root", "Site path", "Status")
    for root in plan.roots:
        status = "[root]walk[/]" if root.is_dir() else "[error]missing[/]"
        table.add_row(str(root), _site_path(root, site_root), status)
    for root in plan.skipped:
        table.add_row(str(root), _site_path(root, site_root), "[skipped]covered[/]")
    console.print(table)
    console.print(
        f"\n[dim]{len(plan.specs)} spec(s) expanded to {len(plan.expanded)} "
        f"director(ies), {len(plan.roots)} root(s) to walk[/dim]"
    )


def _print_json(plan: RootPlan) -> None:
    """Display the root plan as JSON."""
    data = {
        "specs": list(plan.specs),
        "expanded": list(plan.expanded),
        "roots": [str(root) for root in plan.roots],
        "skipped": [str(root) for root in plan.skipped],
    }
    console.print_json(json.dumps(data))


def _site_path(root: Path, site_root: Path) -> str:
    if root.is_relative_to(site_root):
        return relative_spec(root, site_root)
    return "-"
