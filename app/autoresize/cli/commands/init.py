"""Init command implementation.

Creates a starter config.toml for batch resize runs.
"""

from pathlib import Path
from typing import Annotated

import typer

from autoresize.configs.loader import ConfigError, save_config
from autoresize.configs.models import AutoresizeConfig, RulesetSettings, TaskSettings
from autoresize.core.paths import ensure_config_dir, get_config_path
from autoresize.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Create a starter configuration file.",
    invoke_without_command=True,
)

# Defaults of a fresh installation
DEFAULT_DIRECTORIES: tuple[str, ...] = ("fileadmin/", "uploads/")
DEFAULT_FILE_TYPES: tuple[str, ...] = ("gif", "jpeg", "jpg", "png", "tif", "tiff")


def _create_config(site_root: Path) -> AutoresizeConfig:
    """Create a configuration with default rule sets for a site root."""
    return AutoresizeConfig(
        task=TaskSettings(site_root=site_root),
        rulesets=RulesetSettings(
            directories=list(DEFAULT_DIRECTORIES),
            file_types=list(DEFAULT_FILE_TYPES),
        ),
    )


@app.callback(invoke_without_command=True)
def init_config(
    site_root: Annotated[
        Path,
        typer.Option("--site-root", "-s", help="Site root directory."),
    ] = Path("."),
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path for the config file."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Create a configuration file for batch resize runs.

    Watched directories are left empty so every directory known to the
    rule sets is processed.

    Examples:
        autoresize init --site-root /var/www/site
        autoresize init -s /var/www/site -o ./autoresize.toml --force
    """
    if output is None:
        try:
            ensure_config_dir()
        except RuntimeError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e
    output_path = output or get_config_path()

    if output_path.exists() and not force:
        print_error(f"Configuration already exists: {output_path}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    config = _create_config(site_root.expanduser().resolve())
    try:
        saved = save_config(config, output_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Configuration written to {saved}")
    console.print(f"  Site root: [info]{config.task.site_root}[/info]")
    console.print(f"  Rule set directories: [muted]{', '.join(config.rulesets.directories)}[/muted]")
    console.print(f"  File types: [muted]{', '.join(config.rulesets.file_types)}[/muted]")
