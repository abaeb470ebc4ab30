"""CLI package for autoresize.

This package contains the Typer application and all subcommands.
"""

from autoresize.cli.main import app

__all__ = ["app"]
