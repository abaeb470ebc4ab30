"""CLI commands for autoresize.

This package contains all subcommand implementations.
"""

from autoresize.cli.commands import init, roots, run, scan

__all__ = ["init", "roots", "run", "scan"]
