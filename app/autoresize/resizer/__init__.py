"""Resizer collaborator interface, built-in dry-run reporter and loader."""

from autoresize.resizer.base import Resizer
from autoresize.resizer.loader import BUILTIN_REPORTER, ResizerLoadError, load_resizer
from autoresize.resizer.reporter import CandidateReporter

__all__ = [
    "BUILTIN_REPORTER",
    "CandidateReporter",
    "Resizer",
    "ResizerLoadError",
    "load_resizer",
]
