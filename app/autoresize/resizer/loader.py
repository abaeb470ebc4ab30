"""Loading of external resizer collaborators.

A resizer is referenced as ``module:attribute``; the attribute may be a
Resizer subclass, a factory returning a Resizer, or a Resizer instance.
"""

import importlib
from types import ModuleType
from typing import cast

from autoresize.resizer.base import Resizer
from autoresize.resizer.reporter import CandidateReporter

# Name accepted in place of a module path for the built-in dry-run resizer
BUILTIN_REPORTER = "report"


class ResizerLoadError(Exception):
    """Raised when a resizer collaborator cannot be loaded."""


def load_resizer(reference: str | None = None) -> Resizer:
    """Load a resizer from a ``module:attribute`` reference.

    Args:
        reference: Reference to load. None or ``"report"`` selects the
            built-in CandidateReporter.

    Returns:
        Resizer instance.

    Raises:
        ResizerLoadError: If the module or attribute cannot be loaded, or
            does not provide a Resizer.
    """
    if reference is None or reference.strip() == BUILTIN_REPORTER:
        return CandidateReporter()

    module_name, _, attr_path = reference.partition(":")
    module_name = module_name.strip()
    attr_path = attr_path.strip()
    if not module_name or not attr_path:
        msg = f"Invalid resizer reference {reference!r}, expected 'module:attribute'"
        raise ResizerLoadError(msg)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Unable to import resizer module '{module_name}': {e}"
        raise ResizerLoadError(msg) from e

    try:
        target = _resolve_attribute(module, attr_path)
    except AttributeError as e:
        msg = f"Attribute '{attr_path}' not found in module '{module_name}'"
        raise ResizerLoadError(msg) from e

    if isinstance(target, Resizer):
        return target

    try:
        candidate = target() if callable(target) else target
    except Exception as e:
        msg = f"Resizer factory '{reference}' failed: {e}"
        raise ResizerLoadError(msg) from e

    if not isinstance(candidate, Resizer):
        msg = f"'{reference}' did not provide a Resizer (got {type(candidate).__name__})"
        raise ResizerLoadError(msg)
    return candidate


def _resolve_attribute(module: ModuleType, attr_path: str) -> object:
    target: object = module
    for part in attr_path.split("."):
        target = cast(object, getattr(target, part))
    return target
