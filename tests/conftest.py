"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import errno
import os
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest


def _make_files(root: Path, *relative: str) -> None:
    """Create empty files (and their parent directories) below ``root``."""
    for rel in relative:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"")


@pytest.fixture
def make_files() -> Callable[..., None]:
    """Factory creating empty files below a root directory."""
    return _make_files


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Empty site root directory."""
    root = tmp_path / "site"
    root.mkdir()
    return root


@pytest.fixture
def fileadmin_site(site_root: Path) -> Path:
    """Site with a fileadmin tree holding hidden, recycled and nested images."""
    _make_files(
        site_root,
        "fileadmin/a.jpg",
        "fileadmin/.hidden.jpg",
        "fileadmin/_recycler_/b.jpg",
        "fileadmin/sub/c.png",
        "fileadmin/readme.txt",
        "fileadmin/LICENSE",
    )
    return site_root


@pytest.fixture
def media_site(site_root: Path) -> Path:
    """Site with yearly media folders, only some holding a photos folder."""
    _make_files(
        site_root,
        "media/2020/photos/one.jpg",
        "media/2021/photos/two.JPG",
        "media/notes/three.jpg",
    )
    return site_root


@pytest.fixture
def deny_listing() -> Callable[[Path], AbstractContextManager[Any]]:
    """Factory patching os.scandir to refuse listing one directory."""
    real_scandir = os.scandir

    def factory(target: Path) -> AbstractContextManager[Any]:
        def scandir(path: Any = ".") -> Any:
            if os.fspath(path) == str(target):
                raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
            return real_scandir(path)

        return patch("os.scandir", side_effect=scandir)

    return factory
