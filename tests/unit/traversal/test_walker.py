"""Unit tests for TreeWalker candidate selection."""

import os
from collections.abc import Callable
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any

import pytest
from autoresize.traversal.exclusions import ExclusionRules
from autoresize.traversal.models import SkipReason
from autoresize.traversal.walker import (
    RootNotFoundError,
    RootUnreadableError,
    TreeWalker,
    file_extension,
    normalize_extensions,
)


def _collect(walker: TreeWalker, root: Path) -> list[Path]:
    dispatched: list[Path] = []
    walker.walk(root, dispatched.append)
    return dispatched


def _walker(
    site_root: Path,
    *excluded: str,
    extensions: tuple[str, ...] = ("jpg", "png"),
) -> TreeWalker:
    return TreeWalker(ExclusionRules.from_specs(excluded, site_root), extensions)


class TestFileExtension:
    """Tests for file_extension function."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("a.jpg", "jpg"),
            ("A.JPG", "jpg"),
            ("archive.tar.GZ", "gz"),
            ("LICENSE", None),
            ("trailing.", None),
        ],
    )
    def test_extension(self, name: str, expected: str | None) -> None:
        """The text after the last dot is returned lower-cased."""
        assert file_extension(name) == expected


class TestNormalizeExtensions:
    """Tests for normalize_extensions function."""

    def test_normalizes_case_and_dots(self) -> None:
        """Extensions are lower-cased without leading dots; blanks dropped."""
        assert normalize_extensions(["JPG", ".png", " gif ", ""]) == {"jpg", "png", "gif"}


class TestWalkScenario:
    """Tests reproducing the fileadmin selection scenario."""

    def test_dispatches_only_candidates(self, fileadmin_site: Path) -> None:
        """Hidden, recycled, unrecognized and extension-less files are skipped."""
        root = fileadmin_site / "fileadmin"
        dispatched = _collect(_walker(fileadmin_site), root)

        assert set(dispatched) == {root / "a.jpg", root / "sub" / "c.png"}

    def test_stats(self, fileadmin_site: Path) -> None:
        """Walk statistics count visited, dispatched and skipped files."""
        root = fileadmin_site / "fileadmin"
        stats = _walker(fileadmin_site).walk(root, lambda _path: None)

        assert stats.root == root
        assert stats.visited == 6
        assert stats.dispatched == 2
        assert stats.skipped == {
            SkipReason.HIDDEN: 1,
            SkipReason.RECYCLER: 1,
            SkipReason.UNRECOGNIZED: 1,
            SkipReason.NO_EXTENSION: 1,
        }

    def test_order_is_stable(self, fileadmin_site: Path) -> None:
        """Two walks over the same tree dispatch in the same order."""
        walker = _walker(fileadmin_site)
        root = fileadmin_site / "fileadmin"
        assert _collect(walker, root) == _collect(walker, root)


class TestWalkFilters:
    """Tests for the individual skip filters."""

    def test_hidden_files_never_dispatched(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """Files starting with a dot are skipped regardless of extension."""
        make_files(site_root, "d/.a.jpg", "d/.jpg", "d/sub/.b.png")
        assert _collect(_walker(site_root), site_root / "d") == []

    def test_extension_case_insensitive(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """Upper-case extensions match lower-case recognized types."""
        make_files(site_root, "d/A.JPG", "d/b.Png")
        result = _collect(_walker(site_root), site_root / "d")
        assert [p.name for p in result] == ["A.JPG", "b.Png"]

    def test_nested_recycler_skipped(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """Everything below a recycler directory is skipped."""
        make_files(site_root, "d/_recycler_/deep/x.jpg", "d/keep.jpg")
        result = _collect(_walker(site_root), site_root / "d")
        assert result == [site_root / "d" / "keep.jpg"]

    def test_excluded_directory_and_descendants_skipped(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """Exclusions cover the directory itself and its subtree."""
        make_files(
            site_root,
            "fileadmin/a.jpg",
            "fileadmin/_temp_/b.jpg",
            "fileadmin/_temp_/deep/c.jpg",
        )
        walker = _walker(site_root, "fileadmin/_temp_/")
        result = _collect(walker, site_root / "fileadmin")
        assert result == [site_root / "fileadmin" / "a.jpg"]

    def test_exclusion_is_segment_based(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """Excluding 'media' does not exclude the sibling 'media2'."""
        make_files(site_root, "root/media/a.jpg", "root/media2/b.jpg")
        walker = _walker(site_root, "root/media")
        result = _collect(walker, site_root / "root")
        assert result == [site_root / "root" / "media2" / "b.jpg"]

    def test_absolute_exclusion(self, site_root: Path, make_files: Callable[..., None]) -> None:
        """Absolute exclusion specs are honored."""
        make_files(site_root, "d/x/a.jpg", "d/y/b.jpg")
        walker = _walker(site_root, str(site_root / "d" / "x"))
        assert _collect(walker, site_root / "d") == [site_root / "d" / "y" / "b.jpg"]

    def test_excluded_root_dispatches_nothing(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """A root that is itself excluded yields no candidates."""
        make_files(site_root, "d/a.jpg", "d/sub/b.jpg")
        walker = _walker(site_root, "d")
        assert _collect(walker, site_root / "d") == []

    def test_no_recognized_extensions(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """With no recognized types nothing is dispatched."""
        make_files(site_root, "d/a.jpg")
        walker = _walker(site_root, extensions=())
        assert _collect(walker, site_root / "d") == []


class TestWalkErrors:
    """Tests for walker error handling."""

    def test_missing_root_raises(self, site_root: Path) -> None:
        """A missing root is a configuration error for that root."""
        walker = _walker(site_root)
        with pytest.raises(RootNotFoundError, match="does not exist"):
            walker.walk(site_root / "missing", lambda _path: None)

    def test_file_as_root_raises(self, site_root: Path, make_files: Callable[..., None]) -> None:
        """A file is not a valid root."""
        make_files(site_root, "a.jpg")
        with pytest.raises(RootNotFoundError):
            _walker(site_root).walk(site_root / "a.jpg", lambda _path: None)

    @pytest.mark.skipif(os.geteuid() == 0, reason="root ignores directory permissions")
    def test_unreadable_subdirectory_skipped(
        self, site_root: Path, make_files: Callable[..., None]
    ) -> None:
        """An unreadable subdirectory does not stop the walk."""
        make_files(site_root, "d/locked/a.jpg", "d/open/b.jpg")
        locked = site_root / "d" / "locked"
        locked.chmod(0o000)
        try:
            result = _collect(_walker(site_root), site_root / "d")
        finally:
            locked.chmod(0o755)
        assert result == [site_root / "d" / "open" / "b.jpg"]

    def test_unreadable_root_raises(
        self,
        fileadmin_site: Path,
        deny_listing: Callable[[Path], AbstractContextManager[Any]],
    ) -> None:
        """A root that exists but cannot be listed fails the walk."""
        root = fileadmin_site / "fileadmin"
        with deny_listing(root), pytest.raises(RootUnreadableError, match="Permission denied"):
            _walker(fileadmin_site).walk(root, lambda _path: None)

    def test_unlistable_subdirectory_logged_and_skipped(
        self,
        fileadmin_site: Path,
        deny_listing: Callable[[Path], AbstractContextManager[Any]],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A subdirectory that cannot be listed is skipped with a warning."""
        root = fileadmin_site / "fileadmin"
        with deny_listing(root / "sub"):
            result = _collect(_walker(fileadmin_site), root)

        assert result == [root / "a.jpg"]
        assert "Cannot list directory" in caplog.text


class TestCandidatesAndClassify:
    """Tests for candidates() and classify()."""

    def test_candidates_describe_files(self, fileadmin_site: Path) -> None:
        """Candidates carry directory, name and normalized extension."""
        root = fileadmin_site / "fileadmin"
        candidates = list(_walker(fileadmin_site).candidates(root))

        assert [(c.directory, c.name, c.extension) for c in candidates] == [
            (root, "a.jpg", "jpg"),
            (root / "sub", "c.png", "png"),
        ]

    def test_candidates_missing_root(self, site_root: Path) -> None:
        """candidates() raises when iterated over a missing root."""
        with pytest.raises(RootNotFoundError):
            list(_walker(site_root).candidates(site_root / "missing"))

    @pytest.mark.parametrize(
        ("relative", "expected"),
        [
            ("d/.a.jpg", SkipReason.HIDDEN),
            ("d/_recycler_/a.jpg", SkipReason.RECYCLER),
            ("d/excluded/a.jpg", SkipReason.EXCLUDED),
            ("d/LICENSE", SkipReason.NO_EXTENSION),
            ("d/a.txt", SkipReason.UNRECOGNIZED),
            ("d/a.jpg", None),
        ],
    )
    def test_classify(self, site_root: Path, relative: str, expected: SkipReason | None) -> None:
        """classify() reports the first applicable skip reason."""
        walker = _walker(site_root, "d/excluded")
        assert walker.classify(site_root / relative) == expected
