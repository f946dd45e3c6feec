#
# tests/unit/test_resolver.py
#
"""
Tests for turning raw class-path elements into a path string.
"""

import os
import sys
from pathlib import Path

import pytest

from jplaunch.context import LaunchContext
from jplaunch.exceptions import ResolutionError
from jplaunch.resolver import PathResolver


@pytest.fixture
def resolver(context: LaunchContext) -> PathResolver:
    return PathResolver(context)


class TestPathResolver:
    """Test PathResolver functionality."""

    def test_keeps_order_of_existing_entries(self, resolver: PathResolver, classpath_dirs: list[Path]) -> None:
        elements = [str(p) for p in reversed(classpath_dirs)]
        resolved = resolver.resolve(elements)
        assert resolved.split(os.pathsep) == [str(p.resolve()) for p in reversed(classpath_dirs)]

    def test_skips_missing_entries(
        self, resolver: PathResolver, classpath_dirs: list[Path], tmp_path: Path
    ) -> None:
        missing = tmp_path / "target" / "generated-test-sources"
        elements = [str(classpath_dirs[0]), str(missing), str(classpath_dirs[1])]

        parts = resolver.resolve(elements).split(os.pathsep)

        assert str(missing.resolve()) not in parts
        assert parts == [str(classpath_dirs[0].resolve()), str(classpath_dirs[1].resolve())]

    def test_relative_elements_become_absolute(
        self, resolver: PathResolver, classpath_dirs: list[Path], tmp_path: Path, monkeypatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        resolved = resolver.resolve([os.path.join("target", "classes")])
        assert Path(resolved).is_absolute()
        assert resolved == str(classpath_dirs[1].resolve())

    def test_normalizes_dot_segments(self, resolver: PathResolver, classpath_dirs: list[Path]) -> None:
        element = classpath_dirs[0] / ".." / "classes"
        assert resolver.resolve([str(element)]) == str(classpath_dirs[1].resolve())

    def test_duplicates_keep_first_occurrence(self, resolver: PathResolver, classpath_dirs: list[Path]) -> None:
        a, b, _ = classpath_dirs
        entries = resolver.entries([str(a), str(b), str(a / ".." / a.name)])
        assert entries == [a.resolve(), b.resolve()]

    def test_blank_elements_are_ignored(self, resolver: PathResolver, classpath_dirs: list[Path]) -> None:
        assert resolver.resolve(["", "  ", str(classpath_dirs[0])]) == str(classpath_dirs[0].resolve())

    def test_empty_input_gives_empty_string(self, resolver: PathResolver) -> None:
        assert resolver.resolve([]) == ""

    def test_not_cached_between_calls(self, resolver: PathResolver, tmp_path: Path) -> None:
        late = tmp_path / "late"
        assert resolver.resolve([str(late)]) == ""
        late.mkdir()
        assert resolver.resolve([str(late)]) == str(late.resolve())

    def test_supplier_is_called(self, resolver: PathResolver, classpath_dirs: list[Path]) -> None:
        resolved = resolver.resolve(lambda: [str(classpath_dirs[2])])
        assert resolved == str(classpath_dirs[2].resolve())

    def test_supplier_resolution_error_propagates(self, resolver: PathResolver) -> None:
        def unresolved() -> list[str]:
            raise ResolutionError("dependencies not resolved yet")

        with pytest.raises(ResolutionError, match="not resolved"):
            resolver.resolve(unresolved)

    def test_supplier_os_error_becomes_resolution_error(self, resolver: PathResolver) -> None:
        def broken() -> list[str]:
            raise PermissionError("denied")

        with pytest.raises(ResolutionError) as exc_info:
            resolver.resolve(broken)
        assert isinstance(exc_info.value.details, PermissionError)


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need extra privileges on Windows")
class TestSymlinks:
    """Symlinked class-path elements."""

    def test_symlinked_directory_is_normalized(
        self, resolver: PathResolver, classpath_dirs: list[Path], tmp_path: Path
    ) -> None:
        link = tmp_path / "classes-link"
        link.symlink_to(classpath_dirs[1], target_is_directory=True)

        entries = resolver.entries([str(link), str(classpath_dirs[1])])

        assert entries == [classpath_dirs[1].resolve()]

    def test_symlink_loop_is_skipped(
        self, resolver: PathResolver, classpath_dirs: list[Path], tmp_path: Path
    ) -> None:
        loop = tmp_path / "loop"
        loop.symlink_to(loop)

        resolved = resolver.resolve([str(loop), str(classpath_dirs[1])])

        assert resolved == str(classpath_dirs[1].resolve())


def test_tilde_is_not_expanded(resolver: PathResolver, classpath_dirs: list[Path]) -> None:
    resolved = resolver.resolve(["~no_such_user_xyz/lib.jar", str(classpath_dirs[0])])
    assert resolved == str(classpath_dirs[0].resolve())
