"""Unit tests for upstream file filtering and source discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from classwork_linter.config import IgnoreFilesFilter
from classwork_linter.io.source_files import (
    collect_source_files,
    ignore_reason,
    read_source,
    should_ignore_file,
)


def test_disabled_filter_keeps_every_file() -> None:
    """`ignoreFiles: false` should never skip a file."""

    assert should_ignore_file("huge.spec.ts", 10**9, False) is False


def test_name_filter_is_checked_before_size_threshold() -> None:
    """Name matches should win over size checks when both apply."""

    ignore_files = IgnoreFilesFilter(includes_in_name=frozenset({".spec."}), max_size=10)

    assert ignore_reason("app.spec.ts", 100, ignore_files) == "name contains `.spec.`"
    assert ignore_reason("app.ts", 100, ignore_files) == "size 100 exceeds 10 bytes"
    assert ignore_reason("app.ts", 10, ignore_files) is None


def test_collect_source_files_expands_directories_and_applies_filter(tmp_path: Path) -> None:
    """Directories should expand recursively in sorted order."""

    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "b.ts").write_text("let b;", encoding="utf-8")
    (tmp_path / "src" / "a.ts").write_text("let a;", encoding="utf-8")
    (tmp_path / "src" / "a.test.ts").write_text("let t;", encoding="utf-8")
    single = tmp_path / "main.js"
    single.write_text("x" * 50, encoding="utf-8")

    selection = collect_source_files(
        [tmp_path / "src", single],
        IgnoreFilesFilter(includes_in_name=frozenset({".test."}), max_size=20),
    )

    assert selection.selected == (tmp_path / "src" / "a.ts", tmp_path / "src" / "b.ts")
    assert selection.skipped == (
        (tmp_path / "src" / "a.test.ts", "name contains `.test.`"),
        (single, "size 50 exceeds 20 bytes"),
    )


def test_name_filter_matches_folders_below_directory_argument(tmp_path: Path) -> None:
    """A fragment naming a folder should skip files nested inside that folder."""

    nested = tmp_path / "node_modules" / "lib"
    nested.mkdir(parents=True)
    (nested / "index.js").write_text("let dep;", encoding="utf-8")
    (tmp_path / "app.js").write_text("let app;", encoding="utf-8")

    selection = collect_source_files(
        [tmp_path],
        IgnoreFilesFilter(includes_in_name=frozenset({"node_modules"}), max_size=None),
    )

    assert selection.selected == (tmp_path / "app.js",)
    assert selection.skipped == ((nested / "index.js", "name contains `node_modules`"),)


def test_collect_source_files_rejects_missing_paths(tmp_path: Path) -> None:
    """Missing paths should fail before any linting starts."""

    with pytest.raises(FileNotFoundError, match="Source path not found"):
        collect_source_files([tmp_path / "missing.ts"], False)


def test_read_source_replaces_undecodable_bytes(tmp_path: Path) -> None:
    """Binary noise should not abort reading a source file."""

    path = tmp_path / "odd.js"
    path.write_bytes(b"let a = 1;\xff\n")

    assert read_source(path) == "let a = 1;�\n"
