"""Source file discovery and upstream file filtering.

Responsibilities:
- Apply the `ignoreFiles` contract before any file reaches the lint pipeline.
- Expand directory arguments into a deterministic, sorted file list.
- Read source files as text.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..config import IgnoreFiles


@dataclass(frozen=True, slots=True)
class SourceFileSelection:
    """Files selected for linting and files skipped with their reasons."""

    selected: tuple[Path, ...]
    skipped: tuple[tuple[Path, str], ...]


def ignore_reason(name: str, size: int, ignore_files: IgnoreFiles) -> str | None:
    """Return why a file should be skipped, or `None` to lint it.

    The name filter is checked first; the size threshold only applies to
    files the name filter kept.
    """

    if ignore_files is False:
        return None
    for fragment in sorted(ignore_files.includes_in_name):
        if fragment in name:
            return f"name contains `{fragment}`"
    if ignore_files.max_size is not None and size > ignore_files.max_size:
        return f"size {size} exceeds {ignore_files.max_size} bytes"
    return None


def should_ignore_file(name: str, size: int, ignore_files: IgnoreFiles) -> bool:
    """Return whether a file is skipped by the `ignoreFiles` filter."""

    return ignore_reason(name, size, ignore_files) is not None


def _expand(paths: Iterable[Path]) -> list[tuple[Path, str]]:
    """Expand directories recursively; keep file paths as given.

    Each file is paired with the name the `includesInName` filter matches:
    the POSIX path relative to its directory argument, or the base name of a
    file argument.
    """

    expanded: list[tuple[Path, str]] = []
    for path in paths:
        if path.is_dir():
            children = sorted(child for child in path.rglob("*") if child.is_file())
            expanded.extend((child, child.relative_to(path).as_posix()) for child in children)
        elif path.is_file():
            expanded.append((path, path.name))
        else:
            raise FileNotFoundError(f"Source path not found: `{path}`.")
    return expanded


def collect_source_files(paths: Iterable[Path], ignore_files: IgnoreFiles) -> SourceFileSelection:
    """Collect files to lint, honoring the `ignoreFiles` filter.

    Files under a directory argument are name-matched by their path relative
    to that directory, so a fragment like `node_modules` also skips files
    nested inside such a folder.

    Raises:
        FileNotFoundError: If a given path does not exist.
    """

    selected: list[Path] = []
    skipped: list[tuple[Path, str]] = []
    for path, match_name in _expand(paths):
        reason = ignore_reason(match_name, path.stat().st_size, ignore_files)
        if reason is None:
            selected.append(path)
        else:
            skipped.append((path, reason))
    return SourceFileSelection(selected=tuple(selected), skipped=tuple(skipped))


def read_source(path: Path) -> str:
    """Read a source file as UTF-8 text, replacing undecodable bytes."""

    return path.read_text(encoding="utf-8", errors="replace")
