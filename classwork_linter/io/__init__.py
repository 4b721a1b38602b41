"""Input components for classwork-linter.

This package contains source file discovery and the upstream file filter.
"""

from .source_files import (
    SourceFileSelection,
    collect_source_files,
    ignore_reason,
    read_source,
    should_ignore_file,
)

__all__ = [
    "SourceFileSelection",
    "collect_source_files",
    "ignore_reason",
    "read_source",
    "should_ignore_file",
]
