"""Lint pipeline package.

This package wires the source normalizer, the analysis engine adapter, and
stage telemetry into the public lint entry points.
"""

from .adapter import ResultAdapter, clean_long_name, remap_filename, summarize_report
from .orchestrator import LintPipeline, lint_source, lint_source_sync

__all__ = [
    "LintPipeline",
    "ResultAdapter",
    "clean_long_name",
    "lint_source",
    "lint_source_sync",
    "remap_filename",
    "summarize_report",
]
