"""Top-level package for classwork-linter.

This package normalizes source text so lizard can compute complexity metrics
reliably, then reshapes lizard's report into a stable summary. The main entry
points are `lint_source` and its blocking variant `lint_source_sync`.
"""

from .config import ConfigLoader, IgnoreFilesFilter, LinterConfig, merge_config
from .models.datatypes import MethodSummary, SummaryResult
from .pipeline.orchestrator import LintPipeline, lint_source, lint_source_sync
from .text.rules import BoundedRule, DirectRule

__all__ = [
    "BoundedRule",
    "ConfigLoader",
    "DirectRule",
    "IgnoreFilesFilter",
    "LintPipeline",
    "LinterConfig",
    "MethodSummary",
    "SummaryResult",
    "__version__",
    "lint_source",
    "lint_source_sync",
    "merge_config",
]

__version__ = "0.1.0"
