"""Data model exports for classwork-linter."""

from .datatypes import (
    ERROR_SOURCE_PREFIX,
    LintFailure,
    LintOutcome,
    LintSuccess,
    MethodSummary,
    RawEngineReport,
    RawFunctionRecord,
    SummaryResult,
)

__all__ = [
    "ERROR_SOURCE_PREFIX",
    "LintFailure",
    "LintOutcome",
    "LintSuccess",
    "MethodSummary",
    "RawEngineReport",
    "RawFunctionRecord",
    "SummaryResult",
]
