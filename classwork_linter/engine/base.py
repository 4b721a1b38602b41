"""Analysis engine boundary.

The engine is an external collaborator: given a filename and cleaned source
text it returns a `RawEngineReport` (or an awaitable resolving to one), or
raises. Any raise is treated as an opaque failure by the pipeline.
"""

from __future__ import annotations

from typing import Awaitable, Protocol, Union

from ..models.datatypes import RawEngineReport

EngineResult = Union[RawEngineReport, Awaitable[RawEngineReport]]


class AnalysisEngine(Protocol):
    """Protocol for function-level complexity analysis engines."""

    def analyze_source_code(self, filename: str, source: str) -> EngineResult:
        """Analyze `source` as if read from `filename`."""
