"""Result adapter between cleaned source and the analysis engine.

Responsibilities:
- Remap source-file extensions the engine cannot dispatch correctly.
- Invoke the engine and await its report.
- Reshape the engine report into a `SummaryResult`.
"""

from __future__ import annotations

import asyncio
import inspect
import re

from ..engine.base import AnalysisEngine
from ..models.datatypes import MethodSummary, RawEngineReport, RawFunctionRecord, SummaryResult

ENGINE_EXTENSION = ".java"

_REMAPPED_EXTENSION_RE = re.compile(r"\.(?:tsx|ts|js)$")
_PAREN_SPACE_RE = re.compile(r"\( ", re.DOTALL)
_BRACKET_SPACE_RE = re.compile(r"\[ ", re.DOTALL)


def remap_filename(filename: str) -> str:
    """Replace a `.ts`, `.tsx` or `.js` extension with the engine's `.java`."""

    return _REMAPPED_EXTENSION_RE.sub(ENGINE_EXTENSION, filename)


def clean_long_name(long_name: str) -> str:
    """Collapse the spaces the engine leaves after `(` and `[`."""

    return _BRACKET_SPACE_RE.sub("[", _PAREN_SPACE_RE.sub("(", long_name))


def method_summary(record: RawFunctionRecord) -> MethodSummary:
    """Map one raw function record to its public method summary."""

    return MethodSummary(
        name=record.name,
        long_name=clean_long_name(record.long_name),
        cyclomatic_complexity=record.cyclomatic_complexity,
        start_line=record.start_line,
        end_line=record.end_line,
        parameters=tuple(record.parameters),
        filename=record.filename,
        top_nesting_level=record.top_nesting_level,
        length=record.length,
        fan_in=record.fan_in,
        fan_out=record.fan_out,
        general_fan_out=record.general_fan_out,
    )


def summarize_report(report: RawEngineReport, source: str) -> SummaryResult:
    """Aggregate an engine report into a summary carrying the cleaned source."""

    methods = tuple(method_summary(record) for record in report.function_list)
    return SummaryResult(
        qtd_lines=report.nloc,
        qtd_methods=len(methods),
        cyclomatic_complexity=sum(
            record.cyclomatic_complexity for record in report.function_list
        ),
        token=report.token_count,
        methods=methods,
        source=source,
    )


class ResultAdapter:
    """Invoke an analysis engine and reshape its report."""

    def __init__(self, engine: AnalysisEngine) -> None:
        """Initialize the adapter with the engine it delegates to."""

        self._engine = engine

    async def run_engine(self, cleaned_source: str, filename: str) -> RawEngineReport:
        """Call the engine with the remapped filename and await its report.

        Synchronous engines run in a worker thread so the caller's event loop
        is not blocked while the engine computes.
        """

        engine_filename = remap_filename(filename)
        if inspect.iscoroutinefunction(self._engine.analyze_source_code):
            return await self._engine.analyze_source_code(engine_filename, cleaned_source)

        result = await asyncio.to_thread(
            self._engine.analyze_source_code, engine_filename, cleaned_source
        )
        if inspect.isawaitable(result):
            return await result
        return result

    async def analyze(self, cleaned_source: str, filename: str) -> SummaryResult:
        """Analyze cleaned source and return its summary.

        Errors raised by the engine propagate to the caller.
        """

        report = await self.run_engine(cleaned_source, filename)
        return summarize_report(report, cleaned_source)
