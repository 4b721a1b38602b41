"""Lizard-backed analysis engine.

Responsibilities:
- Run `lizard` on in-memory source text.
- Convert lizard's `FileInformation` into a `RawEngineReport`.
"""

from __future__ import annotations

from lizard import FileInformation, FunctionInfo, analyze_file

from ..models.datatypes import RawEngineReport, RawFunctionRecord


def _function_record(function: FunctionInfo) -> RawFunctionRecord:
    """Convert one lizard function entry into a raw function record."""

    return RawFunctionRecord(
        name=function.name,
        long_name=function.long_name,
        cyclomatic_complexity=function.cyclomatic_complexity,
        nloc=function.nloc,
        token_count=function.token_count,
        start_line=function.start_line,
        end_line=function.end_line,
        parameters=tuple(function.parameters),
        filename=function.filename,
        top_nesting_level=function.top_nesting_level,
        length=function.length,
        fan_in=getattr(function, "fan_in", 0),
        fan_out=getattr(function, "fan_out", 0),
        general_fan_out=getattr(function, "general_fan_out", 0),
    )


def report_from_file_information(info: FileInformation) -> RawEngineReport:
    """Convert a lizard `FileInformation` into a raw engine report."""

    return RawEngineReport(
        filename=info.filename,
        nloc=info.nloc,
        token_count=info.token_count,
        function_list=tuple(_function_record(function) for function in info.function_list),
    )


class LizardEngine:
    """Analyze source text with lizard's language-dispatching file analyzer."""

    def analyze_source_code(self, filename: str, source: str) -> RawEngineReport:
        """Run lizard on `source`, dispatching the reader by `filename` extension."""

        info = analyze_file.analyze_source_code(filename, source)
        return report_from_file_information(info)
