"""Unit tests for filename remapping and engine report reshaping."""

from __future__ import annotations

import asyncio

import pytest

from classwork_linter.models.datatypes import RawEngineReport
from classwork_linter.pipeline.adapter import (
    ResultAdapter,
    clean_long_name,
    remap_filename,
    summarize_report,
)
from tests.engine_stubs import AsyncRecordingEngine, RecordingEngine, function_record


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("foo.ts", "foo.java"),
        ("foo.tsx", "foo.java"),
        ("foo.js", "foo.java"),
        ("src/app.component.ts", "src/app.component.java"),
        ("foo.py", "foo.py"),
        ("foo.json", "foo.json"),
        ("foo.java", "foo.java"),
    ],
)
def test_remap_filename_rewrites_only_known_script_extensions(
    filename: str, expected: str
) -> None:
    """Script extensions should map to `.java`; others pass through."""

    assert remap_filename(filename) == expected


def test_clean_long_name_collapses_spaces_after_open_paren_and_bracket() -> None:
    """Engine formatting artifacts should be removed across the whole name."""

    assert clean_long_name("add( int a, int [ ] b)") == "add(int a, int [] b)"
    assert clean_long_name("f( a,\n( b)") == "f(a,\n(b)"


def test_summarize_report_aggregates_complexity_and_maps_methods_in_order() -> None:
    """Summary totals should derive from the engine report and method list."""

    report = RawEngineReport(
        filename="calc.java",
        nloc=12,
        token_count=80,
        function_list=(
            function_record("add", 2, long_name="add( a, b)", parameters=("a", "b")),
            function_record("sub", 3, start_line=5, end_line=8),
        ),
    )

    summary = summarize_report(report, "cleaned")

    assert summary.qtd_lines == 12
    assert summary.qtd_methods == 2
    assert summary.cyclomatic_complexity == 5
    assert summary.token == 80
    assert summary.source == "cleaned"
    assert [method.name for method in summary.methods] == ["add", "sub"]
    assert summary.methods[0].long_name == "add(a, b)"
    assert summary.methods[0].parameters == ("a", "b")
    assert summary.cyclomatic_complexity == sum(
        method.cyclomatic_complexity for method in summary.methods
    )
    assert summary.qtd_methods == len(summary.methods)


def test_summarize_report_without_functions_yields_zero_methods() -> None:
    """A report with no functions should keep engine totals and zero methods."""

    report = RawEngineReport(filename="empty.java", nloc=3, token_count=9)

    summary = summarize_report(report, "int a;")

    assert summary.qtd_methods == 0
    assert summary.cyclomatic_complexity == 0
    assert summary.qtd_lines == 3
    assert summary.is_error is False


def test_result_adapter_passes_remapped_filename_and_cleaned_source(
    recording_engine: RecordingEngine,
) -> None:
    """Adapter should call the engine with the remapped filename."""

    adapter = ResultAdapter(recording_engine)

    summary = asyncio.run(adapter.analyze("cleaned;", "widget.tsx"))

    assert recording_engine.calls == [("widget.java", "cleaned;")]
    assert summary.qtd_methods == 2
    assert summary.cyclomatic_complexity == 3


def test_result_adapter_awaits_coroutine_engines() -> None:
    """Coroutine engines should be awaited directly."""

    engine = AsyncRecordingEngine()
    adapter = ResultAdapter(engine)

    summary = asyncio.run(adapter.analyze("x;", "main.js"))

    assert engine.calls == [("main.java", "x;")]
    assert summary.token == 42


def test_method_summary_as_dict_uses_public_vocabulary() -> None:
    """Method payloads should use the stable camelCase field names."""

    report = RawEngineReport(
        filename="a.java",
        nloc=3,
        token_count=5,
        function_list=(function_record("f", 1, parameters=("x",)),),
    )

    payload = summarize_report(report, "src").methods[0].as_dict()

    assert payload == {
        "name": "f",
        "longName": "f()",
        "cyclomaticComplexity": 1,
        "startLine": 1,
        "endLine": 3,
        "parameters": ["x"],
        "filename": "stub.java",
        "topNestingLevel": 0,
        "length": 3,
        "fanIn": 1,
        "fanOut": 2,
        "generalFanOut": 3,
    }
