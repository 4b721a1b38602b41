"""Lint pipeline orchestration.

Responsibilities:
- Merge configuration once per call.
- Run Normalize -> Analyze as a single linear pass with stage telemetry.
- Convert any stage failure into the zeroed, error-tagged summary.

Key public entry points:
- `LintPipeline`: reusable pipeline bound to an engine and optional logger.
- `lint_source`: async convenience wrapper returning a `SummaryResult`.
- `lint_source_sync`: blocking wrapper for scripts and the CLI.
"""

from __future__ import annotations

import asyncio
import concurrent.futures
from collections.abc import Coroutine, Mapping, Sequence
from typing import Any, TypeVar

from ..config import LinterConfig, merge_config
from ..engine.base import AnalysisEngine
from ..engine.lizard_engine import LizardEngine
from ..models.datatypes import LintFailure, LintOutcome, LintSuccess, SummaryResult
from ..telemetry.logger import RunLogger
from ..text.normalizer import SourceNormalizer
from .adapter import ResultAdapter
from .telemetry import PipelineTelemetryMixin

ConfigInput = LinterConfig | Mapping[str, Any] | None

_T = TypeVar("_T")


class LintPipeline(PipelineTelemetryMixin):
    """Normalize source text and summarize the engine's complexity report."""

    def __init__(
        self,
        engine: AnalysisEngine | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize the pipeline with an analysis engine and optional logger."""

        self._adapter = ResultAdapter(engine if engine is not None else LizardEngine())
        self._run_logger = run_logger

    async def analyze_source(
        self,
        source: str | Sequence[str],
        filename: str,
        config: ConfigInput = None,
    ) -> LintOutcome:
        """Run the pipeline and return an explicit success or failure outcome."""

        stage = "config"
        try:
            resolved = self._run_stage(stage, filename, lambda: merge_config(config))

            stage = "normalize"
            normalizer = SourceNormalizer(resolved.ignore_chars)
            cleaned = self._run_stage(stage, filename, lambda: normalizer.normalize(source))

            stage = "analyze"
            summary = await self._run_async_stage(
                stage, filename, lambda: self._adapter.analyze(cleaned, filename)
            )
        except Exception as exc:
            return LintFailure(stage=stage, error=exc)
        return LintSuccess(summary=summary)

    async def lint(
        self,
        source: str | Sequence[str],
        filename: str,
        config: ConfigInput = None,
    ) -> SummaryResult:
        """Run the pipeline and return a summary; failures are encoded inside it."""

        outcome = await self.analyze_source(source, filename, config)
        return outcome.to_summary()


async def lint_source(
    source: str | Sequence[str],
    filename: str,
    config: ConfigInput = None,
    *,
    engine: AnalysisEngine | None = None,
    run_logger: RunLogger | None = None,
) -> SummaryResult:
    """Lint one source text and return its complexity summary.

    Never raises: any failure yields a summary with zeroed numeric fields,
    no methods, and `source` set to `"[error]: <description>"`.
    """

    pipeline = LintPipeline(engine=engine, run_logger=run_logger)
    return await pipeline.lint(source, filename, config)


def _run_async(coro: Coroutine[Any, Any, _T]) -> _T:
    """Run a coroutine from sync code, whether or not an event loop is running."""

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, coro).result()


def lint_source_sync(
    source: str | Sequence[str],
    filename: str,
    config: ConfigInput = None,
    *,
    engine: AnalysisEngine | None = None,
    run_logger: RunLogger | None = None,
) -> SummaryResult:
    """Blocking variant of `lint_source`."""

    return _run_async(
        lint_source(source, filename, config, engine=engine, run_logger=run_logger)
    )
