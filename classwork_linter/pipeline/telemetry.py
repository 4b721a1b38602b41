"""Stage telemetry helper methods for the lint pipeline.

Responsibilities:
- Emit stage start/complete/failure events.
- Wrap stage actions with consistent telemetry hooks.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


class PipelineTelemetryMixin:
    """Provide stage-telemetry helper methods."""

    _run_logger: RunLogger | None

    def _on_stage_start(self, stage_name: str, filename: str) -> None:
        """Emit a stage-start event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name, filename=filename)

    def _on_stage_complete(self, stage_name: str, filename: str) -> None:
        """Emit a stage-complete event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name, filename=filename)

    def _on_stage_failure(self, stage_name: str, filename: str, exc: Exception) -> None:
        """Emit a stage-failure event with sanitized exception metadata."""

        if self._run_logger is not None:
            self._run_logger.log_stage_failure(
                stage_name, type(exc).__name__, filename=filename
            )

    def _run_stage(
        self,
        stage_name: str,
        filename: str,
        action: Callable[[], _StageResult],
    ) -> _StageResult:
        """Run one named synchronous stage with telemetry events."""

        self._on_stage_start(stage_name, filename)
        try:
            result = action()
        except Exception as exc:
            self._on_stage_failure(stage_name, filename, exc)
            raise
        self._on_stage_complete(stage_name, filename)
        return result

    async def _run_async_stage(
        self,
        stage_name: str,
        filename: str,
        action: Callable[[], Awaitable[_StageResult]],
    ) -> _StageResult:
        """Run one named awaitable stage with telemetry events."""

        self._on_stage_start(stage_name, filename)
        try:
            result = await action()
        except Exception as exc:
            self._on_stage_failure(stage_name, filename, exc)
            raise
        self._on_stage_complete(stage_name, filename)
        return result
