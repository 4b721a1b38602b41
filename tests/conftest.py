"""Shared pytest fixtures for the full classwork-linter test suite."""

from __future__ import annotations

import pytest

from tests.engine_stubs import FailingEngine, RecordingEngine


@pytest.fixture
def recording_engine() -> RecordingEngine:
    """Provide an engine stub that returns a two-function report."""

    return RecordingEngine()


@pytest.fixture
def failing_engine() -> FailingEngine:
    """Provide an engine stub that always raises."""

    return FailingEngine()
