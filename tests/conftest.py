"""
Shared pytest fixtures and configuration for record-spine tests.

This module provides:
- Environment and settings-cache isolation
- A recording fake sleep so attempt loops never wait on the wall clock
- A ready-made ``ProcessingPolicy`` wired to both fakes
"""

import os
import sys
from pathlib import Path

import pytest
# Ensure record_spine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from record_spine.core.logging import reset_logging
from record_spine.core.record import ProcessingPolicy
from record_spine.core.settings import reset_settings
from record_spine.execution.retry import ConstantBackoff


class Timeline:
    """Records emits and sleeps in the order they happen."""

    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def emit(self, line: str) -> None:
        self.events.append(("emit", line))

    def sleep(self, seconds: float) -> None:
        self.events.append(("sleep", seconds))

    @property
    def lines(self) -> list[str]:
        return [value for kind, value in self.events if kind == "emit"]

    @property
    def sleeps(self) -> list[float]:
        return [value for kind, value in self.events if kind == "sleep"]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch, tmp_path):
    """Strip RECORD_SPINE_* variables and any .env from every test."""
    for key in list(os.environ):
        if key.startswith("RECORD_SPINE_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def timeline() -> Timeline:
    return Timeline()


@pytest.fixture
def policy(timeline: Timeline) -> ProcessingPolicy:
    """Default three attempts of 30s, with fake sleep and emit."""
    return ProcessingPolicy(
        strategy=ConstantBackoff(max_retries=3, delay=30.0),
        sleep=timeline.sleep,
        emit=timeline.emit,
    )
