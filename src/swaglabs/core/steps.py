"""Scenario results and step recording.

A ``StepRecorder`` is bound to one test. Page objects report their domain
operations through it; the records ride on the test reports to the run
reporter.
"""

from __future__ import annotations

import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum

import structlog

log = structlog.get_logger(__name__)


class Status(str, Enum):
    """Outcome of a step or a scenario."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class StepRecord:
    description: str
    status: Status
    duration: float = 0.0


@dataclass
class ScenarioResult:
    """Outcome of one test invocation, consumed by reporters only."""

    name: str
    status: Status = Status.PASSED
    steps: list[StepRecord] = field(default_factory=list)
    error: str | None = None
    duration: float = 0.0

    @property
    def failed_steps(self) -> list[StepRecord]:
        return [s for s in self.steps if s.status == Status.FAILED]


class StepRecorder:
    """Collects the named steps of one test."""

    def __init__(self, test_name: str = "") -> None:
        self.test_name = test_name
        self.records: list[StepRecord] = []
        self._depth = 0

    @contextmanager
    def step(self, description: str) -> Iterator[None]:
        """Record ``description`` as one step around the wrapped block.

        Nested steps are folded into the outermost one.
        """
        if self._depth:
            yield
            return

        self._depth += 1
        started = time.perf_counter()
        log.debug("step_started", test=self.test_name, step=description)
        status = Status.FAILED
        try:
            yield
            status = Status.PASSED
        finally:
            self._depth -= 1
            self.records.append(StepRecord(description, status, time.perf_counter() - started))
