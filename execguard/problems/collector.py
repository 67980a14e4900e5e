"""
execguard Problem Collector

The guard hands every problem to a collector and forgets it.
What the collector does next (dedupe, render, fail the build)
is its own business. ProblemLog is the simplest sink: an
append-only list behind a lock, safe to share across task threads.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

from loguru import logger

from execguard.problems import PropertyProblem


@runtime_checkable
class ProblemCollector(Protocol):
    def submit(self, problem: PropertyProblem) -> None:
        ...


class ProblemLog:
    """
    Append-only, thread-safe problem sink.

    Usage:
        problems = ProblemLog()
        guard = ExecutionAccessGuard(config, problems)
        ...
        for p in problems.problems:
            print(p.message)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._problems: list[PropertyProblem] = []

    def submit(self, problem: PropertyProblem) -> None:
        with self._lock:
            self._problems.append(problem)
            count = len(self._problems)
        logger.debug(f"[PROBLEMS] #{count} at {problem.trace}: {problem.message}")

    @property
    def problems(self) -> tuple[PropertyProblem, ...]:
        with self._lock:
            return tuple(self._problems)

    def clear(self) -> None:
        with self._lock:
            self._problems.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._problems)
