"""
execguard Governance — Execution-Time Access Enforcement

Hosts call in here the moment build code touches something it
should not while tasks execute. The guard never raises to the
caller: each violation becomes one problem, handed to a collector.

    guard = ExecutionAccessGuard(load_config(repo), ProblemLog())
    guard.on_project_access("getProject", task)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from loguru import logger

from execguard.config_loader import GuardConfig
from execguard.diagnostics import (
    listener_registration_problem,
    resolve_task_trace,
    task_execution_access_problem,
)
from execguard.listeners import Task, is_exempt
from execguard.problems import UNKNOWN, PropertyProblem
from execguard.problems.collector import ProblemCollector


class ViolationCategory(str, Enum):
    PROJECT_ACCESS = "project_access"
    TASK_DEPENDENCIES_ACCESS = "task_dependencies_access"
    LISTENER_REGISTRATION = "listener_registration"


class ExecutionAccessGuard:
    """
    Turns restricted interactions into problems.

    One hook per ViolationCategory. Every hook is a no-op while
    enforcement is disabled.
    """

    def __init__(self, config: GuardConfig, problems: ProblemCollector):
        self.config = config
        self.problems = problems

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def on_project_access(self, invocation_description: str, task: Task) -> None:
        self._on_task_execution_access(
            ViolationCategory.PROJECT_ACCESS, invocation_description, task
        )

    def on_task_dependencies_access(self, invocation_description: str, task: Task) -> None:
        # Same problem as project access today; kept apart so wording can diverge
        self._on_task_execution_access(
            ViolationCategory.TASK_DEPENDENCIES_ACCESS, invocation_description, task
        )

    def on_build_scope_listener_registration(
        self, listener: Any, invocation_description: str, invocation_source: Any
    ) -> None:
        if not self.enabled:
            return
        if is_exempt(listener):
            logger.trace(
                f"[GUARD] Exempt listener {type(listener).__name__} via '{invocation_description}'"
            )
            return
        self._submit(
            ViolationCategory.LISTENER_REGISTRATION,
            listener_registration_problem(UNKNOWN, invocation_description, invocation_source),
        )

    def _on_task_execution_access(
        self, category: ViolationCategory, invocation_description: str, task: Task
    ) -> None:
        if not self.enabled:
            return
        self._submit(
            category,
            task_execution_access_problem(
                resolve_task_trace(task), invocation_description, task
            ),
        )

    def _submit(self, category: ViolationCategory, problem: PropertyProblem) -> None:
        logger.debug(f"[GUARD] {category.value}: {problem.exception}")
        self.problems.submit(problem)


__all__ = ["ExecutionAccessGuard", "ViolationCategory"]
