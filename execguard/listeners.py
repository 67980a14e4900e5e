"""
execguard Listener Capabilities + Host Hooks

Listeners that are part of normal build lifecycle wiring carry a
capability tag. Registering them at execution time is not a user
mistake, so the guard lets them through.

Exactly two capabilities exempt a listener:
  - INTERNAL_FRAMEWORK
  - PROJECT_EVALUATION
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, runtime_checkable


class Capability(str, Enum):
    INTERNAL_FRAMEWORK = "internal_framework"
    PROJECT_EVALUATION = "project_evaluation"


EXEMPT_CAPABILITIES: frozenset[Capability] = frozenset({
    Capability.INTERNAL_FRAMEWORK,
    Capability.PROJECT_EVALUATION,
})


# ---------------------------------------------------------------------------
# Capability Markers
# ---------------------------------------------------------------------------

class InternalListener:
    """Base for listeners owned by the build framework itself."""
    listener_capabilities: frozenset[Capability] = frozenset({Capability.INTERNAL_FRAMEWORK})


class ProjectEvaluationListener:
    """Base for listeners that hook project evaluation."""
    listener_capabilities: frozenset[Capability] = frozenset({Capability.PROJECT_EVALUATION})


def capabilities_of(listener: Any) -> frozenset[Capability]:
    """
    Collect the capabilities a listener declares.

    Declarations are merged across the MRO so a class deriving from both
    markers carries both tags. Instances may also set the attribute directly.
    """
    found: set[Capability] = set()
    for cls in type(listener).__mro__:
        found.update(cls.__dict__.get("listener_capabilities", ()))
    found.update(getattr(listener, "__dict__", {}).get("listener_capabilities", ()))
    return frozenset(found)


def is_exempt(listener: Any) -> bool:
    return bool(capabilities_of(listener) & EXEMPT_CAPABILITIES)


# ---------------------------------------------------------------------------
# Host Hook Interfaces
# ---------------------------------------------------------------------------

@runtime_checkable
class Task(Protocol):
    path: str


@runtime_checkable
class TaskExecutionAccessListener(Protocol):
    """Called by the host when a task touches restricted state while executing."""

    def on_project_access(self, invocation_description: str, task: Task) -> None:
        ...

    def on_task_dependencies_access(self, invocation_description: str, task: Task) -> None:
        ...


@runtime_checkable
class BuildScopeListenerRegistrationListener(Protocol):
    """Called by the host when a build-scoped listener is registered."""

    def on_build_scope_listener_registration(
        self, listener: Any, invocation_description: str, invocation_source: Any
    ) -> None:
        ...
