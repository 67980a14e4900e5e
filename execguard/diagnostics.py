"""
execguard Diagnostics — Problem Synthesis

Pure functions. Given the facts of a violation, build the problem
record. Wording lives here; which violations exist and which are
exempt lives in the guard.

Same inputs, same record.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from execguard.generated import unpack_type
from execguard.problems import (
    UNKNOWN,
    InvalidUserCodeError,
    PropertyProblem,
    SourceTrace,
    StructuredMessage,
    TaskTrace,
)


def resolve_task_trace(task: Any) -> SourceTrace:
    """
    Attribute a violation to `task`.

    Never fails. A task without a usable path degrades to UNKNOWN.
    """
    try:
        path = getattr(task, "path", None)
    except Exception as e:
        logger.warning(f"[DIAGNOSTICS] Could not read path of {type(task).__name__}: {e}")
        return UNKNOWN
    if not isinstance(path, str) or not path:
        return UNKNOWN
    return TaskTrace(unpack_type(task), path)


def describe(obj: Any) -> str:
    """str(obj), or `<TypeName>` when the object's own __str__ blows up."""
    try:
        return str(obj)
    except Exception as e:
        logger.warning(f"[DIAGNOSTICS] str() failed for {type(obj).__name__}: {e}")
        return f"<{unpack_type(obj).__name__}>"


def task_execution_access_problem(
    trace: SourceTrace, invocation_description: str, owner: Any
) -> PropertyProblem:
    exception = InvalidUserCodeError(
        f"Invocation of '{invocation_description}' by {describe(owner)} at execution time is unsupported."
    )
    return PropertyProblem(
        trace,
        StructuredMessage.Builder()
        .text("invocation of ")
        .reference(invocation_description)
        .text(" at execution time is unsupported.")
        .build(),
        exception,
    )


def listener_registration_problem(
    trace: SourceTrace, invocation_description: str, invocation_source: Any
) -> PropertyProblem:
    exception = InvalidUserCodeError(
        f"Listener registration '{invocation_description}' by {describe(invocation_source)} is unsupported."
    )
    return PropertyProblem(
        trace,
        StructuredMessage.Builder()
        .text("registration of listener on ")
        .reference(invocation_description)
        .text(" is unsupported")
        .build(),
        exception,
    )
