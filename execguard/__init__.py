"""
execguard — Execution-Time Access Guard

Catches build code that reaches for project state, task dependencies
or build-scoped listener registration while tasks execute, and turns
each hit into a structured problem instead of an exception.
"""

from execguard.config_loader import ConfigError, GuardConfig, load_config
from execguard.governance import ExecutionAccessGuard, ViolationCategory
from execguard.problems import (
    UNKNOWN,
    InvalidUserCodeError,
    PropertyProblem,
    StructuredMessage,
    TaskTrace,
)
from execguard.problems.collector import ProblemCollector, ProblemLog

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ExecutionAccessGuard",
    "GuardConfig",
    "InvalidUserCodeError",
    "ProblemCollector",
    "ProblemLog",
    "PropertyProblem",
    "StructuredMessage",
    "TaskTrace",
    "UNKNOWN",
    "ViolationCategory",
    "load_config",
]
