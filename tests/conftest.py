"""Shared fixtures: fake tasks, projects, listeners and guards."""

import pytest

from execguard.config_loader import GuardConfig
from execguard.generated import generated_subclass
from execguard.governance import ExecutionAccessGuard
from execguard.problems.collector import ProblemLog


class PackageTask:
    def __init__(self, path: str):
        self.path = path

    def __str__(self) -> str:
        return f"task '{self.path}'"


@generated_subclass
class PackageTask_Decorated(PackageTask):
    pass


class Project:
    def __init__(self, path: str):
        self.path = path

    def __str__(self) -> str:
        return f"project '{self.path}'"


@pytest.fixture
def package_task_type():
    return PackageTask


@pytest.fixture
def jar_task():
    return PackageTask(":app:jar")


@pytest.fixture
def decorated_jar_task():
    return PackageTask_Decorated(":app:jar")


@pytest.fixture
def project():
    return Project(":app")


@pytest.fixture
def problems():
    return ProblemLog()


@pytest.fixture
def guard(problems):
    return ExecutionAccessGuard(GuardConfig(enabled=True), problems)


@pytest.fixture
def disabled_guard(problems):
    return ExecutionAccessGuard(GuardConfig(enabled=False), problems)
