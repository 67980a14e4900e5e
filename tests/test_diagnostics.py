from execguard.diagnostics import (
    describe,
    listener_registration_problem,
    resolve_task_trace,
    task_execution_access_problem,
)
from execguard.problems import UNKNOWN, InvalidUserCodeError, TaskTrace


def test_task_problem_is_deterministic(jar_task, package_task_type):
    trace = TaskTrace(package_task_type, ":app:jar")

    first = task_execution_access_problem(trace, "getProject", jar_task)
    second = task_execution_access_problem(trace, "getProject", jar_task)

    assert first == second
    assert hash(first) == hash(second)
    assert first is not second


def test_listener_problem_is_deterministic(project):
    first = listener_registration_problem(UNKNOWN, "addBuildListener", project)
    second = listener_registration_problem(UNKNOWN, "addBuildListener", project)

    assert first == second


def test_problems_differ_by_descriptor(jar_task):
    a = task_execution_access_problem(UNKNOWN, "getProject", jar_task)
    b = task_execution_access_problem(UNKNOWN, "getTaskDependencies", jar_task)

    assert a != b
    assert a.message.references == ("getProject",)
    assert b.message.references == ("getTaskDependencies",)


def test_causal_error_is_attached_not_raised(project):
    problem = listener_registration_problem(UNKNOWN, "addTaskListener", project)

    assert isinstance(problem.exception, InvalidUserCodeError)
    assert problem.exception.__traceback__ is None


def test_message_renders_with_reference_in_backticks(jar_task):
    problem = task_execution_access_problem(UNKNOWN, "getProject", jar_task)

    assert str(problem.message) == "invocation of `getProject` at execution time is unsupported."


def test_listener_message_has_no_trailing_period(project):
    problem = listener_registration_problem(UNKNOWN, "addTaskListener", project)

    assert str(problem.message) == "registration of listener on `addTaskListener` is unsupported"


def test_resolve_task_trace(jar_task, decorated_jar_task, package_task_type):
    assert resolve_task_trace(jar_task) == TaskTrace(package_task_type, ":app:jar")
    assert resolve_task_trace(decorated_jar_task) == TaskTrace(package_task_type, ":app:jar")


def test_resolve_task_trace_degrades(package_task_type):
    assert resolve_task_trace(object()) == UNKNOWN
    assert resolve_task_trace(package_task_type("")) == UNKNOWN
    assert resolve_task_trace(package_task_type(None)) == UNKNOWN

    class ExplodingPath:
        @property
        def path(self):
            raise RuntimeError("not configured")

    assert resolve_task_trace(ExplodingPath()) == UNKNOWN


def test_describe_falls_back_to_type_name():
    class Loud:
        def __str__(self):
            raise ValueError("nope")

    assert describe(Loud()) == "<Loud>"
    assert describe("plain") == "plain"
