"""
execguard Problems — Shared Diagnostic Types

A problem is the immutable unit of diagnostic output:

    PropertyProblem(trace, message, exception)

  - trace:     where in the build the violation originated
  - message:   structured text, references kept apart from prose
  - exception: the causal InvalidUserCodeError (attached, never raised)

Problems are handed to a collector immediately; nothing here keeps history.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union

from rich.text import Text as RichText

REFERENCE_STYLE = "bold cyan"


# ---------------------------------------------------------------------------
# Causal Error
# ---------------------------------------------------------------------------

class InvalidUserCodeError(Exception):
    """User build code did something unsupported. Carried by a problem, not raised."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvalidUserCodeError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


# ---------------------------------------------------------------------------
# Structured Message
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Reference:
    """Names an API or identifier. Renderers may style it as code."""
    name: str


Fragment = Union[Text, Reference]


@dataclass(frozen=True)
class StructuredMessage:
    fragments: tuple[Fragment, ...] = ()

    class Builder:
        """Append-only composition of message fragments."""

        def __init__(self) -> None:
            self._fragments: list[Fragment] = []

        def text(self, text: str) -> "StructuredMessage.Builder":
            self._fragments.append(Text(text))
            return self

        def reference(self, name: str) -> "StructuredMessage.Builder":
            self._fragments.append(Reference(name))
            return self

        def build(self) -> "StructuredMessage":
            return StructuredMessage(tuple(self._fragments))

    @classmethod
    def build(cls, compose: Callable[["StructuredMessage.Builder"], Any]) -> "StructuredMessage":
        """
        Build a message in one step:

            StructuredMessage.build(lambda b: b.text("call ").reference("foo"))
        """
        builder = cls.Builder()
        compose(builder)
        return builder.build()

    @property
    def references(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fragments if isinstance(f, Reference))

    def __str__(self) -> str:
        parts = []
        for fragment in self.fragments:
            if isinstance(fragment, Reference):
                parts.append(f"`{fragment.name}`")
            else:
                parts.append(fragment.text)
        return "".join(parts)

    def to_rich(self, reference_style: str = REFERENCE_STYLE) -> RichText:
        """Render to rich Text with references styled apart from prose."""
        rendered = RichText()
        for fragment in self.fragments:
            if isinstance(fragment, Reference):
                rendered.append(fragment.name, style=reference_style)
            else:
                rendered.append(fragment.text)
        return rendered

    def to_list(self) -> list[dict[str, str]]:
        out = []
        for fragment in self.fragments:
            if isinstance(fragment, Reference):
                out.append({"kind": "reference", "value": fragment.name})
            else:
                out.append({"kind": "text", "value": fragment.text})
        return out


# ---------------------------------------------------------------------------
# Source Traces
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TaskTrace:
    """A violation attributed to a concrete task."""
    task_type: type
    path: str

    def __str__(self) -> str:
        return f"task `{self.path}` of type `{self.task_type.__name__}`"

    def to_dict(self) -> dict[str, str]:
        return {
            "kind": "task",
            "type": f"{self.task_type.__module__}.{self.task_type.__qualname__}",
            "path": self.path,
        }


@dataclass(frozen=True)
class UnknownTrace:
    """No single owner can be attributed."""

    def __str__(self) -> str:
        return "unknown location"

    def to_dict(self) -> dict[str, str]:
        return {"kind": "unknown"}


UNKNOWN = UnknownTrace()

SourceTrace = Union[TaskTrace, UnknownTrace]


# ---------------------------------------------------------------------------
# Problem Record
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PropertyProblem:
    trace: SourceTrace
    message: StructuredMessage
    exception: InvalidUserCodeError

    def to_dict(self) -> dict[str, Any]:
        """
        Plain mapping for collectors that ship problems elsewhere.

        Returns:
            dict with keys:
                - "trace": the trace's to_dict()
                - "message": list of {"kind", "value"} fragments
                - "error": the causal error text
        """
        return {
            "trace": self.trace.to_dict(),
            "message": self.message.to_list(),
            "error": str(self.exception),
        }


__all__ = [
    "Fragment",
    "InvalidUserCodeError",
    "PropertyProblem",
    "Reference",
    "SourceTrace",
    "StructuredMessage",
    "TaskTrace",
    "Text",
    "UNKNOWN",
    "UnknownTrace",
]
