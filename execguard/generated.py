"""
execguard Generated Subclasses

Build tools often decorate user task classes at runtime with
generated subclasses (PackageTask_Decorated). Diagnostics should
name the class the user declared, so traces unpack past them.
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T", bound=type)

_MARKER = "__execguard_generated__"


def generated_subclass(cls: T) -> T:
    """Mark a class as runtime-generated. Not inherited by further subclasses."""
    setattr(cls, _MARKER, True)
    return cls


def is_generated(cls: type) -> bool:
    # Own __dict__ only: a user subclass of a generated class is not generated
    return bool(cls.__dict__.get(_MARKER, False))


def unpack_type(obj: Any) -> type:
    """
    Return the declared type of `obj` (an instance or a class).

    Walks the MRO and returns the first class that is not generated.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    for candidate in cls.__mro__:
        if not is_generated(candidate):
            return candidate
    return cls
