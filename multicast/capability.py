"""
Query what observers are capable of.

An observer responds to an operation if it exposes a public, callable attribute of the
operation's name. Names that start with an underscore are never operations.
"""

from __future__ import annotations

from typing import Any


def is_operation(operation: str) -> bool:
    """
    Check if a name can identify a forwardable operation.
    """
    return operation.isidentifier() and not operation.startswith("_")


def responds_to(observer: Any, operation: str) -> bool:
    """
    Check if an observer implements an operation.
    """
    if not is_operation(operation):
        return False
    return callable(getattr(observer, operation, None))


def is_kind_of(observer: Any, kind: type | tuple[type, ...]) -> bool:
    """
    Check if an observer is an instance of the given type(s).
    """
    return isinstance(observer, kind)
