"""
Providing typing utilities.
"""

from __future__ import annotations

from typing import TypeVar

from multicast.docstring import append

_T = TypeVar("_T")


def threadsafe(target: _T) -> _T:
    """
    Mark a target as thread-safe.
    """
    target.__doc__ = append(
        target.__doc__ or "",
        "This is thread-safe, which means you can safely use this between different threads.",
    )
    return target
