"""
pytest fixtures for code that uses multicast delegates.

Add ``from multicast.test_utils.conftest import *`` to your project's ``conftest.py``
to start using these fixtures.
"""

from __future__ import annotations

__all__ = [
    "recording_context",
    "thread_context",
]

from typing import TYPE_CHECKING

import pytest

from multicast.context import ThreadExecutionContext
from multicast.test_utils.context import RecordingExecutionContext

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def recording_context() -> RecordingExecutionContext:
    """
    Create an execution context that only runs work when told to.
    """
    return RecordingExecutionContext()


@pytest.fixture
def thread_context() -> Iterator[ThreadExecutionContext]:
    """
    Create an execution context with its own worker thread.
    """
    with ThreadExecutionContext("test") as context:
        yield context
