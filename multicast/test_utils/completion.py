"""
Wait for asynchronous invocations to complete.
"""

from __future__ import annotations

import threading
from typing import Any, final, TYPE_CHECKING

from multicast.typing import threadsafe

if TYPE_CHECKING:
    from collections.abc import MutableSequence


@final
@threadsafe
class Completion:
    """
    Count invocations, and wait until an expected number of them has happened.
    """

    def __init__(self, expected: int):
        self._expected = expected
        self._condition = threading.Condition()
        self._calls: MutableSequence[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        """
        Record a single invocation.
        """
        with self._condition:
            self._calls.append(args)
            self._condition.notify_all()

    @property
    def calls(self) -> tuple[tuple[Any, ...], ...]:
        """
        The arguments of every recorded invocation, in the order they were recorded.
        """
        with self._condition:
            return tuple(self._calls)

    def wait(self, timeout: float = 5.0) -> bool:
        """
        Wait until at least the expected number of invocations has been recorded.

        :return: ``False`` if the timeout expired first.
        """
        with self._condition:
            return self._condition.wait_for(
                lambda: len(self._calls) >= self._expected, timeout
            )
