"""
Test utilities for :py:mod:`multicast.context`.
"""

from __future__ import annotations

import threading
from typing import final, TYPE_CHECKING

from typing_extensions import override

from multicast.context import ExecutionContext

if TYPE_CHECKING:
    from collections.abc import MutableSequence
    from multicast.context import Work


@final
class RecordingExecutionContext(ExecutionContext):
    """
    Record submitted work without running it, so tests control when it runs.
    """

    def __init__(self, name: str | None = None):
        super().__init__(name=name, on_error=self._record_error)
        self._pending: MutableSequence[Work] = []
        self._pending_lock = threading.Lock()
        self.errors: MutableSequence[Exception] = []
        self.submitted = 0

    @override
    def _submit(self, work: Work) -> None:
        with self._pending_lock:
            self._pending.append(work)
            self.submitted += 1

    def _record_error(self, error: Exception) -> None:
        self.errors.append(error)

    @property
    def pending(self) -> int:
        """
        The amount of submitted work that has not run yet.
        """
        with self._pending_lock:
            return len(self._pending)

    def run(self) -> int:
        """
        Run all pending work on the calling thread, in submission order.

        :return: The amount of work that ran.
        """
        with self._pending_lock:
            pending = self._pending
            self._pending = []
        for work in pending:
            try:
                work()
            except Exception as error:
                self._report(error)
        return len(pending)
