"""
Provide execution contexts: FIFO task runners that observer invocations are submitted to.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from abc import ABC, abstractmethod
from concurrent.futures import Executor, ThreadPoolExecutor
from inspect import isawaitable
from types import TracebackType
from typing import Any, Callable, Self, TypeAlias, final, TYPE_CHECKING

from typing_extensions import override

from multicast.asyncio import ensure_await
from multicast.error import MulticastError
from multicast.repr import repr_instance
from multicast.typing import threadsafe

if TYPE_CHECKING:
    from collections.abc import Awaitable

Work: TypeAlias = Callable[[], Any]
ErrorHandler: TypeAlias = Callable[[Exception], None]

_logger = logging.getLogger(__name__)


class ExecutionContextClosed(MulticastError, RuntimeError):
    """
    Raised when work is submitted to an execution context that has been closed.
    """

    def __init__(self, context: ExecutionContext):
        super().__init__(
            f'Cannot submit work to execution context "{context.name}", because it is closed.'
        )
        self.context = context


class ExecutionContext(ABC):
    """
    A FIFO task runner.

    Work submitted to a context runs eventually, and in the order it was submitted to
    that same context. It never runs on the submitting thread as part of the submission.
    Exceptions raised by work are reported by the context, and never propagate to the
    submitter.
    """

    def __init__(self, *, name: str | None = None, on_error: ErrorHandler | None = None):
        self._name = name or f"{type(self).__name__}-{id(self):x}"
        self._on_error = on_error
        self._closed = False
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return repr_instance(self, name=repr(self._name))

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def name(self) -> str:
        """
        The context's human-readable name.
        """
        return self._name

    @property
    def closed(self) -> bool:
        """
        Whether the context has stopped accepting work.
        """
        return self._closed

    def submit(self, work: Work) -> None:
        """
        Submit work to run on this context.

        :raises ExecutionContextClosed: Raised if the context has been closed.
        """
        with self._lock:
            if self._closed:
                raise ExecutionContextClosed(self)
            self._submit(work)

    @abstractmethod
    def _submit(self, work: Work) -> None:
        pass

    def close(self) -> None:
        """
        Stop accepting work.
        """
        with self._lock:
            self._closed = True

    def _report(self, error: Exception) -> None:
        if self._on_error is None:
            _logger.exception(
                'Work on execution context "%s" raised an error.',
                self._name,
                exc_info=error,
            )
        else:
            self._on_error(error)


@threadsafe
class ExecutorExecutionContext(ExecutionContext):
    """
    Run work on a :py:class:`concurrent.futures.Executor`.

    Work runs in submission order only if the executor runs a single task at a time.
    If work returns an awaitable, it is awaited to completion on the executor's thread.
    """

    def __init__(
        self,
        executor: Executor,
        *,
        name: str | None = None,
        on_error: ErrorHandler | None = None,
    ):
        super().__init__(name=name, on_error=on_error)
        self._executor = executor

    @override
    def _submit(self, work: Work) -> None:
        try:
            self._executor.submit(self._run, work)
        except RuntimeError as error:
            # The executor was shut down elsewhere, or the interpreter is exiting.
            raise ExecutionContextClosed(self) from error

    def _run(self, work: Work) -> None:
        try:
            result = work()
            if isawaitable(result):
                asyncio.run(ensure_await(result))
        except Exception as error:
            self._report(error)


@final
@threadsafe
class ThreadExecutionContext(ExecutorExecutionContext):
    """
    Run work on a dedicated worker thread, strictly in submission order.
    """

    def __init__(
        self,
        name: str | None = None,
        *,
        on_error: ErrorHandler | None = None,
    ):
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=name or "")
        super().__init__(executor, name=name, on_error=on_error)

    @override
    def close(self, *, wait: bool = True) -> None:
        """
        Stop accepting work, and shut the worker thread down.

        :param wait: Whether to block until all previously submitted work has run.
        """
        super().close()
        self._executor.shutdown(wait=wait)


@final
@threadsafe
class LoopExecutionContext(ExecutionContext):
    """
    Run work on an asyncio event loop.

    Work may be submitted from any thread. If work returns an awaitable, it is scheduled
    as a task on the loop.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        *,
        name: str | None = None,
        on_error: ErrorHandler | None = None,
    ):
        super().__init__(name=name, on_error=on_error)
        self._loop = loop
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        """
        The event loop work runs on.
        """
        return self._loop

    @override
    def _submit(self, work: Work) -> None:
        try:
            self._loop.call_soon_threadsafe(self._run, work)
        except RuntimeError as error:
            # The loop is closed.
            raise ExecutionContextClosed(self) from error

    def _run(self, work: Work) -> None:
        try:
            result = work()
        except Exception as error:
            self._report(error)
            return
        if isawaitable(result):
            task = self._loop.create_task(self._await(result))
            # Keep a strong reference, because the loop only keeps weak references to tasks.
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

    async def _await(self, awaitable: Awaitable[Any]) -> None:
        try:
            await awaitable
        except Exception as error:
            self._report(error)


_main_context: ExecutionContext | None = None
_main_context_lock = threading.Lock()


def main_context() -> ExecutionContext:
    """
    Get the default execution context.

    Unless another context was set through :py:func:`multicast.context.set_main_context`,
    this lazily starts a process-wide :py:class:`multicast.context.ThreadExecutionContext`.
    """
    global _main_context
    with _main_context_lock:
        if _main_context is None:
            _main_context = ThreadExecutionContext("main")
        return _main_context


def set_main_context(context: ExecutionContext | None) -> ExecutionContext | None:
    """
    Set the default execution context.

    Pass ``None`` to fall back to the lazily started default.

    :return: The previous default context, if any. It is not closed.
    """
    global _main_context
    with _main_context_lock:
        previous_context = _main_context
        _main_context = context
        return previous_context
