"""
Provide multicast delegates.

A multicast delegate stands in for a single observer, while forwarding every call made on
it to all registered observers that implement the called method. Each observer's method
runs asynchronously on the execution context the observer was registered with::

    delegate = MulticastDelegate[StreamObserver]()
    delegate.add(logger_observer)
    delegate.add(ui_observer, ui_context)

    # Runs logger_observer.stream_opened(stream) on the main context, and
    # ui_observer.stream_opened(stream) on ui_context.
    delegate.stream_opened(stream)

Observers that do not implement a method are skipped. Calls return ``None`` immediately,
without waiting for any observer.
"""

from __future__ import annotations

import logging
from functools import partial
from types import TracebackType
from typing import Any, Generic, Self, TypeVar, cast, final, TYPE_CHECKING

from multicast.capability import is_operation
from multicast.config import Configurable, MulticastConfiguration
from multicast.context import ExecutionContextClosed
from multicast.registry import Registry
from multicast.repr import repr_instance
from multicast.typing import threadsafe

if TYPE_CHECKING:
    from collections.abc import Mapping
    from multicast.context import ExecutionContext
    from multicast.registry import Entry, Visitor

_ObserverT = TypeVar("_ObserverT")

_logger = logging.getLogger(__name__)


def _invoke(
    observer: Any, operation: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]
) -> Any:
    return getattr(observer, operation)(*args, **kwargs)


@final
class _Forwarder:
    """
    Forward calls of a single operation to a registry's observers.
    """

    __slots__ = "_delegate", "_operation"

    def __init__(self, delegate: MulticastDelegate[Any], operation: str):
        self._delegate = delegate
        self._operation = operation

    def __repr__(self) -> str:
        return f"<forwarded operation {self._operation!r} of {self._delegate!r}>"

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        self._delegate.invoke(self._operation, *args, **kwargs)


@threadsafe
class MulticastDelegate(Configurable[MulticastConfiguration], Generic[_ObserverT]):
    """
    Forward method calls to many observers, each on its own execution context.

    Any public attribute this class does not define itself is an operation: accessing it
    returns a callable that forwards its arguments to every observer that implements a
    method of that name. This class's own methods always take precedence, so observer
    methods with the same names as these can only be reached through
    :py:meth:`multicast.delegate.MulticastDelegate.invoke`.
    """

    def __init__(self, *, configuration: MulticastConfiguration | None = None):
        super().__init__(configuration=configuration or MulticastConfiguration())
        self._registry: Registry[_ObserverT] = Registry(
            weak=self._configuration.weak_observers
        )

    def __repr__(self) -> str:
        return repr_instance(self, count=self.count())

    def __getattr__(self, name: str) -> _Forwarder:
        # Only consulted for attributes not found through normal lookup.
        if not is_operation(name):
            raise AttributeError(name)
        return _Forwarder(self, name)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __contains__(self, observer: object) -> bool:
        return observer in self._registry

    @property
    def registry(self) -> Registry[_ObserverT]:
        """
        The registry of observers and their execution contexts.
        """
        return self._registry

    def as_observer(self) -> _ObserverT:
        """
        Get this delegate, typed as the observer type.

        This lets owning code call observer methods through the delegate in a type-safe way.
        """
        return cast(_ObserverT, self)

    def add(self, observer: _ObserverT, context: ExecutionContext | None = None) -> None:
        """
        Add an observer.

        :param context: The execution context to invoke the observer on. Defaults to
            :py:func:`multicast.context.main_context`.
        """
        self._registry.add(observer, context)

    def remove(
        self, observer: _ObserverT, context: ExecutionContext | None = None
    ) -> None:
        """
        Remove an observer.

        :param context: If given, remove the observer for this execution context only.
            Otherwise, remove the observer for all execution contexts.
        """
        self._registry.remove(observer, context)

    def remove_all(self) -> None:
        """
        Remove all observers.
        """
        self._registry.remove_all()

    def count(self) -> int:
        """
        Count the (observer, execution context) pairs.
        """
        return self._registry.count()

    def count_of_observers(self) -> int:
        """
        Count the distinct observers.
        """
        return self._registry.count_of_observers()

    def count_of_class(self, kind: type | tuple[type, ...]) -> int:
        """
        Count the pairs whose observer is an instance of the given type(s).
        """
        return self._registry.count_of_class(kind)

    def count_for_operation(self, operation: str) -> int:
        """
        Count the pairs whose observer responds to the given operation.
        """
        return self._registry.count_for_operation(operation)

    def has_observer_responding_to(self, operation: str) -> bool:
        """
        Check if any observer responds to the given operation.
        """
        return self._registry.has_observer_responding_to(operation)

    def enumerate(self, visitor: Visitor[_ObserverT]) -> None:
        """
        Visit each observer and its execution context, in the order they were added.

        See :py:meth:`multicast.registry.Registry.enumerate`.
        """
        self._registry.enumerate(visitor)

    def invoke(self, operation: str, /, *args: Any, **kwargs: Any) -> None:
        """
        Forward an operation to all observers that respond to it.

        Each responding observer's method is called once per execution context it was
        added for, on that context. This returns immediately, and never raises errors
        raised by observers.
        """
        entries = self._registry.responding_to(operation)
        if not entries and self._configuration.log_unhandled:
            _logger.debug('No observer responds to "%s".', operation)
        for entry in entries:
            self._submit(entry, operation, args, kwargs)

    def _submit(
        self,
        entry: Entry[_ObserverT],
        operation: str,
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
    ) -> None:
        try:
            entry.context.submit(
                partial(_invoke, entry.observer, operation, args, dict(kwargs))
            )
        except ExecutionContextClosed as error:
            _logger.warning(
                'Cannot forward "%s" to %r: %s', operation, entry.observer, error
            )

    def close(self) -> None:
        """
        Remove all observers.

        Invocations that were already submitted still run.
        """
        self.remove_all()
