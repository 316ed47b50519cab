"""
Provide the observer registry.

A registry holds (observer, execution context) pairs. Pairs are compared by identity, so
the same observer may be registered under several contexts, and observers need not be
hashable.
"""

from __future__ import annotations

import threading
import weakref
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Callable,
    Generic,
    Iterator,
    TypeAlias,
    TypeVar,
    final,
    TYPE_CHECKING,
)

from multicast.capability import is_kind_of, responds_to
from multicast.context import main_context
from multicast.typing import threadsafe

if TYPE_CHECKING:
    from collections.abc import MutableSequence
    from multicast.context import ExecutionContext

_ObserverT = TypeVar("_ObserverT")


class Visit(Enum):
    """
    Tell :py:meth:`multicast.registry.Registry.enumerate` how to proceed after a visit.
    """

    CONTINUE = "continue"
    STOP = "stop"


Visitor: TypeAlias = Callable[[_ObserverT, "ExecutionContext"], "Visit | None"]


@final
@dataclass(frozen=True, eq=False)
class Entry(Generic[_ObserverT]):
    """
    An observer and the execution context its invocations run on.
    """

    observer: _ObserverT
    context: ExecutionContext

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self.observer is other.observer and self.context is other.context

    def __hash__(self) -> int:
        return hash((id(self.observer), id(self.context)))


_ObserverReference: TypeAlias = Callable[[], Any]


def _strong_reference(observer: Any) -> _ObserverReference:
    return lambda: observer


def _weak_reference(observer: Any) -> _ObserverReference:
    try:
        return weakref.ref(observer)
    except TypeError:
        # Some objects, such as builtins or instances with __slots__ but without
        # __weakref__, cannot be weakly referenced.
        return _strong_reference(observer)


@dataclass(frozen=True)
class _Registration:
    reference: _ObserverReference
    context: ExecutionContext


@final
@threadsafe
class Registry(Generic[_ObserverT]):
    """
    Manage observers and their execution contexts.

    Every structural read or write happens under a single lock, which is never held
    while observer code runs.
    """

    def __init__(self, *, weak: bool = True):
        self._lock = threading.Lock()
        self._registrations: MutableSequence[_Registration] = []
        self._reference = _weak_reference if weak else _strong_reference

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Entry[_ObserverT]]:
        return iter(self.snapshot())

    def __contains__(self, observer: object) -> bool:
        return any(entry.observer is observer for entry in self.snapshot())

    def _live(self) -> MutableSequence[_Registration]:
        return [
            registration
            for registration in self._registrations
            if registration.reference() is not None
        ]

    def _index(self, observer: _ObserverT, context: ExecutionContext) -> int | None:
        for index, registration in enumerate(self._registrations):
            if (
                registration.context is context
                and registration.reference() is observer
            ):
                return index
        return None

    def add(
        self, observer: _ObserverT, context: ExecutionContext | None = None
    ) -> None:
        """
        Add an observer for the given execution context.

        Adding a pair that was added before has no effect.

        :param context: Defaults to :py:func:`multicast.context.main_context`.
        """
        if observer is None:
            return
        if context is None:
            context = main_context()
        with self._lock:
            self._registrations = self._live()
            if self._index(observer, context) is None:
                self._registrations.append(
                    _Registration(self._reference(observer), context)
                )

    def remove(
        self, observer: _ObserverT, context: ExecutionContext | None = None
    ) -> None:
        """
        Remove an observer.

        :param context: If given, remove the observer for this execution context only.
            Otherwise, remove the observer for all execution contexts.
        """
        with self._lock:
            # Removed registrations are released after the lock, because releasing
            # an observer may run its finalizer.
            released = self._registrations
            self._registrations = [
                registration
                for registration in self._registrations
                if (live_observer := registration.reference()) is not None
                and not (
                    live_observer is observer
                    and (context is None or registration.context is context)
                )
            ]
        del released

    def remove_all(self) -> None:
        """
        Remove all observers.
        """
        with self._lock:
            released = self._registrations
            self._registrations = []
        del released

    def snapshot(self) -> tuple[Entry[_ObserverT], ...]:
        """
        Copy the current entries, in the order they were added.

        The copy never changes, even if the registry does.
        """
        with self._lock:
            entries = []
            for registration in self._registrations:
                observer = registration.reference()
                if observer is not None:
                    entries.append(Entry(observer, registration.context))
            if len(entries) != len(self._registrations):
                self._registrations = self._live()
        return tuple(entries)

    def enumerate(self, visitor: Visitor[_ObserverT]) -> None:
        """
        Visit each entry in the order it was added.

        The visitor is called with each entry's observer and execution context. It
        stops the enumeration by returning :py:attr:`multicast.registry.Visit.STOP`.
        Changes to the registry during enumeration do not affect it.
        """
        for entry in self.snapshot():
            if visitor(entry.observer, entry.context) is Visit.STOP:
                return

    def count(self) -> int:
        """
        Count the (observer, execution context) pairs.
        """
        return len(self.snapshot())

    def count_of_observers(self) -> int:
        """
        Count the distinct observers, regardless of their execution contexts.
        """
        return len({id(entry.observer) for entry in self.snapshot()})

    def count_of_class(self, kind: type | tuple[type, ...]) -> int:
        """
        Count the pairs whose observer is an instance of the given type(s).
        """
        return sum(1 for entry in self.snapshot() if is_kind_of(entry.observer, kind))

    def count_for_operation(self, operation: str) -> int:
        """
        Count the pairs whose observer responds to the given operation.
        """
        return len(self.responding_to(operation))

    def has_observer_responding_to(self, operation: str) -> bool:
        """
        Check if any observer responds to the given operation.
        """
        return any(responds_to(entry.observer, operation) for entry in self.snapshot())

    def responding_to(self, operation: str) -> tuple[Entry[_ObserverT], ...]:
        """
        Snapshot the entries whose observer responds to the given operation.
        """
        return tuple(
            entry for entry in self.snapshot() if responds_to(entry.observer, operation)
        )
