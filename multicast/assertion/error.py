"""
Provide assertion failures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from textwrap import indent
from typing import Iterator, Self, TYPE_CHECKING

from typing_extensions import override

from multicast.error import UserFacingError

if TYPE_CHECKING:
    from collections.abc import MutableSequence


class AssertionContext(ABC):
    """
    The context in which an assertion is invoked.
    """

    @abstractmethod
    def format(self) -> str:
        """
        Format this context to a string.
        """
        pass


class Key(AssertionContext):
    """
    A mapping key context.
    """

    def __init__(self, key: str):
        self._key = key

    @override
    def format(self) -> str:
        return f'["{self._key}"]'


class AssertionFailed(UserFacingError, ValueError):
    """
    An assertion failure.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self._contexts: tuple[AssertionContext, ...] = ()

    def __str__(self) -> str:
        if not self._contexts:
            return self.message
        return f"{self.message}\n" + indent(
            "data" + "".join(context.format() for context in self._contexts), "- "
        )

    def with_context(self, *contexts: AssertionContext) -> Self:
        """
        Add contexts describing where the error occurred.
        """
        self_copy = self._copy()
        self_copy._contexts = (*reversed(contexts), *self._contexts)
        return self_copy

    def _copy(self) -> Self:
        return type(self)(self.message)


class AssertionFailedGroup(AssertionFailed):
    """
    A group of zero or more assertion failures.
    """

    def __init__(self):
        super().__init__("The following errors occurred")
        self._errors: MutableSequence[AssertionFailed] = []

    def __iter__(self) -> Iterator[AssertionFailed]:
        yield from self._errors

    def __len__(self) -> int:
        return len(self._errors)

    @override
    def __str__(self) -> str:
        return "\n\n".join(str(error) for error in self._errors)

    @property
    def valid(self) -> bool:
        """
        Check that this collection contains no errors.
        """
        return len(self._errors) == 0

    @property
    def invalid(self) -> bool:
        """
        Check that this collection contains at least one error.
        """
        return not self.valid

    @contextmanager
    def assert_valid(self) -> Iterator[Self]:
        """
        Assert that this collection contains no errors.
        """
        if self.invalid:
            raise self
        with self.catch():
            yield self
        if self.invalid:  # type: ignore[redundant-expr]
            raise self

    def append(self, *errors: AssertionFailed) -> None:
        """
        Append errors to this collection.
        """
        for error in errors:
            if isinstance(error, AssertionFailedGroup):
                self.append(*error)
            else:
                self._errors.append(error.with_context(*self._contexts))

    @override
    def with_context(self, *contexts: AssertionContext) -> Self:
        self_copy = super().with_context(*contexts)
        self_copy._errors = [error.with_context(*contexts) for error in self._errors]
        return self_copy

    @override
    def _copy(self) -> Self:
        return type(self)()

    @contextmanager
    def catch(self, *contexts: AssertionContext) -> Iterator[AssertionFailedGroup]:
        """
        Catch any errors raised within this context manager and add them to the collection.

        :return: A new collection that will only contain any newly raised errors.
        """
        context_errors: AssertionFailedGroup = AssertionFailedGroup()
        if contexts:
            context_errors = context_errors.with_context(*contexts)
        try:
            yield context_errors
        except AssertionFailed as e:
            context_errors.append(e)
        self.append(*context_errors)
