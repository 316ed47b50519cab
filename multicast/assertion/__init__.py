"""
The Assertion API.

Assertions validate untrusted data, such as configuration dumps, and turn it into
trusted Python values.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import (
    Callable,
    Any,
    Generic,
    TypeVar,
    MutableMapping,
    TypeAlias,
    final,
)

from multicast.assertion.error import AssertionFailedGroup, AssertionFailed, Key

_AssertionValueT = TypeVar("_AssertionValueT")
_AssertionReturnT = TypeVar("_AssertionReturnT")

Assertion: TypeAlias = Callable[
    [
        _AssertionValueT,
    ],
    _AssertionReturnT,
]

_AssertionsExtendReturnT = TypeVar("_AssertionsExtendReturnT")


class AssertionChain(Generic[_AssertionValueT, _AssertionReturnT]):
    """
    An assertion chain.

    Chains are assertions themselves. Use ``|`` to feed a chain's output into another
    assertion.
    """

    def __init__(self, _assertion: Assertion[_AssertionValueT, _AssertionReturnT]):
        self._assertion = _assertion

    def __or__(
        self, _assertion: Assertion[_AssertionReturnT, _AssertionsExtendReturnT]
    ) -> AssertionChain[_AssertionValueT, _AssertionsExtendReturnT]:
        return AssertionChain(lambda value: _assertion(self(value)))

    def __call__(self, value: _AssertionValueT) -> _AssertionReturnT:
        """
        Invoke the chain with a value.

        :raises multicast.assertion.error.AssertionFailed: Raised if any part of the
            assertion chain fails.
        """
        return self._assertion(value)


@final
@dataclass(frozen=True)
class OptionalField(Generic[_AssertionValueT, _AssertionReturnT]):
    """
    An optional record field.
    """

    name: str
    assertion: Assertion[_AssertionValueT, _AssertionReturnT]


def assert_bool() -> AssertionChain[Any, bool]:
    """
    Assert that a value is a Python ``bool``.
    """

    def _assert_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise AssertionFailed("This must be a boolean.")

    return AssertionChain(_assert_bool)


def assert_mapping() -> AssertionChain[Any, Mapping[Any, Any]]:
    """
    Assert that a value is a key-value mapping.
    """

    def _assert_mapping(value: Any) -> Mapping[Any, Any]:
        if isinstance(value, Mapping):
            return value
        raise AssertionFailed("This must be a key-value mapping.")

    return AssertionChain(_assert_mapping)


def assert_record(
    *fields: OptionalField[Any, Any],
) -> AssertionChain[Any, MutableMapping[str, Any]]:
    """
    Assert that a value is a record: a key-value mapping with a known set of keys.

    All errors are collected before anything is returned, so a record either passes as
    a whole, or not at all. The returned mapping only contains the fields present in the
    value.
    """

    def _assert_record(value: Mapping[Any, Any]) -> MutableMapping[str, Any]:
        known_keys = {field.name for field in fields}
        known_keys_label = ", ".join(f'"{key}"' for key in sorted(known_keys))
        record: MutableMapping[str, Any] = {}
        with AssertionFailedGroup().assert_valid() as errors:
            for key in value:
                if key not in known_keys:
                    with errors.catch(Key(key)):
                        raise AssertionFailed(
                            f'Unknown key: "{key}". Did you mean one of {known_keys_label}?'
                        )
            for field in fields:
                if field.name in value:
                    with errors.catch(Key(field.name)):
                        record[field.name] = field.assertion(value[field.name])
        return record

    return assert_mapping() | _assert_record
