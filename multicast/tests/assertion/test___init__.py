from typing import Any

import pytest

from multicast.assertion import (
    AssertionChain,
    OptionalField,
    assert_bool,
    assert_mapping,
    assert_record,
)
from multicast.assertion.error import AssertionFailed


class TestAssertionChain:
    def test___call__(self) -> None:
        sut = AssertionChain[int, int](lambda value: value + 1)
        assert sut(1) == 2

    def test___or__(self) -> None:
        sut = AssertionChain[int, int](lambda value: value + 1)
        assert (sut | str)(1) == "2"


class TestAssertBool:
    @pytest.mark.parametrize("value", [True, False])
    def test_with_valid_value(self, value: bool) -> None:
        assert assert_bool()(value) is value

    @pytest.mark.parametrize("value", [None, 0, 1, "true", [], {}])
    def test_with_invalid_value(self, value: Any) -> None:
        with pytest.raises(AssertionFailed):
            assert_bool()(value)


class TestAssertMapping:
    def test_with_valid_value(self) -> None:
        assert assert_mapping()({"key": "value"}) == {"key": "value"}

    @pytest.mark.parametrize("value", [None, True, 1, "key", []])
    def test_with_invalid_value(self, value: Any) -> None:
        with pytest.raises(AssertionFailed):
            assert_mapping()(value)


class TestAssertRecord:
    def test_with_known_keys(self) -> None:
        sut = assert_record(OptionalField("key", assert_bool()))
        assert sut({"key": True}) == {"key": True}

    def test_with_missing_optional_field(self) -> None:
        sut = assert_record(OptionalField("key", assert_bool()))
        assert sut({}) == {}

    def test_with_unknown_key(self) -> None:
        sut = assert_record(OptionalField("key", assert_bool()))
        with pytest.raises(AssertionFailed) as error:
            sut({"unknown": True})
        assert 'Unknown key: "unknown". Did you mean one of "key"?' in str(error.value)

    def test_with_invalid_field(self) -> None:
        sut = assert_record(OptionalField("key", assert_bool()))
        with pytest.raises(AssertionFailed) as error:
            sut({"key": 123})
        assert 'data["key"]' in str(error.value)

    def test_should_collect_all_errors(self) -> None:
        sut = assert_record(
            OptionalField("one", assert_bool()),
            OptionalField("two", assert_bool()),
        )
        with pytest.raises(AssertionFailed) as error:
            sut({"one": True, "two": "yes", "three": False})
        assert 'data["two"]' in str(error.value)
        assert 'data["three"]' in str(error.value)
