import pytest

from multicast.assertion.error import (
    AssertionFailed,
    AssertionFailedGroup,
    Key,
)


class TestKey:
    def test_format(self) -> None:
        assert Key("key").format() == '["key"]'


class TestAssertionFailed:
    def test___str___without_contexts(self) -> None:
        sut = AssertionFailed("Something went wrong.")
        assert str(sut) == "Something went wrong."

    def test___str___with_contexts(self) -> None:
        sut = AssertionFailed("Something went wrong.").with_context(
            Key("inner"), Key("outer")
        )
        assert str(sut) == 'Something went wrong.\n- data["outer"]["inner"]'

    def test_with_context_should_not_change_original(self) -> None:
        sut = AssertionFailed("Something went wrong.")
        sut.with_context(Key("key"))
        assert str(sut) == "Something went wrong."

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            raise AssertionFailed("Something went wrong.")


class TestAssertionFailedGroup:
    def test_valid(self) -> None:
        sut = AssertionFailedGroup()
        assert sut.valid
        assert not sut.invalid
        assert len(sut) == 0

    def test_append(self) -> None:
        sut = AssertionFailedGroup()
        error = AssertionFailed("Something went wrong.")
        sut.append(error)
        assert sut.invalid
        assert len(sut) == 1

    def test_append_with_group_should_flatten(self) -> None:
        sut = AssertionFailedGroup()
        other = AssertionFailedGroup()
        other.append(AssertionFailed("One."), AssertionFailed("Two."))
        sut.append(other)
        assert len(sut) == 2

    def test_catch(self) -> None:
        sut = AssertionFailedGroup()
        with sut.catch(Key("key")):
            raise AssertionFailed("Something went wrong.")
        assert len(sut) == 1
        (error,) = sut
        assert str(error) == 'Something went wrong.\n- data["key"]'

    def test_assert_valid_with_errors(self) -> None:
        sut = AssertionFailedGroup()
        with pytest.raises(AssertionFailedGroup):
            with sut.assert_valid():
                raise AssertionFailed("Something went wrong.")

    def test_assert_valid_without_errors(self) -> None:
        sut = AssertionFailedGroup()
        with sut.assert_valid():
            pass
        assert sut.valid

    def test___str__(self) -> None:
        sut = AssertionFailedGroup()
        sut.append(AssertionFailed("One."), AssertionFailed("Two."))
        assert str(sut) == "One.\n\nTwo."
