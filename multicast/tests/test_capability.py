import pytest

from multicast.capability import is_kind_of, is_operation, responds_to


class _Observer:
    not_callable = "Hello, world!"

    def notify(self) -> None:
        pass  # pragma: no cover

    def _private(self) -> None:
        pass  # pragma: no cover

    @property
    def raising(self) -> None:
        raise AttributeError("raising")


class _SubObserver(_Observer):
    pass


class TestIsOperation:
    @pytest.mark.parametrize(
        ("expected", "operation"),
        [
            (True, "notify"),
            (True, "did_find_thing"),
            (False, "_private"),
            (False, "__init__"),
            (False, ""),
            (False, "not an identifier"),
            (False, "did:find:"),
        ],
    )
    def test(self, expected: bool, operation: str) -> None:
        assert is_operation(operation) is expected


class TestRespondsTo:
    @pytest.mark.parametrize(
        ("expected", "operation"),
        [
            (True, "notify"),
            (False, "unknown"),
            (False, "not_callable"),
            (False, "_private"),
            (False, "__init__"),
            (False, "raising"),
        ],
    )
    def test(self, expected: bool, operation: str) -> None:
        assert responds_to(_Observer(), operation) is expected

    def test_with_inherited_method(self) -> None:
        assert responds_to(_SubObserver(), "notify")

    def test_with_callable_attribute(self) -> None:
        observer = _Observer()
        observer.dynamic = lambda: None  # type: ignore[attr-defined]
        assert responds_to(observer, "dynamic")


class TestIsKindOf:
    def test_with_own_class(self) -> None:
        assert is_kind_of(_Observer(), _Observer)

    def test_with_parent_class(self) -> None:
        assert is_kind_of(_SubObserver(), _Observer)

    def test_with_child_class(self) -> None:
        assert not is_kind_of(_Observer(), _SubObserver)

    def test_with_tuple(self) -> None:
        assert is_kind_of(_Observer(), (int, _Observer))
