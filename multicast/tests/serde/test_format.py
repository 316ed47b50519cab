import pytest

from multicast.serde.dump import Dump
from multicast.serde.format import FormatError, FormatRepository, Json, Yaml


class TestJson:
    def test_extensions(self) -> None:
        assert Json().extensions == {".json"}

    def test_label(self) -> None:
        assert Json().label == "JSON"

    @pytest.mark.parametrize(
        ("expected", "dump"),
        [
            (None, "null"),
            (True, "true"),
            ({"key": [1, 2.5, "three"]}, '{"key": [1, 2.5, "three"]}'),
        ],
    )
    def test_load(self, expected: Dump, dump: str) -> None:
        assert Json().load(dump) == expected

    def test_load_with_invalid_json(self) -> None:
        with pytest.raises(FormatError):
            Json().load("{")


class TestYaml:
    def test_extensions(self) -> None:
        assert Yaml().extensions == {".yaml", ".yml"}

    def test_label(self) -> None:
        assert Yaml().label == "YAML"

    def test_load(self) -> None:
        assert Yaml().load("key:\n  - 1\n  - true\n") == {"key": [1, True]}

    def test_load_with_invalid_yaml(self) -> None:
        with pytest.raises(FormatError):
            Yaml().load("key: [")


class TestFormatRepository:
    @pytest.mark.parametrize(
        ("expected", "extension"),
        [
            (Json, ".json"),
            (Yaml, ".yaml"),
            (Yaml, ".yml"),
        ],
    )
    def test_format_for(self, expected: type, extension: str) -> None:
        assert isinstance(FormatRepository().format_for(extension), expected)

    def test_format_for_with_unknown_extension(self) -> None:
        with pytest.raises(FormatError) as error:
            FormatRepository().format_for(".ini")
        assert (
            str(error.value)
            == 'Unknown file format ".ini". Supported formats are: .json (JSON), .yaml (YAML), .yml (YAML).'
        )
