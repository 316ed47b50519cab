"""
Provide deserialization formats for configuration files.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import cast, final

import yaml
from typing_extensions import override

from multicast.assertion.error import AssertionFailed
from multicast.serde.dump import Dump


class Format(ABC):
    """
    Defines a deserialization format.
    """

    @property
    @abstractmethod
    def extensions(self) -> set[str]:
        """
        The file extensions this format can deserialize.

        Extensions include a leading dot.
        """
        pass

    @property
    @abstractmethod
    def label(self) -> str:
        """
        The format's human-readable label.
        """
        pass

    @abstractmethod
    def load(self, dump: str) -> Dump:
        """
        Deserialize data.
        """
        pass


@final
class Json(Format):
    """
    Defines the `JSON <https://json.org/>`_ deserialization format.
    """

    @override
    @property
    def extensions(self) -> set[str]:
        return {".json"}

    @override
    @property
    def label(self) -> str:
        return "JSON"

    @override
    def load(self, dump: str) -> Dump:
        try:
            return cast(Dump, json.loads(dump))
        except json.JSONDecodeError as e:
            raise FormatError(f"Invalid JSON: {e}.") from None


@final
class Yaml(Format):
    """
    Defines the `YAML <https://yaml.org/>`_ deserialization format.
    """

    @override
    @property
    def extensions(self) -> set[str]:
        return {".yaml", ".yml"}

    @override
    @property
    def label(self) -> str:
        return "YAML"

    @override
    def load(self, dump: str) -> Dump:
        try:
            return cast(Dump, yaml.safe_load(dump))
        except yaml.YAMLError as e:
            raise FormatError(f"Invalid YAML: {e}.") from None


@final
class FormatRepository:
    """
    Exposes the available deserialization formats.
    """

    def __init__(self):
        self._serde_formats = (
            Json(),
            Yaml(),
        )

    def format_for(self, extension: str) -> Format:
        """
        Get the deserialization format for the given file extension.

        The extension includes a leading dot.
        """
        for serde_format in self._serde_formats:
            if extension in serde_format.extensions:
                return serde_format
        supported_formats = ", ".join(
            f"{supported_extension} ({serde_format.label})"
            for serde_format in self._serde_formats
            for supported_extension in sorted(serde_format.extensions)
        )
        raise FormatError(
            f'Unknown file format "{extension}". Supported formats are: {supported_formats}.'
        )


FORMAT_REPOSITORY = FormatRepository()


class FormatError(AssertionFailed):
    """
    Raised when data that is being deserialized is provided in an unknown (undeserializable) format.
    """

    pass  # pragma: no cover
