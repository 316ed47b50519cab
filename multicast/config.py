"""
The Configuration API.
"""

from __future__ import annotations

from typing import Generic, TypeVar, TYPE_CHECKING, Self, Any, final

from typing_extensions import override

from multicast.assertion import assert_record, OptionalField, assert_bool
from multicast.assertion.error import AssertionFailedGroup
from multicast.serde.dump import Dumpable
from multicast.serde.format import FORMAT_REPOSITORY
from multicast.serde.load import Loadable

if TYPE_CHECKING:
    from pathlib import Path
    from multicast.serde.dump import Dump, DumpMapping


class Configuration(Loadable, Dumpable):
    """
    Any configuration object.
    """

    def update(self, other: Self) -> None:
        """
        Update this configuration with the values from ``other``.
        """
        self.load(other.dump())


_ConfigurationT = TypeVar("_ConfigurationT", bound=Configuration)


class Configurable(Generic[_ConfigurationT]):
    """
    Any configurable object.
    """

    def __init__(self, *args: Any, configuration: _ConfigurationT, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._configuration = configuration

    @property
    def configuration(self) -> _ConfigurationT:
        """
        The object's configuration.
        """
        return self._configuration


@final
class MulticastConfiguration(Configuration):
    """
    Provide configuration for :py:class:`multicast.delegate.MulticastDelegate`.
    """

    def __init__(
        self,
        *,
        weak_observers: bool = True,
        log_unhandled: bool = False,
    ):
        super().__init__()
        self._weak_observers = weak_observers
        self._log_unhandled = log_unhandled

    @property
    def weak_observers(self) -> bool:
        """
        Whether to hold observers through weak references.

        Weakly held observers are dropped from the registry once they are garbage
        collected. Observers that cannot be weakly referenced are always held strongly.
        """
        return self._weak_observers

    @weak_observers.setter
    def weak_observers(self, weak_observers: bool) -> None:
        self._weak_observers = weak_observers

    @property
    def log_unhandled(self) -> bool:
        """
        Whether to log operations that no observer responds to.
        """
        return self._log_unhandled

    @log_unhandled.setter
    def log_unhandled(self, log_unhandled: bool) -> None:
        self._log_unhandled = log_unhandled

    @override
    def load(self, dump: Dump) -> None:
        """
        Load a configuration dump.

        The dump is validated as a whole first. If it is invalid, this configuration is
        left unchanged.
        """
        record = assert_record(
            OptionalField("weak_observers", assert_bool()),
            OptionalField("log_unhandled", assert_bool()),
        )(dump)
        for name, value in record.items():
            setattr(self, name, value)

    @override
    def dump(self) -> DumpMapping[Dump]:
        return {
            "weak_observers": self.weak_observers,
            "log_unhandled": self.log_unhandled,
        }


def load_configuration_file(configuration_file_path: Path) -> MulticastConfiguration:
    """
    Load configuration from a JSON or YAML file.

    :raises multicast.assertion.error.AssertionFailed: Raised if the file's format
        is unknown, or if its contents are invalid.
    """
    configuration = MulticastConfiguration()
    with AssertionFailedGroup().assert_valid():
        serde_format = FORMAT_REPOSITORY.format_for(configuration_file_path.suffix)
        with open(configuration_file_path, encoding="utf-8") as f:
            read_configuration = f.read()
        configuration.load(serde_format.load(read_configuration))
    return configuration
