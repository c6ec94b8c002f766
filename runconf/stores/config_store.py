"""ConfigStore abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Hashable

from runconf.models import ConfigEntry, NoDefault


class ConfigStore(ABC):
    """Abstract interface for a configuration store.

    Holds raw entries keyed by (namespace, key), populated ahead of time by
    the host application. Lookups only read from it.
    """

    @abstractmethod
    def get(self, namespace: Hashable, key: Hashable) -> ConfigEntry | NoDefault:
        """Get the raw entry, or NO_DEFAULT when nothing is stored."""
        pass

    @abstractmethod
    def all_keys(self, namespace: Hashable) -> set[Hashable]:
        """Get every key stored in a namespace."""
        pass
