"""In-memory implementation of ConfigStore."""

from collections.abc import Hashable, Mapping
from typing import Any

from runconf.models import NO_DEFAULT, ConfigEntry, NoDefault
from runconf.parsing import parse_entry
from runconf.stores.config_store import ConfigStore


class InMemoryConfigStore(ConfigStore):
    """In-memory implementation of ConfigStore.

    Uses a dict of dicts keyed by namespace, then key. Raw values are
    converted to entries when they are put, never at lookup time.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._namespaces: dict[Hashable, dict[Hashable, ConfigEntry]] = {}

    def get(self, namespace: Hashable, key: Hashable) -> ConfigEntry | NoDefault:
        """Get the raw entry, or NO_DEFAULT when nothing is stored."""
        if key not in self.all_keys(namespace):
            return NO_DEFAULT
        return self._namespaces[namespace][key]

    def all_keys(self, namespace: Hashable) -> set[Hashable]:
        """Get every key stored in a namespace."""
        return set(self._namespaces.get(namespace, {}))

    def put(self, namespace: Hashable, key: Hashable, entry: ConfigEntry) -> None:
        """Store an already-built entry."""
        self._namespaces.setdefault(namespace, {})[key] = entry

    def put_raw(
        self,
        namespace: Hashable,
        key: Hashable,
        raw: Any,
        tag: str | None = None,
    ) -> None:
        """Parse a raw value (tagged tuples, dicts, pair lists) and store it."""
        self.put(namespace, key, parse_entry(raw, tag=tag))

    def put_all(
        self,
        namespace: Hashable,
        values: Mapping[Hashable, Any],
        tag: str | None = None,
    ) -> None:
        """Parse and store every raw value of a mapping."""
        for key, raw in values.items():
            self.put_raw(namespace, key, raw, tag=tag)

    def delete(self, namespace: Hashable, key: Hashable) -> bool:
        """Remove an entry, returning whether it existed."""
        entries = self._namespaces.get(namespace)
        if entries is None or key not in entries:
            return False
        del entries[key]
        return True

    @classmethod
    def from_mapping(
        cls,
        config: Mapping[Hashable, Mapping[Hashable, Any]],
        tag: str | None = None,
    ) -> "InMemoryConfigStore":
        """Build a store from ``{namespace: {key: raw_value}}``."""
        store = cls()
        for namespace, values in config.items():
            store.put_all(namespace, values, tag=tag)
        return store
