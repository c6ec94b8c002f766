"""Configuration stores holding raw entries."""

from runconf.stores.config_store import ConfigStore
from runconf.stores.inmemory import InMemoryConfigStore

__all__ = [
    "ConfigStore",
    "InMemoryConfigStore",
]
