"""Lookup facade over a configuration store.

Reads the raw entry for (namespace, key), applies the caller default when
the store has none, and resolves environment indirection. Results come
back either as Ok/Error or, through the raising variant, as a value or a
ConfigError.

Usage:
    from runconf import ConfigLookup, InMemoryConfigStore, RuntimeGate

    store = InMemoryConfigStore.from_mapping({"app": {"port": ("system", "PORT", "8080")}})
    gate = RuntimeGate()
    config = ConfigLookup(store, is_runtime=gate)

    gate.open()
    port = config.get_config_or_raise("app", "port")
"""

import os
from collections.abc import Hashable
from typing import Any

from runconf.detectors import IsRuntime, always_runtime
from runconf.exceptions import error_for
from runconf.models import NO_DEFAULT, Default, Error, ResolutionResult
from runconf.observability.logging import ensure_configured, get_logger
from runconf.resolver import GetEnv, resolve
from runconf.stores.config_store import ConfigStore

logger = get_logger(__name__)


class ConfigLookup:
    """Resolve configuration values from a store.

    Holds no state beyond its collaborators: every call reads the store and
    the environment afresh.
    """

    def __init__(
        self,
        store: ConfigStore,
        is_runtime: IsRuntime = always_runtime,
        getenv: GetEnv = os.environ.get,
    ) -> None:
        """Initialize the lookup.

        Args:
            store: Store holding the raw entries
            is_runtime: Build-time detector used when a call gives none
            getenv: Environment reader

        Raises:
            TypeError: If is_runtime or getenv is not callable
        """
        if not callable(is_runtime):
            raise TypeError("is_runtime must be a zero-argument callable")
        if not callable(getenv):
            raise TypeError("getenv must be callable")
        self._store = store
        self._is_runtime = is_runtime
        self._getenv = getenv

    @property
    def store(self) -> ConfigStore:
        return self._store

    def get_config(
        self,
        namespace: Hashable,
        key: Hashable,
        default: Default = NO_DEFAULT,
        *,
        is_runtime: IsRuntime | None = None,
    ) -> ResolutionResult:
        """Look up and resolve a configuration value.

        Args:
            namespace: Namespace the key belongs to
            key: Configuration key
            default: Fallback for a missing entry or an unset variable
            is_runtime: Detector for this call site, overriding the lookup's own

        Returns:
            Ok with the value, or Error with the failure reason
        """
        if is_runtime is None:
            is_runtime = self._is_runtime

        entry = self._store.get(namespace, key)
        result = resolve(
            entry,
            namespace,
            key,
            default,
            is_runtime=is_runtime,
            getenv=self._getenv,
        )

        ensure_configured()
        if isinstance(result, Error):
            logger.debug(
                "config_lookup_failed",
                namespace=str(namespace),
                key=str(key),
                error_kind=result.kind.value,
            )
        else:
            logger.debug("config_lookup_resolved", namespace=str(namespace), key=str(key))

        return result

    def get_config_or_raise(
        self,
        namespace: Hashable,
        key: Hashable,
        default: Default = NO_DEFAULT,
        *,
        is_runtime: IsRuntime | None = None,
    ) -> Any:
        """Look up a configuration value, raising on failure.

        Raises:
            MissingConfigError: No entry stored and no default given
            MissingEnvVarError: Referenced variable unset and no default applies
            EnvAtBuildTimeError: Environment referenced during build time
        """
        result = self.get_config(namespace, key, default, is_runtime=is_runtime)
        if isinstance(result, Error):
            raise error_for(result.reason)
        return result.value


def get_config(
    is_runtime: IsRuntime,
    store: ConfigStore,
    namespace: Hashable,
    key: Hashable,
    default: Default = NO_DEFAULT,
) -> ResolutionResult:
    """Resolve (namespace, key) from ``store`` without building a ConfigLookup."""
    return ConfigLookup(store, is_runtime=is_runtime).get_config(namespace, key, default)


def get_config_or_raise(
    is_runtime: IsRuntime,
    store: ConfigStore,
    namespace: Hashable,
    key: Hashable,
    default: Default = NO_DEFAULT,
) -> Any:
    """Raising variant of ``get_config``."""
    return ConfigLookup(store, is_runtime=is_runtime).get_config_or_raise(
        namespace, key, default
    )
