"""Resolve raw configuration entries into values.

The resolver is pure: it consults only the injected environment reader and
the injected build-time detector, and reports failures as ``Error`` results
instead of raising.
"""

import os
from collections.abc import Callable, Hashable, Iterable
from typing import Any

from runconf.detectors import IsRuntime, always_runtime
from runconf.models import (
    NO_DEFAULT,
    ConfigEntry,
    Default,
    EnvAtBuildTime,
    EnvRef,
    EnvRefWithDefault,
    Error,
    LiteralEntry,
    MissingConfig,
    MissingEnvVar,
    NoDefault,
    Ok,
    OrderedMapping,
    ResolutionResult,
    UnorderedMapping,
)

GetEnv = Callable[[str], str | None]


def resolve(
    entry: ConfigEntry | NoDefault,
    namespace: Hashable,
    key: Hashable,
    default: Default = NO_DEFAULT,
    is_runtime: IsRuntime | None = None,
    getenv: GetEnv = os.environ.get,
) -> ResolutionResult:
    """Resolve a stored entry for (namespace, key).

    Args:
        entry: Entry read from the store, or NO_DEFAULT when the store has none
        namespace: Namespace the entry was read from, used in error messages
        key: Key the entry was read under, used in error messages
        default: Caller fallback, NO_DEFAULT when omitted
        is_runtime: Build-time detector; True means the environment may be read.
            Only called when an environment reference is met. Defaults to
            always_runtime.
        getenv: Environment reader

    Returns:
        Ok with the resolved value, or Error with the first failure met
    """
    if is_runtime is None:
        is_runtime = always_runtime
    return _resolve(entry, namespace, key, default, is_runtime, getenv)


def _resolve(
    entry: ConfigEntry | NoDefault,
    namespace: Hashable,
    key: Hashable,
    default: Default,
    is_runtime: IsRuntime,
    getenv: GetEnv,
) -> ResolutionResult:
    if isinstance(entry, EnvRefWithDefault):
        # The reference's own fallback replaces the caller default
        return _resolve_env(entry.var_name, entry.fallback, is_runtime, getenv)

    if isinstance(entry, EnvRef):
        return _resolve_env(entry.var_name, default, is_runtime, getenv)

    if isinstance(entry, OrderedMapping):
        return _resolve_pairs(entry.entries, namespace, key, default, is_runtime, getenv)

    if isinstance(entry, UnorderedMapping):
        result = _resolve_pairs(
            entry.entries.items(), namespace, key, default, is_runtime, getenv
        )
        if isinstance(result, Error):
            return result
        return Ok(value=dict(result.value))

    if entry is NO_DEFAULT:
        if default is NO_DEFAULT:
            return Error(reason=MissingConfig(namespace=namespace, key=key))
        return Ok(value=default)

    if isinstance(entry, LiteralEntry):
        return Ok(value=entry.value)

    # Plain values from stores that skip parsing are literals too
    return Ok(value=entry)


def _resolve_env(
    var_name: str,
    default: Default,
    is_runtime: IsRuntime,
    getenv: GetEnv,
) -> ResolutionResult:
    # Refused even when a default exists
    if not is_runtime():
        return Error(reason=EnvAtBuildTime(var_name=var_name))

    value = getenv(var_name)
    if value is not None:
        return Ok(value=value)
    if default is NO_DEFAULT:
        return Error(reason=MissingEnvVar(var_name=var_name))
    return Ok(value=default)


def _resolve_pairs(
    pairs: Iterable[tuple[Any, ConfigEntry]],
    namespace: Hashable,
    key: Hashable,
    default: Default,
    is_runtime: IsRuntime,
    getenv: GetEnv,
) -> ResolutionResult:
    """Resolve each value in iteration order, stopping at the first error."""
    resolved: list[tuple[Any, Any]] = []
    for item_key, item_entry in pairs:
        result = _resolve(item_entry, namespace, key, default, is_runtime, getenv)
        if isinstance(result, Error):
            return result
        resolved.append((item_key, result.value))
    return Ok(value=resolved)