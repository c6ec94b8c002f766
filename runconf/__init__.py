"""Runconf: deferred resolution of configuration values.

Configuration entries may be literal values or references to environment
variables, nested inside ordered or unordered mappings. References are
resolved at lookup time, never while the caller's build-time detector
reports that static initialization is still running.
"""

from runconf.detectors import (
    IsRuntime,
    RuntimeGate,
    always_runtime,
    module_initialized,
    never_runtime,
)
from runconf.exceptions import (
    ConfigError,
    EnvAtBuildTimeError,
    MissingConfigError,
    MissingEnvVarError,
)
from runconf.lookup import ConfigLookup, get_config, get_config_or_raise
from runconf.models import (
    NO_DEFAULT,
    ConfigEntry,
    EnvAtBuildTime,
    EnvRef,
    EnvRefWithDefault,
    Error,
    ErrorKind,
    LiteralEntry,
    MissingConfig,
    MissingEnvVar,
    NoDefault,
    Ok,
    OrderedMapping,
    ResolutionResult,
    UnorderedMapping,
)
from runconf.parsing import parse_entry
from runconf.resolver import resolve
from runconf.stores import ConfigStore, InMemoryConfigStore

__all__ = [
    # Lookup
    "ConfigLookup",
    "get_config",
    "get_config_or_raise",
    "resolve",
    # Detectors
    "IsRuntime",
    "RuntimeGate",
    "always_runtime",
    "never_runtime",
    "module_initialized",
    # Stores
    "ConfigStore",
    "InMemoryConfigStore",
    "parse_entry",
    # Models
    "ConfigEntry",
    "LiteralEntry",
    "EnvRef",
    "EnvRefWithDefault",
    "OrderedMapping",
    "UnorderedMapping",
    "NO_DEFAULT",
    "NoDefault",
    "Ok",
    "Error",
    "ErrorKind",
    "MissingConfig",
    "MissingEnvVar",
    "EnvAtBuildTime",
    "ResolutionResult",
    # Exceptions
    "ConfigError",
    "MissingConfigError",
    "MissingEnvVarError",
    "EnvAtBuildTimeError",
]
