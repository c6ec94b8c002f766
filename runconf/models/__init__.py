"""Runconf domain models.

Contains the data model shared by the resolver and the lookup facade:
- Entries for raw stored configuration values
- The NO_DEFAULT marker for an omitted caller default
- Results and error reasons produced by resolution
"""

from runconf.models.entries import (
    ENTRY_TYPES,
    ConfigEntry,
    EnvRef,
    EnvRefWithDefault,
    LiteralEntry,
    OrderedMapping,
    UnorderedMapping,
)
from runconf.models.enums import ErrorKind
from runconf.models.results import (
    EnvAtBuildTime,
    Error,
    ErrorReason,
    MissingConfig,
    MissingEnvVar,
    Ok,
    ResolutionResult,
)
from runconf.models.sentinel import NO_DEFAULT, Default, NoDefault

__all__ = [
    # Entries
    "ConfigEntry",
    "ENTRY_TYPES",
    "LiteralEntry",
    "EnvRef",
    "EnvRefWithDefault",
    "OrderedMapping",
    "UnorderedMapping",
    # Sentinel
    "NO_DEFAULT",
    "NoDefault",
    "Default",
    # Results
    "ErrorKind",
    "ErrorReason",
    "MissingConfig",
    "MissingEnvVar",
    "EnvAtBuildTime",
    "Ok",
    "Error",
    "ResolutionResult",
]
