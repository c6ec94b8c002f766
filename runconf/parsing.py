"""Convert raw Python values into configuration entries.

Environment indirection is written as a tagged tuple, ``("system", "VAR")``
or ``("system", "VAR", fallback)``. Raw values are converted once, when a
store is populated, so lookups dispatch on explicit entry types.
"""

from typing import Any

from runconf.config import get_settings
from runconf.models import (
    ENTRY_TYPES,
    ConfigEntry,
    EnvRef,
    EnvRefWithDefault,
    LiteralEntry,
    OrderedMapping,
    UnorderedMapping,
)


def parse_entry(raw: Any, tag: str | None = None) -> ConfigEntry:
    """Build a ConfigEntry from a raw value.

    - ``(tag, var)`` becomes EnvRef
    - ``(tag, var, fallback)`` becomes EnvRefWithDefault
    - dicts become UnorderedMapping
    - non-empty lists of 2-tuples become OrderedMapping
    - entries are returned unchanged
    - anything else, ``None`` included, becomes LiteralEntry

    Args:
        raw: Value as written by the host application
        tag: Indirection tag; defaults to the ``system_tag`` setting
    """
    if tag is None:
        tag = get_settings().system_tag
    return _parse(raw, tag)


def is_env_reference(raw: Any, tag: str | None = None) -> bool:
    """Whether a raw value has the tagged-tuple shape of an env reference."""
    if tag is None:
        tag = get_settings().system_tag
    return _is_env_tuple(raw, tag)


def _parse(raw: Any, tag: str) -> ConfigEntry:
    if isinstance(raw, ENTRY_TYPES):
        return raw

    if _is_env_tuple(raw, tag):
        if len(raw) == 2:
            return EnvRef(var_name=raw[1])
        return EnvRefWithDefault(var_name=raw[1], fallback=raw[2])

    if isinstance(raw, dict):
        return UnorderedMapping(entries={k: _parse(v, tag) for k, v in raw.items()})

    if _is_pair_list(raw):
        return OrderedMapping(entries=[(k, _parse(v, tag)) for k, v in raw])

    return LiteralEntry(value=raw)


def _is_env_tuple(raw: Any, tag: str) -> bool:
    return (
        isinstance(raw, tuple)
        and len(raw) in (2, 3)
        and raw[0] == tag
        and isinstance(raw[1], str)
        and bool(raw[1])
    )


def _is_pair_list(raw: Any) -> bool:
    return (
        isinstance(raw, list)
        and len(raw) > 0
        and all(isinstance(item, tuple) and len(item) == 2 for item in raw)
    )
