"""Marker for an omitted caller default."""

from enum import Enum
from typing import Any, TypeAlias


class NoDefault(Enum):
    """Single-member enum marking "no default was supplied".

    Distinct from ``None``: a caller may legitimately ask for ``None`` as
    the fallback, and a store may legitimately hold ``None`` as a value.
    """

    NO_DEFAULT = "no_default"

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT = NoDefault.NO_DEFAULT

Default: TypeAlias = Any | NoDefault
