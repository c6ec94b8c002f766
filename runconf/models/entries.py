"""Raw configuration entries as held by a configuration store.

Each stored value is one of five explicit variants. Environment indirection
is decided once, when the entry is built, so the resolver dispatches on
``kind`` rather than inspecting value shapes.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class _Entry(BaseModel):
    """Common configuration for all entry variants."""

    model_config = ConfigDict(frozen=True)


class LiteralEntry(_Entry):
    """A hardcoded value, returned verbatim. ``None`` is a valid literal."""

    kind: Literal["literal"] = "literal"
    value: Any = None


class EnvRef(_Entry):
    """Read the value from an environment variable at lookup time."""

    kind: Literal["env_ref"] = "env_ref"
    var_name: str = Field(..., min_length=1, description="Environment variable name")


class EnvRefWithDefault(_Entry):
    """Environment reference with its own fallback for an unset variable."""

    kind: Literal["env_ref_with_default"] = "env_ref_with_default"
    var_name: str = Field(..., min_length=1, description="Environment variable name")
    fallback: Any = Field(default=None, description="Used when the variable is unset")


class OrderedMapping(_Entry):
    """Sequence of key/value pairs; order is kept in the resolved output."""

    kind: Literal["ordered_mapping"] = "ordered_mapping"
    entries: list[tuple[Any, "ConfigEntry"]] = Field(default_factory=list)


class UnorderedMapping(_Entry):
    """Key/value mapping with unique keys; resolves to a dict."""

    kind: Literal["unordered_mapping"] = "unordered_mapping"
    entries: dict[Any, "ConfigEntry"] = Field(default_factory=dict)


ConfigEntry = Annotated[
    LiteralEntry | EnvRef | EnvRefWithDefault | OrderedMapping | UnorderedMapping,
    Field(discriminator="kind"),
]

ENTRY_TYPES: tuple[type[_Entry], ...] = (
    LiteralEntry,
    EnvRef,
    EnvRefWithDefault,
    OrderedMapping,
    UnorderedMapping,
)

OrderedMapping.model_rebuild()
UnorderedMapping.model_rebuild()
