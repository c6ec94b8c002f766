"""Resolution result models.

A lookup produces either ``Ok(value)`` or ``Error(reason)``. Reasons carry
the identifiers needed to format a user-facing message.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from runconf.models.enums import ErrorKind


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class MissingConfig(_Frozen):
    """No entry stored for (namespace, key) and no default supplied."""

    kind: Literal[ErrorKind.MISSING_CONFIG] = ErrorKind.MISSING_CONFIG
    namespace: Any
    key: Any

    @property
    def message(self) -> str:
        return f"Missing configuration: 'config {self.namespace}, {self.key}: <value>'"


class MissingEnvVar(_Frozen):
    """Referenced environment variable is unset and no default applies."""

    kind: Literal[ErrorKind.MISSING_ENV_VAR] = ErrorKind.MISSING_ENV_VAR
    var_name: str

    @property
    def message(self) -> str:
        return f"Missing ENV variable: '{self.var_name}'"


class EnvAtBuildTime(_Frozen):
    """Environment referenced while the build-time detector reports unsafe."""

    kind: Literal[ErrorKind.ENV_AT_BUILD_TIME] = ErrorKind.ENV_AT_BUILD_TIME
    var_name: str

    @property
    def message(self) -> str:
        return f"ENV must not be used on compilation time: '{self.var_name}'"


ErrorReason = Annotated[
    MissingConfig | MissingEnvVar | EnvAtBuildTime,
    Field(discriminator="kind"),
]


class Ok(_Frozen):
    """Successful resolution."""

    value: Any = None

    @property
    def is_ok(self) -> bool:
        return True


class Error(_Frozen):
    """Failed resolution with a categorized reason."""

    reason: ErrorReason

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def kind(self) -> ErrorKind:
        return self.reason.kind

    @property
    def message(self) -> str:
        return self.reason.message


ResolutionResult = Ok | Error
