"""Exception hierarchy for the raising lookup API.

All exceptions inherit from ConfigError, which carries the formatted
message and the ErrorKind of the failed resolution. The resolver itself
never raises these; only ``get_config_or_raise`` converts an Error result.
"""

from runconf.models import EnvAtBuildTime, ErrorKind, ErrorReason, MissingConfig, MissingEnvVar


class ConfigError(Exception):
    """Base exception for all configuration lookup failures."""

    error_kind: ErrorKind | None = None

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingConfigError(ConfigError):
    """Raised when no entry is stored for the key and no default is given."""

    error_kind = ErrorKind.MISSING_CONFIG

    def __init__(self, message: str, namespace: object = None, key: object = None) -> None:
        super().__init__(message)
        self.namespace = namespace
        self.key = key


class MissingEnvVarError(ConfigError):
    """Raised when a referenced environment variable is unset."""

    error_kind = ErrorKind.MISSING_ENV_VAR

    def __init__(self, message: str, var_name: str | None = None) -> None:
        super().__init__(message)
        self.var_name = var_name


class EnvAtBuildTimeError(ConfigError):
    """Raised when the environment is referenced during build time."""

    error_kind = ErrorKind.ENV_AT_BUILD_TIME

    def __init__(self, message: str, var_name: str | None = None) -> None:
        super().__init__(message)
        self.var_name = var_name


def error_for(reason: ErrorReason) -> ConfigError:
    """Build the exception matching an error reason."""
    if isinstance(reason, MissingConfig):
        return MissingConfigError(reason.message, namespace=reason.namespace, key=reason.key)
    if isinstance(reason, MissingEnvVar):
        return MissingEnvVarError(reason.message, var_name=reason.var_name)
    if isinstance(reason, EnvAtBuildTime):
        return EnvAtBuildTimeError(reason.message, var_name=reason.var_name)
    raise TypeError(f"Unknown error reason: {reason!r}")
