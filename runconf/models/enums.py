"""Enums for resolution results."""

from enum import Enum


class ErrorKind(str, Enum):
    """Why a configuration lookup failed.

    - MISSING_CONFIG: No stored entry and no caller default
    - MISSING_ENV_VAR: Referenced environment variable unset, no default applies
    - ENV_AT_BUILD_TIME: Environment referenced while the build-time detector
      reports an unsafe phase
    """

    MISSING_CONFIG = "missing_config"
    MISSING_ENV_VAR = "missing_env_var"
    ENV_AT_BUILD_TIME = "env_at_build_time"
