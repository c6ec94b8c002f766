"""Settings model for the runconf package itself."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class Settings(BaseSettings):
    """Package settings, read from RUNCONF_* environment variables.

    These govern runconf's own behaviour (logging, raw value parsing) and
    are unrelated to the application configuration it resolves.
    """

    model_config = SettingsConfigDict(
        env_prefix="RUNCONF_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(
        default="json",
        description="Log renderer: json for production, console for development",
    )
    redact_secrets: bool = Field(
        default=True,
        description="Mask sensitive fields in log events",
    )
    system_tag: str = Field(
        default="system",
        min_length=1,
        description="Tag marking a raw tuple as an environment reference",
    )
