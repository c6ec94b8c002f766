"""Observability: structured logging via structlog."""

from runconf.observability.logging import (
    configure_from_settings,
    ensure_configured,
    get_logger,
    setup_logging,
)

__all__ = ["configure_from_settings", "ensure_configured", "get_logger", "setup_logging"]
