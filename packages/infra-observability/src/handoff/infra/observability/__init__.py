"""Handoff Infra Observability -- structlog logging."""

from __future__ import annotations

from handoff.infra.observability.logging import (
    REDACTED_VALUE,
    LoggingSettings,
    SensitiveDataProcessor,
    configure_logging,
    get_logger,
    get_logging_settings,
    is_sensitive_key,
)

__all__ = [
    "REDACTED_VALUE",
    "LoggingSettings",
    "SensitiveDataProcessor",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
    "is_sensitive_key",
]
