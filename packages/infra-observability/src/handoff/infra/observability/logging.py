"""structlog setup for handoff processes.

Everything is rendered to stderr. A forked child may be talking to its parent
over stdout, so log lines must never land there.

Call :func:`configure_logging` once at process start; modules grab a logger
with :func:`get_logger` at import time and pick up whatever configuration is
active when they first emit.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from collections.abc import MutableMapping

Processor = structlog.types.Processor

SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {
        "password",
        "passphrase",
        "token",
        "api_key",
        "apikey",
        "secret",
        "credential",
        "private_key",
    }
)

SENSITIVE_SUBSTRINGS: tuple[str, ...] = ("password", "token", "secret")

REDACTED_VALUE: str = "***REDACTED***"

_VALID_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def is_sensitive_key(key: str) -> bool:
    """Check whether a field or property key names secret material.

    Dots and dashes count as underscores, so ``db.password`` and
    ``repo-api-key`` both match.

    Example:
        >>> is_sensitive_key("repository.password")
        True
        >>> is_sensitive_key("classpath.0")
        False
    """
    normalized = key.lower().replace(".", "_").replace("-", "_")
    if normalized in SENSITIVE_FIELDS:
        return True
    if any(normalized.endswith(f"_{field}") for field in SENSITIVE_FIELDS):
        return True
    return any(part in normalized for part in SENSITIVE_SUBSTRINGS)


class LoggingSettings(BaseSettings):
    """Log level and output format, read from ``HANDOFF_LOG_LEVEL`` and
    ``HANDOFF_ENVIRONMENT``.

    ``production`` switches the renderer to one JSON object per line.
    """

    model_config = SettingsConfigDict(env_prefix="HANDOFF_", extra="ignore")

    log_level: str = Field(default="INFO", description="Minimum log level to output")
    environment: str = Field(default="development", description="Selects the renderer")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> str:
        return v.upper() if isinstance(v, str) else str(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v not in _VALID_LEVELS:
            msg = f"log_level must be one of {sorted(_VALID_LEVELS)}"
            raise ValueError(msg)
        return v

    @property
    def use_json_logs(self) -> bool:
        return self.environment == "production"

    @property
    def log_level_int(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)


class SensitiveDataProcessor:
    """Replace values of secret-looking fields with :data:`REDACTED_VALUE`.

    The ``event`` name itself is never touched.
    """

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        for key in list(event_dict.keys()):
            if key != "event" and is_sensitive_key(key):
                event_dict[key] = REDACTED_VALUE
        return event_dict


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Cached settings; tests reset it with ``cache_clear()``."""
    return LoggingSettings()


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Install the handoff processor chain and stderr output.

    Loggers are not cached on first use, so reconfiguring later still takes
    effect for module-level loggers.
    """
    if settings is None:
        settings = get_logging_settings()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        SensitiveDataProcessor(),
        structlog.processors.format_exc_info,
    ]
    if settings.use_json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(settings.log_level_int),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> Any:
    """Return a lazy structlog logger, tagged with ``logger=name`` when given.

    The logger resolves the active configuration each time it emits, so it is
    safe to create at import time, before :func:`configure_logging` runs.
    """
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(logger=name)
