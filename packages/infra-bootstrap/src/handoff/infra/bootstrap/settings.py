"""Bootstrap configuration using Pydantic settings.

Settings are loaded from environment variables with the ``HANDOFF_`` prefix.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BootstrapSettings(BaseSettings):
    """Controls how properties are copied into a target environment.

    Environment Variables:
        HANDOFF_OVERWRITE_EXISTING: Replace keys already present in the target
            (default: true)
        HANDOFF_KEY_PREFIX: Prefix prepended to every key written into the
            target (default: empty)

    Example:
        >>> settings = BootstrapSettings()
        >>> settings.overwrite_existing
        True
    """

    model_config = SettingsConfigDict(
        env_prefix="HANDOFF_",
        extra="ignore",
    )

    overwrite_existing: bool = Field(
        default=True,
        description="Replace keys already present in the target environment",
    )
    key_prefix: str = Field(
        default="",
        description="Prefix prepended to each key written into the target",
    )


@lru_cache(maxsize=1)
def get_bootstrap_settings() -> BootstrapSettings:
    """Get cached bootstrap settings singleton.

    Returns:
        BootstrapSettings instance loaded from environment.
    """
    return BootstrapSettings()
