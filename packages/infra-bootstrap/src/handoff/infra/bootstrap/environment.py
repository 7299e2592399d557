"""Export of received properties into a process environment.

This is the one place where handed-off properties leave the wrapper and
land in shared state. The target is always passed in by the caller (usually
``os.environ`` at child start-up, a plain dict in tests); nothing here
reaches for a global on its own.

Example:
    Child process start-up::

        import os

        wrapper = PropertiesWrapper(received)
        apply_to_environment(wrapper, os.environ)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from handoff.infra.bootstrap.settings import get_bootstrap_settings
from handoff.infra.observability import get_logger, is_sensitive_key

if TYPE_CHECKING:
    from collections.abc import MutableMapping

    from handoff.foundation.properties import PropertiesWrapper
    from handoff.infra.bootstrap.settings import BootstrapSettings

logger = get_logger(__name__)


def apply_to_environment(
    wrapper: PropertiesWrapper,
    target: MutableMapping[str, str],
    settings: BootstrapSettings | None = None,
) -> int:
    """Copy every property of ``wrapper`` into ``target``.

    Entries are written in the wrapper's iteration order. Values are never
    logged; only keys, with written secret-looking keys counted but not
    named.

    Args:
        wrapper: Properties to export.
        target: Environment mapping to write into.
        settings: Optional BootstrapSettings. Loaded from environment
            variables when omitted.

    Returns:
        Number of entries written.
    """
    if settings is None:
        settings = get_bootstrap_settings()

    written = 0
    sensitive = 0
    skipped: list[str] = []
    for key, value in wrapper.properties.items():
        target_key = f"{settings.key_prefix}{key}"
        if not settings.overwrite_existing and target_key in target:
            skipped.append(target_key)
            continue
        target[target_key] = value
        written += 1
        if is_sensitive_key(target_key):
            sensitive += 1

    logger.info(
        "properties_applied",
        count=written,
        skipped=[key for key in skipped if not is_sensitive_key(key)],
        sensitive_keys=sensitive,
        key_prefix=settings.key_prefix,
    )
    return written
