"""Handoff Infra Bootstrap -- exporting properties at process start-up."""

from __future__ import annotations

from handoff.infra.bootstrap.environment import apply_to_environment
from handoff.infra.bootstrap.settings import BootstrapSettings, get_bootstrap_settings

__all__ = [
    "BootstrapSettings",
    "apply_to_environment",
    "get_bootstrap_settings",
]
