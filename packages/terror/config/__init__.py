"""Public API for terror configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    CapabilitySettings,
    LoggingSettings,
    TerrorSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "CapabilitySettings",
    "LoggingSettings",
    "TerrorSettings",
    "load_settings",
]
