"""Configuration module."""

from stackguide.core.config.loader import ConfigLoader, deep_merge
from stackguide.core.config.settings import (
    DetectionSettings,
    LoggingSettings,
    ScanSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ConfigLoader",
    "deep_merge",
    "Settings",
    "LoggingSettings",
    "ScanSettings",
    "DetectionSettings",
    "get_settings",
]
