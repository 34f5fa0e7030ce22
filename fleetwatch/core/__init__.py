"""Core configuration, logging, and domain types."""

from fleetwatch.core.config import (
    AlertsConfig,
    LoggingConfig,
    ReadStateConfig,
    Settings,
    get_settings,
    load_settings,
    reset_settings,
)
from fleetwatch.core.types import (
    Alert,
    DocumentKind,
    EntityType,
    SeverityLevel,
    ThresholdPair,
)

__all__ = [
    "Alert",
    "AlertsConfig",
    "DocumentKind",
    "EntityType",
    "LoggingConfig",
    "ReadStateConfig",
    "SeverityLevel",
    "Settings",
    "ThresholdPair",
    "get_settings",
    "load_settings",
    "reset_settings",
]
