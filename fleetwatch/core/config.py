"""Pydantic settings loaded from YAML configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel

from fleetwatch.core.types import DocumentKind, ThresholdPair

_settings: Settings | None = None

_DEFAULT_CONFIG_PATH = Path("config/settings.yaml")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"


class AlertsConfig(BaseModel):
    """Expiry alert policy configuration.

    ``thresholds`` overrides the built-in warning/critical windows per
    document kind. ``notifications`` toggles kinds on or off; kinds not
    listed stay enabled.
    """

    thresholds: dict[DocumentKind, ThresholdPair] = {}
    notifications: dict[DocumentKind, bool] = {}

    def enabled_kinds(self) -> frozenset[DocumentKind]:
        """Return every document kind not explicitly switched off."""
        return frozenset(
            kind for kind in DocumentKind if self.notifications.get(kind, True)
        )


class ReadStateConfig(BaseModel):
    """Acknowledged-alert store configuration."""

    backend: Literal["memory", "sqlite"] = "memory"
    path: str = "data/read_state.db"


class Settings(BaseModel):
    """Root settings container."""

    alerts: AlertsConfig = AlertsConfig()
    read_state: ReadStateConfig = ReadStateConfig()
    logging: LoggingConfig = LoggingConfig()


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file and cache globally.

    Args:
        path: Path to YAML config. Defaults to config/settings.yaml.

    Returns:
        Parsed Settings instance.
    """
    global _settings  # noqa: PLW0603

    config_path = Path(path) if path else _DEFAULT_CONFIG_PATH

    data: dict[str, Any] = {}
    if config_path.exists():
        with open(config_path) as f:
            raw = yaml.safe_load(f)
            if isinstance(raw, dict):
                data = raw

    _settings = Settings(**data)
    return _settings


def get_settings() -> Settings:
    """Return the cached settings, loading defaults if not yet loaded."""
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Reset the cached settings (useful for testing)."""
    global _settings  # noqa: PLW0603
    _settings = None
