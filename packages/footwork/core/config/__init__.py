"""Configuration management for the footwork trainer."""

from footwork.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from footwork.core.config.models import (
    AppConfig,
    ConfigBase,
    DrillConfig,
    LoggingConfig,
    PlayConfig,
    PlaybackConfig,
    TempoConfig,
)

__all__ = [
    # Loaders
    "configure_logging",
    "detect_format",
    "load_app_config",
    "load_config",
    # Models
    "AppConfig",
    "ConfigBase",
    "DrillConfig",
    "LoggingConfig",
    "PlayConfig",
    "PlaybackConfig",
    "TempoConfig",
]
