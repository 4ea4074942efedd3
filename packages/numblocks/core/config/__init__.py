"""Configuration management for numblocks."""

from numblocks.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
)
from numblocks.core.config.models import (
    AppConfig,
    CanvasConfig,
    CubeConfig,
    InteractionConfig,
    LoggingConfig,
)

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "CanvasConfig",
    "CubeConfig",
    "InteractionConfig",
    "LoggingConfig",
]
