"""Utility functions."""
from .config_manager import (
    AppConfig, ConfigManager, InputConfig, LoggingConfig, RenderConfig,
)
from .logger import setup_logging, setup_logging_from_config

__all__ = [
    "AppConfig", "ConfigManager", "InputConfig", "LoggingConfig", "RenderConfig",
    "setup_logging", "setup_logging_from_config",
]
