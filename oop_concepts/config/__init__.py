"""Configuration package - schemas, loading and environment overrides."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import (
    AppConfig,
    DemoDefaults,
    LogDestination,
    LogFileConfig,
    LoggingConfig,
    LogLevel,
    OutputConfig,
)

__all__ = [
    "AppConfig",
    "DemoDefaults",
    "OutputConfig",
    "LoggingConfig",
    "LogFileConfig",
    "LogLevel",
    "LogDestination",
    "ConfigurationManager",
    "get_config_manager",
]
