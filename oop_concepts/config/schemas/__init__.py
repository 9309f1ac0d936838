"""Configuration schemas."""

from .app_schema import AppConfig, DemoDefaults, OutputConfig, OutputFormat
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel

__all__ = [
    "AppConfig",
    "DemoDefaults",
    "OutputConfig",
    "OutputFormat",
    "LoggingConfig",
    "LogFileConfig",
    "LogLevel",
    "LogDestination",
]
