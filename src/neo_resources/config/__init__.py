"""Configuration for neo-resources."""

from .logging_config import LoggingConfig, LogFormat, LogVerbosity, get_logger, setup_logging
from .settings import ResourceAclSettings, get_settings

__all__ = [
    "LoggingConfig",
    "LogFormat",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
    "ResourceAclSettings",
    "get_settings",
]
