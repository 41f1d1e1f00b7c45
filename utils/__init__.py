"""
Utilities Package

Common utilities shared by the config loader and the feature services.
"""

from .errors import ConfigError, ConfigMalformed, ConfigMissing, QolError, WriteFailure
from .logging import get_logger, setup_logging, shutdown_logging

__all__ = [
    "ConfigError",
    "ConfigMalformed",
    "ConfigMissing",
    "QolError",
    "WriteFailure",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
]
