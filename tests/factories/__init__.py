"""
Test Factories Module

Centralized factory functions for creating config documents and files.
"""

from .config_factories import (
    DEFAULT_DOCUMENT,
    make_env_overrides,
    make_invalid_settings_dict,
    make_partial_settings_dict,
    make_settings_dict,
    temp_config_file,
)

__all__ = [
    "DEFAULT_DOCUMENT",
    "make_env_overrides",
    "make_invalid_settings_dict",
    "make_partial_settings_dict",
    "make_settings_dict",
    "temp_config_file",
]
