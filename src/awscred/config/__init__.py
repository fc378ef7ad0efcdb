"""
Configuration management for awscred.

This module handles loading, validating, and saving configuration settings.
"""

from awscred.config.settings import (
    ConfigurationError,
    Settings,
    get_config_path,
    load_config,
    save_config,
    setup_logging,
)

__all__ = [
    "Settings",
    "load_config",
    "save_config",
    "get_config_path",
    "setup_logging",
    "ConfigurationError",
]
