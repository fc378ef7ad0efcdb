"""
Configuration settings management for awscred.

Settings are loaded from ~/.awscred/config.yaml by default, with the path
overridable via the AWSCRED_CONFIG environment variable. Values in the file
can in turn be overridden by environment variables.
"""

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

# Default configuration directory
DEFAULT_CONFIG_DIR = Path.home() / ".awscred"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Settings:
    """
    awscred configuration settings.

    Attributes:
        credentials_file: Credentials file to operate on. None means the
                          default location (~/.aws/credentials).
        default_profile: Profile name used when none is given.
        log_level: Logging verbosity (DEBUG, INFO, WARNING, ERROR).
    """

    credentials_file: str | None = None
    default_profile: str = "default"
    log_level: str = "WARNING"


class ConfigurationError(Exception):
    """Raised when configuration is invalid or cannot be loaded."""

    pass


def get_config_path() -> Path:
    """
    Get the configuration file path.

    Returns the path from AWSCRED_CONFIG environment variable if set,
    otherwise returns the default path (~/.awscred/config.yaml).
    """
    env_path = os.environ.get("AWSCRED_CONFIG")
    if env_path:
        return Path(env_path)
    return DEFAULT_CONFIG_FILE


def load_config(config_path: Path | None = None) -> Settings:
    """
    Load configuration from YAML file.

    Reads configuration from the specified path (or default if not provided),
    applies environment variable overrides, and validates the configuration.
    A missing file yields default settings.

    Args:
        config_path: Optional path to configuration file. If not provided,
                    uses AWSCRED_CONFIG environment variable or default path.

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If the configuration file cannot be read or
                          contains invalid settings.
    """
    if config_path is None:
        config_path = get_config_path()

    settings = Settings()

    if config_path.exists():
        try:
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read config file: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigurationError("Config file must contain a mapping")

        settings = _apply_config_data(settings, config_data)

    settings = _apply_environment_overrides(settings)

    _validate_config(settings)

    return settings


def save_config(settings: Settings, config_path: Path | None = None) -> None:
    """
    Save configuration to YAML file.

    Raises:
        ConfigurationError: If the configuration cannot be written.
    """
    if config_path is None:
        config_path = get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            yaml.safe_dump(
                _settings_to_dict(settings),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
    except OSError as e:
        raise ConfigurationError(f"Cannot write config file: {e}") from e


def setup_logging(settings: Settings) -> None:
    """Configure logging from the configured log level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _apply_config_data(settings: Settings, data: dict[str, Any]) -> Settings:
    """Apply configuration data from parsed YAML to settings."""
    awscred_data = data.get("awscred") or {}
    if not isinstance(awscred_data, dict):
        raise ConfigurationError("'awscred' section must be a mapping")

    if "credentials_file" in awscred_data:
        value = awscred_data["credentials_file"]
        settings.credentials_file = str(value) if value else None
    if "default_profile" in awscred_data:
        settings.default_profile = str(awscred_data["default_profile"])
    if "log_level" in awscred_data:
        settings.log_level = str(awscred_data["log_level"]).upper()

    return settings


def _apply_environment_overrides(settings: Settings) -> Settings:
    """Apply environment variable overrides to settings."""
    env_map: dict[str, tuple[str, Callable[[str], Any]]] = {
        "AWS_SHARED_CREDENTIALS_FILE": ("credentials_file", str),
        "AWS_PROFILE": ("default_profile", str),
        "AWSCRED_LOG_LEVEL": ("log_level", str.upper),
    }

    for env_var, (attr, converter) in env_map.items():
        value = os.environ.get(env_var)
        if value:
            setattr(settings, attr, converter(value))

    return settings


def _validate_config(settings: Settings) -> None:
    """
    Validate configuration settings.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    if settings.log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid log_level: {settings.log_level}. "
            f"Must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    if not settings.default_profile:
        raise ConfigurationError("default_profile must not be empty")


def _settings_to_dict(settings: Settings) -> dict[str, Any]:
    """Convert Settings instance to dictionary for YAML serialization."""
    return {
        "awscred": {
            "credentials_file": settings.credentials_file,
            "default_profile": settings.default_profile,
            "log_level": settings.log_level,
        },
    }
