"""
Configuration Management
========================

This module provides TOML-based configuration file support for ticksight.

Configuration files are merged in the following order (highest to lowest priority):
1. Path specified via --config option
2. ./ticksight.toml (current directory)
3. ~/.config/ticksight/config.toml (user config)
4. /etc/ticksight/config.toml (system config)
5. Built-in defaults

The API base URL can also be overridden with the TICKSIGHT_API_URL
environment variable, which takes precedence over every file.

Example configuration file (ticksight.toml):

    [api]
    base_url = "https://dev-task.elancoapps.com"
    sightings_endpoint = "/sightings"
    alternate_endpoint = "/api/sightings"
    timeout = 30
    user_agent = "ticksight/0.1"

    [cache]
    path = "~/.local/share/ticksight/tick_sightings.json"

    [submission]
    default_location = "London"
    max_image_bytes = 5242880

    [logging]
    level = "WARNING"
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ticksight.core.constants import (
    ALTERNATE_SIGHTINGS_ENDPOINT,
    DEFAULT_API_BASE_URL,
    DEFAULT_CACHE_PATH,
    DEFAULT_LOCATION,
    MAX_IMAGE_BYTES,
    SIGHTINGS_ENDPOINT,
)
from ticksight.core.logger import get_logger

logger = get_logger(__name__)

API_URL_ENV_VAR = "TICKSIGHT_API_URL"

# Default configuration values
DEFAULT_CONFIG: Dict[str, Any] = {
    "api": {
        "base_url": DEFAULT_API_BASE_URL,
        "sightings_endpoint": SIGHTINGS_ENDPOINT,
        "alternate_endpoint": ALTERNATE_SIGHTINGS_ENDPOINT,
        "timeout": 30,
        "user_agent": "ticksight/0.1",
    },
    "cache": {
        "path": DEFAULT_CACHE_PATH,
    },
    "submission": {
        "default_location": DEFAULT_LOCATION,
        "max_image_bytes": MAX_IMAGE_BYTES,
    },
    "logging": {
        "level": "WARNING",
    },
}

# Standard config file locations, highest priority first
CONFIG_LOCATIONS = [
    Path("ticksight.toml"),
    Path("~/.config/ticksight/config.toml").expanduser(),
    Path("/etc/ticksight/config.toml"),
]


@dataclass
class Config:
    """
    Configuration container for ticksight settings.

    Attributes:
        api: Remote service settings (base URL, endpoints, timeout)
        cache: Local cache settings
        submission: Report form settings
        logging: Logging settings
        _source: Path to the config file that was loaded
    """

    api: Dict[str, Any] = field(default_factory=dict)
    cache: Dict[str, Any] = field(default_factory=dict)
    submission: Dict[str, Any] = field(default_factory=dict)
    logging: Dict[str, Any] = field(default_factory=dict)
    _source: Optional[str] = None

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get a configuration value."""
        section_dict = getattr(self, section, {})
        if section_dict is None:
            return default
        return section_dict.get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set a configuration value."""
        section_dict = getattr(self, section, None)
        if section_dict is not None:
            section_dict[key] = value

    @property
    def cache_path(self) -> Path:
        """Expanded path of the local sightings cache file."""
        return Path(self.get("cache", "path", DEFAULT_CACHE_PATH)).expanduser()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "api": self.api,
            "cache": self.cache,
            "submission": self.submission,
            "logging": self.logging,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: Optional[str] = None) -> "Config":
        """Create Config from dictionary."""
        return cls(
            api=data.get("api", {}),
            cache=data.get("cache", {}),
            submission=data.get("submission", {}),
            logging=data.get("logging", {}),
            _source=source,
        )


def load_toml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a TOML configuration file.

    Args:
        filepath: Path to the TOML file

    Returns:
        Dictionary with configuration values

    Raises:
        FileNotFoundError: If file doesn't exist
        tomllib.TOMLDecodeError: If TOML parsing fails
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    with open(path, "rb") as f:
        return tomllib.load(f)


def save_toml(config: Dict[str, Any], filepath: Union[str, Path]) -> str:
    """
    Save configuration to a TOML file.

    Args:
        config: Configuration dictionary
        filepath: Path to save the file

    Returns:
        Path to the saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)

    lines = []
    for section, values in config.items():
        if isinstance(values, dict) and values:
            lines.append(f"[{section}]")
            for key, value in values.items():
                if isinstance(value, str):
                    lines.append(f'{key} = "{value}"')
                elif isinstance(value, bool):
                    lines.append(f"{key} = {str(value).lower()}")
                elif isinstance(value, (int, float)):
                    lines.append(f"{key} = {value}")
                elif isinstance(value, list):
                    items = ", ".join(f'"{v}"' if isinstance(v, str) else str(v) for v in value)
                    lines.append(f"{key} = [{items}]")
            lines.append("")

    path.write_text("\n".join(lines), encoding="utf-8")

    return str(path)


def get_default_config() -> Config:
    """Get the default configuration."""
    return Config.from_dict(_deep_copy_dict(DEFAULT_CONFIG))


def create_default_config_file(filepath: Optional[str] = None) -> str:
    """
    Create a default configuration file.

    Args:
        filepath: Path to create the file (default: ./ticksight.toml)

    Returns:
        Path to the created file
    """
    if filepath is None:
        filepath = "ticksight.toml"

    return save_toml(DEFAULT_CONFIG, filepath)


def _deep_copy_dict(d: Dict[str, Any]) -> Dict[str, Any]:
    """Create a deep copy of a dictionary."""
    result = {}
    for key, value in d.items():
        if isinstance(value, dict):
            result[key] = _deep_copy_dict(value)
        elif isinstance(value, list):
            result[key] = value.copy()
        else:
            result[key] = value
    return result


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two dictionaries, with override taking precedence."""
    result = _deep_copy_dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _apply_environment(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides."""
    env_url = os.environ.get(API_URL_ENV_VAR)
    if env_url:
        config_data.setdefault("api", {})["base_url"] = env_url
        logger.debug(f"Using API base URL from {API_URL_ENV_VAR}")
    return config_data


# Global configuration instance
_global_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = load_config_cascade()
    return _global_config


def set_config(config: Config) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def reset_config() -> None:
    """Reset the global configuration to None (will reload on next access)."""
    global _global_config
    _global_config = None


def get_config_locations() -> List[Path]:
    """
    Get configuration file search locations in priority order.

    Returns:
        List of paths to search, in priority order (highest first)
    """
    return CONFIG_LOCATIONS.copy()


def load_config_cascade(explicit_path: Optional[str] = None) -> Config:
    """
    Load configuration with full cascade support.

    Merges configs from all levels in priority order:
    defaults -> system -> user -> current dir -> explicit -> environment

    Args:
        explicit_path: Explicit config file path (highest file priority)

    Returns:
        Config object with merged settings from all sources
    """
    config_data = _deep_copy_dict(DEFAULT_CONFIG)
    source = "defaults"

    # Load lowest priority first so higher priority files override
    for location in reversed(get_config_locations()):
        if location.exists():
            try:
                config_data = _merge_dicts(config_data, load_toml(location))
                source = str(location)
                logger.debug(f"Merged configuration from {location}")
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning(f"Error loading {location}: {e}")

    if explicit_path:
        path = Path(explicit_path)
        if path.exists():
            try:
                config_data = _merge_dicts(config_data, load_toml(path))
                source = str(path)
                logger.debug(f"Merged configuration from {path}")
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning(f"Error loading {path}: {e}")
        else:
            logger.warning(f"Specified config file not found: {explicit_path}")

    config_data = _apply_environment(config_data)
    return Config.from_dict(config_data, source=source)
