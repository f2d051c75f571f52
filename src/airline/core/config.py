"""Configuration loading for the airline fleet manager.

Settings live in YAML files. ConfigLoader gives dot-notation access to them;
load_settings() reads the shipped defaults, merges an optional user file on
top and returns the typed StorageSettings the application needs.

Typical usage example:
    from airline.core.config import load_settings

    settings = load_settings("~/.airline/airline.yaml")
    print(settings.default_format)
"""

import copy
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from airline.core.resource_path import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: dict[str, Any] = {
    "storage": {
        "default_format": "json",
        "default_path": "fleet.json",
        "strict_load": False,
    },
}


class ConfigError(Exception):
    """Raised when configuration operations fail."""


class ConfigLoader:
    """Dot-notation access to a YAML configuration tree.

    Examples:
        >>> config = ConfigLoader.load("config/airline.yaml")
        >>> config.get("storage.default_format", default="json")
        'json'
    """

    def __init__(self, data: dict[str, Any]) -> None:
        self._data = data

    @classmethod
    def load(cls, path: str | Path) -> "ConfigLoader":
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            ConfigLoader instance with loaded data.

        Raises:
            ConfigError: If the file is missing, unreadable, or not a mapping.
        """
        path = Path(path).expanduser()

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration root must be a mapping: {path}")

        logger.info("Loaded configuration from: %s", path)
        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key: Configuration key, e.g. "storage.default_format".
            default: Value returned when the key is missing.

        Returns:
            Configuration value or default.
        """
        value: Any = self._data

        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value using dot notation.

        Missing intermediate sections are created.
        """
        keys = key.split(".")
        data = self._data

        for k in keys[:-1]:
            if not isinstance(data.get(k), dict):
                data[k] = {}
            data = data[k]

        data[keys[-1]] = value

    def get_section(self, key: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Raises:
            ConfigError: If the section is missing or not a mapping.
        """
        value = self.get(key)

        if value is None:
            raise ConfigError(f"Configuration section not found: {key}")

        if not isinstance(value, dict):
            raise ConfigError(f"Configuration key is not a section: {key}")

        return value

    def save(self, path: str | Path) -> None:
        """Save configuration to a YAML file.

        Raises:
            ConfigError: If the file cannot be written.
        """
        path = Path(path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(self._data, f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e

        logger.info("Saved configuration to: %s", path)

    def merge(self, other: "ConfigLoader") -> None:
        """Merge another configuration into this one. Values of `other` win."""
        self._data = self._merge_dicts(self._data, other._data)

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value

        return result

    def to_dict(self) -> dict[str, Any]:
        """Get a deep copy of the configuration as a dictionary."""
        return copy.deepcopy(self._data)


@dataclass
class StorageSettings:
    """Where and how the fleet is persisted.

    Attributes:
        default_format: Format name ("json" or "xml") used when a path has no
            recognised suffix.
        default_path: File offered by the operator interface for save/load.
        strict_load: Re-check the fleet admission rules on loaded planes.
    """

    default_format: str = "json"
    default_path: str = "fleet.json"
    strict_load: bool = False

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "StorageSettings":
        """Read the `storage` section of a configuration.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        section = config.get_section("storage")
        settings = cls(
            default_format=str(section.get("default_format", cls.default_format)).lower(),
            default_path=str(section.get("default_path", cls.default_path)),
            strict_load=section.get("strict_load", cls.strict_load),
        )
        if not isinstance(settings.strict_load, bool):
            raise ConfigError(f"storage.strict_load must be a boolean, got {settings.strict_load!r}")
        if settings.default_format not in ("json", "xml"):
            raise ConfigError(f"Unsupported storage.default_format: {settings.default_format!r}")
        return settings


def load_settings(user_config: str | Path | None = None) -> StorageSettings:
    """Build the storage settings from defaults and configuration files.

    Layers, lowest priority first: built-in DEFAULT_SETTINGS, the shipped
    config/airline.yaml (if present), then user_config (if given).

    Args:
        user_config: Optional path to a user configuration file.

    Returns:
        Resolved StorageSettings.

    Raises:
        ConfigError: If a given file cannot be loaded or holds bad values.
    """
    config = ConfigLoader(copy.deepcopy(DEFAULT_SETTINGS))

    shipped = get_config_path("airline.yaml")
    if shipped.exists():
        config.merge(ConfigLoader.load(shipped))

    if user_config is not None:
        config.merge(ConfigLoader.load(user_config))

    return StorageSettings.from_config(config)
