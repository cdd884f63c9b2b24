"""Configuration loader for YAML files."""

from pathlib import Path
from typing import Any

import yaml

from stackguide.core.exceptions.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent.parent / "config" / "default.yaml"


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into a copy of ``base``, recursing into nested dicts.

    Lists and scalars in ``override`` replace the value in ``base``.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Load and merge configuration from YAML files."""

    def __init__(self, *config_paths: Path) -> None:
        """Initialize the config loader.

        Args:
            config_paths: Configuration files, later files override earlier ones.
        """
        self.config_paths = list(config_paths)
        self._config: dict[str, Any] = {}

    def load(self, path: Path | None = None) -> dict[str, Any]:
        """Load configuration from the configured YAML files.

        Args:
            path: Single YAML file to load instead of the configured ones.

        Returns:
            Loaded (merged) configuration dictionary.

        Raises:
            ConfigurationError: If a file cannot be read or is not a YAML mapping.
        """
        paths = [path] if path else self.config_paths
        config: dict[str, Any] = {}
        for load_path in paths:
            config = deep_merge(config, self._read(load_path))
        self._config = config
        return self._config

    def _read(self, load_path: Path) -> dict[str, Any]:
        try:
            with open(load_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {load_path}",
                config_key=str(load_path),
                details={"path": str(load_path)},
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {load_path}",
                config_key=str(load_path),
                details={"error": str(e)},
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {load_path}",
                config_key=str(load_path),
                details={"type": type(data).__name__},
            )
        return data

    def get_section(self, section: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Args:
            section: Section name.

        Returns:
            Configuration section dictionary, empty when missing or not a mapping.
        """
        result = self._config.get(section, {})
        return result if isinstance(result, dict) else {}
