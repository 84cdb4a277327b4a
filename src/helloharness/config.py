"""Configuration loading and validation."""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from helloharness.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "DEFAULT_REQUEST_PATH"]

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_PATH = "./model/request.json"

_DEFAULTS: dict[str, Any] = {
    "request": {"path": DEFAULT_REQUEST_PATH},
    "logging": {"level": "WARNING"},
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration accessor with dot-path key support.

    Values supplied by the caller are layered over the built-in defaults, so
    ``Config().get("request.path")`` always resolves.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = _deep_merge(_DEFAULTS, data or {})

    @classmethod
    def load(cls, path: str | Path) -> Config:
        """Load configuration from a YAML file."""
        file_path = Path(path)
        if not file_path.exists():
            raise ConfigNotFoundError(config_path=str(file_path))

        try:
            raw = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(message=f"Cannot read config file '{file_path}': {e}", cause=e) from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file '{file_path}': {e}", cause=e) from e

        if data is None:
            logger.debug("Config file %s is empty, using defaults", file_path)
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config file '{file_path}' must contain a mapping")

        return cls(data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    @property
    def request_path(self) -> Path:
        """Location of the request JSON file."""
        return Path(self.get("request.path", DEFAULT_REQUEST_PATH))

    @property
    def log_level(self) -> int:
        """Numeric logging level resolved from ``logging.level``."""
        level = self.get("logging.level", "WARNING")
        if isinstance(level, int):
            return level
        resolved = logging.getLevelName(str(level).upper())
        if not isinstance(resolved, int):
            raise ConfigError(message=f"Unknown logging level: {level}")
        return resolved
