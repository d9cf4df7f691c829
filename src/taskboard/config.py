"""Configuration loading for the task board."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from taskboard.source.adapter import DEFAULT_DATA_URL

CONFIG_FILENAME = "taskboard.yaml"

# Environment variable -> (field name, converter)
_ENV_OVERRIDES: dict[str, tuple[str, type]] = {
    "TASKBOARD_DATA_URL": ("data_url", str),
    "TASKBOARD_DB_PATH": ("db_path", str),
    "TASKBOARD_FETCH_TIMEOUT": ("fetch_timeout", float),
    "TASKBOARD_LOG_DIR": ("log_dir", str),
    "TASKBOARD_LOG_LEVEL": ("log_level", str),
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Accepted YAML value types per field
_FIELD_TYPES: dict[str, type] = {
    "data_url": str,
    "db_path": str,
    "fetch_timeout": float,
    "log_dir": str,
    "log_level": str,
    "host": str,
    "port": int,
}


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass
class BoardConfig:
    """Task board configuration.

    Attributes:
        data_url: Endpoint serving the initial tickets and users.
        db_path: SQLite file holding persisted preferences.
        fetch_timeout: Timeout for the initial fetch, in seconds.
        log_dir: Directory for log files (None uses the logging default).
        log_level: Log level name (None uses the logging default).
        host: Interface the REST server binds to.
        port: Port the REST server listens on.
    """

    data_url: str = DEFAULT_DATA_URL
    db_path: str = "taskboard.db"
    fetch_timeout: float = 30.0
    log_dir: str | None = None
    log_level: str | None = None
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardConfig:
        """Create config from dictionary.

        Unknown keys are ignored.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        values: dict[str, Any] = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                continue
            expected = _FIELD_TYPES[f.name]
            if expected is float and isinstance(value, int) and not isinstance(value, bool):
                value = float(value)
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ConfigError(
                    f"'{f.name}' must be {expected.__name__}, got {type(value).__name__}"
                )
            values[f.name] = value
        return cls(**values)

    def apply_env(self) -> None:
        """Override fields from TASKBOARD_* environment variables."""
        for env_name, (field_name, convert) in _ENV_OVERRIDES.items():
            raw = os.environ.get(env_name)
            if raw is None:
                continue
            try:
                setattr(self, field_name, convert(raw))
            except ValueError as e:
                raise ConfigError(f"{env_name}={raw!r} is not a valid {convert.__name__}") from e

    def validate(self) -> None:
        """Check values that are well-typed but still unusable.

        Raises:
            ConfigError: If ``log_level`` is not a standard level name.
        """
        if self.log_level is not None and self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
            )


def find_config(start_path: Path | None = None) -> Path | None:
    """Find taskboard.yaml by searching up from start_path.

    Args:
        start_path: Directory to start search from. Defaults to cwd.

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_path or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Path | None = None) -> BoardConfig:
    """Load configuration from YAML, then apply environment overrides.

    Args:
        config_path: Path to a config file. None searches for taskboard.yaml
            and falls back to defaults when none exists.

    Returns:
        Parsed configuration.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    if config_path is None:
        config_path = find_config()

    data: dict[str, Any] = {}
    if config_path is not None:
        try:
            with open(config_path) as f:
                loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read {config_path}: {e}") from e

        if loaded is not None and not isinstance(loaded, dict):
            raise ConfigError(f"{config_path} must contain a mapping")
        data = loaded or {}

    config = BoardConfig.from_dict(data)
    config.apply_env()
    config.validate()
    return config
