"""Configuration management for Pomodoro CLI."""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Optional

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field, ValidationError

from pomodoro_cli.core.session import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
    SessionConfig,
)
from pomodoro_cli.storage.work_log import DEFAULT_LOG_FILENAME
from pomodoro_cli.utils.ui.formatters import format_warning

logger = logging.getLogger(__name__)

APP_DIR_NAME = "pomodoro-cli"


class TimerConfig(BaseModel):
    """Interval lengths in minutes."""

    work_duration: int = Field(default=DEFAULT_WORK_MINUTES, ge=0)
    break_duration: int = Field(default=DEFAULT_BREAK_MINUTES, ge=0)


class LogConfig(BaseModel):
    """Work log configuration."""

    path: Optional[str] = Field(default=None)
    mode: Literal["append", "truncate"] = Field(default="append")


class AppConfig(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    def session_config(self) -> SessionConfig:
        return SessionConfig(
            work_minutes=self.timer.work_duration,
            break_minutes=self.timer.break_duration,
        )


class ConfigManager:
    """Loads and saves the JSON config file."""

    def __init__(self):
        self.config_dir = Path(user_config_dir(APP_DIR_NAME))
        self.data_dir = Path(user_data_dir(APP_DIR_NAME))
        self.config_file = self.config_dir / "config.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[AppConfig] = None

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    return AppConfig.model_validate_json(f.read())
            except (OSError, ValidationError) as e:
                logger.warning("ignoring unreadable config %s: %s", self.config_file, e)
                format_warning(
                    f"Ignoring unreadable config {self.config_file}; using defaults"
                )
                return AppConfig()
        return AppConfig()

    def save_config(self, config: Optional[AppConfig] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            f.write(config.model_dump_json(indent=2))

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: if the key does not name an existing setting
            ValidationError: if the value is rejected by the model
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Navigate to the nested dictionary
        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)

        current[keys[-1]] = value

        # Reload config from the modified dictionary
        self._config = AppConfig(**config_dict)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
        else:
            self.set(key, self.get_from_config(AppConfig(), key))

    def get_from_config(self, config: AppConfig, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def work_log_path(self) -> Path:
        """Return the configured work log path, or the default in the data dir."""
        if self.config.log.path:
            return Path(self.config.log.path).expanduser()
        return self.data_dir / DEFAULT_LOG_FILENAME


@lru_cache(maxsize=1)
def get_config_manager() -> ConfigManager:
    """Get a cached ConfigManager instance."""
    return ConfigManager()
