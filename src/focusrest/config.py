"""Configuration management for focusrest."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from focusrest.utils.logger import LOG_LEVELS, get_logger
from focusrest.utils.ui.formatters import format_warning


class TimerConfig(BaseModel):
    """Control loop timing."""

    poll_interval_ms: int = Field(default=100, gt=0)
    refresh_per_second: int = Field(default=10, gt=0)


class KeysConfig(BaseModel):
    """Key bindings."""

    focus: str = Field(default="f")
    rest: str = Field(default="r")
    pause: str = Field(default="p")
    quit_word: str = Field(default="quit")

    @field_validator("focus", "rest", "pause")
    @classmethod
    def validate_single_key(cls, v: str) -> str:
        if len(v) != 1 or not v.isprintable() or v.isspace():
            raise ValueError("key binding must be a single printable character")
        return v.lower()

    @field_validator("quit_word")
    @classmethod
    def validate_quit_word(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("quit_word cannot be empty")
        return v

    @model_validator(mode="after")
    def validate_distinct(self) -> "KeysConfig":
        if len({self.focus, self.rest, self.pause}) != 3:
            raise ValueError("focus, rest and pause keys must be distinct")
        if self.quit_word in (self.focus, self.rest, self.pause):
            raise ValueError("quit_word cannot be the same as a key binding")
        return self


class LoggingConfig(BaseModel):
    """Log file verbosity."""

    level: str = Field(default="INFO")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return v


class DisplayConfig(BaseModel):
    """Display configuration."""

    show_help: bool = Field(default=True)
    show_summary: bool = Field(default=True)


class Config(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    keys: KeysConfig = Field(default_factory=KeysConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages focusrest configuration profiles."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("focusrest"))
        self.config_file = self.config_dir / f"{profile}.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults."""
        if not self.config_file.exists():
            return Config()

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)
            return Config(**data)
        except (json.JSONDecodeError, TypeError, ValidationError) as e:
            get_logger().warning(
                "config file %s is invalid, using defaults: %s", self.config_file, e
            )
            format_warning(
                f"Config file {self.config_file} is invalid, using defaults"
            )
            return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w", encoding="utf-8") as f:
            f.write(config.model_dump_json(indent=2))

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            ValueError: If the key is unknown or the value fails validation
        """
        if self.get(key) is None or isinstance(self.get(key), BaseModel):
            raise ValueError(f"Unknown configuration key '{key}'")

        self._config = self._with_value(key, value)
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration, or a single key, to defaults."""
        if key is None:
            self._config = Config()
        else:
            default_value = self.get_from_config(Config(), key)
            if default_value is None:
                raise ValueError(f"Unknown configuration key '{key}'")
            if isinstance(default_value, BaseModel):
                default_value = default_value.model_dump()
            self._config = self._with_value(key, default_value)
        self.save_config()

    def _with_value(self, key: str, value: Any) -> Config:
        """Return a validated copy of the current config with *key* replaced."""
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            return Config(**config_dict)
        except ValidationError as e:
            errors = "; ".join(err["msg"] for err in e.errors())
            raise ValueError(f"Invalid value for '{key}': {errors}") from e

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    def list_profiles(self) -> list[str]:
        """List all available profiles."""
        profiles = []
        for config_file in self.config_dir.glob("*.json"):
            if not config_file.name.startswith("."):
                profiles.append(config_file.stem)
        return sorted(profiles)


@lru_cache(maxsize=8)
def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get the config manager for *profile*, creating it on first use."""
    return ConfigManager(profile)
