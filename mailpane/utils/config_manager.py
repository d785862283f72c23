"""Configuration manager for persistent settings stored as JSON."""

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from mailpane.core.models.message import Folder

from .errors import (
    ConfigurationError,
    FileSystemError,
    InvalidConfigError,
    MailpaneError,
    MissingConfigError,
)
from .logging import get_logger, log_call
from .paths import CONFIG_PATH, DATABASE_PATH

logger = get_logger(__name__)


class UIConfig(BaseModel):
    """Pydantic model for UI settings."""

    theme: str = "dark"
    start_folder: str = "inbox"
    show_hint_bar: bool = True

    @field_validator("start_folder")
    @classmethod
    def _known_folder(cls, value: str) -> str:
        return Folder.from_string(value).value


class StorageConfig(BaseModel):
    """Pydantic model for database settings."""

    database_path: str = str(DATABASE_PATH)
    sample_data: bool = True
    sample_size: int = Field(default=140, ge=0)
    sample_seed: int = 2016


class LoggingConfig(BaseModel):
    """Pydantic model for logging settings."""

    log_level: str = "INFO"
    max_file_size: int = 5_242_880  # 5 MB
    backup_count: int = 5


class AppConfig(BaseModel):
    """Pydantic model for overall application configuration."""

    version: str = "0.1.0"
    ui: UIConfig = Field(default_factory=UIConfig)
    database: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages persistent application configuration."""

    _instance = None
    _initialized = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None):
        if not ConfigManager._initialized:
            self.path = config_path or CONFIG_PATH
            self.config = self._load_or_create_config()
            logger.info(f"Configuration loaded from {self.path}")
            ConfigManager._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the singleton so the next call reloads from disk."""
        cls._instance = None
        cls._initialized = False

    def _load_or_create_config(self) -> AppConfig:
        """Load configuration from file or create default if not present."""

        if not self.path.exists():
            logger.info("No config file found, creating default configuration.")
            config = AppConfig()
            self._save_config(config)
            return config

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            config = AppConfig(**data)
            logger.debug("Configuration successfully loaded and validated.")
            return config

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise InvalidConfigError(
                f"Configuration file is not valid JSON: {str(e)}"
            ) from e
        except ValidationError as e:
            logger.error(f"Failed to validate config file: {e}")
            raise InvalidConfigError(
                f"Configuration data does not match expected schema: {str(e)}"
            ) from e
        except OSError as e:
            raise FileSystemError(f"Failed to read configuration file: {str(e)}") from e

    def _save_config(self, config: Optional[AppConfig] = None) -> None:
        """Save the current configuration to file."""

        config = config or self.config

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            logger.debug("Configuration successfully saved.")
        except OSError as e:
            raise FileSystemError(
                f"Failed to write configuration file: {str(e)}"
            ) from e

    def section(self, name: str) -> dict:
        """Return a configuration section as a dictionary."""
        if name not in AppConfig.model_fields:
            raise MissingConfigError(f"Unknown configuration section '{name}'")
        return getattr(self.config, name).model_dump()

    @log_call
    def set_config(self, key_path: str, value: Any, persist: bool = True) -> None:
        """Set a configuration value using dot-separated key path."""

        keys = key_path.split(".")
        obj = self.config

        for key in keys[:-1]:
            if not hasattr(obj, key):
                raise MissingConfigError(
                    f"Configuration path '{key_path}' is invalid: '{key}' not found"
                )
            obj = getattr(obj, key)

        if not isinstance(obj, BaseModel) or keys[-1] not in type(obj).model_fields:
            raise MissingConfigError(
                f"Configuration key '{keys[-1]}' does not exist in path '{key_path}'"
            )

        try:
            # Validate against the section model before touching the live config
            updated = type(obj).model_validate({**obj.model_dump(), keys[-1]: value})
        except ValidationError as e:
            raise InvalidConfigError(
                f"Invalid value for '{key_path}': {str(e)}"
            ) from e

        setattr(obj, keys[-1], getattr(updated, keys[-1]))

        if persist:
            self._save_config()

        logger.info(f"Config key '{key_path}' updated.")

    @log_call
    def reset_to_defaults(self) -> None:
        """Reset configuration to default values."""

        try:
            logger.warning("Resetting configuration to default values.")
            self.config = AppConfig()
            self._save_config()
        except MailpaneError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to reset configuration to defaults: {str(e)}"
            ) from e
