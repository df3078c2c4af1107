"""
Configuration management for the Wellington Trains application.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from version import __version__

logger = logging.getLogger(__name__)

VALID_THEMES = ("dark", "light")
VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DataConfig(BaseModel):
    """Configuration for the location of the .data files."""

    data_directory: Optional[str] = Field(
        None, description="Directory holding stations.data and train-lines.data; bundled data if unset"
    )


class DisplayConfig(BaseModel):
    """Configuration for display settings."""

    theme: str = "dark"  # "dark" or "light"
    window_width: int = Field(900, ge=400)
    window_height: int = Field(650, ge=300)

    @field_validator("theme")
    @classmethod
    def validate_theme(cls, value: str) -> str:
        if value not in VALID_THEMES:
            raise ValueError(f"Theme must be one of {VALID_THEMES}, got {value!r}")
        return value


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        value = value.upper()
        if value not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LOG_LEVELS}, got {value!r}")
        return value


class ConfigData(BaseModel):
    """Main configuration data model."""

    data: DataConfig = Field(default_factory=DataConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses the
                platform configuration directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        On Windows, uses AppData/Roaming/WellingtonTrains/config.json
        On Linux, uses XDG_CONFIG_HOME/WellingtonTrains/config.json or
        ~/.config/WellingtonTrains/config.json

        Returns:
            Path: Default configuration file path
        """
        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                config_dir = Path(appdata) / "WellingtonTrains"
                config_dir.mkdir(parents=True, exist_ok=True)
                return config_dir / "config.json"
        else:  # Linux/Unix
            xdg_config = os.environ.get("XDG_CONFIG_HOME")
            if xdg_config:
                config_dir = Path(xdg_config) / "WellingtonTrains"
            else:
                config_dir = Path.home() / ".config" / "WellingtonTrains"

            config_dir.mkdir(parents=True, exist_ok=True)
            return config_dir / "config.json"

        # Fallback to current directory for development
        return Path("config.json")

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except Exception as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)

            self.config = config
            logger.info(f"Successfully saved config to: {self.config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        self.save_config(ConfigData())

    def update_theme(self, theme: str) -> None:
        """
        Update the theme setting and save to file.

        Args:
            theme: Theme name ("dark" or "light")
        """
        if self.config is None:
            self.load_config()

        if self.config and theme in VALID_THEMES:
            self.config.display.theme = theme
            self.save_config(self.config)

    def update_data_directory(self, data_directory: Optional[str]) -> None:
        """
        Update the data directory and save to file.

        Args:
            data_directory: Directory holding the .data files, or None for bundled data

        Raises:
            ConfigurationError: If the directory does not exist
        """
        if self.config is None:
            self.load_config()

        if data_directory is not None and not Path(data_directory).is_dir():
            raise ConfigurationError(f"Data directory does not exist: {data_directory}")

        self.config.data.data_directory = data_directory
        self.save_config(self.config)

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        return {
            "app_version": __version__,
            "theme": self.config.display.theme,
            "window_size": f"{self.config.display.window_width}x{self.config.display.window_height}",
            "data_directory": self.config.data.data_directory or "bundled",
            "log_level": self.config.logging.level,
        }
