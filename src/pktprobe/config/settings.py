"""
Configuration system

Pydantic models for the payload ingestion limits and logging, loaded from a
YAML (or JSON) file under ``~/.pktprobe``. A missing file yields defaults.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from ..common.constants import FileConstants, PayloadConstants
from ..common.exceptions import ConfigurationError


class PayloadSettings(BaseModel):
    """Payload ingestion settings"""

    max_template_size: int = Field(
        default=PayloadConstants.MAX_TEMPLATE_SIZE, ge=1, le=65535, description="Largest decoded text template"
    )
    max_frame_size: int = Field(
        default=PayloadConstants.MAX_FRAME_SIZE,
        ge=1,
        le=PayloadConstants.MAX_FRAME_SIZE,
        description="Largest capture frame accepted",
    )
    strict_payload_size: bool = Field(
        default=False, description="Treat an oversized template as a syntax error instead of truncating it"
    )
    load_builtin_payloads: bool = Field(default=True, description="Seed the registry with the built-in payloads")

    model_config = {"validate_assignment": True}


class LoggingSettings(BaseModel):
    """Logging settings"""

    log_level: str = Field(default="INFO", description="Console log level")
    log_to_file: bool = Field(default=True, description="Also write a rotating log file")
    log_file_max_size: int = Field(default=FileConstants.LOG_MAX_SIZE, gt=0)
    log_backup_count: int = Field(default=FileConstants.LOG_BACKUP_COUNT, ge=0)

    model_config = {"validate_assignment": True}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


class AppConfig(BaseModel):
    """Application configuration"""

    payloads: PayloadSettings = Field(default_factory=PayloadSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    config_version: str = "1.0"

    @classmethod
    def default(cls) -> "AppConfig":
        """Default configuration"""
        return cls()

    @staticmethod
    def get_default_config_path() -> Path:
        """Default configuration file path"""
        return Path.home() / FileConstants.CONFIG_DIR_NAME / FileConstants.DEFAULT_CONFIG_FILE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        try:
            return cls.model_validate(data or {})
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> "AppConfig":
        """Load a configuration file

        Raises:
            ConfigurationError: the file exists but is unreadable or invalid
        """
        if config_path is None:
            config_path = cls.get_default_config_path()

        config_path = Path(config_path)

        if not config_path.exists():
            return cls.default()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if config_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read config {config_path}: {e}") from e

        if data is not None and not isinstance(data, dict):
            raise ConfigurationError(f"Config {config_path} must contain a mapping")

        return cls.from_dict(data)

    def save(self, config_path: Optional[Union[str, Path]] = None) -> Path:
        """Write the configuration file and return its path"""
        if config_path is None:
            config_path = self.get_default_config_path()

        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump()
        with open(config_path, "w", encoding="utf-8") as f:
            if config_path.suffix.lower() == ".json":
                json.dump(data, f, indent=2)
            else:
                yaml.safe_dump(data, f, default_flow_style=False, indent=2)

        return config_path


# Global configuration instance
_app_config: Optional[AppConfig] = None


def get_app_config() -> AppConfig:
    """Return the process-wide configuration, loading it on first use"""
    global _app_config
    if _app_config is None:
        _app_config = AppConfig.load()
    return _app_config


def reload_app_config(config_path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Re-read the configuration"""
    global _app_config
    _app_config = AppConfig.load(config_path)
    return _app_config
