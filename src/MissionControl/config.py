"""Centralized configuration for the Mission Control query libraries.

The query functions themselves are configuration-free: they read nothing but
the references they are handed. Configuration only covers the ambient runtime
(logging level and format), loaded from environment variables with .env file
support.
"""
import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_LOG_FORMAT = "%(name)s - %(levelname)s - %(message)s"


class MissionControlConfig(BaseSettings):
    """Process-wide settings for Mission Control.

    Loaded from ``MISSION_CONTROL_*`` environment variables, falling back to a
    ``.env`` file in the working directory.

    Example:
        >>> config = MissionControlConfig(log_level="debug")
        >>> config.log_level
        'DEBUG'
    """
    model_config = SettingsConfigDict(
        env_prefix="MISSION_CONTROL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="INFO", description="Level for the MissionControl logger")
    log_format: str = Field(default=DEFAULT_LOG_FORMAT, description="Formatter string for enable_logging()")

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level (e.g. ``logging.INFO``)."""
        return logging.getLevelName(self.log_level)


_config: Optional[MissionControlConfig] = None


def get_config(reload: bool = False) -> MissionControlConfig:
    """Get the shared config, building it on first use.

    Args:
        reload: Re-read environment variables and .env instead of using the cached instance

    Returns:
        MissionControlConfig instance
    """
    global _config
    if _config is None or reload:
        _config = MissionControlConfig()
    return _config
