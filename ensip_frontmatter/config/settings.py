"""Centralized configuration for the ENSIP frontmatter validator.

Settings are read from environment variables prefixed with
``ENSIP_FRONTMATTER_`` and from an optional ``.env`` file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings for the ENSIP frontmatter validator."""

    # === Logging Configuration ===
    log_level: str = Field(default="INFO", description="Logging level")
    structured_logging: bool = Field(default=True, description="Emit JSON log lines")
    log_file: str | None = Field(default=None, description="Optional path of a rotating log file")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, description="Rotate the log file after this many bytes")
    log_backup_count: int = Field(default=5, description="Number of rotated log files to keep")

    model_config = {
        "env_prefix": "ENSIP_FRONTMATTER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelNamesMapping()[self.log_level]

    @property
    def log_file_path(self) -> Path | None:
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser().resolve()


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        load_dotenv()  # Load .env file
        _settings = Settings()
    return _settings


def reset_settings():
    """Reset the global settings instance (primarily for testing)."""
    global _settings
    _settings = None
