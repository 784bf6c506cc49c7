"""
Assoc-Array Configuration Settings

This module contains the configuration constants for the container and
its tooling. Values can be overridden through environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Container configuration settings."""

    # Storage settings
    DEFAULT_CAPACITY: int = int(os.environ.get("ASSOC_ARRAY_DEFAULT_CAPACITY", "16"))

    # Logging settings
    DEBUG: bool = os.environ.get("ASSOC_ARRAY_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("ASSOC_ARRAY_LOG_LEVEL", "INFO")


# Global settings instance
settings = Settings()
