"""Configuration module for Assoc-Array."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
