"""Configuration module for fakeit."""

from fakeit.config.logging import configure_logging, get_logger
from fakeit.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_logger", "get_settings"]
