"""
Configuration module.

Exports:
    Settings: Application settings model
    load_settings: Build settings from the environment
    configure_logging: structlog setup for the run
"""

from config.settings import Settings, load_settings
from config.logging import configure_logging

__all__ = [
    "Settings",
    "load_settings",
    "configure_logging",
]
