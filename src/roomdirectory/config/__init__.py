"""
Configuration management with typed Pydantic models.

Provides input, database and logging settings with
environment-aware configuration loading.
"""

from roomdirectory.config.loader import load_config
from roomdirectory.config.settings import (
    DatabaseConfig,
    InputConfig,
    LoggingConfig,
    SeedConfig,
)

__all__ = [
    "DatabaseConfig",
    "InputConfig",
    "LoggingConfig",
    "SeedConfig",
    "load_config",
]
