"""
Configuration loading utilities.

Supports environment variable interpolation in YAML values. Without a
config file, DATABASE_URL and ROOMDIRECTORY_INPUT from the environment
override the built-in defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from roomdirectory.config.settings import (
    DEFAULT_DATABASE_URL,
    DEFAULT_INPUT_PATH,
    DatabaseConfig,
    InputConfig,
    LoggingConfig,
    SeedConfig,
)


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        msg = f"Config root must be a mapping, got {type(data).__name__}: {path}"
        raise ValueError(msg)
    return _process_config_values(data) if data else {}


def load_config(config_path: Path | None = None) -> SeedConfig:
    """
    Load seeding configuration.

    Config layout (all keys optional):
        input.path, input.encoding, input.delimiter
        database.url, database.echo, database.create_tables
        logging.level, logging.json_output

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Fully validated SeedConfig instance.
    """
    data = load_yaml(config_path) if config_path is not None else {}

    input_data = data.get("input") or {}
    input_config = InputConfig(
        path=Path(
            input_data.get("path")
            or os.environ.get("ROOMDIRECTORY_INPUT", str(DEFAULT_INPUT_PATH))
        ),
        encoding=input_data.get("encoding", "utf-8"),
        delimiter=input_data.get("delimiter", ","),
    )

    database_data = data.get("database") or {}
    database = DatabaseConfig(
        url=database_data.get("url")
        or os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL),
        echo=database_data.get("echo", False),
        create_tables=database_data.get("create_tables", True),
    )

    logging_data = data.get("logging") or {}
    logging_config = LoggingConfig(
        level=logging_data.get("level", "INFO"),
        json_output=logging_data.get("json_output", False),
    )

    return SeedConfig(input=input_config, database=database, logging=logging_config)
