"""
Typed configuration models using Pydantic.

All configuration is defined here with explicit typing and validation.
Every field has a default, so the seed command runs without a config file.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_INPUT_PATH = Path("./seed-data.csv")
DEFAULT_DATABASE_URL = "sqlite:///rooms.db"


class InputConfig(BaseModel):
    """Seed input file configuration."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(
        default=DEFAULT_INPUT_PATH,
        description="Path to the room CSV, relative to the working directory",
    )
    encoding: str = Field(default="utf-8", description="Input file encoding")
    delimiter: str = Field(default=",", description="Column delimiter")

    @field_validator("delimiter")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        """Ensure the delimiter is a single character."""
        if len(v) != 1:
            msg = f"delimiter must be a single character, got: {v!r}"
            raise ValueError(msg)
        return v


class DatabaseConfig(BaseModel):
    """Database connection configuration."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        default=DEFAULT_DATABASE_URL,
        description="SQLAlchemy database URL",
    )
    echo: bool = Field(default=False, description="Echo SQL statements")
    create_tables: bool = Field(
        default=True,
        description="Create missing tables before seeding (no migrations)",
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Ensure the URL is not blank."""
        if not v.strip():
            msg = "database url must not be empty"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level")
    json_output: bool = Field(default=False, description="Emit JSON log lines")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Ensure the level is one the logging module knows."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            msg = f"level must be one of {sorted(valid)}, got: {v!r}"
            raise ValueError(msg)
        return v.upper()


class SeedConfig(BaseModel):
    """Complete seeding configuration."""

    model_config = ConfigDict(frozen=True)

    input: InputConfig = Field(default_factory=InputConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def input_path(self) -> Path:
        """Convenience accessor for the input CSV path."""
        return self.input.path

    @property
    def database_url(self) -> str:
        """Convenience accessor for the database URL."""
        return self.database.url
