"""
Room seed CSV ingestion.

Loads the room CSV as text, trims every cell, and drops blank rows.
The result is checked against RoomDataSchema before any row is seeded.
"""

from pathlib import Path

import pandas as pd
from pandera.errors import SchemaError

from roomdirectory.config.settings import SeedConfig
from roomdirectory.exceptions import InputFormatError
from roomdirectory.schemas.room_data import OPTIONAL_COLUMNS, RoomDataSchema
from roomdirectory.utils.logging import get_logger

log = get_logger(__name__)

RoomRow = dict[str, str]


class RoomDataLoader:
    """Loader for the room seed CSV."""

    def __init__(self, config: SeedConfig) -> None:
        """
        Initialize room data loader.

        Args:
            config: Seed configuration; only the input section is used.
        """
        self.config = config

    @property
    def path(self) -> Path:
        """Input path, relative paths taken from the working directory."""
        path = self.config.input.path
        return path if path.is_absolute() else Path.cwd() / path

    def load(self, *, validate: bool = True) -> pd.DataFrame:
        """
        Load and optionally validate the seed CSV.

        Args:
            validate: Whether to check the columns against RoomDataSchema.

        Returns:
            DataFrame of trimmed string cells, one row per room.

        Raises:
            FileNotFoundError: If the input file does not exist.
            InputFormatError: If the file cannot be parsed or lacks
                required columns.
        """
        df = self._read_csv(self.path)
        log.info("Loaded room data", rows=len(df), columns=len(df.columns))

        if validate:
            try:
                df = RoomDataSchema.validate(df)
            except SchemaError as e:
                msg = f"Seed input is missing required room columns: {e}"
                raise InputFormatError(msg) from e
            log.info("Schema validation passed")

        return df

    def _read_csv(self, path: Path) -> pd.DataFrame:
        if not path.exists():
            msg = f"Seed input file not found: {path}"
            raise FileNotFoundError(msg)

        log.info("Loading room data", path=str(path))

        try:
            df = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
                sep=self.config.input.delimiter,
                encoding=self.config.input.encoding,
            )
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
            msg = f"Could not parse seed input {path}: {e}"
            raise InputFormatError(msg) from e

        # Trim headers and cells
        df.columns = [str(c).strip() for c in df.columns]
        df = df.fillna("")
        for column in df.columns:
            df[column] = df[column].astype(str).str.strip()

        # Rows with only delimiters are blank lines too
        blank = (df == "").all(axis=1)
        if blank.any():
            log.debug("Dropping blank rows", n_blank=int(blank.sum()))
            df = df[~blank].reset_index(drop=True)

        # Optional columns missing from the file read as empty cells
        for column in OPTIONAL_COLUMNS:
            if column not in df.columns:
                df[column] = ""

        return df


def dataframe_to_rows(df: pd.DataFrame) -> list[RoomRow]:
    """Convert a validated room DataFrame to row dicts in file order."""
    return [
        {str(k): "" if pd.isna(v) else str(v) for k, v in record.items()}
        for record in df.to_dict(orient="records")
    ]


def load_room_rows(config: SeedConfig, *, validate: bool = True) -> list[RoomRow]:
    """
    Convenience function to load seed rows.

    Args:
        config: Seed configuration.
        validate: Whether to validate against schema.

    Returns:
        One dict per room row, keyed by column name.
    """
    loader = RoomDataLoader(config)
    return dataframe_to_rows(loader.load(validate=validate))
