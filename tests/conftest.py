"""Pytest configuration and shared fixtures."""

import csv
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy import Engine
from sqlalchemy.orm import Session

from roomdirectory.config.settings import DatabaseConfig, InputConfig, SeedConfig
from roomdirectory.database import create_db_engine, create_schema, session_scope
from roomdirectory.schemas.room_data import OPTIONAL_COLUMNS, REQUIRED_COLUMNS

ALL_COLUMNS: list[str] = [*REQUIRED_COLUMNS, *OPTIONAL_COLUMNS]


def make_row(**values: str) -> dict[str, str]:
    """Build a full seed row with every column present, empty by default."""
    row = dict.fromkeys(ALL_COLUMNS, "")
    row.update(
        {
            "building_name": "Science Center",
            "building_abbrev": "SCI",
            "room_number": "101",
            "room_type": "classroom",
            "floor": "1",
        }
    )
    row.update(values)
    return row


@pytest.fixture
def sample_rows() -> list[dict[str, str]]:
    """Create a small set of seed rows covering the common cases."""
    return [
        make_row(
            room_number="101",
            projector_qty="2",
            whiteboard="yes",
            hdmi="yes",
            table_qty="3",
            table_details="round",
            chair_qty="25",
        ),
        make_row(
            room_number="B05",
            room_type="computer-lab",
            floor="-1",
            whiteboard="no",
            workstation="yes",
            chair_qty="30",
            chair_type="rolling",
        ),
        make_row(
            building_name="Arts Hall",
            building_abbrev="ART",
            room_number="200",
            room_type="performance-hall",
            floor="0",
            room_display_name="Main Stage",
            speaker="yes",
            notes="Piano on stage",
        ),
        make_row(
            building_name="Science Centre",
            building_abbrev="SCI",
            room_number="102",
            room_type="storage",
        ),
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes rows to a CSV file under tmp_path."""

    def _write(
        rows: list[dict[str, str]],
        name: str = "seed-data.csv",
        columns: list[str] | None = None,
    ) -> Path:
        path = tmp_path / name
        fieldnames = columns or ALL_COLUMNS
        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """SQLite database file under tmp_path."""
    return f"sqlite:///{tmp_path / 'rooms.db'}"


@pytest.fixture
def seed_config(tmp_path: Path, database_url: str) -> SeedConfig:
    """Seed configuration pointing at tmp_path files."""
    return SeedConfig(
        input=InputConfig(path=tmp_path / "seed-data.csv"),
        database=DatabaseConfig(url=database_url),
    )


@pytest.fixture
def engine(database_url: str) -> Iterator[Engine]:
    """Engine with all tables created."""
    engine = create_db_engine(DatabaseConfig(url=database_url))
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Iterator[Session]:
    """Open session on the test database."""
    with session_scope(engine) as session:
        yield session
