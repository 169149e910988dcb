"""
Deduplication of entities referenced by the seed rows.

Reduces the rows to the distinct buildings and features that must exist
before any room can reference them. Both collections keep first-seen order.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from roomdirectory.features.catalog import CHAIRS_KEY, FEATURE_CATALOG, TABLES_KEY
from roomdirectory.ingestion.room_data import RoomRow
from roomdirectory.normalization.values import is_truthy


@dataclass(frozen=True)
class BuildingRecord:
    """A building as first seen in the input."""

    abbreviation: str
    name: str


def collect_buildings(rows: Iterable[RoomRow]) -> list[BuildingRecord]:
    """
    Distinct buildings keyed by abbreviation.

    The first row's building name wins; later rows that disagree on the
    name for the same abbreviation are ignored.
    """
    seen: dict[str, BuildingRecord] = {}
    for row in rows:
        abbrev = row.get("building_abbrev", "")
        if abbrev not in seen:
            seen[abbrev] = BuildingRecord(
                abbreviation=abbrev, name=row.get("building_name", "")
            )
    return list(seen.values())


def collect_feature_keys(rows: Iterable[RoomRow]) -> list[str]:
    """
    Feature keys set in at least one row.

    Catalog columns count when any row has a truthy value. The tables and
    chairs keys count when any row has a non-empty quantity cell,
    including "0".
    """
    seen: dict[str, None] = {}
    for row in rows:
        for column in FEATURE_CATALOG:
            if is_truthy(row.get(column)):
                seen.setdefault(column, None)
        if row.get("table_qty"):
            seen.setdefault(TABLES_KEY, None)
        if row.get("chair_qty"):
            seen.setdefault(CHAIRS_KEY, None)
    return list(seen)
