"""
Room feature associations for a single row.

Combines the generic catalog flags with the tables and chairs columns,
which carry free-text details.
"""

from dataclasses import dataclass

from roomdirectory.features.catalog import CHAIRS_KEY, FEATURE_CATALOG, TABLES_KEY
from roomdirectory.ingestion.room_data import RoomRow
from roomdirectory.normalization.values import optional_text, parse_count_or_one, parse_flag


@dataclass(frozen=True)
class FeatureAssignment:
    """
    One feature attached to a room.

    Attributes:
        feature_key: Catalog column key, or "tables"/"chairs".
        quantity: Number of units, at least 1.
        details: Free-text details (tables and chairs only).
    """

    feature_key: str
    quantity: int
    details: str | None = None


def build_assignments(row: RoomRow) -> list[FeatureAssignment]:
    """
    Features to attach to the room created from a row.

    Catalog columns that parse as absent produce nothing. Tables and chairs
    are attached whenever their quantity cell is non-empty.

    Args:
        row: Seed row.

    Returns:
        Assignments in catalog order, then tables, then chairs.
    """
    assignments: list[FeatureAssignment] = []

    for column in FEATURE_CATALOG:
        flag = parse_flag(column, row.get(column))
        if flag.is_present:
            assignments.append(FeatureAssignment(column, flag.quantity))

    table_qty = row.get("table_qty", "")
    if table_qty:
        details = ", ".join(v for v in (table_qty, row.get("table_details", "")) if v)
        assignments.append(
            FeatureAssignment(TABLES_KEY, parse_count_or_one(table_qty), details)
        )

    chair_qty = row.get("chair_qty", "")
    if chair_qty:
        assignments.append(
            FeatureAssignment(
                CHAIRS_KEY,
                parse_count_or_one(chair_qty),
                optional_text(row.get("chair_type")),
            )
        )

    return assignments
