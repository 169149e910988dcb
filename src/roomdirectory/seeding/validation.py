"""
Per-row validation of seed rows.

Each row becomes either a ValidRow, ready to insert, or a RowRejection
naming the reason. Rejections are never fatal.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from roomdirectory.ingestion.room_data import RoomRow
from roomdirectory.normalization.values import parse_capacity, parse_leading_int
from roomdirectory.room_types import ROOM_TYPE_VALUES, RoomType, parse_room_type


class RejectionReason(str, Enum):
    """Why a row was skipped."""

    UNRESOLVED_BUILDING = "unresolved_building"
    INVALID_ROOM_TYPE = "invalid_room_type"
    INVALID_FLOOR = "invalid_floor"


@dataclass(frozen=True)
class RowRejection:
    """
    A skipped row.

    Attributes:
        reason: Rejection reason.
        building_abbrev: Building abbreviation of the row.
        room_number: Room number of the row.
        value: The offending cell value.
    """

    reason: RejectionReason
    building_abbrev: str
    room_number: str
    value: str

    @property
    def message(self) -> str:
        """Human-readable description for logs and reports."""
        if self.reason is RejectionReason.UNRESOLVED_BUILDING:
            return f"Building not found: {self.value}"
        if self.reason is RejectionReason.INVALID_ROOM_TYPE:
            return (
                f'Invalid room type "{self.value}" for '
                f"{self.building_abbrev} {self.room_number}. "
                f"Valid types: {', '.join(ROOM_TYPE_VALUES)}"
            )
        return (
            f'Invalid floor "{self.value}" for '
            f"{self.building_abbrev} {self.room_number}"
        )


@dataclass(frozen=True)
class ValidRow:
    """A row that passed validation, with its parsed values."""

    row: RoomRow
    building_id: str
    room_type: RoomType
    floor: int
    capacity: int

    @property
    def building_abbrev(self) -> str:
        return self.row["building_abbrev"]

    @property
    def room_number(self) -> str:
        return self.row["room_number"]


RowValidation = ValidRow | RowRejection


class RowValidator:
    """
    Gate for rows before persistence.

    Checks, in order: the building abbreviation resolves to an id created
    in the buildings phase, the room type is one of the enumerated values,
    and the floor starts with an integer.
    """

    def __init__(self, building_ids: Mapping[str, str]) -> None:
        """
        Initialize row validator.

        Args:
            building_ids: Building abbreviation -> building id.
        """
        self.building_ids = building_ids

    def validate(self, row: RoomRow) -> RowValidation:
        """Validate a single row."""
        abbrev = row.get("building_abbrev", "")
        room_number = row.get("room_number", "")

        building_id = self.building_ids.get(abbrev)
        if not building_id:
            return RowRejection(
                RejectionReason.UNRESOLVED_BUILDING, abbrev, room_number, abbrev
            )

        raw_type = row.get("room_type", "")
        room_type = parse_room_type(raw_type)
        if room_type is None:
            return RowRejection(
                RejectionReason.INVALID_ROOM_TYPE, abbrev, room_number, raw_type
            )

        raw_floor = row.get("floor", "")
        floor = parse_leading_int(raw_floor)
        if floor is None:
            return RowRejection(
                RejectionReason.INVALID_FLOOR, abbrev, room_number, raw_floor
            )

        return ValidRow(
            row=row,
            building_id=building_id,
            room_type=room_type,
            floor=floor,
            capacity=parse_capacity(row.get("chair_qty")),
        )
