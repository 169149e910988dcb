"""
Pandera schema for the room seed CSV.

The schema checks structure only (required columns, string cells). Row
semantics such as the room type enumeration are checked per row by the
seeding validator, so one bad row never rejects the whole file.
"""

import pandera.pandas as pa
from pandera.typing import Series

REQUIRED_COLUMNS: tuple[str, ...] = (
    "building_name",
    "building_abbrev",
    "room_number",
    "room_type",
    "floor",
)

OPTIONAL_COLUMNS: tuple[str, ...] = (
    "room_display_name",
    "projector_qty",
    "tv_qty",
    "whiteboard",
    "chalkboard",
    "smartboard",
    "speaker",
    "microphone",
    "camera",
    "hdmi",
    "usb_c",
    "vga",
    "table_qty",
    "table_details",
    "chair_qty",
    "chair_type",
    "presentation_stand",
    "workstation",
    "windows",
    "wash_station",
    "notes",
    "photo_back",
    "photo_front",
)


class RoomDataSchema(pa.DataFrameModel):
    """
    Schema for one row per room in the seed CSV.

    Optional feature columns may be missing from the file; the loader
    fills them with empty strings before validation.
    """

    building_name: Series[str] = pa.Field(
        description="Building display name (first row per abbreviation wins)",
    )
    building_abbrev: Series[str] = pa.Field(
        description="Building abbreviation, the deduplication key",
    )
    room_number: Series[str] = pa.Field(description="Room number within building")
    room_type: Series[str] = pa.Field(
        description="Room type, checked against the enumeration per row",
    )
    floor: Series[str] = pa.Field(
        description="Signed floor number as text (0 = ground, -1 = basement)",
    )
    room_display_name: Series[str] | None = pa.Field(nullable=True, default=None)
    chair_qty: Series[str] | None = pa.Field(nullable=True, default=None)
    table_qty: Series[str] | None = pa.Field(nullable=True, default=None)

    class Config:
        """Schema configuration."""

        name = "RoomDataSchema"
        strict = False  # Allow extra columns
        coerce = True  # Coerce types where possible
