"""
Schema definitions using Pandera for data validation.

Data contracts for the seed input are defined here.
"""

from roomdirectory.schemas.room_data import (
    OPTIONAL_COLUMNS,
    REQUIRED_COLUMNS,
    RoomDataSchema,
)

__all__ = ["OPTIONAL_COLUMNS", "REQUIRED_COLUMNS", "RoomDataSchema"]
