"""
Data ingestion layer for loading the seed input with schema validation.

All raw data loading happens through this module to ensure
consistent validation at system boundaries.
"""

from roomdirectory.ingestion.room_data import RoomDataLoader, load_room_rows

__all__ = ["RoomDataLoader", "load_room_rows"]
