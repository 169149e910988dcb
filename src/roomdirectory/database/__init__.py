"""
Database layer: ORM models and session handling.
"""

from roomdirectory.database.models import Base, Building, Feature, Room, RoomFeature
from roomdirectory.database.session import (
    create_db_engine,
    create_schema,
    session_scope,
)

__all__ = [
    "Base",
    "Building",
    "Feature",
    "Room",
    "RoomFeature",
    "create_db_engine",
    "create_schema",
    "session_scope",
]
