"""
Read-side room directory queries.

Retrieves rooms joined with building and feature details, filtered the
way the directory pages filter them.
"""

from roomdirectory.directory.formatting import (
    format_feature_label,
    format_floor,
    format_room_type,
    group_features_by_category,
)
from roomdirectory.directory.query import (
    RoomFeatureDetails,
    RoomWithDetails,
    SearchFilters,
    get_room,
    list_buildings,
    list_features,
    search_rooms,
)

__all__ = [
    "RoomFeatureDetails",
    "RoomWithDetails",
    "SearchFilters",
    "format_feature_label",
    "format_floor",
    "format_room_type",
    "get_room",
    "group_features_by_category",
    "list_buildings",
    "list_features",
    "search_rooms",
]
