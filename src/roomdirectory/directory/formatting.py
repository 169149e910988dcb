"""Display helpers for room directory values."""

from collections.abc import Iterable

from roomdirectory.directory.query import RoomFeatureDetails


def format_floor(floor: int) -> str:
    """
    Floor label: 0 is "Ground", positive floors are numbers, basements are "B<n>".

    >>> format_floor(-1)
    'B1'
    """
    if floor == 0:
        return "Ground"
    if floor > 0:
        return str(floor)
    return f"B{abs(floor)}"


def format_room_type(room_type: str) -> str:
    """'computer-lab' -> 'Computer Lab'."""
    return " ".join(word[:1].upper() + word[1:] for word in room_type.split("-"))


def format_feature_label(feature: RoomFeatureDetails) -> str:
    """Feature name, with the quantity appended when above one."""
    if feature.quantity > 1:
        return f"{feature.name} ({feature.quantity})"
    return feature.name


def group_features_by_category(
    features: Iterable[RoomFeatureDetails],
) -> dict[str, list[RoomFeatureDetails]]:
    """Group features by category, keeping first-seen category order."""
    grouped: dict[str, list[RoomFeatureDetails]] = {}
    for feature in features:
        grouped.setdefault(feature.category, []).append(feature)
    return grouped
