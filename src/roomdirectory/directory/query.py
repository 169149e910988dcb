"""
Room search over the seeded tables.

All filters combine with AND. Capacity bounds are inclusive, every listed
feature must be present, and the free-text search is case-insensitive.
"""

from dataclasses import dataclass, field

from sqlalchemy import Select, func, or_, select
from sqlalchemy.orm import Session, contains_eager, selectinload

from roomdirectory.database.models import Building, Feature, Room, RoomFeature
from roomdirectory.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class SearchFilters:
    """
    Room search filters. Unset fields do not filter.

    Attributes:
        building_id: Only rooms in this building.
        room_type: Only rooms of this type (enumeration value).
        min_capacity: Minimum capacity, inclusive.
        max_capacity: Maximum capacity, inclusive.
        floor: Only rooms on this floor.
        accessible: Only rooms with this accessibility.
        feature_ids: Rooms must have every one of these features.
        search_query: Text matched against room number, display name,
            building name, building abbreviation and notes.
    """

    building_id: str | None = None
    room_type: str | None = None
    min_capacity: int | None = None
    max_capacity: int | None = None
    floor: int | None = None
    accessible: bool | None = None
    feature_ids: tuple[str, ...] = ()
    search_query: str | None = None


@dataclass(frozen=True)
class RoomFeatureDetails:
    """A feature as attached to one room."""

    id: str
    name: str
    category: str
    quantity: int
    details: str | None


@dataclass(frozen=True)
class RoomWithDetails:
    """A room joined with its building and features."""

    id: str
    building_id: str
    building_name: str
    building_abbrev: str
    room_number: str
    room_type: str
    display_name: str | None
    capacity: int
    floor: int
    accessible: bool
    notes: str | None
    photo_front: str | None
    photo_back: str | None
    features: list[RoomFeatureDetails] = field(default_factory=list)


def _base_query() -> Select[tuple[Room]]:
    return (
        select(Room)
        .join(Room.building)
        .options(
            contains_eager(Room.building),
            selectinload(Room.features).selectinload(RoomFeature.feature),
        )
        .execution_options(populate_existing=True)
    )


def _escape_like(text: str) -> str:
    """Make LIKE wildcards in user text match literally."""
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _apply_filters(stmt: Select[tuple[Room]], filters: SearchFilters) -> Select[tuple[Room]]:
    if filters.building_id is not None:
        stmt = stmt.where(Room.building_id == filters.building_id)
    if filters.room_type is not None:
        stmt = stmt.where(Room.room_type == filters.room_type)
    if filters.min_capacity is not None:
        stmt = stmt.where(Room.capacity >= filters.min_capacity)
    if filters.max_capacity is not None:
        stmt = stmt.where(Room.capacity <= filters.max_capacity)
    if filters.floor is not None:
        stmt = stmt.where(Room.floor == filters.floor)
    if filters.accessible is not None:
        stmt = stmt.where(Room.accessible == filters.accessible)
    for feature_id in filters.feature_ids:
        stmt = stmt.where(Room.features.any(RoomFeature.feature_id == feature_id))
    if filters.search_query:
        pattern = f"%{_escape_like(filters.search_query.strip().lower())}%"
        stmt = stmt.where(
            or_(
                func.lower(Room.room_number).like(pattern, escape="\\"),
                func.lower(Room.display_name).like(pattern, escape="\\"),
                func.lower(Room.notes).like(pattern, escape="\\"),
                func.lower(Building.name).like(pattern, escape="\\"),
                func.lower(Building.abbreviation).like(pattern, escape="\\"),
            )
        )
    return stmt


def _to_details(room: Room) -> RoomWithDetails:
    features = sorted(
        (
            RoomFeatureDetails(
                id=link.feature.id,
                name=link.feature.name,
                category=link.feature.category.value,
                quantity=link.quantity,
                details=link.details,
            )
            for link in room.features
        ),
        key=lambda f: (f.category, f.name),
    )
    return RoomWithDetails(
        id=room.id,
        building_id=room.building_id,
        building_name=room.building.name,
        building_abbrev=room.building.abbreviation,
        room_number=room.room_number,
        room_type=room.room_type.value,
        display_name=room.display_name,
        capacity=room.capacity,
        floor=room.floor,
        accessible=room.accessible,
        notes=room.notes,
        photo_front=room.photo_front,
        photo_back=room.photo_back,
        features=features,
    )


def search_rooms(
    session: Session, filters: SearchFilters | None = None
) -> list[RoomWithDetails]:
    """
    Rooms matching the filters, ordered by building abbreviation and room number.

    Args:
        session: Open database session.
        filters: Search filters; None returns every room.

    Returns:
        Matching rooms with building and feature details.
    """
    filters = filters or SearchFilters()
    stmt = _apply_filters(_base_query(), filters).order_by(
        Building.abbreviation, Room.room_number
    )
    rooms = session.scalars(stmt).unique().all()
    log.debug("Room search", n_results=len(rooms))
    return [_to_details(room) for room in rooms]


def get_room(session: Session, room_id: str) -> RoomWithDetails | None:
    """A single room with details, or None when the id is unknown."""
    room = session.scalars(_base_query().where(Room.id == room_id)).unique().first()
    return _to_details(room) if room is not None else None


def list_buildings(session: Session) -> list[Building]:
    """All buildings ordered by name."""
    return list(session.scalars(select(Building).order_by(Building.name)).all())


def list_features(session: Session) -> list[Feature]:
    """All features ordered by category and name."""
    return list(
        session.scalars(select(Feature).order_by(Feature.category, Feature.name)).all()
    )
