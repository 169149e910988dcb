"""Closed enumeration of room usage types."""

from enum import Enum


class RoomType(str, Enum):
    """How a room is used. Values are the exact strings found in the CSV."""

    CLASSROOM = "classroom"
    COMPUTER_LAB = "computer-lab"
    SCIENCE_LAB = "science-lab"
    LECTURE_HALL = "lecture-hall"
    OFFICE = "office"
    PERFORMANCE_HALL = "performance-hall"
    CHAPEL = "chapel"
    GYM = "gym"
    BREAKROOM = "breakroom"
    CONFERENCE_ROOM = "conference-room"
    LOBBY = "lobby"
    STUDY_ROOM = "study-room"
    SPECIAL = "special"


ROOM_TYPE_VALUES: tuple[str, ...] = tuple(t.value for t in RoomType)


def parse_room_type(value: str) -> RoomType | None:
    """Exact, case-sensitive lookup; None when the value is not a room type."""
    try:
        return RoomType(value)
    except ValueError:
        return None
