"""SQLAlchemy models for the room directory.

Four tables: buildings, features, rooms and the rooms<->features
association carrying quantity and details.
"""

from __future__ import annotations

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from roomdirectory.features.catalog import FeatureCategory
from roomdirectory.room_types import RoomType
from roomdirectory.utils.identifiers import generate_id


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


def _enum_values(enum_cls: type[RoomType] | type[FeatureCategory]) -> list[str]:
    return [member.value for member in enum_cls]


class Building(Base):
    """A building, deduplicated by abbreviation during seeding."""

    __tablename__ = "buildings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # Not unique in the database: reseeding appends duplicates
    abbreviation: Mapped[str] = mapped_column(String(32), nullable=False, index=True)

    rooms: Mapped[list[Room]] = relationship(back_populates="building")

    def __repr__(self) -> str:
        return f"Building(id={self.id!r}, abbreviation={self.abbreviation!r})"


class Feature(Base):
    """An equipment item or room characteristic."""

    __tablename__ = "features"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[FeatureCategory] = mapped_column(
        Enum(
            FeatureCategory,
            name="feature_category",
            values_callable=_enum_values,
            native_enum=False,
            length=32,
        ),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Feature(id={self.id!r}, name={self.name!r})"


class Room(Base):
    """A physical room in a building."""

    __tablename__ = "rooms"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    building_id: Mapped[str] = mapped_column(
        ForeignKey("buildings.id"), nullable=False, index=True
    )
    room_number: Mapped[str] = mapped_column(Text, nullable=False)
    display_name: Mapped[str | None] = mapped_column(Text)
    room_type: Mapped[RoomType] = mapped_column(
        Enum(
            RoomType,
            name="room_type",
            values_callable=_enum_values,
            native_enum=False,
            length=32,
        ),
        nullable=False,
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 0 = ground, negative = below grade
    floor: Mapped[int] = mapped_column(Integer, nullable=False)
    accessible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text)
    photo_front: Mapped[str | None] = mapped_column(Text)
    photo_back: Mapped[str | None] = mapped_column(Text)

    building: Mapped[Building] = relationship(back_populates="rooms")
    features: Mapped[list[RoomFeature]] = relationship(
        back_populates="room", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_rooms_type", "room_type"),
        Index("idx_rooms_floor", "floor"),
    )

    def __repr__(self) -> str:
        return f"Room(id={self.id!r}, room_number={self.room_number!r})"


class RoomFeature(Base):
    """Association of a feature with a room."""

    __tablename__ = "room_features"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    room_id: Mapped[str] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False, index=True
    )
    feature_id: Mapped[str] = mapped_column(
        ForeignKey("features.id"), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    details: Mapped[str | None] = mapped_column(Text)

    room: Mapped[Room] = relationship(back_populates="features")
    feature: Mapped[Feature] = relationship()

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_room_features_quantity"),
    )
