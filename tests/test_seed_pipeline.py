"""Tests for the seeding pipeline."""

from collections.abc import Callable
from pathlib import Path

import pytest
from conftest import make_row
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from roomdirectory.config.settings import DatabaseConfig, InputConfig, SeedConfig
from roomdirectory.database import Building, Feature, Room, RoomFeature
from roomdirectory.exceptions import InputFormatError
from roomdirectory.room_types import RoomType
from roomdirectory.seeding import SeedPipeline, preview_seed, run_seed
from roomdirectory.seeding.validation import RejectionReason


def _count(session: Session, model: type) -> int:
    return session.scalar(select(func.count()).select_from(model)) or 0


def _room(session: Session, abbrev: str, number: str) -> Room:
    return session.scalars(
        select(Room)
        .join(Room.building)
        .where(Building.abbreviation == abbrev, Room.room_number == number)
    ).one()


def _room_feature(session: Session, room: Room, feature_name: str) -> RoomFeature | None:
    return session.scalars(
        select(RoomFeature)
        .join(RoomFeature.feature)
        .where(RoomFeature.room_id == room.id, Feature.name == feature_name)
    ).one_or_none()


class TestSeedPipeline:
    """Tests for SeedPipeline.run."""

    def test_counts(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test buildings, features and rooms created from sample rows."""
        result = SeedPipeline(session).run(sample_rows)

        assert result.n_rows == 4
        assert result.n_buildings == 2
        # projector, whiteboard, hdmi, workstation, speakers + tables, chairs
        assert result.n_features == 7
        assert result.n_rooms == 3
        assert len(result.skipped) == 1
        assert _count(session, Building) == 2
        assert _count(session, Feature) == 7
        assert _count(session, Room) == 3

    def test_one_building_per_abbreviation(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that the first row's building name is kept."""
        SeedPipeline(session).run(sample_rows)

        buildings = session.scalars(
            select(Building).where(Building.abbreviation == "SCI")
        ).all()
        assert len(buildings) == 1
        assert buildings[0].name == "Science Center"

    def test_invalid_room_type_skipped(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that rows with unknown room types create no room."""
        result = SeedPipeline(session).run(sample_rows)

        skipped = result.skipped[0]
        assert skipped.row_number == 4
        assert skipped.room_number == "102"
        assert skipped.rejection is not None
        assert skipped.rejection.reason is RejectionReason.INVALID_ROOM_TYPE
        assert skipped.rejection.value == "storage"
        assert result.n_rooms == result.n_rows - len(result.skipped)
        assert session.scalars(
            select(Room).where(Room.room_number == "102")
        ).first() is None

    def test_invalid_floor_skipped(self, session: Session) -> None:
        """Test that rows with a non-numeric floor create no room."""
        rows = [make_row(room_number="1"), make_row(room_number="2", floor="G")]

        result = SeedPipeline(session).run(rows)

        assert result.n_rooms == 1
        assert result.skipped[0].rejection is not None
        assert result.skipped[0].rejection.reason is RejectionReason.INVALID_FLOOR

    def test_oversized_numbers_do_not_abort(self, session: Session) -> None:
        """Test that out-of-range numbers are coerced or rejected per row."""
        rows = [
            make_row(
                room_number="1",
                chair_qty="99999999999999999999",
                table_qty="99999999999999999999",
            ),
            make_row(room_number="2", floor="99999999999999999999"),
            make_row(room_number="3"),
        ]

        result = SeedPipeline(session).run(rows)

        assert result.n_rooms == 2
        assert [o.room_number for o in result.skipped] == ["2"]
        assert result.skipped[0].rejection is not None
        assert result.skipped[0].rejection.reason is RejectionReason.INVALID_FLOOR

        room = _room(session, "SCI", "1")
        assert room.capacity == 0
        chairs = _room_feature(session, room, "Chairs")
        tables = _room_feature(session, room, "Tables")
        assert chairs is not None
        assert chairs.quantity == 1
        assert tables is not None
        assert tables.quantity == 1

    def test_tables_association(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test table quantity and details."""
        SeedPipeline(session).run(sample_rows)

        link = _room_feature(session, _room(session, "SCI", "101"), "Tables")
        assert link is not None
        assert link.quantity == 3
        assert link.details == "3, round"

    def test_chairs_association_and_capacity(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test chairs without a seating type set capacity and null details."""
        SeedPipeline(session).run(sample_rows)

        room = _room(session, "SCI", "101")
        link = _room_feature(session, room, "Chairs")
        assert link is not None
        assert link.quantity == 25
        assert link.details is None
        assert room.capacity == 25

    def test_chair_type_details(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that the chair type becomes the association details."""
        SeedPipeline(session).run(sample_rows)

        link = _room_feature(session, _room(session, "SCI", "B05"), "Chairs")
        assert link is not None
        assert link.details == "rolling"

    def test_basement_floor(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that floor "-1" is stored as -1."""
        SeedPipeline(session).run(sample_rows)

        room = _room(session, "SCI", "B05")
        assert room.floor == -1
        assert room.room_type is RoomType.COMPUTER_LAB

    def test_whiteboard_flags(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test whiteboard "yes" attaches one and "no" attaches none."""
        SeedPipeline(session).run(sample_rows)

        with_board = _room_feature(session, _room(session, "SCI", "101"), "Whiteboard")
        without_board = _room_feature(
            session, _room(session, "SCI", "B05"), "Whiteboard"
        )
        assert with_board is not None
        assert with_board.quantity == 1
        assert without_board is None

    def test_optional_fields(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that empty optional cells are stored as NULL."""
        SeedPipeline(session).run(sample_rows)

        stage = _room(session, "ART", "200")
        assert stage.display_name == "Main Stage"
        assert stage.notes == "Piano on stage"
        assert stage.capacity == 0
        assert stage.floor == 0

        plain = _room(session, "SCI", "101")
        assert plain.display_name is None
        assert plain.notes is None
        assert plain.photo_front is None
        assert plain.photo_back is None

    def test_room_without_features(self, session: Session) -> None:
        """Test that a row with no features inserts no associations."""
        result = SeedPipeline(session).run([make_row()])

        assert result.n_rooms == 1
        assert result.outcomes[0].n_features == 0
        assert _count(session, RoomFeature) == 0

    def test_tables_and_chairs_always_exist(self, session: Session) -> None:
        """Test that Tables and Chairs are created even when unused."""
        result = SeedPipeline(session).run([make_row()])

        names = set(session.scalars(select(Feature.name)).all())
        assert names == {"Tables", "Chairs"}
        assert result.n_features == 2

    def test_empty_input(self, session: Session) -> None:
        """Test a run with no rows."""
        result = SeedPipeline(session).run([])

        assert result.n_buildings == 0
        assert result.n_rooms == 0
        assert result.n_features == 2

    def test_associations_reference_created_rows(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that every association points at a room and feature from this run."""
        result = SeedPipeline(session).run(sample_rows)

        room_ids = {o.room_id for o in result.outcomes if o.room_id}
        feature_ids = set(result.feature_ids.values())
        for link in session.scalars(select(RoomFeature)).all():
            assert link.room_id in room_ids
            assert link.feature_id in feature_ids

    def test_rerun_duplicates(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that a second run appends duplicates instead of upserting."""
        SeedPipeline(session).run(sample_rows)
        SeedPipeline(session).run(sample_rows)

        assert _count(session, Building) == 4
        assert _count(session, Feature) == 14
        assert _count(session, Room) == 6

    def test_custom_id_factory(self, session: Session) -> None:
        """Test that ids come from the injected factory."""
        ids = iter(f"id-{n}" for n in range(100))

        result = SeedPipeline(session, id_factory=lambda: next(ids)).run([make_row()])

        assert result.building_ids == {"SCI": "id-0"}
        assert result.feature_ids == {"tables": "id-1", "chairs": "id-2"}
        assert result.outcomes[0].room_id == "id-3"

    def test_unique_ids(
        self, session: Session, sample_rows: list[dict[str, str]]
    ) -> None:
        """Test that generated ids do not repeat across tables."""
        result = SeedPipeline(session).run(sample_rows)

        ids = [
            *result.building_ids.values(),
            *result.feature_ids.values(),
            *(o.room_id for o in result.outcomes if o.room_id),
        ]
        assert len(ids) == len(set(ids))


class TestPreviewSeed:
    """Tests for preview_seed."""

    def test_outcomes(self, sample_rows: list[dict[str, str]]) -> None:
        """Test preview statuses without a database."""
        outcomes = preview_seed(sample_rows)

        assert [o.status for o in outcomes] == [
            "created",
            "created",
            "created",
            "skipped",
        ]
        assert outcomes[0].room_id is None
        # projector, whiteboard, hdmi, tables, chairs
        assert outcomes[0].n_features == 5


class TestRunSeed:
    """Tests for the run_seed entry point."""

    def test_end_to_end(
        self,
        seed_config: SeedConfig,
        write_csv: Callable[..., Path],
        sample_rows: list[dict[str, str]],
        session: Session,
    ) -> None:
        """Test seeding from a CSV file into a fresh database."""
        write_csv(sample_rows)

        result = run_seed(seed_config)

        assert result.n_rooms == 3
        assert _count(session, Room) == 3

    def test_creates_tables(
        self,
        tmp_path: Path,
        write_csv: Callable[..., Path],
        sample_rows: list[dict[str, str]],
    ) -> None:
        """Test that missing tables are created before seeding."""
        path = write_csv(sample_rows)
        config = SeedConfig(
            input=InputConfig(path=path),
            database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'fresh.db'}"),
        )

        result = run_seed(config)

        assert result.n_buildings == 2

    def test_missing_input(self, seed_config: SeedConfig) -> None:
        """Test that a missing input file is fatal and creates no database."""
        with pytest.raises(FileNotFoundError):
            run_seed(seed_config)

        assert not (seed_config.input_path.parent / "rooms.db").exists()

    def test_unparseable_input(
        self, seed_config: SeedConfig, session: Session
    ) -> None:
        """Test that a malformed input file is fatal and writes nothing."""
        seed_config.input_path.write_text("room_number\n101\n", encoding="utf-8")

        with pytest.raises(InputFormatError):
            run_seed(seed_config)

        assert _count(session, Building) == 0
