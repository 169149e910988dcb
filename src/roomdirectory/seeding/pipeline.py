"""
Seeding pipeline implementation.

Loads the room CSV into the database in four dependent phases:
buildings, features, rooms, room features. Later phases reference ids
created by earlier ones.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from sqlalchemy.orm import Session

from roomdirectory.config.settings import SeedConfig
from roomdirectory.database.models import Building, Feature, Room, RoomFeature
from roomdirectory.database.session import create_db_engine, create_schema, session_scope
from roomdirectory.features.catalog import ALWAYS_CREATED, FEATURE_CATALOG
from roomdirectory.ingestion.room_data import RoomRow, load_room_rows
from roomdirectory.normalization.values import optional_text
from roomdirectory.seeding.associations import build_assignments
from roomdirectory.seeding.dedup import collect_buildings, collect_feature_keys
from roomdirectory.seeding.validation import RowRejection, RowValidator, ValidRow
from roomdirectory.utils.identifiers import generate_id
from roomdirectory.utils.logging import get_logger, log_context

log = get_logger(__name__)

OutcomeStatus = Literal["created", "skipped"]


@dataclass(frozen=True)
class RowOutcome:
    """
    What happened to one input row.

    Attributes:
        row_number: 1-based position among the data rows.
        building_abbrev: Building abbreviation of the row.
        room_number: Room number of the row.
        status: 'created' or 'skipped'.
        room_id: Id of the created room.
        n_features: Number of features attached to the created room.
        rejection: Why the row was skipped.
    """

    row_number: int
    building_abbrev: str
    room_number: str
    status: OutcomeStatus
    room_id: str | None = None
    n_features: int = 0
    rejection: RowRejection | None = None


@dataclass
class SeedResult:
    """
    Result of a seeding run.

    Attributes:
        n_rows: Number of input rows.
        building_ids: Abbreviation -> id for buildings created this run.
        feature_ids: Feature key -> id for features created this run.
        outcomes: One outcome per input row, in file order.
    """

    n_rows: int
    building_ids: dict[str, str] = field(default_factory=dict)
    feature_ids: dict[str, str] = field(default_factory=dict)
    outcomes: list[RowOutcome] = field(default_factory=list)

    @property
    def n_buildings(self) -> int:
        return len(self.building_ids)

    @property
    def n_features(self) -> int:
        return len(self.feature_ids)

    @property
    def n_rooms(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "created")

    @property
    def skipped(self) -> list[RowOutcome]:
        """Outcomes of rows that were not loaded."""
        return [o for o in self.outcomes if o.status == "skipped"]


class SeedPipeline:
    """
    Sequential loader for room seed rows.

    Every insert is committed on its own; there is no run-wide
    transaction. Rejected rows are logged and skipped. Database errors
    propagate and end the run.
    """

    def __init__(
        self,
        session: Session,
        *,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        """
        Initialize seed pipeline.

        Args:
            session: Open database session, owned by the caller.
            id_factory: Source of new record identifiers.
        """
        self.session = session
        self.id_factory = id_factory

    def run(self, rows: Sequence[RoomRow]) -> SeedResult:
        """
        Load all rows.

        Args:
            rows: Seed rows in file order.

        Returns:
            SeedResult with created ids and per-row outcomes.
        """
        log.info("Starting database seed", n_rows=len(rows))
        result = SeedResult(n_rows=len(rows))

        log.info("Phase 1: Creating buildings")
        result.building_ids = self._create_buildings(rows)

        log.info("Phase 2: Creating features")
        result.feature_ids = self._create_features(rows)

        log.info("Phase 3: Creating rooms and room features")
        validator = RowValidator(result.building_ids)
        for row_number, row in enumerate(rows, start=1):
            result.outcomes.append(
                self._process_row(row_number, row, validator, result.feature_ids)
            )

        log.info(
            "Seed complete",
            n_buildings=result.n_buildings,
            n_features=result.n_features,
            n_rooms=result.n_rooms,
            n_skipped=len(result.skipped),
        )
        return result

    def _create_buildings(self, rows: Sequence[RoomRow]) -> dict[str, str]:
        """Insert one building per distinct abbreviation."""
        records = collect_buildings(rows)
        log.info("Creating buildings", n_buildings=len(records))

        building_ids: dict[str, str] = {}
        for record in records:
            building_id = self.id_factory()
            self.session.add(
                Building(
                    id=building_id,
                    name=record.name,
                    abbreviation=record.abbreviation,
                )
            )
            self.session.commit()
            building_ids[record.abbreviation] = building_id
            log.info(
                "Created building", name=record.name, abbreviation=record.abbreviation
            )
        return building_ids

    def _create_features(self, rows: Sequence[RoomRow]) -> dict[str, str]:
        """Insert the catalog features in use, then tables and chairs."""
        feature_ids: dict[str, str] = {}

        # Tables and chairs come from ALWAYS_CREATED below
        keys = [k for k in collect_feature_keys(rows) if k in FEATURE_CATALOG]
        specs = [(k, FEATURE_CATALOG[k]) for k in keys]
        specs.extend(ALWAYS_CREATED.items())

        for key, spec in specs:
            feature_id = self.id_factory()
            self.session.add(
                Feature(id=feature_id, name=spec.name, category=spec.category)
            )
            self.session.commit()
            feature_ids[key] = feature_id
            log.info("Created feature", name=spec.name, category=spec.category.value)
        return feature_ids

    def _process_row(
        self,
        row_number: int,
        row: RoomRow,
        validator: RowValidator,
        feature_ids: dict[str, str],
    ) -> RowOutcome:
        """Validate one row and insert its room and room features."""
        abbrev = row.get("building_abbrev", "")
        room_number = row.get("room_number", "")

        with log_context(building=abbrev, room=room_number):
            validation = validator.validate(row)
            if isinstance(validation, RowRejection):
                log.error(
                    "Skipping row",
                    reason=validation.reason.value,
                    detail=validation.message,
                    row_number=row_number,
                )
                return RowOutcome(
                    row_number=row_number,
                    building_abbrev=abbrev,
                    room_number=room_number,
                    status="skipped",
                    rejection=validation,
                )

            room_id = self._insert_room(validation)
            n_features = self._insert_room_features(room_id, row, feature_ids)
            log.info("Created room", room_id=room_id, n_features=n_features)

        return RowOutcome(
            row_number=row_number,
            building_abbrev=abbrev,
            room_number=room_number,
            status="created",
            room_id=room_id,
            n_features=n_features,
        )

    def _insert_room(self, valid: ValidRow) -> str:
        row = valid.row
        room_id = self.id_factory()
        room = Room(
            id=room_id,
            building_id=valid.building_id,
            room_number=valid.room_number,
            display_name=optional_text(row.get("room_display_name")),
            room_type=valid.room_type,
            capacity=valid.capacity,
            floor=valid.floor,
            notes=optional_text(row.get("notes")),
            photo_front=optional_text(row.get("photo_front")),
            photo_back=optional_text(row.get("photo_back")),
        )
        self.session.add(room)
        self.session.commit()
        return room_id

    def _insert_room_features(
        self, room_id: str, row: RoomRow, feature_ids: dict[str, str]
    ) -> int:
        """Batch-insert the room's features; returns how many were inserted."""
        links = [
            RoomFeature(
                room_id=room_id,
                feature_id=feature_ids[a.feature_key],
                quantity=a.quantity,
                details=a.details,
            )
            for a in build_assignments(row)
            if a.feature_key in feature_ids
        ]
        if not links:
            return 0

        self.session.add_all(links)
        self.session.commit()
        return len(links)


def run_seed(config: SeedConfig) -> SeedResult:
    """
    Convenience function to run the seeding pipeline.

    Reads the input file, then opens the configured database, creates
    missing tables when enabled and loads the rows. Nothing touches the
    database when the input cannot be read. The session and engine are
    released on every exit path.

    Args:
        config: Seed configuration.

    Returns:
        SeedResult with counts and per-row outcomes.

    Raises:
        FileNotFoundError: If the input file does not exist.
        InputFormatError: If the input cannot be parsed.
        sqlalchemy.exc.SQLAlchemyError: If a database call fails.
    """
    rows = load_room_rows(config)

    engine = create_db_engine(config.database)
    try:
        if config.database.create_tables:
            create_schema(engine)
        with session_scope(engine) as session:
            return SeedPipeline(session).run(rows)
    finally:
        engine.dispose()


def preview_seed(rows: Sequence[RoomRow]) -> list[RowOutcome]:
    """
    Outcomes a seed run would produce, without touching the database.

    Buildings get placeholder ids; rooms that would be created carry no id.

    Args:
        rows: Seed rows in file order.

    Returns:
        One outcome per row, in file order.
    """
    building_ids = {b.abbreviation: generate_id() for b in collect_buildings(rows)}
    validator = RowValidator(building_ids)

    outcomes: list[RowOutcome] = []
    for row_number, row in enumerate(rows, start=1):
        validation = validator.validate(row)
        if isinstance(validation, RowRejection):
            outcomes.append(
                RowOutcome(
                    row_number=row_number,
                    building_abbrev=validation.building_abbrev,
                    room_number=validation.room_number,
                    status="skipped",
                    rejection=validation,
                )
            )
        else:
            outcomes.append(
                RowOutcome(
                    row_number=row_number,
                    building_abbrev=validation.building_abbrev,
                    room_number=validation.room_number,
                    status="created",
                    n_features=len(build_assignments(row)),
                )
            )
    return outcomes
