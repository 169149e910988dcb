"""Tests for building room feature assignments."""

from conftest import make_row

from roomdirectory.features.catalog import CHAIRS_KEY, TABLES_KEY
from roomdirectory.seeding.associations import FeatureAssignment, build_assignments


class TestBuildAssignments:
    """Tests for build_assignments."""

    def test_no_features(self) -> None:
        """Test that a bare row has no assignments."""
        assert build_assignments(make_row()) == []

    def test_whiteboard_yes_and_no(self) -> None:
        """Test yes/no flag columns."""
        assert build_assignments(make_row(whiteboard="yes")) == [
            FeatureAssignment("whiteboard", 1)
        ]
        assert build_assignments(make_row(whiteboard="no")) == []

    def test_quantity_column(self) -> None:
        """Test that counts carry through."""
        assert build_assignments(make_row(projector_qty="2")) == [
            FeatureAssignment("projector_qty", 2)
        ]

    def test_tables_with_details(self) -> None:
        """Test that table details combine count and description."""
        result = build_assignments(make_row(table_qty="3", table_details="round"))
        assert result == [FeatureAssignment(TABLES_KEY, 3, "3, round")]

    def test_tables_without_details(self) -> None:
        """Test table details when only a count is given."""
        result = build_assignments(make_row(table_qty="4"))
        assert result == [FeatureAssignment(TABLES_KEY, 4, "4")]

    def test_tables_zero(self) -> None:
        """Test that a "0" table count still attaches one table."""
        result = build_assignments(make_row(table_qty="0"))
        assert result == [FeatureAssignment(TABLES_KEY, 1, "0")]

    def test_chairs_without_type(self) -> None:
        """Test chairs with no seating type."""
        result = build_assignments(make_row(chair_qty="25"))
        assert result == [FeatureAssignment(CHAIRS_KEY, 25, None)]

    def test_chairs_with_type(self) -> None:
        """Test chairs with a seating type."""
        result = build_assignments(make_row(chair_qty="12", chair_type="stools"))
        assert result == [FeatureAssignment(CHAIRS_KEY, 12, "stools")]

    def test_order(self) -> None:
        """Test catalog features first, then tables, then chairs."""
        row = make_row(
            chair_qty="10", table_qty="2", windows="yes", projector_qty="1"
        )
        keys = [a.feature_key for a in build_assignments(row)]
        assert keys == ["projector_qty", "windows", TABLES_KEY, CHAIRS_KEY]

    def test_quantities_positive(self) -> None:
        """Test that no assignment has a quantity below one."""
        row = make_row(projector_qty="-3", tv_qty="0", table_qty="-1", chair_qty="x")
        assert all(a.quantity >= 1 for a in build_assignments(row))
