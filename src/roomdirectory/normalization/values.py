"""
Parsing of raw CSV cell values.

All cells arrive as whitespace-trimmed strings ("" when missing). The
negative markers are matched exactly and case-sensitively: "No" and
"FALSE" count as present.
"""

import re
from dataclasses import dataclass
from enum import Enum

from roomdirectory.features.catalog import is_quantity_column

# Cell values that mean "this room does not have the feature"
ABSENT_MARKERS: frozenset[str] = frozenset({"", "0", "no"})

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Range of the INTEGER columns the parsed values are stored in
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class FlagState(str, Enum):
    """Tri-state outcome of reading a feature cell."""

    ABSENT = "absent"
    PRESENT = "present"
    QUANTITY = "quantity"


@dataclass(frozen=True)
class FlagValue:
    """
    Parsed feature cell.

    Attributes:
        state: Whether the feature is absent, present, or counted.
        quantity: Number of units; 0 when absent, 1 when merely present.
    """

    state: FlagState
    quantity: int = 0

    @property
    def is_present(self) -> bool:
        """True for PRESENT and QUANTITY."""
        return self.state is not FlagState.ABSENT


ABSENT = FlagValue(FlagState.ABSENT)


def is_truthy(value: str | None) -> bool:
    """Whether a cell counts as set (anything except "", "0" and "no")."""
    return value is not None and value not in ABSENT_MARKERS


def parse_leading_int(value: str | None) -> int | None:
    """
    Parse the leading integer of a cell.

    "12" -> 12, "-1" -> -1, "12 seats" -> 12, "abc" -> None, "" -> None.
    Integers outside the 32-bit column range also give None.
    """
    if not value:
        return None
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    number = int(match.group(1))
    if not INT_MIN <= number <= INT_MAX:
        return None
    return number


def parse_flag(column: str, value: str | None) -> FlagValue:
    """
    Read a catalog feature cell.

    Quantity columns (``*_qty``) yield QUANTITY when the cell starts with a
    positive integer, ABSENT when it starts with zero or a negative integer,
    and PRESENT with quantity 1 for any other set value. Flag columns yield
    PRESENT with quantity 1 for any set value.

    Args:
        column: Source column key, e.g. "projector_qty" or "whiteboard".
        value: Trimmed cell value.

    Returns:
        Parsed flag value.
    """
    if not is_truthy(value):
        return ABSENT

    if is_quantity_column(column):
        quantity = parse_leading_int(value)
        if quantity is not None:
            if quantity < 1:
                return ABSENT
            return FlagValue(FlagState.QUANTITY, quantity)

    return FlagValue(FlagState.PRESENT, 1)


def parse_count_or_one(value: str | None) -> int:
    """Leading integer of a count cell, or 1 when missing or below 1."""
    count = parse_leading_int(value)
    if count is None or count < 1:
        return 1
    return count


def parse_capacity(chair_qty: str | None) -> int:
    """Room capacity from the chair count, 0 when it does not parse."""
    capacity = parse_leading_int(chair_qty)
    return capacity if capacity is not None else 0


def optional_text(value: str | None) -> str | None:
    """Empty cells become None."""
    return value or None
