"""
Declarative feature catalog.

Each flag or quantity column in the seed CSV maps to one canonical
feature. Tables and chairs are defined separately because their columns
carry details (dimensions, seating type) alongside the quantity.
"""

from dataclasses import dataclass
from enum import Enum


class FeatureCategory(str, Enum):
    """Grouping used when displaying room features."""

    DISPLAY = "display"
    AUDIO = "audio"
    CONNECTIVITY = "connectivity"
    FURNITURE = "furniture"
    CHARACTERISTICS = "characteristics"


@dataclass(frozen=True)
class FeatureSpec:
    """
    Definition of a catalog feature.

    Attributes:
        name: Canonical feature name stored in the features table.
        category: Display category.
    """

    name: str
    category: FeatureCategory


# Column key -> feature. Order defines creation order within a row.
FEATURE_CATALOG: dict[str, FeatureSpec] = {
    "projector_qty": FeatureSpec("Projector", FeatureCategory.DISPLAY),
    "tv_qty": FeatureSpec("TV/Monitor", FeatureCategory.DISPLAY),
    "whiteboard": FeatureSpec("Whiteboard", FeatureCategory.DISPLAY),
    "chalkboard": FeatureSpec("Chalkboard", FeatureCategory.DISPLAY),
    "smartboard": FeatureSpec("Smartboard", FeatureCategory.DISPLAY),
    "speaker": FeatureSpec("Speakers", FeatureCategory.AUDIO),
    "microphone": FeatureSpec("Microphone", FeatureCategory.AUDIO),
    "camera": FeatureSpec("Camera", FeatureCategory.AUDIO),
    "hdmi": FeatureSpec("HDMI", FeatureCategory.CONNECTIVITY),
    "vga": FeatureSpec("VGA", FeatureCategory.CONNECTIVITY),
    "usb_c": FeatureSpec("USB-C", FeatureCategory.CONNECTIVITY),
    "presentation_stand": FeatureSpec(
        "Presentation Stand", FeatureCategory.FURNITURE
    ),
    "workstation": FeatureSpec("Workstation", FeatureCategory.FURNITURE),
    "windows": FeatureSpec("Windows", FeatureCategory.CHARACTERISTICS),
    "wash_station": FeatureSpec("Wash Station", FeatureCategory.CHARACTERISTICS),
}

# Keys for the detail-carrying furniture features
TABLES_KEY = "tables"
CHAIRS_KEY = "chairs"

TABLES = FeatureSpec("Tables", FeatureCategory.FURNITURE)
CHAIRS = FeatureSpec("Chairs", FeatureCategory.FURNITURE)

# Features created on every run, whether or not any row uses them
ALWAYS_CREATED: dict[str, FeatureSpec] = {
    TABLES_KEY: TABLES,
    CHAIRS_KEY: CHAIRS,
}


def is_quantity_column(column: str) -> bool:
    """Whether a catalog column holds a count rather than a yes/no flag."""
    return column.endswith("_qty")
