"""
Room feature catalog.

Maps raw CSV columns to canonical feature names and categories.
"""

from roomdirectory.features.catalog import (
    CHAIRS,
    FEATURE_CATALOG,
    TABLES,
    FeatureCategory,
    FeatureSpec,
)

__all__ = ["CHAIRS", "FEATURE_CATALOG", "TABLES", "FeatureCategory", "FeatureSpec"]
