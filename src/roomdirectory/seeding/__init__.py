"""
Seeding pipeline for the room directory.

Orchestrates CSV loading, deduplication, row validation and the
phase-ordered database inserts.
"""

from roomdirectory.seeding.pipeline import (
    RowOutcome,
    SeedPipeline,
    SeedResult,
    preview_seed,
    run_seed,
)
from roomdirectory.seeding.reporter import SeedReporter

__all__ = [
    "RowOutcome",
    "SeedPipeline",
    "SeedReporter",
    "SeedResult",
    "preview_seed",
    "run_seed",
]
