"""
Roomdirectory: room directory data layer.

This package provides the CSV seeding pipeline that loads buildings,
features and rooms into the database, plus the read-side room queries.
"""

from importlib.metadata import version

__version__ = version("roomdirectory")

__all__ = ["__version__"]
