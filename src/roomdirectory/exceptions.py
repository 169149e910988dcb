"""Exceptions raised by the seeding pipeline."""


class RoomDirectoryError(Exception):
    """Base class for package errors."""


class InputFormatError(RoomDirectoryError):
    """Seed input exists but cannot be parsed into rows."""
