"""
Identifier generation for new database records.

Identifiers are random UUID4 strings. They need no coordination between
callers and are never derived from row order, so any phase could assign
them in any order.
"""

import uuid


def generate_id() -> str:
    """Return a new random identifier string."""
    return str(uuid.uuid4())
