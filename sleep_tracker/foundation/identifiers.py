"""ID generation for stored sleep logs."""

from __future__ import annotations

from uuid import uuid4, UUID


def new_id() -> UUID:
    """Generate a new random UUID v4 for a stored record."""
    return uuid4()
