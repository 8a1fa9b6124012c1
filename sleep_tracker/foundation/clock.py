"""Clock utilities.

This module is the single source of "now" and "today" so tests can
monkey-patch it trivially.
"""

from __future__ import annotations

from datetime import date, datetime, timezone


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


def today() -> date:
    """Return the current local calendar date.

    Sleep logs are attributed to the user's wake-up day, which is a local
    calendar date, so "today" follows the server's local clock.
    """
    return date.today()
