"""Controlled enumerations for the sleep-tracker domain."""

from __future__ import annotations

from enum import Enum


class MorningFeeling(str, Enum):
    """How the user felt on waking up.

    The engine treats these as labels only; no ordering is implied.
    """

    GOOD = "GOOD"
    OK = "OK"
    BAD = "BAD"
