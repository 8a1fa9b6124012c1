"""SleepLog: one night's bed-to-wake interval and how the user felt.

A SleepLog is validated once, at construction, and never mutated after.
Everything downstream (store, statistics engine) relies on the
wake-after-bed invariant holding and never re-checks it.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from sleep_tracker.domain.enums import MorningFeeling

WAKE_BEFORE_BED = "Wake time must be after bed time"


# ── Submission ───────────────────────────────────────────────────────────────

class CreateSleepLogRequest(BaseModel):
    """What a user submits for last night's sleep."""

    bed_time: datetime = Field(..., description="When the user went to bed")
    wake_time: datetime = Field(..., description="When the user got out of bed")
    morning_feeling: MorningFeeling

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# ── Sleep Log ────────────────────────────────────────────────────────────────

class SleepLog(BaseModel):
    """A stored sleep session, attributed to the calendar date of waking up.

    ``id`` and ``created_at`` are assigned by the store and are ``None``
    on records that have not been saved yet.
    """

    id: Optional[UUID] = None
    user_id: int
    sleep_date: date = Field(..., description="Calendar date the session is attributed to")
    bed_time: datetime
    wake_time: datetime
    morning_feeling: MorningFeeling
    created_at: Optional[datetime] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def wake_must_follow_bed(self) -> "SleepLog":
        if (self.bed_time.tzinfo is None) != (self.wake_time.tzinfo is None):
            raise ValueError("Bed time and wake time must both carry a timezone or neither")
        if self.wake_time <= self.bed_time:
            raise ValueError(WAKE_BEFORE_BED)
        return self

    @classmethod
    def from_request(cls, user_id: int, request: CreateSleepLogRequest) -> "SleepLog":
        """Build an unsaved log; the sleep date is the wake-up day."""
        return cls(
            user_id=user_id,
            sleep_date=request.wake_time.date(),
            bed_time=request.bed_time,
            wake_time=request.wake_time,
            morning_feeling=request.morning_feeling,
        )

    @property
    def time_in_bed(self) -> timedelta:
        return self.wake_time - self.bed_time
