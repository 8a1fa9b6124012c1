"""Response models for the sleep-log endpoints.

Field names go over the wire in camelCase.  Durations are rendered as
ISO-8601 durations (``PT7H30M``, ``PT0S``) and clock times as
``HH:MM:SS``; absent clock times are ``null``.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from sleep_tracker.domain.averages import SleepAverages
from sleep_tracker.domain.enums import MorningFeeling
from sleep_tracker.domain.sleep_log import SleepLog


def format_iso_duration(value: timedelta) -> str:
    """Render *value* as an ISO-8601 time duration, hours not folded into days.

    >>> format_iso_duration(timedelta(hours=7, minutes=30))
    'PT7H30M'
    """
    total_seconds = value.days * 86400 + value.seconds
    if total_seconds == 0 and value.microseconds == 0:
        return "PT0S"

    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    out = "PT"
    if hours:
        out += f"{hours}H"
    if minutes:
        out += f"{minutes}M"
    if value.microseconds:
        out += f"{seconds}.{value.microseconds:06d}".rstrip("0") + "S"
    elif seconds:
        out += f"{seconds}S"
    return out


def format_clock_time(value: Optional[time]) -> Optional[str]:
    return value.strftime("%H:%M:%S") if value is not None else None


_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SleepLogResponse(BaseModel):
    """A single night, as returned after logging and for last night."""

    sleep_date: date
    bed_time: datetime
    wake_time: datetime
    total_time_in_bed: timedelta
    morning_feeling: MorningFeeling

    model_config = _CAMEL

    @field_serializer("total_time_in_bed")
    def serialize_duration(self, value: timedelta) -> str:
        return format_iso_duration(value)

    @classmethod
    def from_sleep_log(cls, sleep_log: SleepLog) -> "SleepLogResponse":
        return cls(
            sleep_date=sleep_log.sleep_date,
            bed_time=sleep_log.bed_time,
            wake_time=sleep_log.wake_time,
            total_time_in_bed=sleep_log.time_in_bed,
            morning_feeling=sleep_log.morning_feeling,
        )


class SleepAveragesResponse(BaseModel):
    """Averages over the reporting window."""

    from_date: date = Field(..., alias="from")
    to_date: date = Field(..., alias="to")
    average_total_time_in_bed: timedelta
    average_bed_time: Optional[time] = None
    average_wake_time: Optional[time] = None
    morning_feeling_frequencies: dict[MorningFeeling, int] = Field(default_factory=dict)

    model_config = _CAMEL

    @field_serializer("average_total_time_in_bed")
    def serialize_duration(self, value: timedelta) -> str:
        return format_iso_duration(value)

    @field_serializer("average_bed_time", "average_wake_time")
    def serialize_clock_time(self, value: Optional[time]) -> Optional[str]:
        return format_clock_time(value)

    @classmethod
    def from_sleep_averages(cls, averages: SleepAverages) -> "SleepAveragesResponse":
        return cls(
            from_date=averages.from_date,
            to_date=averages.to_date,
            average_total_time_in_bed=averages.average_time_in_bed,
            average_bed_time=averages.average_bed_time,
            average_wake_time=averages.average_wake_time,
            morning_feeling_frequencies=dict(averages.morning_feeling_frequencies),
        )
