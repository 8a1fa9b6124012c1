"""SleepAverages: the statistical summary of a reporting window.

This is a pure data structure produced by
:func:`sleep_tracker.core.statistics_engine.aggregate`.

Two kinds of average live side by side here:

    - ``average_time_in_bed`` is a linear arithmetic mean of durations.
    - ``average_bed_time`` / ``average_wake_time`` are circular means of
      clock times.

Because a duration lives on a line and a clock time on a circle,
``average_wake_time - average_bed_time`` does not in general equal
``average_time_in_bed``.  The gap grows with the variance of the user's
schedule.  The two are computed independently and must stay that way.
"""

from __future__ import annotations

from datetime import date, time, timedelta
from typing import Optional

from pydantic import BaseModel, Field

from sleep_tracker.domain.enums import MorningFeeling


class SleepAverages(BaseModel):
    """Immutable aggregate over the sleep logs of a ``(from, to]`` window.

    When the window holds no logs, the duration is zero, both clock times
    are ``None`` and the frequency map is empty.
    """

    from_date: date = Field(..., description="Start of the window (exclusive)")
    to_date: date = Field(..., description="End of the window (inclusive)")
    average_time_in_bed: timedelta = Field(default=timedelta(0))
    average_bed_time: Optional[time] = Field(
        None, description="Circular mean of bed times (None if no data)"
    )
    average_wake_time: Optional[time] = Field(
        None, description="Circular mean of wake times (None if no data)"
    )
    morning_feeling_frequencies: dict[MorningFeeling, int] = Field(
        default_factory=dict,
        description="Occurrences per feeling; feelings that never occurred are absent",
    )

    model_config = {"frozen": True}

    @property
    def is_empty(self) -> bool:
        return not self.morning_feeling_frequencies
