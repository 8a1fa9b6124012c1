"""Sleep statistics engine: turns a set of sleep logs into SleepAverages.

Design principles:
    1. Pure function: accepts logs and a date range, returns SleepAverages.
    2. No side effects, no I/O, no shared state; safe to call concurrently.
    3. Never raises a domain error.  An empty collection is a valid input
       and yields the "no data" aggregate.
    4. Logs are trusted: the wake-after-bed invariant was enforced when
       each SleepLog was built and is not re-checked here.
    5. The caller selected the logs for the window; ``from_date`` and
       ``to_date`` are echoed, never used for filtering.

Statistics:
    - average_time_in_bed:  sum(wake - bed) // count         (linear)
    - average_bed_time:     circular mean of bed clock times  (circular)
    - average_wake_time:    circular mean of wake clock times (circular)
    - frequencies:          count per MorningFeeling, zero counts omitted
"""

from __future__ import annotations

from collections import Counter
from datetime import date, timedelta
from typing import Collection

from sleep_tracker.core.circular import mean_time_of_day
from sleep_tracker.domain.averages import SleepAverages
from sleep_tracker.domain.enums import MorningFeeling
from sleep_tracker.domain.sleep_log import SleepLog


def aggregate(
    sleep_logs: Collection[SleepLog],
    from_date: date,
    to_date: date,
) -> SleepAverages:
    """Summarise *sleep_logs* for the ``(from_date, to_date]`` window."""
    if not sleep_logs:
        return SleepAverages(from_date=from_date, to_date=to_date)

    return SleepAverages(
        from_date=from_date,
        to_date=to_date,
        average_time_in_bed=_average_time_in_bed(sleep_logs),
        average_bed_time=mean_time_of_day(log.bed_time.time() for log in sleep_logs),
        average_wake_time=mean_time_of_day(log.wake_time.time() for log in sleep_logs),
        morning_feeling_frequencies=_morning_feeling_frequencies(sleep_logs),
    )


# ── Helpers ──────────────────────────────────────────────────────────────────

def _average_time_in_bed(sleep_logs: Collection[SleepLog]) -> timedelta:
    total = sum((log.time_in_bed for log in sleep_logs), timedelta(0))
    return total // len(sleep_logs)


def _morning_feeling_frequencies(sleep_logs: Collection[SleepLog]) -> dict[MorningFeeling, int]:
    counts = Counter(log.morning_feeling for log in sleep_logs)
    # Declaration order keeps the mapping stable regardless of input order.
    return {feeling: counts[feeling] for feeling in MorningFeeling if counts[feeling]}
