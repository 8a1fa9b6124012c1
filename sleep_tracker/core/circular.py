"""Circular (directional) statistics for periodic quantities.

Clock times wrap around: 23:59 and 00:01 are two minutes apart, not
23 h 58 min.  Summing and dividing gives the wrong answer near the wrap
point, so values are averaged as points on a unit circle instead:

    1. Map each value onto an angle:  angle = value / period * 2π
    2. Take the mean of cos(angle) and the mean of sin(angle) separately
       (the centre of gravity of the points, not the mean of the angles).
    3. Recover the angle with atan2(mean_sin, mean_cos), shifted into
       [0, 2π), and map it back onto the period.

Zero-vector convention:
    When the points cancel out exactly (e.g. two values half a period
    apart) the centroid is the origin and has no direction.  atan2(0, 0)
    is 0, so the mean collapses onto the start of the period.  In
    practice floating-point residue usually leaves a tiny vector that
    points at one of the two antipodal candidates instead.  Either way
    the result is deterministic for identical input, but callers must
    not read meaning into which candidate is returned.
"""

from __future__ import annotations

import math
from datetime import time
from typing import Iterable

TWO_PI = 2 * math.pi
SECONDS_PER_DAY = 24 * 60 * 60


def circular_mean(values: Iterable[float], period: float) -> float:
    """Mean of *values* on a domain that wraps every *period* units.

    Returns a value in ``[0, period]``; the upper bound is only reachable
    through floating-point rounding, so callers that need a strict
    half-open range should reduce modulo *period* after rounding.

    Raises:
        ValueError: if *values* is empty or *period* is not positive.
    """
    if period <= 0:
        raise ValueError("period must be positive")

    sin_sum = 0.0
    cos_sum = 0.0
    count = 0
    for value in values:
        angle = (value / period) * TWO_PI
        sin_sum += math.sin(angle)
        cos_sum += math.cos(angle)
        count += 1

    if count == 0:
        raise ValueError("circular_mean() requires at least one value")

    angle = math.atan2(sin_sum / count, cos_sum / count)
    if angle < 0:
        angle += TWO_PI
    return (angle / TWO_PI) * period


# ── Clock times ──────────────────────────────────────────────────────────────

def seconds_since_midnight(value: time) -> int:
    """Whole seconds elapsed since 00:00; sub-second precision is dropped."""
    return value.hour * 3600 + value.minute * 60 + value.second


def time_from_seconds(seconds: int) -> time:
    seconds %= SECONDS_PER_DAY
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return time(hours, minutes, secs)


def mean_time_of_day(times: Iterable[time]) -> time:
    """Circular mean of clock times on a 24-hour circle, to the nearest second."""
    mean = circular_mean((seconds_since_midnight(t) for t in times), SECONDS_PER_DAY)
    return time_from_seconds(round(mean) % SECONDS_PER_DAY)
