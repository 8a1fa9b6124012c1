"""Tests for the circular mean utilities."""

import math
from datetime import time

import pytest

from sleep_tracker.core.circular import (
    SECONDS_PER_DAY,
    circular_mean,
    mean_time_of_day,
    seconds_since_midnight,
    time_from_seconds,
)


class TestCircularMean:
    def test_single_value_is_its_own_mean(self) -> None:
        assert circular_mean([90.0], period=360.0) == pytest.approx(90.0)

    def test_compass_headings_wrap_around_north(self) -> None:
        mean = circular_mean([350.0, 10.0], period=360.0)
        # 0 and 360 are the same heading
        assert min(mean, 360.0 - mean) == pytest.approx(0.0, abs=1e-9)

    def test_result_is_never_negative(self) -> None:
        mean = circular_mean([300.0, 320.0], period=360.0)
        assert mean == pytest.approx(310.0)

    def test_day_of_week_period(self) -> None:
        # Saturday (5) and Monday (0) straddle the week boundary; Sunday (6) is between.
        assert circular_mean([5.0, 0.0], period=7.0) == pytest.approx(6.0)

    def test_empty_input_rejected(self) -> None:
        with pytest.raises(ValueError):
            circular_mean([], period=360.0)

    def test_non_positive_period_rejected(self) -> None:
        with pytest.raises(ValueError):
            circular_mean([1.0], period=0.0)

    def test_accepts_generator(self) -> None:
        mean = circular_mean((v for v in [80.0, 100.0]), period=360.0)
        assert mean == pytest.approx(90.0)


class TestClockTimes:
    def test_seconds_since_midnight(self) -> None:
        assert seconds_since_midnight(time(0, 0)) == 0
        assert seconds_since_midnight(time(12, 0)) == SECONDS_PER_DAY // 2
        assert seconds_since_midnight(time(23, 59, 59)) == SECONDS_PER_DAY - 1

    def test_sub_second_precision_dropped(self) -> None:
        assert seconds_since_midnight(time(0, 0, 1, 999_999)) == 1

    def test_time_from_seconds_wraps(self) -> None:
        assert time_from_seconds(SECONDS_PER_DAY) == time(0, 0)
        assert time_from_seconds(3661) == time(1, 1, 1)

    def test_mean_across_midnight(self) -> None:
        assert mean_time_of_day([time(23, 0), time(1, 0)]) == time(0, 0)

    def test_mean_across_noon(self) -> None:
        assert mean_time_of_day([time(11, 0), time(13, 0)]) == time(12, 0)

    def test_mean_rounds_to_nearest_second(self) -> None:
        result = mean_time_of_day([time(7, 0, 0), time(7, 0, 1)])
        assert result.microsecond == 0
        assert result in (time(7, 0, 0), time(7, 0, 1))

    def test_angles_map_to_quarter_turns(self) -> None:
        # 18:00 sits at 3π/2 on the clock face
        mean = circular_mean([18 * 3600], period=SECONDS_PER_DAY)
        assert mean / SECONDS_PER_DAY * 2 * math.pi == pytest.approx(3 * math.pi / 2)
