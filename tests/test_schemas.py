"""Tests for the response models and their wire format."""

from datetime import date, datetime, time, timedelta

from sleep_tracker.api.schemas import (
    SleepAveragesResponse,
    SleepLogResponse,
    format_clock_time,
    format_iso_duration,
)
from sleep_tracker.domain.averages import SleepAverages
from sleep_tracker.domain.enums import MorningFeeling

from tests.test_sleep_log import _sleep_log


class TestIsoDuration:
    def test_zero(self) -> None:
        assert format_iso_duration(timedelta(0)) == "PT0S"

    def test_hours_and_minutes(self) -> None:
        assert format_iso_duration(timedelta(hours=7, minutes=30)) == "PT7H30M"

    def test_whole_hours(self) -> None:
        assert format_iso_duration(timedelta(hours=8)) == "PT8H"

    def test_hours_not_folded_into_days(self) -> None:
        assert format_iso_duration(timedelta(hours=25, seconds=5)) == "PT25H5S"

    def test_fractional_seconds(self) -> None:
        assert format_iso_duration(timedelta(minutes=1, seconds=2, microseconds=500_000)) == "PT1M2.5S"


class TestClockTime:
    def test_formats_with_seconds(self) -> None:
        assert format_clock_time(time(7, 5)) == "07:05:00"

    def test_none_passes_through(self) -> None:
        assert format_clock_time(None) is None


class TestSleepLogResponse:
    def test_from_sleep_log(self) -> None:
        log = _sleep_log(datetime(2026, 2, 19, 23, 30), datetime(2026, 2, 20, 7, 0))
        body = SleepLogResponse.from_sleep_log(log).model_dump(mode="json", by_alias=True)
        assert body == {
            "sleepDate": "2026-02-20",
            "bedTime": "2026-02-19T23:30:00",
            "wakeTime": "2026-02-20T07:00:00",
            "totalTimeInBed": "PT7H30M",
            "morningFeeling": "GOOD",
        }


class TestSleepAveragesResponse:
    def test_full_averages(self) -> None:
        averages = SleepAverages(
            from_date=date(2026, 1, 22),
            to_date=date(2026, 2, 21),
            average_time_in_bed=timedelta(hours=8),
            average_bed_time=time(23, 15),
            average_wake_time=time(7, 15),
            morning_feeling_frequencies={
                MorningFeeling.GOOD: 15,
                MorningFeeling.OK: 10,
                MorningFeeling.BAD: 3,
            },
        )
        body = SleepAveragesResponse.from_sleep_averages(averages).model_dump(mode="json", by_alias=True)
        assert body == {
            "from": "2026-01-22",
            "to": "2026-02-21",
            "averageTotalTimeInBed": "PT8H",
            "averageBedTime": "23:15:00",
            "averageWakeTime": "07:15:00",
            "morningFeelingFrequencies": {"GOOD": 15, "OK": 10, "BAD": 3},
        }

    def test_empty_averages(self) -> None:
        averages = SleepAverages(from_date=date(2026, 1, 22), to_date=date(2026, 2, 21))
        body = SleepAveragesResponse.from_sleep_averages(averages).model_dump(mode="json", by_alias=True)
        assert body["averageTotalTimeInBed"] == "PT0S"
        assert body["averageBedTime"] is None
        assert body["averageWakeTime"] is None
        assert body["morningFeelingFrequencies"] == {}
