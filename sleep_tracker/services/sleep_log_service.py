"""SleepLogService: the use cases behind the sleep-log endpoints.

Wires request validation, the SleepLogStore and the statistics engine
together.  Raises domain errors only; the API layer turns them into
HTTP responses.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from pydantic import ValidationError

from sleep_tracker.core.statistics_engine import aggregate
from sleep_tracker.domain.averages import SleepAverages
from sleep_tracker.domain.errors import (
    DuplicateSleepLogError,
    InvalidSleepLogError,
    SleepLogNotFoundError,
    first_error_message,
)
from sleep_tracker.domain.sleep_log import CreateSleepLogRequest, SleepLog
from sleep_tracker.foundation.clock import today
from sleep_tracker.store.sleep_log_store import SleepLogStore

logger = logging.getLogger(__name__)


class SleepLogService:
    """Creates sleep logs and answers the two read queries.

    Args:
        store: Where sleep logs are saved and looked up.
        averages_window_days: Default length of the averages window.
    """

    def __init__(self, store: SleepLogStore, averages_window_days: int = 30) -> None:
        if averages_window_days < 1:
            raise ValueError("averages_window_days must be at least 1")
        self._store = store
        self._averages_window_days = averages_window_days

    async def create_sleep_log(self, user_id: int, request: CreateSleepLogRequest) -> SleepLog:
        """Validate and store last night's sleep for *user_id*.

        Raises:
            InvalidSleepLogError: wake time is not after bed time.
            DuplicateSleepLogError: a log already exists for the wake-up date.
        """
        try:
            sleep_log = SleepLog.from_request(user_id, request)
        except ValidationError as exc:
            message = first_error_message(exc.errors())
            logger.info("Rejected sleep log for user %d: %s", user_id, message)
            raise InvalidSleepLogError(message) from exc

        try:
            return await self._store.save(sleep_log)
        except DuplicateSleepLogError:
            logger.info("Duplicate sleep log for user %d on %s", user_id, sleep_log.sleep_date)
            raise

    async def get_last_night_sleep(self, user_id: int) -> SleepLog:
        """Return the log attributed to today (the night that just ended).

        Raises:
            SleepLogNotFoundError: nothing was logged for today.
        """
        day = today()
        sleep_log = await self._store.find_by_user_and_date(user_id, day)
        if sleep_log is None:
            raise SleepLogNotFoundError(
                f"No sleep log found for user {user_id} on {day.isoformat()}"
            )
        return sleep_log

    async def get_averages(self, user_id: int, days: int | None = None) -> SleepAverages:
        """Aggregate the user's logs over ``(today - days, today]``."""
        days = days or self._averages_window_days
        to_date = today()
        from_date = to_date - timedelta(days=days)
        sleep_logs = await self._store.find_by_user_and_date_range(user_id, from_date, to_date)
        return aggregate(sleep_logs, from_date, to_date)
