"""In-memory SleepLog store with async-safe access.

Design notes:
    - An asyncio.Lock guards all reads and mutations so concurrent request
      handlers never observe a half-written index.
    - Each user has at most one log per sleep date.  A second save for the
      same (user_id, sleep_date) raises DuplicateSleepLogError.
    - The store assigns ``id`` and ``created_at``; callers hand in unsaved
      logs and get the stored copy back.
    - The store does NOT compute statistics.  It only answers
      "which logs fall on this date / in this window".
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from uuid import UUID

from sleep_tracker.domain.errors import DuplicateSleepLogError
from sleep_tracker.domain.sleep_log import SleepLog
from sleep_tracker.foundation.clock import utc_now
from sleep_tracker.foundation.identifiers import new_id

logger = logging.getLogger(__name__)

# The key type of the per-user date index.
DateKey = tuple[int, date]


class SleepLogStore:
    """Async-safe, in-memory store for SleepLogs."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._logs: dict[UUID, SleepLog] = {}
        self._date_index: dict[DateKey, UUID] = {}

    # ── Public API ───────────────────────────────────────────────────────

    async def save(self, sleep_log: SleepLog) -> SleepLog:
        """Persist *sleep_log* and return the stored copy with id/created_at set.

        Raises:
            DuplicateSleepLogError: the user already has a log for that date.
        """
        async with self._lock:
            key = (sleep_log.user_id, sleep_log.sleep_date)
            if key in self._date_index:
                raise DuplicateSleepLogError(
                    f"Sleep log already exists for user {sleep_log.user_id} "
                    f"on {sleep_log.sleep_date.isoformat()}"
                )

            stored = sleep_log.model_copy(update={"id": new_id(), "created_at": utc_now()})
            self._logs[stored.id] = stored
            self._date_index[key] = stored.id
            logger.info(
                "Saved sleep log %s for user %d on %s",
                stored.id,
                stored.user_id,
                stored.sleep_date,
            )
            return stored

    async def get(self, log_id: UUID) -> SleepLog | None:
        async with self._lock:
            return self._logs.get(log_id)

    async def find_by_user_and_date(self, user_id: int, sleep_date: date) -> SleepLog | None:
        """Return the user's log attributed to *sleep_date*, or None."""
        async with self._lock:
            log_id = self._date_index.get((user_id, sleep_date))
            return self._logs.get(log_id) if log_id is not None else None

    async def find_by_user_and_date_range(
        self,
        user_id: int,
        from_date: date,
        to_date: date,
    ) -> list[SleepLog]:
        """Return the user's logs with ``from_date < sleep_date <= to_date``.

        The lower bound is exclusive and the upper bound inclusive, so
        ``(today - 30 days, today]`` covers exactly 30 nights.  Results are
        ordered by sleep date.
        """
        async with self._lock:
            matches = [
                self._logs[log_id]
                for (uid, sleep_date), log_id in self._date_index.items()
                if uid == user_id and from_date < sleep_date <= to_date
            ]
        matches.sort(key=lambda log: log.sleep_date)
        logger.debug(
            "Found %d sleep log(s) for user %d in (%s, %s]",
            len(matches),
            user_id,
            from_date,
            to_date,
        )
        return matches

    async def count(self) -> int:
        async with self._lock:
            return len(self._logs)
