"""REST endpoints for logging sleep and reading it back.

Paths:
    POST /api/sleep-log              log last night's sleep
    GET  /api/sleep-log/last-night   the log attributed to today
    GET  /api/sleep-log/averages     averages over the last N days

The caller is identified by the ``X-User-Id`` header.  Domain errors
raised by the service are rendered by the handlers in
:mod:`sleep_tracker.api.errors`.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Header, Query

from sleep_tracker.api.schemas import SleepAveragesResponse, SleepLogResponse
from sleep_tracker.domain.sleep_log import CreateSleepLogRequest
from sleep_tracker.services.sleep_log_service import SleepLogService

logger = logging.getLogger(__name__)


def create_sleep_log_router(
    service: SleepLogService,
    max_window_days: int = 365,
) -> APIRouter:
    """Factory that wires the sleep-log endpoints to a concrete service."""

    router = APIRouter(prefix="/api/sleep-log", tags=["sleep-log"])

    @router.post("", status_code=201, response_model=SleepLogResponse)
    async def create_sleep_log(
        request: CreateSleepLogRequest,
        user_id: int = Header(..., alias="X-User-Id"),
    ) -> SleepLogResponse:
        sleep_log = await service.create_sleep_log(user_id, request)
        return SleepLogResponse.from_sleep_log(sleep_log)

    @router.get("/last-night", response_model=SleepLogResponse)
    async def get_last_night_sleep(
        user_id: int = Header(..., alias="X-User-Id"),
    ) -> SleepLogResponse:
        sleep_log = await service.get_last_night_sleep(user_id)
        return SleepLogResponse.from_sleep_log(sleep_log)

    @router.get("/averages", response_model=SleepAveragesResponse)
    async def get_averages(
        user_id: int = Header(..., alias="X-User-Id"),
        days: Optional[int] = Query(None, ge=1, le=max_window_days),
    ) -> SleepAveragesResponse:
        """Averages over ``(today - days, today]``; *days* defaults to the configured window."""
        averages = await service.get_averages(user_id, days)
        logger.debug(
            "Averages for user %d over (%s, %s]: %d feeling(s) counted",
            user_id,
            averages.from_date,
            averages.to_date,
            sum(averages.morning_feeling_frequencies.values()),
        )
        return SleepAveragesResponse.from_sleep_averages(averages)

    return router
