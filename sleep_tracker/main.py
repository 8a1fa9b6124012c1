"""sleep-tracker: nightly sleep logging and rolling sleep statistics.

This is the application entry point.  It wires the SleepLogStore,
SleepLogService, error handlers and REST endpoints together.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from sleep_tracker.api.errors import register_exception_handlers
from sleep_tracker.api.sleep_log import create_sleep_log_router
from sleep_tracker.config import Settings, settings
from sleep_tracker.services.sleep_log_service import SleepLogService
from sleep_tracker.store.sleep_log_store import SleepLogStore

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)


# ── App ──────────────────────────────────────────────────────────────────────

def create_app(
    store: SleepLogStore | None = None,
    config: Settings | None = None,
) -> FastAPI:
    """Build the application around *store* (a fresh in-memory one by default)."""
    config = config or settings
    store = store or SleepLogStore()
    service = SleepLogService(store, averages_window_days=config.averages_window_days)

    app = FastAPI(
        title=config.app_name,
        description="Nightly sleep logging and rolling sleep statistics",
        version="1.0.0",
        debug=config.debug,
    )
    register_exception_handlers(app)

    # ── Routes ───────────────────────────────────────────────────────────

    app.include_router(create_sleep_log_router(
        service,
        max_window_days=config.max_averages_window_days,
    ))

    # ── Health ───────────────────────────────────────────────────────────

    @app.get("/health")
    async def health() -> dict:
        return {
            "status": "ok",
            "sleep_logs": await store.count(),
            "averages_window_days": config.averages_window_days,
        }

    return app


app = create_app()
