"""Application configuration loaded from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "sleep-tracker"
    debug: bool = False
    log_level: str = "INFO"

    # Reporting window for /api/sleep-log/averages
    averages_window_days: int = 30
    max_averages_window_days: int = 365

    model_config = {"env_prefix": "SLEEP_"}


settings = Settings()
