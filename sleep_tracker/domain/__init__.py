from sleep_tracker.domain.averages import SleepAverages
from sleep_tracker.domain.enums import MorningFeeling
from sleep_tracker.domain.sleep_log import CreateSleepLogRequest, SleepLog

__all__ = ["CreateSleepLogRequest", "MorningFeeling", "SleepAverages", "SleepLog"]
