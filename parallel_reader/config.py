"""
Configuration settings for the parallel reader core.
"""

from dataclasses import dataclass
from typing import Dict, Any, Tuple


class Config:
    """Configuration class for application settings."""

    # Review intervals in days, indexed by level
    REVIEW_INTERVALS = (0, 1, 3, 7, 14, 30, 90, 180)
    MIN_LEVEL = 0
    MAX_LEVEL = 7
    FAILURE_SETBACK = 2
    REVIEW_DELAY_DAYS = 1  # exposure-only reviews resurface the next day

    # Tagged bitext settings
    BLANK_LINE_MARKER = "···"
    TOKEN_SPLIT_PATTERN = r"(\s+)"
    GROUP_TAG_PATTERN = r"/(\d+)/"
    GROUP_STRIP_PATTERN = r"/\d+/"

    # Learning phase: counters given to cards that have no stored info
    DEFAULT_LEARNING_COUNTER = 2


@dataclass
class SchedulerConfig:
    """Configuration for a review scheduler."""

    intervals: Tuple[int, ...] = Config.REVIEW_INTERVALS
    failure_setback: int = Config.FAILURE_SETBACK
    review_delay_days: int = Config.REVIEW_DELAY_DAYS

    def __post_init__(self):
        """Normalise and check the interval table."""
        self.intervals = tuple(int(days) for days in self.intervals)

        if not self.intervals:
            raise ValueError("Interval table must not be empty")
        if any(days < 0 for days in self.intervals):
            raise ValueError(f"Intervals must be non-negative: {self.intervals}")
        if self.failure_setback < 0:
            raise ValueError(f"failure_setback must be non-negative: {self.failure_setback}")
        if self.review_delay_days < 0:
            raise ValueError(f"review_delay_days must be non-negative: {self.review_delay_days}")

    def interval_for(self, level: int) -> int:
        """Days until the next review for a level; out-of-range levels are clamped."""
        index = max(0, min(level, len(self.intervals) - 1))
        return self.intervals[index]

    def get_config_summary(self) -> Dict[str, Any]:
        """Get a summary of current configuration."""
        return {
            "intervals": list(self.intervals),
            "failure_setback": self.failure_setback,
            "review_delay_days": self.review_delay_days,
        }


# Default scheduler configuration instance
default_scheduler_config = SchedulerConfig()
