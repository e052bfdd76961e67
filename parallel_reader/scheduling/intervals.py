"""
Review interval table and calendar-day arithmetic.

All comparisons are by calendar day. Time of day never matters, and aware
timestamps count on their UTC day.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional

from ..config import SchedulerConfig, default_scheduler_config
from ..models import ActionType, clamp_level


logger = logging.getLogger(__name__)


def to_naive_utc(value: Any) -> Optional[datetime]:
    """
    Comparable naive datetime for dates, datetimes and ISO 8601 strings.

    Aware values are converted to UTC before the offset is dropped. Dates
    become midnight. Anything unreadable gives None.
    """
    if isinstance(value, str):
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            logger.debug(f"Unreadable review date: {value!r}")
            return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                return value.astimezone(timezone.utc).replace(tzinfo=None)
            except OverflowError:
                return value.replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    return None


def to_day(value: Any) -> Optional[date]:
    """
    Truncate a timestamp to its calendar day.

    Accepts dates, datetimes and ISO 8601 strings. Anything unreadable
    gives None, which callers treat as "never reviewed".
    """
    moment = to_naive_utc(value)
    return moment.date() if moment is not None else None


def interval_for_level(level: Any, config: SchedulerConfig = default_scheduler_config) -> int:
    """Days between reviews at a level. Levels past the table use its last entry."""
    return config.interval_for(clamp_level(level))


def next_review_date(last_repeat: Any, level: Any,
                     action_type: Any = ActionType.CARD,
                     config: SchedulerConfig = default_scheduler_config) -> Optional[date]:
    """
    Calendar day an item becomes due again.

    An exposure-only review always brings the item back after
    ``review_delay_days``, whatever its level. Returns None when
    ``last_repeat`` is missing or unreadable.
    """
    last_day = to_day(last_repeat)
    if last_day is None:
        return None

    if ActionType.parse(action_type) is ActionType.REVIEW:
        days = config.review_delay_days
    else:
        days = interval_for_level(level, config)

    try:
        return last_day + timedelta(days=days)
    except OverflowError:
        return date.max
