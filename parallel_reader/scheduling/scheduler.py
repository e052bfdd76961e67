"""
Leveled spaced-repetition scheduler.

Items climb one level per correct answer and fall back two levels per wrong
answer, within ``[0, 7]``. Each level maps to a fixed review interval.
Exposure-only reviews ("review" actions) leave the level alone and bring
the item back the next day, and a wrong last answer makes an item due
immediately whatever its interval says.
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from ..config import Config, SchedulerConfig, default_scheduler_config
from ..models import ActionType, HistoryEntry, ReviewItem, clamp_level
from .intervals import next_review_date, to_day, to_naive_utc


logger = logging.getLogger(__name__)


class ReviewScheduler:
    """
    Decides when items are due and how review events change their level.

    Every method is pure: inputs are never mutated, the current day is
    always passed in, and no input raises.
    """

    def __init__(self, config: Optional[SchedulerConfig] = None):
        self.config = config or default_scheduler_config

    def is_due(self, level: Any, last_repeat: Any,
               last_entry: Optional[HistoryEntry], today: Any) -> bool:
        """
        Check whether an item should be shown today.

        Args:
            level: Current level of the item
            last_repeat: When the item was last reviewed, or None if never
            last_entry: Most recent history entry, or None
            today: The current day (date, datetime or ISO string)

        Returns:
            True if the item is due on ``today``
        """
        # A wrong last answer overrides the schedule
        if last_entry is not None and last_entry.success is False:
            return True

        action_type = last_entry.action_type if last_entry is not None else ActionType.CARD
        due_day = next_review_date(last_repeat, level, action_type, self.config)
        if due_day is None:
            return True

        today_day = to_day(today)
        if today_day is None:
            logger.debug(f"Unreadable current day {today!r}, treating item as due")
            return True

        return today_day >= due_day

    def next_level(self, current_level: Any, success: bool,
                   action_type: Any = ActionType.CARD) -> int:
        """
        Level after a review event.

        Exposure-only reviews keep the level. A failure moves back by the
        failure setback (never below 0), a success moves up one (never above
        the maximum level).
        """
        level = clamp_level(current_level)

        if ActionType.parse(action_type) is ActionType.REVIEW:
            return level
        if not success:
            return max(0, level - self.config.failure_setback)
        return min(Config.MAX_LEVEL, level + 1)

    def latest_entry(self, history: Optional[Sequence[HistoryEntry]]) -> Optional[HistoryEntry]:
        """
        Most recent history entry by date.

        History is always ordered by date here rather than trusting storage
        order. Entries with unreadable dates rank below all dated entries;
        among equal dates the later-appended entry wins.
        """
        if not history:
            return None
        _, entry = max(enumerate(history), key=_recency_key)
        return entry

    def is_item_due(self, item: ReviewItem, today: Any) -> bool:
        """Check whether a stored item is due on ``today``."""
        last_entry = self.latest_entry(item.history)
        due = self.is_due(item.level, item.last_repeat, last_entry, today)
        action = ActionType.parse(last_entry.action_type) if last_entry else ActionType.CARD

        logger.debug(
            f"Card: {item.word}, Level: {item.level}, "
            f"Type: {action.value}, "
            f"Last success: {last_entry.success if last_entry else None}, Due: {due}"
        )
        return due

    def due_items(self, items: Optional[Iterable[ReviewItem]], today: Any) -> List[ReviewItem]:
        """Items due on ``today``, in their original order."""
        if items is None:
            logger.warning("No items provided to the review queue")
            return []
        return [item for item in items if self.is_item_due(item, today)]

    def apply_review(self, item: ReviewItem, success: bool,
                     action_type: Any, when: datetime,
                     example_hash: Optional[str] = None) -> ReviewItem:
        """
        Record a review event.

        Returns a new item with its next level, ``last_repeat`` set to
        ``when`` and the event appended to its history. The given item is
        left untouched. The caller supplies ``when``; nothing here reads the
        clock.
        """
        action = ActionType.parse(action_type)

        entry = HistoryEntry(date=when, success=bool(success),
                             action_type=action, example_hash=example_hash)
        new_level = self.next_level(item.level, success, action)

        logger.debug(f"Review of {item.word!r}: level {item.level} -> {new_level} "
                     f"({action.value}, success={bool(success)})")

        return replace(item, level=new_level, last_repeat=when,
                       history=list(item.history) + [entry])


def _recency_key(indexed: Tuple[int, HistoryEntry]) -> Tuple[int, datetime, int]:
    position, entry = indexed
    moment = to_naive_utc(entry.date)
    if moment is None:
        return (0, datetime.min, position)
    return (1, moment, position)


# Shared scheduler instance
default_scheduler = ReviewScheduler()


def is_due(level: Any, last_repeat: Any,
           last_entry: Optional[HistoryEntry], today: Any) -> bool:
    """Due-date decision with the default interval table."""
    return default_scheduler.is_due(level, last_repeat, last_entry, today)


def next_level(current_level: Any, success: bool, action_type: Any = ActionType.CARD) -> int:
    """Level transition with the default settings."""
    return default_scheduler.next_level(current_level, success, action_type)


def due_items(items: Optional[Iterable[ReviewItem]], today: Any) -> List[ReviewItem]:
    """Review queue for ``today`` with the default settings."""
    return default_scheduler.due_items(items, today)
