"""
Scheduling module for leveled spaced-repetition review.
"""

from .intervals import to_day, to_naive_utc, interval_for_level, next_review_date
from .scheduler import ReviewScheduler, default_scheduler, is_due, next_level, due_items
from .learning import Exercise, default_card_info, is_learning, record_exercise
from .exercises import CARD_TYPE_DESCRIPTIONS, card_type_for_level, word_hints, history_label

__all__ = [
    'to_day',
    'to_naive_utc',
    'interval_for_level',
    'next_review_date',
    'ReviewScheduler',
    'default_scheduler',
    'is_due',
    'next_level',
    'due_items',
    'Exercise',
    'default_card_info',
    'is_learning',
    'record_exercise',
    'CARD_TYPE_DESCRIPTIONS',
    'card_type_for_level',
    'word_hints',
    'history_label',
]
