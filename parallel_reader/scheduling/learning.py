"""
Learning phase for newly added cards.

Before a card enters spaced review it is drilled with four exercises. Once
each exercise has been passed at least once, passing the final
context-letters exercise graduates the card to reviewing.
"""

import logging
from dataclasses import replace
from enum import Enum
from typing import Optional

from ..config import Config
from ..models import CardInfo, CardStatus, LearningProgress, ReviewItem


logger = logging.getLogger(__name__)


class Exercise(Enum):
    """Learning exercises, in the order a session runs them."""
    WORD_TO_MEANING = "word_to_meaning"
    MEANING_TO_WORD = "meaning_to_word"
    CONTEXT = "context"
    CONTEXT_LETTERS = "context_letters"


def default_card_info(sentence: str = "") -> CardInfo:
    """Info for cards stored without any: already reviewing, all exercises passed."""
    counter = Config.DEFAULT_LEARNING_COUNTER
    return CardInfo(
        status=CardStatus.REVIEWING,
        progress=LearningProgress(counter, counter, counter, counter),
        sentence=sentence,
    )


def is_learning(item: ReviewItem) -> bool:
    return item.info is not None and item.info.status is CardStatus.LEARNING


def record_exercise(info: Optional[CardInfo], exercise: Exercise, success: bool) -> CardInfo:
    """
    Update learning state after one exercise.

    A pass adds one to the exercise counter. A miss wipes all counters and
    puts the card back into learning, then counts the attempted exercise.
    A card with no info starts learning from zero.

    Args:
        info: Current learning state, or None for a brand new card
        exercise: The exercise just attempted
        success: Whether the learner passed it

    Returns:
        New CardInfo; the given one is not modified
    """
    if info is None:
        info = CardInfo()

    if success:
        progress = info.progress
        status = info.status
    else:
        progress = LearningProgress()
        status = CardStatus.LEARNING

    field_name = exercise.value
    progress = replace(progress, **{field_name: getattr(progress, field_name) + 1})

    if (success and exercise is Exercise.CONTEXT_LETTERS
            and status is CardStatus.LEARNING and progress.is_complete()):
        logger.debug("Learning complete, card moves to reviewing")
        status = CardStatus.REVIEWING

    return CardInfo(status=status, progress=progress, sentence=info.sentence)
