"""
Card type selection for review sessions.
"""

import random
from typing import Any, List, Optional

from ..models import ActionType, clamp_level


CARD_TYPE_DESCRIPTIONS = {
    0: 'Word Recognition',
    1: 'Translation Recognition',
    2: 'Context with Blank (Original)',
    3: 'Context with Blank (Translation)',
    4: 'Context with Selection (Original)',
    5: 'Context with Selection (Translation)',
}

# Card types mixed in once an item is past the last dedicated type
ADVANCED_CARD_TYPES = (2, 3, 5)


def card_type_for_level(level: Any, rng: Optional[random.Random] = None) -> int:
    """
    Card type to show for an item at ``level``.

    Levels up to 5 have their own card type; higher levels pick one of the
    context card types at random.
    """
    level = clamp_level(level)
    if level <= max(CARD_TYPE_DESCRIPTIONS):
        return level
    return (rng or random).choice(ADVANCED_CARD_TYPES)


def word_hints(word: str, rng: Optional[random.Random] = None) -> List[str]:
    """Letters of a word, lowercased and shuffled."""
    letters = list(word.lower())
    (rng or random).shuffle(letters)
    return letters


def history_label(level: Any, action_type: Any = ActionType.CARD) -> str:
    """
    Label stored with a history entry, e.g. ``"Word Recognition (card)"``.

    ``ActionType.parse`` reads the action back out of this form.
    """
    description = CARD_TYPE_DESCRIPTIONS.get(clamp_level(level), 'Unknown Type')
    return f"{description} ({ActionType.parse(action_type).value})"
