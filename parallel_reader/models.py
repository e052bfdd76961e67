"""
Core data models for the parallel reader.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from .config import Config


DateLike = Union[date, datetime, str]


@dataclass(frozen=True)
class ParsedWord:
    """A single token of one side of a sentence pair, linked to its group."""
    word: str
    sentence_number: int
    word_index: int
    group_number: Optional[int] = None  # None means ungrouped
    linked_indices: Tuple[int, ...] = ()  # same side, same group, self excluded
    linked_words: Tuple[str, ...] = ()
    mirror_indices: Tuple[int, ...] = ()  # opposite side, same group
    mirror_words: Tuple[str, ...] = ()
    is_space: bool = False
    is_translation: bool = False
    raw: str = ""  # token exactly as it appeared in the tagged text

    @property
    def is_grouped(self) -> bool:
        return self.group_number is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialise using the field names of the reader's storage layer."""
        return {
            'word': self.word,
            'sentenceNumber': self.sentence_number,
            'wordIndex': self.word_index,
            'groupNumber': -1 if self.group_number is None else self.group_number,
            'linkeNumber': list(self.linked_indices),
            'wordLinkedNumber': list(self.linked_words),
            'linkedWordMirror': list(self.mirror_indices),
            'wordLinkedWordMirror': list(self.mirror_words),
            'isSpace': self.is_space,
            'isTranslation': self.is_translation,
        }


@dataclass(frozen=True)
class ParsedSentence:
    """Two cross-linked token sequences for one sentence pair."""
    sentence_number: int
    original: Tuple[ParsedWord, ...] = ()
    translation: Tuple[ParsedWord, ...] = ()

    def side(self, is_translation: bool) -> Tuple[ParsedWord, ...]:
        return self.translation if is_translation else self.original

    def words(self) -> List[ParsedWord]:
        """All tokens of both sides, original first."""
        return list(self.original) + list(self.translation)

    def text(self, is_translation: bool = False) -> str:
        """Display text of one side with tags removed."""
        return "".join(word.word for word in self.side(is_translation))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'sentenceNumber': self.sentence_number,
            'original': [word.to_dict() for word in self.original],
            'translation': [word.to_dict() for word in self.translation],
        }


@dataclass
class SentenceRecord:
    """A stored sentence row as supplied by the storage layer."""
    sentence_number: int
    original_text: str = ""
    original_parsed_text: Optional[str] = None
    translation_parsed_text: Optional[str] = None
    chapter_id: Optional[int] = None


class ActionType(Enum):
    """Kind of review event recorded in a card's history."""
    CARD = "card"      # graded answer, drives level progression
    REVIEW = "review"  # exposure only, level unchanged

    @classmethod
    def parse(cls, raw: Any) -> "ActionType":
        """
        Read an action type from a stored value.

        Accepts enum members, the bare values and the stored label form
        ``"Word Recognition (review)"``. Anything unrecognised is a card action.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, str):
            return cls.CARD

        value = raw.strip().lower()
        if value.endswith(")") and "(" in value:
            value = value[value.rindex("(") + 1:-1].strip()

        for member in cls:
            if member.value == value:
                return member
        return cls.CARD


@dataclass(frozen=True)
class HistoryEntry:
    """One recorded review event."""
    date: DateLike
    success: bool
    action_type: ActionType = ActionType.CARD
    example_hash: Optional[str] = None

    def __post_init__(self):
        # Stored values may be "review", "card" or a label; keep the enum only
        object.__setattr__(self, 'action_type', ActionType.parse(self.action_type))


class CardStatus(Enum):
    """Phase of a card: still being introduced or in spaced review."""
    LEARNING = "learning"
    REVIEWING = "reviewing"


@dataclass(frozen=True)
class LearningProgress:
    """Successful exercise counters for a card in its learning phase."""
    word_to_meaning: int = 0
    meaning_to_word: int = 0
    context: int = 0
    context_letters: int = 0

    def is_complete(self) -> bool:
        return min(self.word_to_meaning, self.meaning_to_word,
                   self.context, self.context_letters) > 0


@dataclass(frozen=True)
class CardInfo:
    """Learning state stored alongside a card."""
    status: CardStatus = CardStatus.LEARNING
    progress: LearningProgress = field(default_factory=LearningProgress)
    sentence: str = ""


@dataclass
class ReviewItem:
    """A learned word with its scheduling state."""
    word: str
    level: int = 0
    last_repeat: Optional[DateLike] = None
    history: List[HistoryEntry] = field(default_factory=list)
    info: Optional[CardInfo] = None

    def __post_init__(self):
        self.level = clamp_level(self.level)
        if self.history is None:
            self.history = []


def clamp_level(level: Any, max_level: int = Config.MAX_LEVEL) -> int:
    """Coerce a stored level into ``[MIN_LEVEL, max_level]``; junk becomes 0."""
    try:
        value = int(level)
    except (TypeError, ValueError, OverflowError):
        return Config.MIN_LEVEL
    return max(Config.MIN_LEVEL, min(max_level, value))
