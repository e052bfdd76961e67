"""
Group lookup and highlight state over parsed sentences.

A pressed word highlights every word of its sentence, on both sides, that
shares its group number. Ungrouped words highlight nothing.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models import ParsedSentence, ParsedWord


@dataclass
class GroupMembers:
    """Words of one group, split by side."""
    original: List[ParsedWord] = field(default_factory=list)
    translation: List[ParsedWord] = field(default_factory=list)

    def all(self) -> List[ParsedWord]:
        return self.original + self.translation


class GroupIndex:
    """Map from group number to the words of a sentence carrying it."""

    def __init__(self, sentence_number: int, groups: Dict[int, GroupMembers]):
        self.sentence_number = sentence_number
        self._groups = groups

    @classmethod
    def build(cls, sentence: ParsedSentence) -> "GroupIndex":
        groups: Dict[int, GroupMembers] = {}
        for word in sentence.words():
            if word.group_number is None:
                continue
            members = groups.setdefault(word.group_number, GroupMembers())
            side = members.translation if word.is_translation else members.original
            side.append(word)
        return cls(sentence.sentence_number, groups)

    def members(self, group_number: Optional[int]) -> GroupMembers:
        if group_number is None:
            return GroupMembers()
        return self._groups.get(group_number, GroupMembers())

    def group_numbers(self) -> List[int]:
        return sorted(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, group_number) -> bool:
        return group_number in self._groups


def words_sharing_highlight(sentence: ParsedSentence, word: ParsedWord) -> List[ParsedWord]:
    """
    All words highlighted together with ``word``.

    Same sentence number and same group, across both sides, the pressed
    word included. Empty for ungrouped words or words of another sentence.
    """
    if word.group_number is None or word.sentence_number != sentence.sentence_number:
        return []
    return [other for other in sentence.words() if other.group_number == word.group_number]


def find_word(sentence: ParsedSentence, text: str, word_index: int) -> Optional[ParsedWord]:
    """Locate a pressed word by its text and index, original side first."""
    for word in sentence.words():
        if word.word == text and word.word_index == word_index:
            return word
    return None


@dataclass
class HighlightState:
    """Selection state of a reader page: highlighted group and selected sentence."""
    sentence_number: Optional[int] = None
    group_number: Optional[int] = None
    word_index: Optional[int] = None
    selected_sentence: Optional[int] = None

    def press(self, word: ParsedWord) -> None:
        """Highlight the group of a pressed word."""
        self.sentence_number = word.sentence_number
        self.group_number = word.group_number
        self.word_index = word.word_index

    def long_press(self, sentence_number: int) -> None:
        """Toggle selection of a whole sentence and drop any word highlight."""
        if self.selected_sentence == sentence_number:
            self.selected_sentence = None
        else:
            self.selected_sentence = sentence_number
        self.clear()

    def clear(self) -> None:
        self.sentence_number = None
        self.group_number = None
        self.word_index = None

    def is_highlighted(self, word: ParsedWord) -> bool:
        if self.sentence_number is None or self.group_number is None:
            return False
        return (word.sentence_number == self.sentence_number
                and word.group_number == self.group_number)
