"""
Tests for group lookup and highlight state.
"""

import pytest

from parallel_reader.alignment import (
    GroupIndex, HighlightState, find_word, parse_sentence, words_sharing_highlight
)


@pytest.fixture
def sentence():
    return parse_sentence("Ich/0/ sehe/1/ den/2/ Hund/2/", "I/0/ see/1/ the/2/ dog/2/", 5)


@pytest.fixture
def other_sentence():
    return parse_sentence("Er/0/ läuft", "He/0/ runs", 6)


class TestGroupIndex:
    """Test the group-to-words map."""

    def test_members_by_side(self, sentence):
        """Test group members are split by side in token order."""
        index = GroupIndex.build(sentence)
        members = index.members(2)

        assert [w.word for w in members.original] == ["den", "Hund"]
        assert [w.word for w in members.translation] == ["the", "dog"]
        assert len(members.all()) == 4

    def test_group_numbers(self, sentence):
        """Test every used group is indexed, group 0 included."""
        index = GroupIndex.build(sentence)
        assert index.group_numbers() == [0, 1, 2]
        assert len(index) == 3
        assert 0 in index
        assert 9 not in index

    def test_unknown_and_missing_groups(self, sentence):
        """Test lookups for absent groups return no members."""
        index = GroupIndex.build(sentence)
        assert index.members(9).all() == []
        assert index.members(None).all() == []


class TestWordsSharingHighlight:
    """Test the highlight lookup contract."""

    def test_same_group_both_sides(self, sentence):
        """Test a pressed word brings its whole group."""
        hund = sentence.original[6]
        words = words_sharing_highlight(sentence, hund)
        assert [w.word for w in words] == ["den", "Hund", "the", "dog"]

    def test_matches_group_index(self, sentence):
        """Test the filter and the index agree."""
        index = GroupIndex.build(sentence)
        for word in sentence.words():
            if word.group_number is not None:
                assert words_sharing_highlight(sentence, word) == index.members(word.group_number).all()

    def test_ungrouped_word_highlights_nothing(self, sentence):
        """Test spaces highlight nothing."""
        assert words_sharing_highlight(sentence, sentence.original[1]) == []

    def test_word_from_another_sentence(self, sentence, other_sentence):
        """Test a word of another sentence highlights nothing here."""
        assert words_sharing_highlight(sentence, other_sentence.original[0]) == []


class TestHighlightState:
    """Test reader highlight selection."""

    def test_press_highlights_group_in_sentence(self, sentence, other_sentence):
        """Test pressing a word highlights its group in its sentence only."""
        state = HighlightState()
        state.press(sentence.original[0])

        assert state.is_highlighted(sentence.translation[0])
        assert not state.is_highlighted(sentence.translation[2])
        assert not state.is_highlighted(other_sentence.original[0])

    def test_group_zero_highlights(self, sentence):
        """Test group 0 is highlighted like other groups."""
        state = HighlightState()
        state.press(sentence.translation[0])
        assert sentence.translation[0].group_number == 0
        assert state.is_highlighted(sentence.original[0])

    def test_ungrouped_press_highlights_nothing(self, sentence):
        """Test pressing a space highlights nothing."""
        state = HighlightState()
        state.press(sentence.original[1])
        assert not any(state.is_highlighted(w) for w in sentence.words())

    def test_long_press_toggles_sentence(self, sentence):
        """Test long press selects, deselects and clears highlights."""
        state = HighlightState()
        state.press(sentence.original[0])

        state.long_press(5)
        assert state.selected_sentence == 5
        assert state.group_number is None
        assert not state.is_highlighted(sentence.original[0])

        state.long_press(5)
        assert state.selected_sentence is None

    def test_find_word(self, sentence):
        """Test a pressed word is found by text and index."""
        assert find_word(sentence, "dog", 6).is_translation
        assert find_word(sentence, "Hund", 6).word == "Hund"
        assert find_word(sentence, "Katze", 0) is None
