"""
Tests for the learning phase and card type selection.
"""

import random

import pytest

from parallel_reader.models import ActionType, CardInfo, CardStatus, LearningProgress, ReviewItem
from parallel_reader.scheduling import (
    Exercise, default_card_info, is_learning, record_exercise,
    card_type_for_level, word_hints, history_label
)


class TestRecordExercise:
    """Test learning progress updates."""

    def test_new_card_starts_learning(self):
        """Test a card without info starts from zero."""
        info = record_exercise(None, Exercise.WORD_TO_MEANING, True)
        assert info.status is CardStatus.LEARNING
        assert info.progress == LearningProgress(word_to_meaning=1)

    def test_success_increments_one_counter(self):
        info = CardInfo(progress=LearningProgress(1, 0, 2, 0), sentence="Der Hund läuft")
        updated = record_exercise(info, Exercise.MEANING_TO_WORD, True)

        assert updated.progress == LearningProgress(1, 1, 2, 0)
        assert updated.sentence == "Der Hund läuft"
        assert info.progress == LearningProgress(1, 0, 2, 0)

    def test_failure_resets_progress(self):
        """Test a miss wipes progress and counts the attempt."""
        info = CardInfo(status=CardStatus.REVIEWING, progress=LearningProgress(3, 3, 3, 3),
                        sentence="Satz")
        updated = record_exercise(info, Exercise.CONTEXT, False)

        assert updated.status is CardStatus.LEARNING
        assert updated.progress == LearningProgress(0, 0, 1, 0)
        assert updated.sentence == "Satz"

    def test_graduates_after_context_letters(self):
        """Test passing the last exercise with all others passed graduates."""
        info = CardInfo(progress=LearningProgress(1, 1, 1, 0))
        updated = record_exercise(info, Exercise.CONTEXT_LETTERS, True)
        assert updated.status is CardStatus.REVIEWING

    def test_no_graduation_with_gaps(self):
        """Test an exercise never passed blocks graduation."""
        info = CardInfo(progress=LearningProgress(1, 0, 1, 0))
        updated = record_exercise(info, Exercise.CONTEXT_LETTERS, True)
        assert updated.status is CardStatus.LEARNING

    def test_only_context_letters_graduates(self):
        """Test other exercises do not graduate even with full progress."""
        info = CardInfo(progress=LearningProgress(1, 1, 1, 1))
        updated = record_exercise(info, Exercise.CONTEXT, True)
        assert updated.status is CardStatus.LEARNING

    def test_default_info_is_reviewing(self):
        info = default_card_info()
        assert info.status is CardStatus.REVIEWING
        assert info.progress == LearningProgress(2, 2, 2, 2)

    def test_is_learning(self):
        assert is_learning(ReviewItem(word="Hund", info=CardInfo()))
        assert not is_learning(ReviewItem(word="Hund", info=default_card_info()))
        assert not is_learning(ReviewItem(word="Hund"))


class TestExercises:
    """Test card type selection and hints."""

    @pytest.mark.parametrize("level", [0, 1, 2, 3, 4, 5])
    def test_low_levels_have_their_own_card_type(self, level):
        assert card_type_for_level(level) == level

    def test_high_levels_pick_context_cards(self):
        rng = random.Random(3)
        picks = {card_type_for_level(7, rng) for _ in range(50)}
        assert picks <= {2, 3, 5}
        assert len(picks) > 1

    def test_negative_level(self):
        assert card_type_for_level(-2) == 0

    def test_word_hints(self):
        """Test hints are the lowercased letters in some order."""
        hints = word_hints("Hund", random.Random(1))
        assert sorted(hints) == sorted("hund")

    def test_history_label(self):
        """Test stored labels read back as their action type."""
        label = history_label(0, ActionType.REVIEW)
        assert label == "Word Recognition (review)"
        assert ActionType.parse(label) is ActionType.REVIEW
        assert ActionType.parse(history_label(2, "card")) is ActionType.CARD
        assert history_label(7) == "Unknown Type (card)"

    @pytest.mark.parametrize("raw, expected", [
        (None, ActionType.CARD),
        ("review", ActionType.REVIEW),
        (" REVIEW ", ActionType.REVIEW),
        ("Context with Blank (Original)", ActionType.CARD),
        ("something else", ActionType.CARD),
        (3, ActionType.CARD),
        (ActionType.REVIEW, ActionType.REVIEW),
    ])
    def test_action_type_parse(self, raw, expected):
        assert ActionType.parse(raw) is expected
