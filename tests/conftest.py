"""
Pytest configuration and fixtures.

Provides common fixtures and the Hypothesis profile for testing the
alignment parser and review scheduler.
"""

import json
from datetime import date, datetime

import pytest
from hypothesis import settings, Verbosity

from parallel_reader.errors import ErrorHandler
from parallel_reader.models import ActionType, HistoryEntry, ReviewItem, SentenceRecord


# Configure Hypothesis for property-based testing
settings.register_profile("parallel_reader",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None
)
settings.load_profile("parallel_reader")


def pytest_configure(config):
    config.addinivalue_line("markers", "property: Hypothesis property-based test")


@pytest.fixture
def handler():
    """Provide a fresh error handler."""
    return ErrorHandler()


@pytest.fixture
def sample_sentence_records():
    """Provide stored sentence rows, including an untagged blank line."""
    return [
        SentenceRecord(
            sentence_number=1,
            original_text="Der Hund läuft",
            original_parsed_text="Der/1/ Hund/1/ läuft",
            translation_parsed_text="The/1/ dog/1/ runs",
        ),
        SentenceRecord(
            sentence_number=2,
            original_text="Ich sehe ihn",
            original_parsed_text="Ich/0/ sehe/1/ ihn/2/",
            translation_parsed_text="I/0/ see/1/ him/2/",
        ),
        SentenceRecord(
            sentence_number=3,
            original_text="···",
            original_parsed_text=None,
            translation_parsed_text=None,
        ),
    ]


@pytest.fixture
def sample_review_items():
    """Provide cards in assorted scheduling states."""
    return [
        ReviewItem(word="Hund"),
        ReviewItem(word="Katze", level=2, last_repeat=datetime(2024, 3, 1, 18, 30)),
        ReviewItem(word="Maus", level=7, last_repeat=date(2024, 3, 1),
                   history=[HistoryEntry(date=datetime(2024, 3, 1, 9, 0), success=False)]),
        ReviewItem(word="Vogel", level=5, last_repeat=date(2024, 3, 1),
                   history=[HistoryEntry(date=datetime(2024, 3, 1, 9, 0), success=True,
                                         action_type=ActionType.REVIEW)]),
    ]


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON payload to a temporary file and return its path."""
    def _write(payload, name="records.json"):
        path = tmp_path / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path
    return _write

