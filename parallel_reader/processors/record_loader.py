"""
Record loader for sentence and card exports.

Reads JSON lists of stored rows into model objects. Rows use the storage
layer's field names; both snake_case and camelCase keys are accepted.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import (
    ErrorHandler, ErrorCategory, ErrorSeverity, ProcessingError,
    RecordLoadError, error_handler as default_error_handler
)
from ..models import (
    ActionType, CardInfo, CardStatus, HistoryEntry, LearningProgress,
    ReviewItem, SentenceRecord
)
from ..scheduling.learning import default_card_info


logger = logging.getLogger(__name__)

TRUE_VALUES = {"true", "1"}


def parse_success(value: Any) -> bool:
    """Stored success flags come back as booleans, 0/1 or strings."""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return value is True or value == 1


def _pick(row: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in row:
            return row[key]
    return default


class RecordLoader:
    """Loads sentence and card records from JSON files."""

    def __init__(self, handler: Optional[ErrorHandler] = None):
        """
        Initialize the loader.

        Args:
            handler: Error handler collecting skipped-record warnings
        """
        self.error_handler = handler or default_error_handler

    def read_rows(self, path: Path) -> List[Dict[str, Any]]:
        """
        Read a JSON file holding a list of objects.

        Raises:
            RecordLoadError: If the file is missing, unreadable or not a list
        """
        path = Path(path)
        problem = self.error_handler.check_record_file(path)
        if problem:
            self.error_handler.add_error(problem)
            raise RecordLoadError(problem)

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            problem = ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message="Could not read records file",
                details=str(e),
                suggested_actions=[
                    "Check that the file is valid UTF-8 JSON",
                    "Re-export the records from the app"
                ],
                error_code="FILE_003",
                context={'path': str(path)}
            )
            self.error_handler.add_error(problem)
            raise RecordLoadError(problem) from e

        if not isinstance(data, list):
            problem = ProcessingError(
                category=ErrorCategory.INPUT_VALIDATION,
                severity=ErrorSeverity.ERROR,
                message="Records file must contain a JSON list",
                details=f"Top-level JSON value is a {type(data).__name__}",
                suggested_actions=["Wrap the records in a JSON array"],
                error_code="INPUT_001",
                context={'path': str(path)}
            )
            self.error_handler.add_error(problem)
            raise RecordLoadError(problem)

        logger.info(f"Read {len(data)} records from {path}")
        return data

    def load_sentences(self, path: Path) -> List[SentenceRecord]:
        """Load sentence records, skipping rows without a sentence number."""
        records = []
        for position, row in enumerate(self.read_rows(path)):
            record = self.sentence_from_row(row)
            if record is None:
                self._skip(position, "sentence row has no usable sentence number")
                continue
            records.append(record)
        return records

    def load_cards(self, path: Path) -> List[ReviewItem]:
        """Load card records, skipping rows without a word."""
        items = []
        for position, row in enumerate(self.read_rows(path)):
            item = self.card_from_row(row)
            if item is None:
                self._skip(position, "card row has no word")
                continue
            items.append(item)
        return items

    def sentence_from_row(self, row: Any) -> Optional[SentenceRecord]:
        if not isinstance(row, dict):
            return None
        try:
            sentence_number = int(_pick(row, 'sentence_number', 'sentenceNumber'))
        except (TypeError, ValueError, OverflowError):
            return None

        chapter_id = _pick(row, 'chapter_id', 'chapterId')
        return SentenceRecord(
            sentence_number=sentence_number,
            original_text=_pick(row, 'original_text', 'originalText', default="") or "",
            original_parsed_text=_pick(row, 'original_parsed_text', 'originalParsedText'),
            translation_parsed_text=_pick(row, 'translation_parsed_text', 'translationParsedText'),
            chapter_id=chapter_id if isinstance(chapter_id, int) else None,
        )

    def card_from_row(self, row: Any) -> Optional[ReviewItem]:
        if not isinstance(row, dict) or not row.get('word'):
            return None

        history = [
            self.history_from_row(entry)
            for entry in row.get('history') or []
            if isinstance(entry, dict)
        ]
        return ReviewItem(
            word=str(row['word']),
            level=row.get('level', 0),
            last_repeat=_pick(row, 'last_repeat', 'lastRepeat'),
            history=history,
            info=self.info_from_row(row.get('info')),
        )

    def history_from_row(self, row: Dict[str, Any]) -> HistoryEntry:
        return HistoryEntry(
            date=row.get('date'),
            success=parse_success(row.get('success')),
            action_type=ActionType.parse(_pick(row, 'action_type', 'actionType', 'type')),
            example_hash=_pick(row, 'example_hash', 'exampleHash'),
        )

    def info_from_row(self, info: Any) -> CardInfo:
        """Stored card info with every missing field filled from the defaults."""
        defaults = default_card_info()
        if not isinstance(info, dict):
            return defaults

        raw_progress = _pick(info, 'learningProgress', 'progress', default={})
        if not isinstance(raw_progress, dict):
            raw_progress = {}

        def counter(snake: str, camel: str, fallback: int) -> int:
            value = _pick(raw_progress, camel, snake, default=fallback)
            return value if isinstance(value, int) else fallback

        progress = LearningProgress(
            word_to_meaning=counter('word_to_meaning', 'wordToMeaning',
                                    defaults.progress.word_to_meaning),
            meaning_to_word=counter('meaning_to_word', 'meaningToWord',
                                    defaults.progress.meaning_to_word),
            context=counter('context', 'context', defaults.progress.context),
            context_letters=counter('context_letters', 'contextLetters',
                                    defaults.progress.context_letters),
        )

        try:
            status = CardStatus(info.get('status'))
        except ValueError:
            status = defaults.status

        return CardInfo(status=status, progress=progress, sentence=info.get('sentence') or "")

    def _skip(self, position: int, reason: str) -> None:
        self.error_handler.add_error(ProcessingError(
            category=ErrorCategory.INPUT_VALIDATION,
            severity=ErrorSeverity.WARNING,
            message=f"Skipped record {position}: {reason}",
            details="",
            suggested_actions=["Fix or remove the record in the export"],
            error_code="INPUT_002",
            context={'position': position}
        ))
