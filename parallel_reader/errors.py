"""
Error handling system for the parallel reader.

The alignment parser and review scheduler never raise on bad data. This
module gives their callers a place to record and report data problems
(malformed tags, unreadable records) with actionable messages.
"""

import logging
from enum import Enum
from typing import List, Optional, Dict, Any
from dataclasses import dataclass

from .alignment.tokenizer import detect_malformed_tags
from .scheduling.intervals import to_day


class ErrorSeverity(Enum):
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors that can occur around the core."""
    INPUT_VALIDATION = "input_validation"
    ALIGNMENT = "alignment"
    SCHEDULING = "scheduling"
    FILE_SYSTEM = "file_system"


@dataclass
class ProcessingError:
    """Represents a processing error with context and guidance."""
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: str
    suggested_actions: List[str]
    error_code: str
    context: Dict[str, Any] = None

    def __post_init__(self):
        if self.context is None:
            self.context = {}


class ParallelReaderError(Exception):
    """Base exception for parallel reader errors."""

    def __init__(self, processing_error: ProcessingError):
        self.processing_error = processing_error
        super().__init__(processing_error.message)


class InputValidationError(ParallelReaderError):
    """Raised when command line input is unusable."""
    pass


class RecordLoadError(ParallelReaderError):
    """Raised when a records file cannot be read as a list of records."""
    pass


class ErrorHandler:
    """
    Centralized error handling and reporting system.

    Collects errors and warnings, logs them at their severity and
    summarises them for display.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.errors: List[ProcessingError] = []
        self.warnings: List[ProcessingError] = []

    def add_error(self, error: ProcessingError) -> None:
        """Add an error to the collection."""
        if error.severity in [ErrorSeverity.ERROR, ErrorSeverity.CRITICAL]:
            self.errors.append(error)
        elif error.severity == ErrorSeverity.WARNING:
            self.warnings.append(error)

        log_level = {
            ErrorSeverity.INFO: logging.INFO,
            ErrorSeverity.WARNING: logging.WARNING,
            ErrorSeverity.ERROR: logging.ERROR,
            ErrorSeverity.CRITICAL: logging.CRITICAL
        }[error.severity]

        self.logger.log(log_level, f"[{error.error_code}] {error.message}")
        if error.details:
            self.logger.log(log_level, f"Details: {error.details}")

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if any warnings have been recorded."""
        return len(self.warnings) > 0

    def get_error_summary(self) -> Dict[str, Any]:
        """Get a summary of all errors and warnings."""
        return {
            'error_count': len(self.errors),
            'warning_count': len(self.warnings),
            'errors': [self._format_error_for_summary(e) for e in self.errors],
            'warnings': [self._format_error_for_summary(e) for e in self.warnings]
        }

    def _format_error_for_summary(self, error: ProcessingError) -> Dict[str, Any]:
        """Format error for summary display."""
        return {
            'code': error.error_code,
            'category': error.category.value,
            'severity': error.severity.value,
            'message': error.message,
            'suggested_actions': error.suggested_actions
        }

    def clear_errors(self) -> None:
        """Clear all recorded errors and warnings."""
        self.errors.clear()
        self.warnings.clear()

    def check_tagged_text(self, text: Optional[str],
                          sentence_number: Optional[int] = None) -> Optional[ProcessingError]:
        """
        Look for tag-like fragments the parser will treat as ungrouped.

        Returns a warning describing the offending tokens, or None when the
        text is clean or absent.
        """
        if not text:
            return None

        malformed = detect_malformed_tags(text)
        if not malformed:
            return None

        where = f" in sentence {sentence_number}" if sentence_number is not None else ""
        return ProcessingError(
            category=ErrorCategory.ALIGNMENT,
            severity=ErrorSeverity.WARNING,
            message=f"Malformed group tags{where} will be shown as ungrouped",
            details=f"Tokens: {', '.join(malformed)}",
            suggested_actions=[
                "Tag aligned words as word/N/ where N is a whole number",
                "Remove stray slashes from the tagged text"
            ],
            error_code="ALIGN_001",
            context={'sentence_number': sentence_number, 'tokens': malformed}
        )

    def check_record_file(self, path) -> Optional[ProcessingError]:
        """Validate that a records file exists and is a regular file."""
        if not path.exists():
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message="Records file not found",
                details=f"No file at: {path}",
                suggested_actions=[
                    "Check the file path for typos",
                    "Export the records to JSON before running this command"
                ],
                error_code="FILE_001",
                context={'path': str(path)}
            )

        if not path.is_file():
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message="Records path is not a file",
                details=f"Path is a directory or special file: {path}",
                suggested_actions=["Point the command at a JSON file"],
                error_code="FILE_002",
                context={'path': str(path)}
            )

        return None

    def check_review_dates(self, items) -> Optional[ProcessingError]:
        """
        Look for cards whose last review date cannot be read.

        The scheduler treats such cards as never reviewed, so they are always
        due. Returns a warning naming them, or None.
        """
        unreadable = [
            item.word for item in items
            if item.last_repeat is not None and to_day(item.last_repeat) is None
        ]
        if not unreadable:
            return None

        return ProcessingError(
            category=ErrorCategory.SCHEDULING,
            severity=ErrorSeverity.WARNING,
            message=f"{len(unreadable)} card(s) have unreadable review dates and are shown as due",
            details=f"Cards: {', '.join(unreadable)}",
            suggested_actions=[
                "Store review dates as ISO 8601, e.g. 2024-03-01T10:00:00Z",
                "Review the cards again to record a fresh date"
            ],
            error_code="SCHED_001",
            context={'words': unreadable}
        )


# Global error handler instance
error_handler = ErrorHandler()
