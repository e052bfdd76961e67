"""
Command line entry point for the parallel reader core.

Parses tagged sentence pairs and lists the cards due for review.
"""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from .alignment import AlignmentParser
from .errors import (
    error_handler, ErrorCategory, ErrorSeverity, ProcessingError,
    InputValidationError, ParallelReaderError
)
from .models import SentenceRecord
from .processors import RecordLoader
from .scheduling import ReviewScheduler, to_day


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO

    # stdout carries the JSON output
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def parse_today(value: Optional[str]) -> date:
    """Day to schedule against: ``--today`` if given, else the system date."""
    if value is None:
        return date.today()

    day = to_day(value)
    if day is None:
        raise InputValidationError(ProcessingError(
            category=ErrorCategory.INPUT_VALIDATION,
            severity=ErrorSeverity.ERROR,
            message="Invalid --today value",
            details=f"Could not read {value!r} as a date",
            suggested_actions=["Use the YYYY-MM-DD format, e.g. 2024-03-01"],
            error_code="INPUT_003"
        ))
    return day


def run_parse(args: argparse.Namespace) -> List[dict]:
    """Parse sentence pairs from the command line or a records file."""
    logger = logging.getLogger(__name__)
    parser = AlignmentParser()

    if args.records:
        records = RecordLoader(error_handler).load_sentences(args.records)
    else:
        if args.original is None or args.translation is None:
            raise InputValidationError(ProcessingError(
                category=ErrorCategory.INPUT_VALIDATION,
                severity=ErrorSeverity.ERROR,
                message="Nothing to parse",
                details="Neither --records nor both --original and --translation were given",
                suggested_actions=[
                    "Pass --records FILE.json",
                    "Or pass --original TEXT --translation TEXT"
                ],
                error_code="INPUT_004"
            ))
        records = [SentenceRecord(
            sentence_number=args.sentence_number,
            original_text=args.original,
            original_parsed_text=args.original,
            translation_parsed_text=args.translation,
        )]

    for record in records:
        for text in (record.original_parsed_text, record.translation_parsed_text):
            warning = error_handler.check_tagged_text(text, record.sentence_number)
            if warning:
                error_handler.add_error(warning)

    logger.info(f"Parsing {len(records)} sentence(s)")
    return [parser.parse_record(record).to_dict() for record in records]


def run_due(args: argparse.Namespace) -> List[dict]:
    """List the cards due on the requested day."""
    logger = logging.getLogger(__name__)
    today = parse_today(args.today)
    scheduler = ReviewScheduler()

    items = RecordLoader(error_handler).load_cards(args.cards)
    warning = error_handler.check_review_dates(items)
    if warning:
        error_handler.add_error(warning)

    due =scheduler.due_items(items, today)

    logger.info(f"{len(due)} of {len(items)} cards due on {today.isoformat()}")
    return [
        {
            'word': item.word,
            'level': item.level,
            'lastRepeat': str(item.last_repeat) if item.last_repeat is not None else None,
        }
        for item in due
    ]


def print_issue_summary() -> None:
    """Report collected warnings and errors on stderr."""
    if not (error_handler.has_errors() or error_handler.has_warnings()):
        return

    summary = error_handler.get_error_summary()
    print(f"Warnings: {summary['warning_count']}, errors: {summary['error_count']}",
          file=sys.stderr)
    for issue in summary['errors'] + summary['warnings']:
        print(f"  [{issue['code']}] {issue['message']}", file=sys.stderr)
        if issue['suggested_actions']:
            print(f"    Suggestion: {issue['suggested_actions'][0]}", file=sys.stderr)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parallel-reader",
        description="Parse tagged bitext and schedule flashcard reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s parse --original "Der/1/ Hund/1/ läuft" --translation "The/1/ dog/1/ runs"
  %(prog)s parse --records sentences.json
  %(prog)s due --cards cards.json --today 2024-03-01
        """
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse tagged sentence pairs into linked words")
    parse_cmd.add_argument("--original", help="Tagged original-language text")
    parse_cmd.add_argument("--translation", help="Tagged translation text")
    parse_cmd.add_argument(
        "--sentence-number",
        type=int,
        default=0,
        help="Sentence number stamped on the parsed words (default: 0)"
    )
    parse_cmd.add_argument(
        "--records",
        type=Path,
        help="JSON file with a list of stored sentence rows"
    )

    due_cmd = subparsers.add_parser("due", help="List cards due for review")
    due_cmd.add_argument(
        "--cards",
        type=Path,
        required=True,
        help="JSON file with a list of stored cards and their history"
    )
    due_cmd.add_argument(
        "--today",
        default=None,
        help="Day to schedule against as YYYY-MM-DD (default: system date)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool and return its exit code."""
    args = build_arg_parser().parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)
    error_handler.clear_errors()

    try:
        if args.command == "parse":
            output = run_parse(args)
        else:
            output = run_due(args)
    except ParallelReaderError as e:
        if e.processing_error not in error_handler.errors:
            error_handler.add_error(e.processing_error)
        logger.error(f"{args.command} failed: {e}")
        print_issue_summary()
        return 1

    print(json.dumps(output, ensure_ascii=False, indent=2))
    print_issue_summary()
    return 0


if __name__ == "__main__":
    sys.exit(main())
