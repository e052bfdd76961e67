"""
Alignment module for parsing tagged bitext into linked word tokens.
"""

from .tokenizer import tokenize, extract_group, strip_tags, detect_malformed_tags
from .parser import AlignmentParser, default_parser, parse_sentence
from .tagging import retag_token, untag_token, max_group_number, next_group_number
from .highlight import (
    GroupIndex,
    GroupMembers,
    HighlightState,
    find_word,
    words_sharing_highlight,
)

__all__ = [
    'tokenize',
    'extract_group',
    'strip_tags',
    'detect_malformed_tags',
    'AlignmentParser',
    'default_parser',
    'parse_sentence',
    'retag_token',
    'untag_token',
    'max_group_number',
    'next_group_number',
    'GroupIndex',
    'GroupMembers',
    'HighlightState',
    'find_word',
    'words_sharing_highlight',
]
