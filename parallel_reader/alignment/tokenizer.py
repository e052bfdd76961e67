"""
Tokenizer for tagged bitext.

Text is split on whitespace runs with the runs kept as tokens, so joining
the tokens gives back the input exactly. A content token may carry a group
tag such as ``Hund/1/``.
"""

import re
from typing import List, Optional

from ..config import Config


TOKEN_SPLIT_RE = re.compile(Config.TOKEN_SPLIT_PATTERN)
GROUP_TAG_RE = re.compile(Config.GROUP_TAG_PATTERN)
GROUP_STRIP_RE = re.compile(Config.GROUP_STRIP_PATTERN)
SPACE_RE = re.compile(r"\s+")

# Slash-delimited fragments that are not numeric tags ("Hund/a/", "Hund//"),
# or a word ending in an unclosed numeric tag ("Hund/1").
MALFORMED_TAG_RE = re.compile(r"/[^/\s]*/|[^\W\d_]/\d+$")


def tokenize(text: str) -> List[str]:
    """
    Split text into alternating content and whitespace tokens.

    Examples:
        >>> tokenize("Der/1/ Hund")
        ['Der/1/', ' ', 'Hund']

        >>> tokenize(" a")
        ['', ' ', 'a']
    """
    return TOKEN_SPLIT_RE.split(text)


def is_space_token(token: str) -> bool:
    """True for a token made only of whitespace (the empty string is not)."""
    return SPACE_RE.fullmatch(token) is not None


def extract_group(token: str) -> Optional[int]:
    """Group number from the first ``/N/`` tag of a token, or None."""
    match = GROUP_TAG_RE.search(token)
    if not match:
        return None
    return int(match.group(1))


def strip_tags(token: str) -> str:
    """Remove every ``/N/`` tag from a token."""
    return GROUP_STRIP_RE.sub('', token).strip()


def detect_malformed_tags(text: str) -> List[str]:
    """
    List content tokens holding tag-like fragments that are not valid tags.

    The parser treats such tokens as ungrouped; this only helps callers
    report dirty data.
    """
    malformed = []
    for token in tokenize(text):
        if not token or is_space_token(token):
            continue
        if MALFORMED_TAG_RE.search(GROUP_STRIP_RE.sub('', token)):
            malformed.append(token)
    return malformed
