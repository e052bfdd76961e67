"""
Tag editing for tagged bitext.

Used when a reader re-aligns a sentence by hand: one token gets a new
group tag while every other token stays byte-identical.
"""

from typing import Optional

from ..models import ParsedSentence
from .tokenizer import tokenize, is_space_token, GROUP_STRIP_RE


def retag_token(text: str, index: int, group: Optional[int]) -> str:
    """
    Replace the group tag of the token at ``index``.

    All existing tags of that token are removed and ``/group/`` is appended;
    ``group=None`` leaves the token untagged. Whitespace tokens and indices
    outside the token list return the text unchanged.

    Examples:
        >>> retag_token("Der/1/ Hund läuft", 2, 4)
        'Der/1/ Hund/4/ läuft'

        >>> retag_token("Der/1/ Hund", 0, None)
        'Der Hund'
    """
    if group is not None and group < 0:
        raise ValueError(f"Group numbers are non-negative: {group}")

    tokens = tokenize(text)
    if not 0 <= index < len(tokens) or is_space_token(tokens[index]):
        return text

    clean = GROUP_STRIP_RE.sub('', tokens[index])
    tokens[index] = clean if group is None else f"{clean}/{group}/"
    return "".join(tokens)


def untag_token(text: str, index: int) -> str:
    """Remove the group tag of the token at ``index``."""
    return retag_token(text, index, None)


def max_group_number(sentence: ParsedSentence) -> int:
    """Highest group number used in a sentence, 0 when nothing is grouped."""
    groups = [word.group_number for word in sentence.words() if word.group_number is not None]
    return max(groups, default=0)


def next_group_number(sentence: ParsedSentence) -> int:
    """Group number for a new group that clashes with no existing one."""
    return max_group_number(sentence) + 1
