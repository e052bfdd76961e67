"""
Alignment parser for tagged bitext.

Turns the two tagged strings of a sentence pair into cross-linked word
tokens. Words sharing a group number are linked to each other on the same
side and mirrored to every word of that group on the other side, so phrases
can be aligned to phrases.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import numpy as np

from ..config import Config
from ..models import ParsedSentence, ParsedWord, SentenceRecord
from .tokenizer import tokenize, is_space_token, extract_group, strip_tags


logger = logging.getLogger(__name__)


@dataclass
class _WordDraft:
    """Mutable token used while links are being filled in."""
    word: str
    raw: str
    index: int
    group: Optional[int]
    is_space: bool
    linked_indices: List[int] = field(default_factory=list)
    linked_words: List[str] = field(default_factory=list)
    mirror_indices: List[int] = field(default_factory=list)
    mirror_words: List[str] = field(default_factory=list)

    def freeze(self, sentence_number: int, is_translation: bool) -> ParsedWord:
        return ParsedWord(
            word=self.word,
            sentence_number=sentence_number,
            word_index=self.index,
            group_number=self.group,
            linked_indices=tuple(self.linked_indices),
            linked_words=tuple(self.linked_words),
            mirror_indices=tuple(self.mirror_indices),
            mirror_words=tuple(self.mirror_words),
            is_space=self.is_space,
            is_translation=is_translation,
            raw=self.raw,
        )


class AlignmentParser:
    """
    Parses sentence pairs written in the ``word/N/`` tag grammar.

    The parser is total: malformed tags are treated as absent and a pair
    with a missing side degrades to a single untagged display token.
    """

    def __init__(self, blank_line_marker: str = Config.BLANK_LINE_MARKER):
        """
        Initialize the parser.

        Args:
            blank_line_marker: Raw text that stands for an empty line
        """
        self.blank_line_marker = blank_line_marker

    def parse(self, original_tagged: Optional[str], translation_tagged: Optional[str],
              sentence_number: int, original_text: Optional[str] = None) -> ParsedSentence:
        """
        Parse one sentence pair.

        Args:
            original_tagged: Tagged original-language text, or None
            translation_tagged: Tagged translation text, or None
            sentence_number: Identifier stamped on every token
            original_text: Plain original text shown when a side is missing

        Returns:
            ParsedSentence with both sides fully cross-linked
        """
        if not original_tagged or not translation_tagged:
            logger.debug(f"Sentence {sentence_number} has no tagged text, showing plain text")
            return self._unparsed_sentence(original_text, sentence_number)

        original = self._parse_side(_as_text(original_tagged))
        translation = self._parse_side(_as_text(translation_tagged))
        links = self._cross_link(original, translation)

        logger.debug(f"Parsed sentence {sentence_number}: "
                     f"{len(original)} original tokens, {len(translation)} translation tokens, "
                     f"{links} cross links")

        return ParsedSentence(
            sentence_number=sentence_number,
            original=tuple(draft.freeze(sentence_number, False) for draft in original),
            translation=tuple(draft.freeze(sentence_number, True) for draft in translation),
        )

    def parse_record(self, record: SentenceRecord) -> ParsedSentence:
        """Parse a stored sentence row."""
        return self.parse(
            record.original_parsed_text,
            record.translation_parsed_text,
            record.sentence_number,
            original_text=record.original_text,
        )

    def parse_chapter(self, records: Iterable[SentenceRecord]) -> Dict[int, ParsedSentence]:
        """Parse every sentence of a chapter, keyed by sentence number."""
        return {record.sentence_number: self.parse_record(record) for record in records}

    def _unparsed_sentence(self, original_text: Optional[str],
                           sentence_number: int) -> ParsedSentence:
        """Single untagged token holding the plain original text."""
        raw = _as_text(original_text) if original_text is not None else ""
        word = "" if raw == self.blank_line_marker else raw

        pseudo = ParsedWord(
            word=word,
            sentence_number=sentence_number,
            word_index=0,
            raw=raw,
        )
        return ParsedSentence(sentence_number=sentence_number, original=(pseudo,))

    def _parse_side(self, text: str) -> List[_WordDraft]:
        """Tokenize one side and link words sharing a group on that side."""
        drafts: List[_WordDraft] = []
        group_indices: Dict[int, List[int]] = {}

        # First pass: clean words and collect indices per group
        for index, token in enumerate(tokenize(text)):
            if is_space_token(token):
                drafts.append(_WordDraft(word=token, raw=token, index=index,
                                         group=None, is_space=True))
                continue

            group = extract_group(token)
            if group is not None:
                group_indices.setdefault(group, []).append(index)

            drafts.append(_WordDraft(word=strip_tags(token), raw=token, index=index,
                                     group=group, is_space=False))

        # Second pass: same-side siblings, self excluded
        for draft in drafts:
            if draft.is_space or draft.group is None:
                continue
            draft.linked_indices = [i for i in group_indices[draft.group] if i != draft.index]
            draft.linked_words = [drafts[i].word for i in draft.linked_indices]

        return drafts

    def _cross_link(self, original: List[_WordDraft], translation: List[_WordDraft]) -> int:
        """Mirror every pair of opposite-side words sharing a group. Returns the pair count."""
        link_matrix = build_link_matrix(original, translation)

        # nonzero walks the matrix row by row, so mirrors keep token order
        rows, cols = np.nonzero(link_matrix)
        for i, j in zip(rows.tolist(), cols.tolist()):
            orig, trans = original[i], translation[j]
            orig.mirror_indices.append(trans.index)
            trans.mirror_indices.append(orig.index)
            orig.mirror_words.append(trans.word)
            trans.mirror_words.append(orig.word)

        return len(rows)


def build_link_matrix(original: List[_WordDraft], translation: List[_WordDraft]) -> np.ndarray:
    """
    Build the cross-link matrix for a sentence pair.

    Entry ``[i, j]`` is True when original token ``i`` and translation token
    ``j`` carry the same group number. Ungrouped tokens link to nothing.
    """
    # Dense codes keep arbitrarily large group numbers inside the int range
    codes: Dict[int, int] = {}

    def encode(drafts: List[_WordDraft]) -> np.ndarray:
        return np.array(
            [-1 if d.group is None else codes.setdefault(d.group, len(codes)) for d in drafts],
            dtype=int
        )

    orig_codes = encode(original)[:, np.newaxis]
    trans_codes = encode(translation)[np.newaxis, :]
    return (orig_codes == trans_codes) & (orig_codes >= 0)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else str(value)


# Shared parser instance
default_parser = AlignmentParser()


def parse_sentence(original_tagged: Optional[str], translation_tagged: Optional[str],
                   sentence_number: int, original_text: Optional[str] = None) -> ParsedSentence:
    """Parse a sentence pair with the default parser."""
    return default_parser.parse(original_tagged, translation_tagged,
                                sentence_number, original_text=original_text)
