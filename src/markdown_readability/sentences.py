from __future__ import annotations

import logging
import re
from typing import List, Sequence, Tuple

from .markup import hidden_block_spans, strip_block_markup, strip_inline_markup
from .models import Sentence
from .tokenization import split_words

logger = logging.getLogger(__name__)

SENTENCE_SPLIT_RE = re.compile(r"[.:!?]\s+|\n")
SENTENCE_PUNCTUATION = ".:!?"
MIN_SENTENCE_LENGTH = 2


def split_candidates(text: str) -> List[str]:
    """Split markup-free text at sentence endings and line breaks."""
    return SENTENCE_SPLIT_RE.split(strip_block_markup(text))


def find_visible(
    text: str, candidate: str, start: int, hidden: Sequence[Tuple[int, int]]
) -> int:
    """Find candidate at or after start, skipping matches inside hidden blocks."""
    while True:
        idx = text.find(candidate, start)
        if idx < 0:
            return idx
        for span_start, span_end in hidden:
            if span_start <= idx < span_end:
                start = span_end
                break
        else:
            return idx


def extract_sentences(text: str, offset: int = 0) -> List[Sentence]:
    """
    Extract scorable sentences from a slice of the document.

    Block-level markup is removed before splitting, which shifts every later
    character. Ranges are therefore never computed from the stripped copy:
    each candidate is searched for in the original text, starting where the
    previous sentence ended so that repeated sentences map onto successive
    occurrences. Matches that start inside a removed code block or
    frontmatter are passed over, since that text is never shown as prose.
    Returned ranges are absolute (shifted by offset) and still cover any
    inline markup, while ``Sentence.words`` is computed from the
    inline-stripped copy.
    """
    sentences: List[Sentence] = []
    cursor = 0
    hidden = hidden_block_spans(text)

    for candidate in split_candidates(text):
        idx = find_visible(text, candidate, cursor, hidden)
        if idx < 0:
            logger.debug("Skipping sentence not found in source text: %r", candidate)
            continue

        range_end = idx + len(candidate)
        if (
            candidate
            and range_end < len(text)
            and text[range_end] in SENTENCE_PUNCTUATION
        ):
            range_end += 1
        cursor = range_end

        if len(candidate.strip()) < MIN_SENTENCE_LENGTH:
            continue

        cleaned = strip_inline_markup(candidate)
        words = split_words(cleaned)
        if not words:
            continue

        sentences.append(
            Sentence(
                start=offset + idx,
                end=offset + range_end,
                text=cleaned.strip(),
                words=words,
            )
        )

    return sentences
