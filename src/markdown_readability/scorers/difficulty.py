"""
Difficult-word detection shared by the readability formulas.

The published formulas count "difficult" words through a dictionary or a
syllable count. Both are language specific, so a word is considered difficult
here when its length exceeds the mean word length of its sentence by more than
two standard deviations. Under a normal distribution that marks roughly five
percent of words as difficult. Coleman and Liau note that word length in
letters predicts readability better than syllables do.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass(slots=True, frozen=True)
class WordLengthStats:
    """Word-length statistics for a single sentence."""

    count: int
    mean: float
    sum_of_squares: float
    std_dev: float

    @property
    def threshold(self) -> float:
        return self.mean + 2 * self.std_dev


def word_length_stats(words: Sequence[str]) -> WordLengthStats:
    """Compute mean, sum of squared deviations and sample standard deviation."""
    if not words:
        raise ValueError("Cannot compute word statistics for an empty sentence.")
    lengths = np.array([len(word) for word in words], dtype=float)
    mean = float(lengths.sum() / lengths.size)
    sum_of_squares = float(np.sum((lengths - mean) ** 2))
    # A single word has no spread; n - 1 would be zero.
    if lengths.size == 1:
        std_dev = 0.0
    else:
        std_dev = float(np.sqrt(sum_of_squares / (lengths.size - 1)))
    return WordLengthStats(
        count=int(lengths.size),
        mean=mean,
        sum_of_squares=sum_of_squares,
        std_dev=std_dev,
    )


def difficulty_threshold(words: Sequence[str]) -> float:
    """Length above which a word counts as difficult."""
    return word_length_stats(words).threshold


def count_difficult_words(words: Sequence[str]) -> int:
    threshold = difficulty_threshold(words)
    return sum(1 for word in words if len(word) > threshold)
