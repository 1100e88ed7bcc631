from __future__ import annotations

from typing import Sequence

from ..models import ReadabilityAlgorithm
from .base import ReadabilityScorer
from .difficulty import word_length_stats


class ColemanLiauScorer(ReadabilityScorer):
    """
    Coleman-Liau index computed from the mean word length.

    See https://en.wikipedia.org/wiki/Coleman%E2%80%93Liau_index
    """

    algorithm = ReadabilityAlgorithm.COLEMAN_LIAU
    source_max = 30

    def raw_score(self, words: Sequence[str]) -> float:
        stats = word_length_stats(words)
        return 5.89 * stats.mean - 0.3 / (100 * stats.count) - 15.8
