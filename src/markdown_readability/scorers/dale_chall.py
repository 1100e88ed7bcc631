from __future__ import annotations

import math
from typing import Sequence

from ..models import ReadabilityAlgorithm
from .base import ReadabilityScorer
from .difficulty import count_difficult_words


class DaleChallScorer(ReadabilityScorer):
    """
    Dale-Chall grade with length-based difficult words.

    Grades observed on full-length prose stay between 0 and 11, so the scale
    is capped at 10.
    """

    algorithm = ReadabilityAlgorithm.DALE_CHALL
    source_max = 10

    def raw_score(self, words: Sequence[str]) -> float:
        total = len(words)
        difficult_ratio = count_difficult_words(words) / total
        score = 0.1579 * difficult_ratio * 100 + 0.0496 * total
        if difficult_ratio > 0.05:
            score += 3.6365
        return float(math.floor(score))
