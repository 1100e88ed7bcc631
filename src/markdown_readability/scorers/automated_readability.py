from __future__ import annotations

import math
from typing import Sequence

from ..models import ReadabilityAlgorithm
from .base import ReadabilityScorer
from .difficulty import word_length_stats


class AutomatedReadabilityScorer(ReadabilityScorer):
    """
    Automated Readability Index.

    ARI grades are always rounded up. Full texts range from about -7 to 71;
    the scale is capped at 50.
    """

    algorithm = ReadabilityAlgorithm.AUTOMATED_READABILITY
    source_max = 50

    def raw_score(self, words: Sequence[str]) -> float:
        stats = word_length_stats(words)
        return float(math.ceil(4.71 * stats.mean + 0.5 * stats.count - 21.43))
