from __future__ import annotations

from typing import Sequence

from ..models import ReadabilityAlgorithm
from .base import ReadabilityScorer
from .difficulty import count_difficult_words


class GunningFogScorer(ReadabilityScorer):
    """Gunning fog index; full-length prose grades between 0 and 20."""

    algorithm = ReadabilityAlgorithm.GUNNING_FOG
    source_max = 20

    def raw_score(self, words: Sequence[str]) -> float:
        total = len(words)
        return 0.4 * (total + 100 * count_difficult_words(words) / total)
