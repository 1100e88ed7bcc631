from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

from ..models import ReadabilityAlgorithm
from ..normalization import normalize


class ReadabilityScorer(ABC):
    """
    Abstract readability formula.

    Subclasses compute a raw grade in the formula's native scale. ``score``
    clamps that grade into ``[source_min, source_max]`` and maps it onto the
    shared 0-10 scale used to pick a highlight style.
    """

    algorithm: ClassVar[ReadabilityAlgorithm]
    source_min: ClassVar[float] = 0
    source_max: ClassVar[float]

    @abstractmethod
    def raw_score(self, words: Sequence[str]) -> float:
        """Return the unclamped grade for a tokenized sentence."""
        raise NotImplementedError

    def clamp(self, value: float) -> float:
        return min(max(value, self.source_min), self.source_max)

    def score(self, words: Sequence[str]) -> int:
        """Return the normalized 0-10 score for a tokenized sentence."""
        clamped = self.clamp(self.raw_score(words))
        return normalize(clamped, self.source_min, self.source_max)
