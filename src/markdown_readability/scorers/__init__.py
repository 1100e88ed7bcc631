from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Type, Union

from ..models import ReadabilityAlgorithm
from .automated_readability import AutomatedReadabilityScorer
from .base import ReadabilityScorer
from .coleman_liau import ColemanLiauScorer
from .dale_chall import DaleChallScorer
from .difficulty import (
    WordLengthStats,
    count_difficult_words,
    difficulty_threshold,
    word_length_stats,
)
from .gunning_fog import GunningFogScorer

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import ReadabilityConfig

__all__ = [
    "ReadabilityScorer",
    "DaleChallScorer",
    "GunningFogScorer",
    "ColemanLiauScorer",
    "AutomatedReadabilityScorer",
    "WordLengthStats",
    "word_length_stats",
    "difficulty_threshold",
    "count_difficult_words",
    "SCORERS",
    "create_scorer",
    "build_scorer_from_config",
]

SCORERS: Dict[ReadabilityAlgorithm, Type[ReadabilityScorer]] = {
    ReadabilityAlgorithm.DALE_CHALL: DaleChallScorer,
    ReadabilityAlgorithm.GUNNING_FOG: GunningFogScorer,
    ReadabilityAlgorithm.COLEMAN_LIAU: ColemanLiauScorer,
    ReadabilityAlgorithm.AUTOMATED_READABILITY: AutomatedReadabilityScorer,
}


def create_scorer(algorithm: Union[str, ReadabilityAlgorithm]) -> ReadabilityScorer:
    """Factory for building scorers by algorithm or identifier."""
    return SCORERS[ReadabilityAlgorithm.parse(algorithm)]()


def build_scorer_from_config(config: "ReadabilityConfig") -> ReadabilityScorer:
    """Convenience helper to build a scorer from ReadabilityConfig."""
    return create_scorer(config.algorithm)
