from __future__ import annotations

import logging
from typing import Iterable, List, Tuple, Union

from .config import ReadabilityConfig
from .models import ScoredRange, Sentence, VisibleRegion
from .scorers import ReadabilityScorer, build_scorer_from_config
from .sentences import extract_sentences

logger = logging.getLogger(__name__)

RegionLike = Union[VisibleRegion, Tuple[str, int]]


def score_sentences(
    sentences: Iterable[Sentence], scorer: ReadabilityScorer
) -> List[ScoredRange]:
    """Score each sentence using the provided scorer."""
    scores: List[ScoredRange] = []
    for sentence in sentences:
        score = scorer.score(sentence.words)
        scores.append(ScoredRange(start=sentence.start, end=sentence.end, score=score))
    return scores


def score_region(region: VisibleRegion, scorer: ReadabilityScorer) -> List[ScoredRange]:
    """Extract and score the sentences of a single visible region."""
    sentences = extract_sentences(region.text, region.offset)
    return score_sentences(sentences, scorer)


def recompute(
    regions: Iterable[RegionLike], config: ReadabilityConfig
) -> List[ScoredRange]:
    """
    Score every sentence inside the visible regions.

    Regions are disjoint and ordered, so concatenating their results keeps the
    ranges sorted and non-overlapping. Returns an empty list without touching
    the regions when readability mode is disabled.
    """
    if not config.enabled:
        return []

    scorer = build_scorer_from_config(config)
    ranges: List[ScoredRange] = []
    for region in regions:
        ranges.extend(score_region(VisibleRegion.coerce(region), scorer))
    logger.debug(
        "Scored %d sentences with %s", len(ranges), config.algorithm.value
    )
    return ranges
