from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

from .config import ReadabilityConfig
from .pipeline import RegionLike, recompute

logger = logging.getLogger(__name__)

# One style per normalized score, indexed 0 through 10.
SCORE_STYLES: Tuple[str, ...] = tuple(f"readability-{score}" for score in range(11))


def style_for_score(score: int) -> str:
    """Return the style class for a normalized score."""
    if not 0 <= score < len(SCORE_STYLES):
        raise IndexError(f"Readability score {score} has no style.")
    return SCORE_STYLES[score]


@dataclass(slots=True, frozen=True)
class Annotation:
    """A styled range ready to be drawn by the editor."""

    start: int
    end: int
    score: int
    style: str


class ReadabilityHighlighter:
    """
    Keeps readability annotations in sync with the editor view.

    The editor calls ``update`` after every view change. While the mode is
    disabled no work is done and no annotations are kept. While enabled the
    previous annotations are thrown away and rebuilt from the visible regions.
    """

    def __init__(self, config_provider: Callable[[], ReadabilityConfig]) -> None:
        self._config_provider = config_provider
        self._enabled = False
        self._annotations: Tuple[Annotation, ...] = ()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def annotations(self) -> Tuple[Annotation, ...]:
        return self._annotations

    def update(self, regions: Iterable[RegionLike]) -> Tuple[Annotation, ...]:
        config = self._config_provider()
        if config.enabled != self._enabled:
            logger.debug(
                "Readability mode %s", "enabled" if config.enabled else "disabled"
            )
            self._enabled = config.enabled

        if not self._enabled:
            self._annotations = ()
            return self._annotations

        self._annotations = tuple(
            Annotation(
                start=scored.start,
                end=scored.end,
                score=scored.score,
                style=style_for_score(scored.score),
            )
            for scored in recompute(regions, config)
        )
        return self._annotations
