from dataclasses import replace

import pytest

from markdown_readability.config import ReadabilityConfig
from markdown_readability.highlighter import (
    SCORE_STYLES,
    ReadabilityHighlighter,
    style_for_score,
)
from markdown_readability.models import ReadabilityAlgorithm, VisibleRegion


def test_score_styles_cover_every_score():
    assert len(SCORE_STYLES) == 11
    assert style_for_score(0) == "readability-0"
    assert style_for_score(10) == "readability-10"
    with pytest.raises(IndexError):
        style_for_score(11)


def test_highlighter_follows_configuration():
    config = ReadabilityConfig()
    highlighter = ReadabilityHighlighter(lambda: config)
    regions = [VisibleRegion("The cat sat. The dog ran.", 0)]

    assert highlighter.update(regions) == ()
    assert highlighter.enabled is False

    config = replace(config, enabled=True)
    annotations = highlighter.update(regions)
    assert highlighter.enabled is True
    assert [(a.start, a.end) for a in annotations] == [(0, 12), (13, 25)]
    assert all(a.style == SCORE_STYLES[a.score] for a in annotations)

    config = replace(config, enabled=False)
    assert highlighter.update(regions) == ()
    assert highlighter.annotations == ()
    assert highlighter.enabled is False


def test_highlighter_replaces_previous_annotations():
    config = ReadabilityConfig(enabled=True, algorithm=ReadabilityAlgorithm.COLEMAN_LIAU)
    highlighter = ReadabilityHighlighter(lambda: config)

    highlighter.update([VisibleRegion("First view text.", 0)])
    second = highlighter.update([VisibleRegion("Scrolled further down.", 500)])

    assert [(a.start, a.end) for a in second] == [(500, 522)]
    assert highlighter.annotations == second
