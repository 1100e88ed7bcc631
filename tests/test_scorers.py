import math

import pytest

from markdown_readability.models import ReadabilityAlgorithm
from markdown_readability.scorers import (
    SCORERS,
    AutomatedReadabilityScorer,
    ColemanLiauScorer,
    DaleChallScorer,
    GunningFogScorer,
    count_difficult_words,
    create_scorer,
    word_length_stats,
)

ONE_LONG_WORD = ["a"] * 9 + ["extraordinarily"]
FOUR_LETTER_WORDS = ["word"] * 10


def test_word_length_stats_uses_sample_deviation():
    stats = word_length_stats(["ab", "abcd"])
    assert stats.count == 2
    assert stats.mean == 3
    assert stats.sum_of_squares == 2
    assert stats.std_dev == pytest.approx(math.sqrt(2))
    assert stats.threshold == pytest.approx(3 + 2 * math.sqrt(2))


def test_single_word_has_zero_deviation():
    stats = word_length_stats(["a"])
    assert stats.std_dev == 0
    assert stats.threshold == 1
    assert count_difficult_words(["a"]) == 0


def test_empty_word_list_is_rejected():
    with pytest.raises(ValueError):
        word_length_stats([])


def test_outlier_word_counts_as_difficult():
    assert count_difficult_words(ONE_LONG_WORD) == 1
    assert count_difficult_words(FOUR_LETTER_WORDS) == 0


@pytest.mark.parametrize("algorithm", list(ReadabilityAlgorithm))
def test_single_word_sentence_scores_zero(algorithm: ReadabilityAlgorithm):
    scorer = create_scorer(algorithm)
    assert scorer.score(["a"]) == 0


def test_dale_chall_adds_penalty_for_difficult_words():
    scorer = DaleChallScorer()
    # 0.1579 * 10 + 0.0496 * 10 + 3.6365 = 5.7115, floored.
    assert scorer.raw_score(ONE_LONG_WORD) == 5
    assert scorer.score(ONE_LONG_WORD) == 5
    assert scorer.raw_score(FOUR_LETTER_WORDS) == 0


def test_gunning_fog_score():
    scorer = GunningFogScorer()
    assert scorer.raw_score(ONE_LONG_WORD) == pytest.approx(8.0)
    assert scorer.score(ONE_LONG_WORD) == 4


def test_coleman_liau_score():
    scorer = ColemanLiauScorer()
    assert scorer.raw_score(FOUR_LETTER_WORDS) == pytest.approx(7.7597)
    assert scorer.score(FOUR_LETTER_WORDS) == 3


def test_automated_readability_rounds_up():
    scorer = AutomatedReadabilityScorer()
    # 4.71 * 4 + 0.5 * 10 - 21.43 = 2.41
    assert scorer.raw_score(FOUR_LETTER_WORDS) == 3
    assert scorer.score(FOUR_LETTER_WORDS) == 1


@pytest.mark.parametrize("algorithm", list(ReadabilityAlgorithm))
def test_pathological_sentence_is_clamped(algorithm: ReadabilityAlgorithm):
    words = ["supercalifragilistic"] * 500
    scorer = create_scorer(algorithm)
    assert scorer.raw_score(words) > scorer.source_max
    assert scorer.score(words) == 10


def test_every_algorithm_has_a_scorer():
    assert set(SCORERS) == set(ReadabilityAlgorithm)
    for algorithm, scorer_cls in SCORERS.items():
        assert scorer_cls.algorithm is algorithm


def test_create_scorer_accepts_identifiers():
    assert isinstance(create_scorer("gunning-fog"), GunningFogScorer)
    assert isinstance(create_scorer("COLEMAN_LIAU"), ColemanLiauScorer)
    with pytest.raises(ValueError):
        create_scorer("flesch-kincaid")
