"""
markdown_readability package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import ReadabilityConfig, config_from_dict, config_from_yaml, load_config
from .highlighter import SCORE_STYLES, Annotation, ReadabilityHighlighter
from .models import ReadabilityAlgorithm, ScoredRange, Sentence, VisibleRegion
from .normalization import normalize
from .pipeline import recompute
from .scorers import build_scorer_from_config, create_scorer
from .sentences import extract_sentences

__all__ = [
    "ReadabilityConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "ReadabilityAlgorithm",
    "ScoredRange",
    "Sentence",
    "VisibleRegion",
    "normalize",
    "extract_sentences",
    "create_scorer",
    "build_scorer_from_config",
    "recompute",
    "SCORE_STYLES",
    "Annotation",
    "ReadabilityHighlighter",
]

__version__ = "0.1.0"
