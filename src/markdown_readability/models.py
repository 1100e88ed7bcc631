from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple, Union


class ReadabilityAlgorithm(str, Enum):
    """Readability formulas that can drive the highlighting."""

    DALE_CHALL = "dale-chall"
    GUNNING_FOG = "gunning-fog"
    COLEMAN_LIAU = "coleman-liau"
    AUTOMATED_READABILITY = "automated-readability"

    @classmethod
    def parse(cls, value: Union[str, "ReadabilityAlgorithm"]) -> "ReadabilityAlgorithm":
        """Resolve a config value or member name into an algorithm."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace("_", "-")
        for member in cls:
            if normalized in {member.value, member.name.lower().replace("_", "-")}:
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(
            f"Unknown readability algorithm '{value}'. Expected one of: {choices}."
        )


@dataclass(slots=True, frozen=True)
class VisibleRegion:
    """A contiguous slice of the displayed document."""

    text: str
    offset: int = 0

    @classmethod
    def coerce(cls, value: Union["VisibleRegion", Tuple[str, int]]) -> "VisibleRegion":
        if isinstance(value, cls):
            return value
        text, offset = value
        return cls(text=text, offset=offset)


@dataclass(slots=True)
class Sentence:
    """A sentence-like unit with its absolute range in the document."""

    start: int
    end: int
    text: str
    words: List[str] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class ScoredRange:
    """Normalized readability score for the characters in [start, end)."""

    start: int
    end: int
    score: int
