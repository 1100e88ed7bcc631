from __future__ import annotations

from typing import List


def split_words(text: str) -> List[str]:
    """Split a sentence on single spaces, dropping the empty tokens."""
    return [word for word in text.strip().split(" ") if word != ""]
