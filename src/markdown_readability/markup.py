from __future__ import annotations

import re
from typing import List, Tuple

FENCED_CODE_RE = re.compile(r"^`{1,3}.+?^`{1,3}$", re.MULTILINE | re.DOTALL)
FRONTMATTER_RE = re.compile(r"^-{3}.+?^(?:-{3}|\.{3})$", re.MULTILINE | re.DOTALL)
HEADING_RE = re.compile(r"^#{1,6}\s+", re.MULTILINE)
CHECKBOX_RE = re.compile(r"^\s*[-+*]\s\[[x\s]\]\s", re.MULTILINE | re.IGNORECASE)

EMPHASIS_RE = re.compile(r"(\*{1,3})([^*]+)\1")
# Underscores only delimit emphasis at word edges, so snake_case stays intact.
UNDERSCORE_EMPHASIS_RE = re.compile(r"(?<!\w)(_{1,3})([^_]+)\1(?!\w)")
WIKILINK_RE = re.compile(r"\[\[([^\]]+)\]\]")
IMAGE_RE = re.compile(r"!\[[^\]]*\]\([^)]+\)")
LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
CITATION_RE = re.compile(r"\[[^\[\]]*@[^\[\]]+\]")

BLOCK_PATTERNS = (FENCED_CODE_RE, FRONTMATTER_RE, HEADING_RE, CHECKBOX_RE)
# Blocks whose whole body disappears, as opposed to line-prefix markers.
HIDDEN_BLOCK_PATTERNS = (FENCED_CODE_RE, FRONTMATTER_RE)


def strip_block_markup(text: str) -> str:
    """Remove code blocks, frontmatter, heading and checkbox markers."""
    for pattern in BLOCK_PATTERNS:
        text = pattern.sub("", text)
    return text


def hidden_block_spans(text: str) -> List[Tuple[int, int]]:
    """Return the sorted [start, end) spans of code and frontmatter blocks."""
    spans = [
        match.span()
        for pattern in HIDDEN_BLOCK_PATTERNS
        for match in pattern.finditer(text)
    ]
    return sorted(spans)


def strip_inline_markup(text: str) -> str:
    """Reduce inline markdown to the text a reader actually sees."""
    text = EMPHASIS_RE.sub(r"\2", text)
    text = UNDERSCORE_EMPHASIS_RE.sub(r"\2", text)
    text = WIKILINK_RE.sub(r"\1", text)
    # Images go before links, otherwise the link pattern eats the alt text.
    text = IMAGE_RE.sub("", text)
    text = LINK_RE.sub(r"\1", text)
    return CITATION_RE.sub("", text)
