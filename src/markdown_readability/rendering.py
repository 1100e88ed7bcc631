from __future__ import annotations

import html
from typing import Iterable, List

from .highlighter import SCORE_STYLES, style_for_score
from .models import ScoredRange

# Green for easy sentences through red for hard ones.
SCORE_COLORS = (
    "#b7e4c7",
    "#c7eac0",
    "#d8efb8",
    "#e9f3b0",
    "#f7f2a8",
    "#fbe3a0",
    "#fcd398",
    "#fcc190",
    "#f9ad88",
    "#f59a80",
    "#f08678",
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
body {{ font-family: sans-serif; max-width: 50em; margin: 2em auto; }}
pre {{ white-space: pre-wrap; font-family: inherit; line-height: 1.6; }}
{styles}
</style>
</head>
<body>
<pre>{body}</pre>
</body>
</html>
"""


def render_stylesheet() -> str:
    return "\n".join(
        f".{style} {{ background-color: {color}; }}"
        for style, color in zip(SCORE_STYLES, SCORE_COLORS)
    )


def render_fragment(text: str, ranges: Iterable[ScoredRange]) -> str:
    """Escape text and wrap every scored range in a styled span."""
    parts: List[str] = []
    position = 0
    for scored in ranges:
        parts.append(html.escape(text[position : scored.start]))
        parts.append(
            f'<span class="{style_for_score(scored.score)}" data-score="{scored.score}">'
            f"{html.escape(text[scored.start : scored.end])}</span>"
        )
        position = scored.end
    parts.append(html.escape(text[position:]))
    return "".join(parts)


def render_html(text: str, ranges: Iterable[ScoredRange], title: str = "Readability") -> str:
    """Render a standalone HTML page highlighting each scored sentence."""
    return PAGE_TEMPLATE.format(
        title=html.escape(title),
        styles=render_stylesheet(),
        body=render_fragment(text, ranges),
    )
