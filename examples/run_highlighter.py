"""
Tiny helper script that mimics an editor driving the readability highlighter.
Each "view update" passes the visible slice of the document.
"""

from __future__ import annotations

from dataclasses import replace

from markdown_readability import ReadabilityAlgorithm, ReadabilityConfig, ReadabilityHighlighter
from markdown_readability.models import VisibleRegion

DOCUMENT = """# Harbour log

The tide came in early. Gulls circled the wall!
Notwithstanding considerable institutional resistance, the committee proceeded.
"""


def main() -> None:
    config = ReadabilityConfig(enabled=True, algorithm=ReadabilityAlgorithm.GUNNING_FOG)
    highlighter = ReadabilityHighlighter(lambda: config)

    for algorithm in ReadabilityAlgorithm:
        config = replace(config, algorithm=algorithm)
        annotations = highlighter.update([VisibleRegion(text=DOCUMENT, offset=0)])
        print("-" * 40)
        print(algorithm.value)
        for annotation in annotations:
            print(f"{annotation.style:>15}  {DOCUMENT[annotation.start:annotation.end]}")


if __name__ == "__main__":
    main()
