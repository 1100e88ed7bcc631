from __future__ import annotations

import json
import logging
from dataclasses import replace as dc_replace
from pathlib import Path
from typing import List, Tuple, TypedDict

import typer
import yaml

from .config import ReadabilityConfig, load_config
from .models import ScoredRange, VisibleRegion
from .pipeline import recompute
from .rendering import render_html

app = typer.Typer(help="Markdown readability CLI.", no_args_is_help=True)

# File types the CLI knows how to read as markdown documents.
SUPPORTED_INPUT_EXTENSIONS = {".md", ".markdown", ".txt"}


class RangePayload(TypedDict):
    start: int
    end: int
    score: int
    text: str


class DocumentSummary(TypedDict):
    doc_id: str
    algorithm: str
    average_score: float
    ranges: List[RangePayload]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    algorithm: str | None = typer.Option(
        None,
        "--algorithm",
        "-a",
        help="Readability algorithm (dale-chall, gunning-fog, coleman-liau, automated-readability).",
    ),
    enabled: bool = typer.Option(
        True,
        "--enabled/--disabled",
        help="Score the documents; --disabled mirrors an editor with the mode off.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    """Score every sentence of the input documents and emit a JSON summary."""
    _configure_logging(verbose)
    # A file on disk is always fully "visible", so the mode follows the flag.
    cfg = dc_replace(_resolve_config(config, algorithm), enabled=enabled)
    summary: List[DocumentSummary] = []
    for doc_id, text in _load_documents(input_path):
        ranges = recompute([VisibleRegion(text=text, offset=0)], cfg)
        summary.append(_document_summary(doc_id, text, ranges, cfg))
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def render(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path = typer.Option(..., dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
    algorithm: str | None = typer.Option(None, "--algorithm", "-a"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
) -> None:
    """Write an HTML page with every sentence highlighted by its score."""
    _configure_logging(verbose)
    cfg = dc_replace(_resolve_config(config, algorithm), enabled=True)
    text = input_path.read_text(encoding="utf-8")
    ranges = recompute([VisibleRegion(text=text, offset=0)], cfg)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        render_html(text, ranges, title=input_path.name), encoding="utf-8"
    )
    typer.echo(f"Wrote {len(ranges)} highlighted sentences to {output_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ReadabilityConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_config(config_path: Path | None, algorithm: str | None) -> ReadabilityConfig:
    """Load the config file and apply the --algorithm override."""
    try:
        cfg = load_config(config_path)
        if algorithm:
            # replace() re-validates, so a bad value never reaches scoring.
            cfg = dc_replace(cfg, algorithm=algorithm)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return cfg


def _load_documents(input_path: Path) -> List[Tuple[str, str]]:
    """Expand the input path into (doc_id, text) pairs."""
    if input_path.is_file():
        return [(input_path.name, input_path.read_text(encoding="utf-8"))]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        (str(file.relative_to(input_path)), file.read_text(encoding="utf-8"))
        for file in files
    ]


def _document_summary(
    doc_id: str, text: str, ranges: List[ScoredRange], config: ReadabilityConfig
) -> DocumentSummary:
    """Create a JSON-serializable summary for a scored document."""
    average = sum(r.score for r in ranges) / len(ranges) if ranges else 0.0
    return {
        "doc_id": doc_id,
        "algorithm": config.algorithm.value,
        "average_score": average,
        "ranges": [
            {
                "start": r.start,
                "end": r.end,
                "score": r.score,
                "text": text[r.start : r.end],
            }
            for r in ranges
        ],
    }


if __name__ == "__main__":
    main()
