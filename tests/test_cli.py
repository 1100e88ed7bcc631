import json
from pathlib import Path

from typer.testing import CliRunner

from markdown_readability.cli import app

runner = CliRunner()


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """CLI analyze command returns JSON ranges for every markdown file."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "-a", "gunning-fog"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert doc_ids == ["chapter1.md", "notes/todo.markdown"]
    first = payload["documents"][0]
    assert first["algorithm"] == "gunning-fog"
    assert [r["text"] for r in first["ranges"]] == [
        "Title",
        "The storm clouds rolled over the bay.",
        "Sailors watched the winds.",
    ]


def test_cli_analyze_disabled_returns_no_ranges(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "--disabled"]
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert all(doc["ranges"] == [] for doc in payload["documents"])


def test_cli_analyze_rejects_unknown_algorithm(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["analyze", "--input-path", str(corpus_dir), "-a", "flesch"]
    )
    assert result.exit_code != 0


def test_cli_analyze_reads_config_file(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("algorithm: coleman-liau\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(corpus_dir / "chapter1.md"), "-c", str(config_path)],
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["documents"][0]["algorithm"] == "coleman-liau"


def test_cli_render_writes_html(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    output = tmp_path / "out" / "chapter1.html"
    result = runner.invoke(
        app,
        [
            "render",
            "--input-path",
            str(corpus_dir / "chapter1.md"),
            "--output-path",
            str(output),
        ],
    )
    assert result.exit_code == 0
    html = output.read_text(encoding="utf-8")
    assert 'class="readability-' in html
    assert "Sailors watched the winds." in html


def test_cli_print_config():
    """print-config command dumps the current configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "algorithm: dale-chall" in result.stdout


def _create_sample_corpus(tmp_path: Path) -> Path:
    corpus_dir = tmp_path / "corpus"
    (corpus_dir / "notes").mkdir(parents=True)
    (corpus_dir / "chapter1.md").write_text(
        "# Title\n\nThe storm clouds rolled over the bay. Sailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "notes" / "todo.markdown").write_text(
        "- [ ] Buy more rope\n", encoding="utf-8"
    )
    (corpus_dir / "image.png").write_bytes(b"\x89PNG")
    return corpus_dir
